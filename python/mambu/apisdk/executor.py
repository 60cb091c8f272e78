"""
The generic execution of Mambu API requests described by :py:class:`~mambu.apisdk.apidef.ApiDefinition`s.
"""
import logging
from collections.abc import Mapping
from urllib.parse import quote

from . import apidata
from .apidef import ApiDefinition, ApiReturnFormat, ContentType
from .params import ParamsMap
from .serialize import JSONSerializer
from .exceptions import (InvalidArgument, StateException, MambuDecodeError,
                         MambuClientError, MambuResourceNotFound, MambuServerError)
from .utils.logging import blab, truncate

def _segment(id) -> str:
    # ids are sent as single path segments
    return quote(str(id), safe='')

def build_path(apidef: ApiDefinition, object_id=None, related_id=None) -> str:
    """
    return the URL path for a request, formatted as ``endpoint[/objectId][/relatedEntity[/relatedId]]``.
    The object ID is included only if the request type requires one and it is provided; the related
    entity part appears only if the definition has one, and the related ID only below it.
    """
    path = apidef.endpoint
    if apidef.requires_object_id and object_id is not None:
        path += '/' + _segment(object_id)
    if apidef.related_entity:
        path += '/' + apidef.related_entity
        if related_id is not None:
            path += '/' + _segment(related_id)
    return path

def build_params(apidef: ApiDefinition, params: Mapping=None) -> ParamsMap:
    """
    return the parameters to send with a request:  a copy of the given params, with the fullDetails
    parameter set if the request type requires it.
    """
    out = ParamsMap(params or {})
    if apidef.with_full_details:
        out[apidata.FULL_DETAILS] = apidata.TRUE
    return out

class RequestExecutor:
    """
    a class that executes API requests:  given an :py:class:`~mambu.apisdk.apidef.ApiDefinition` and
    the IDs and parameters for a particular call, it sends the request via a
    :py:class:`~mambu.apisdk.connection.MambuAPIService` and converts the response into the result
    promised by the definition.

    An executor keeps no state between calls, so one instance may be shared by any number of
    services and threads.
    """

    def __init__(self, service, serializer: JSONSerializer=None, log: logging.Logger=None):
        """
        :param MambuAPIService service:  the connection to send requests with
        :param JSONSerializer serializer:  the codec for entities (a default one is created if
                                           not provided)
        :param Logger log:  the Logger to send messages to
        """
        if service is None:
            raise InvalidArgument("RequestExecutor: service must not be None")
        self.service = service
        if not serializer:
            serializer = JSONSerializer()
        self.serializer = serializer
        if not log:
            log = logging.getLogger("mambu.apisdk.executor")
        self.log = log

    def execute(self, apidef: ApiDefinition, object_id=None, related_id=None, params: Mapping=None,
                body=None):
        """
        execute an API request

        :param ApiDefinition apidef:  the specification of the request
        :param object_id:   the ID of the entity identified in the path (ignored if the request type
                            does not use one)
        :param related_id:  the ID of the related entity (ignored if the definition has no related
                            entity part)
        :param Mapping params:  the parameters to send with the request
        :param body:        for JSON requests, the content to send:  an entity, a Mapping, or an
                            already-encoded JSON string
        :return:  the result, according to the definition's return format:  a MambuEntity (OBJECT),
                  a list of MambuEntity (COLLECTION), True (BOOLEAN), or a str (RESPONSE_STRING)
        :raises InvalidParameter:     if a parameter value cannot be sent
        :raises MambuTransportError:  if communication with the service fails
        :raises MambuProtocolError:   if the service responds with a non-success status
        :raises MambuDecodeError:     if the response does not have the expected content
        """
        if not isinstance(apidef, ApiDefinition):
            raise InvalidArgument("apidef is not an ApiDefinition: "+repr(apidef))

        path = build_path(apidef, object_id, related_id)
        reqparams = build_params(apidef, params)

        payload = None
        if apidef.content_type == ContentType.JSON and body is not None:
            payload = body if isinstance(body, str) else self.serializer.encode(body)

        resp = self.service.send(apidef.method, path, apidef.content_type, reqparams, payload)
        self._check_status(resp, apidef)
        blab(self.log, "Response from %s %s: %s", apidef.method.value, resp.url, truncate(resp.text))

        return self.parse_response(apidef, resp)

    def _check_status(self, resp, apidef):
        meth = apidef.method.value
        if 200 <= resp.status < 300:
            return

        self.log.debug("%s %s failed: %s %s", meth, resp.url, resp.status, resp.reason)
        if resp.status == 404:
            raise MambuResourceNotFound(resp.url, meth, resp.reason, resp.text)
        if 400 <= resp.status < 500:
            raise MambuClientError(resp.url, meth, resp.status, resp.reason, resp.text)
        if resp.status >= 500:
            raise MambuServerError(resp.url, meth, resp.status, resp.reason, resp.text)
        raise MambuServerError(resp.url, meth, resp.status, resp.reason, resp.text,
                               message="Unexpected response from server: {0} {1}"
                                       .format(resp.status, resp.reason))

    def parse_response(self, apidef: ApiDefinition, resp):
        """
        convert a successful response into the result type promised by the given definition
        """
        fmt = apidef.return_format
        if fmt == ApiReturnFormat.BOOLEAN:
            return True
        if fmt == ApiReturnFormat.RESPONSE_STRING:
            return resp.text

        try:
            if fmt == ApiReturnFormat.OBJECT:
                return self.serializer.decode(resp.text, apidef.result_type)
            if fmt == ApiReturnFormat.COLLECTION:
                return self.serializer.decode_list(resp.text, apidef.result_type)
        except MambuDecodeError as ex:
            raise MambuDecodeError(resp.url, apidef.method.value, resp.text, http_code=resp.status,
                                   message="{0} {1}: {2}".format(apidef.method.value, resp.url, str(ex)),
                                   cause=ex) from ex

        raise StateException("Unsupported return format: "+str(fmt))
