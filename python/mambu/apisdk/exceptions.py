"""
Exceptions raised by the Mambu API SDK.

All exceptions derive from :py:class:`MambuApiException`.  Problems detected while wiring up the
SDK (unknown entity kinds, incomplete API definitions, bad configuration) are raised as
:py:class:`ConfigurationException`s; failures of an individual API call are raised as subclasses of
:py:class:`MambuServiceException`, which record the URL and HTTP method that were attempted.
"""
import json

__all__ = [ "MambuApiException", "ConfigurationException", "StateException", "InvalidArgument",
            "InvalidParameter", "EndpointNotRegistered", "MissingRelatedEntity",
            "MambuServiceException", "MambuTransportError", "MambuProtocolError",
            "MambuClientError", "MambuResourceNotFound", "MambuServerError", "MambuDecodeError" ]

class MambuApiException(Exception):
    """
    a general base class for exceptions raised while using the Mambu API SDK
    """
    pass

class ConfigurationException(MambuApiException):
    """
    an exception indicating that the SDK has been set up incorrectly, either through bad
    configuration data or through an improperly defined API request.  These errors are expected
    to be detected at start-up (or wiring) time and are not recoverable in the middle of an API call.
    """
    pass

class StateException(MambuApiException):
    """
    an exception indicating that the SDK has reached an internal state that should not be possible
    """
    pass

class InvalidArgument(MambuApiException, ValueError):
    """
    an exception indicating that a required argument was missing or had an unusable value
    """
    pass

class InvalidParameter(InvalidArgument):
    """
    an exception indicating that an API request parameter (to be sent via the query string or a
    form body) has a name or value that cannot be sent.
    """
    def __init__(self, name, value=None, message=None):
        if not message:
            message = "Invalid value for API parameter, {0}: {1}".format(name, repr(value))
        super(InvalidParameter, self).__init__(message)
        self.name = name
        self.value = value

class EndpointNotRegistered(ConfigurationException):
    """
    an exception indicating that no URL endpoint has been registered for an entity kind
    """
    def __init__(self, kind, message=None):
        if not message:
            message = "No API endpoint is registered for entity kind: " + str(kind)
        super(EndpointNotRegistered, self).__init__(message)
        self.kind = kind

class MissingRelatedEntity(InvalidArgument, ConfigurationException):
    """
    an exception indicating that an API definition was requested for a request type that requires
    a second (related) entity kind, but none was given.
    """
    def __init__(self, api_type, message=None):
        if not message:
            message = "A related (result) entity kind is required for API type " + str(api_type)
        super(MissingRelatedEntity, self).__init__(message)
        self.api_type = api_type

class MambuServiceException(MambuApiException):
    """
    an exception indicating a failure of an API call to the Mambu service.

    This exception includes the extra public properties, ``url``, ``method``, ``code``, ``reason``,
    and ``response`` which capture the URL that was accessed, the HTTP method used, the HTTP response
    status code and message (if the service responded), and the raw text of the response body.
    """

    def __init__(self, url=None, method=None, http_code=None, http_reason=None, response=None,
                 message=None, cause=None):
        if not message:
            message = "Problem accessing the Mambu service"
            if url:
                message = "Trouble accessing {0} {1} from the Mambu service".format(method or "", url)
            if http_code or http_reason:
                message += ":"
                if http_code:
                    message += " "+str(http_code)
                if http_reason:
                    message += " "+str(http_reason)
            elif cause:
                message += ": "+str(cause)

        super(MambuServiceException, self).__init__(message)
        self.url = url
        self.method = method
        self.code = http_code or 0
        self.reason = http_reason
        self.response = response
        self.cause = cause

class MambuTransportError(MambuServiceException):
    """
    an exception indicating a failure communicating with the Mambu service.  This covers network
    related errors, like failures to connect, dropped connections, DNS errors, timeouts, etc.;
    typically the remote service did not get a chance to respond to the request.
    """
    def __init__(self, url=None, method=None, message=None, cause=None):
        if not message:
            message = "Mambu service communication failure"
            if url:
                message += " while accessing {0} {1}".format(method or "", url)
            if cause:
                message += ": "+str(cause)
        super(MambuTransportError, self).__init__(url, method, message=message, cause=cause)

class MambuProtocolError(MambuServiceException):
    """
    an exception indicating that the Mambu service responded with a non-success (non-2xx) status.

    If the response body contains Mambu's JSON error description, its ``returnCode`` and
    ``returnStatus`` values are made available as the ``error_code`` and ``error_status`` properties.
    """
    def __init__(self, url=None, method=None, http_code=None, http_reason=None, response=None,
                 message=None, cause=None):
        super(MambuProtocolError, self).__init__(url, method, http_code, http_reason, response,
                                                 message, cause)
        self.error_code = None
        self.error_status = None
        self._parse_error_response(response)

    def _parse_error_response(self, response):
        if not response:
            return
        try:
            data = json.loads(response)
        except ValueError:
            return
        if isinstance(data, dict):
            self.error_code = data.get('returnCode')
            self.error_status = data.get('returnStatus')

class MambuClientError(MambuProtocolError):
    """
    an exception indicating that Mambu rejected a request as improperly formed or unauthorized
    (i.e. HTTP status code >= 400, < 500).
    """
    def __init__(self, url=None, method=None, http_code=None, http_reason=None, response=None,
                 message=None, cause=None):
        if not message:
            message = "client-side Mambu API error occurred"
            if url:
                message += " while accessing {0} {1}".format(method or "", url)
            message += ": {0} {1}".format(http_code, http_reason or "")
        super(MambuClientError, self).__init__(url, method, http_code, http_reason, response,
                                               message, cause)

class MambuResourceNotFound(MambuClientError):
    """
    an exception indicating that a requested entity does not exist in Mambu (i.e. a 404 response)
    """
    def __init__(self, url=None, method=None, http_reason=None, response=None, message=None,
                 cause=None):
        if not message:
            message = "Requested Mambu resource not found"
            if url:
                message += ": "+url
        super(MambuResourceNotFound, self).__init__(url, method, 404, http_reason, response,
                                                    message, cause)

class MambuServerError(MambuProtocolError):
    """
    an exception indicating that an error occurred on the server-side while processing the request
    (i.e. HTTP status code >= 500) or that the server responded with an unexpected status.
    """
    pass

class MambuDecodeError(MambuServiceException):
    """
    an exception indicating that a successful response from Mambu did not have the content expected
    for the request (e.g. a single object was expected, but an array was returned).
    """
    def __init__(self, url=None, method=None, response=None, message=None, cause=None, http_code=None):
        if not message:
            message = "Unexpected content returned from Mambu"
            if url:
                message += " while accessing {0} {1}".format(method or "", url)
            if cause:
                message += ": "+str(cause)
        super(MambuDecodeError, self).__init__(url, method, http_code, None, response, message, cause)
