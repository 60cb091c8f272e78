"""
The connection to a Mambu tenant:  the component that actually sends API requests over HTTP
"""
import logging
from collections import namedtuple
from collections.abc import Mapping

import requests

from .config import ConfigurationException, get_param
from .apidef import Method, ContentType
from .exceptions import MambuTransportError
from .utils.logging import blab

HTTPResult = namedtuple("HTTPResult", "status reason text url")
HTTPResult.__doc__ = "the status and raw content of a response from the Mambu service"

class MambuAPIService:
    """
    a connection to the API of a Mambu tenant.  This class knows how to reach and authenticate to
    the service; it knows nothing about the meaning of the requests it sends.

    This class looks for the following parameters in the configuration passed in at construction:

    ``domain``
         (str) _required_.  the host name of the Mambu tenant (e.g. "demo.mambu.com")
    ``protocol``
         (str) _optional_.  the URL scheme to use (default: "https")
    ``api_path``
         (str) _optional_.  the base path of the API on the server (default: "api")
    ``timeout``
         (float) _optional_.  the number of seconds to wait for the server to respond before failing
         (default: wait indefinitely)
    ``auth``
         (dict) _optional_.  the authentication parameters (see below)

    The ``auth`` dictionary contains a ``type`` parameter which selects the means of authentication:

    ``userpass``
         HTTP basic authentication with the ``user`` and ``pass`` parameters (the default type)
    ``apikey``
         send the ``key`` parameter in an ``apiKey`` request header
    ``bearer``
         send the ``token`` parameter as a bearer token in the ``Authorization`` header
    ``none``
         send no credentials
    """

    def __init__(self, config: Mapping, log: logging.Logger=None):
        """
        initialize the connection
        :param dict config:  the configuration parameters
        :param Logger  log:  the Logger to send messages to
        """
        self.cfg = config
        domain = get_param(config, 'domain')
        if not domain:
            raise ConfigurationException("MambuAPIService: Missing required config param: domain")
        protocol = config.get('protocol', 'https')
        if protocol not in ('http', 'https'):
            raise ConfigurationException("MambuAPIService: unsupported protocol: "+str(protocol))
        apipath = config.get('api_path', 'api').strip('/')

        self.baseurl = "{0}://{1}".format(protocol, domain.strip('/'))
        if apipath:
            self.baseurl += '/' + apipath
        self.timeout = config.get('timeout')

        if not log:
            log = logging.getLogger("mambu.apisdk.connection")
        self.log = log

        self._authkw = {}
        self._authhdr = {}
        self._setup_auth(config.get('auth'))

    def _setup_auth(self, config: Mapping=None):
        # erase any previously set-up authentication
        self._authkw = {}
        self._authhdr = {}

        if not config or config.get('type', '') is None:
            return      # no authentication required

        authtype = config.get('type', 'userpass')
        if isinstance(authtype, str):
            authtype = authtype.lower()

        if authtype == "none":
            pass

        elif authtype == "userpass":
            self._authkw = { "auth": (config.get('user'), config.get('pass')) }
            if not all(self._authkw["auth"]):
                raise ConfigurationException("MambuAPIService: authentication type userpass requires "+
                                             "both 'user' and 'pass' config parameters")

        elif authtype == "apikey":
            key = config.get("key")
            if not key:
                raise ConfigurationException("MambuAPIService: authentication type apikey requires "+
                                             "'key' config parameter")
            self._authhdr = { "apiKey": key }

        elif authtype == "bearer":
            token = config.get("token")
            if not token:
                raise ConfigurationException("MambuAPIService: authentication type bearer requires "+
                                             "'token' config parameter")
            self._authhdr = { "Authorization": f"Bearer {token}" }

        else:
            raise ConfigurationException("MambuAPIService: authentication 'type' param value not "+
                                         "supported: "+str(authtype))

    def url_for(self, path: str) -> str:
        """
        return the full URL for the given API path (e.g. "loans/822/repayments")
        """
        return self.baseurl + '/' + path.lstrip('/')

    def send(self, method, path: str, content_type, params: Mapping=None, body: str=None) -> HTTPResult:
        """
        send a request to the Mambu service and return its response, whatever its status.

        Parameters are sent in the URL query string, except for POST requests with form content,
        where they are sent form-encoded in the request body.  Thus, an action conventionally written
        as ``POST loans/822/transactions?type=APPROVAL`` goes out as a POST to
        ``loans/822/transactions`` with ``type=APPROVAL`` as its form body.

        :param Method        method:  the HTTP method to use
        :param str             path:  the URL path relative to the API base (e.g. "loans/822")
        :param ContentType content_type:  the content type of the request
        :param Mapping       params:  the request parameters
        :param str             body:  the (JSON) request body
        :raises MambuTransportError:  if the request could not be sent or the response received
        """
        if isinstance(method, Method):
            method = method.value
        if isinstance(content_type, ContentType):
            content_type = content_type.value
        url = self.url_for(path)

        hdrs = { "Content-Type": content_type, "Accept": "application/json" }
        hdrs.update(self._authhdr)

        query = None
        data = None
        if method == "POST" and content_type.startswith("application/x-www-form-urlencoded"):
            data = dict(params) if params else None
        else:
            query = dict(params) if params else None
            if body is not None:
                data = body.encode('utf-8') if isinstance(body, str) else body

        self.log.debug("Sending %s %s", method, url)
        blab(self.log, "params=%s; body=%s", query or data, body)
        try:
            resp = requests.request(method, url, params=query, data=data, headers=hdrs,
                                    timeout=self.timeout, **self._authkw)
        except requests.RequestException as ex:
            raise MambuTransportError(url, method, cause=ex) from ex

        self.log.debug("%s %s returned %s %s", method, url, resp.status_code, resp.reason)
        return HTTPResult(resp.status_code, resp.reason, resp.text, url)
