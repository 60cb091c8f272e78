"""
The base class for the resource service classes
"""
import logging

from ..executor import RequestExecutor
from ..exceptions import InvalidArgument

class MambuService:
    """
    a base class for services that access a particular Mambu resource
    """

    def __init__(self, service, log: logging.Logger=None):
        """
        create the service
        :param service:  the connection to Mambu, either as a MambuAPIService or as a RequestExecutor
                         that wraps one
        :param Logger log:  the Logger to send messages to
        """
        if service is None:
            raise InvalidArgument(type(self).__name__+": service must not be None")
        if not log:
            log = logging.getLogger("mambu.apisdk.services."+type(self).__name__)
        self.log = log
        if isinstance(service, RequestExecutor):
            self._executor = service
        else:
            self._executor = RequestExecutor(service, log=log.getChild("executor"))

    @property
    def executor(self) -> RequestExecutor:
        """the RequestExecutor used to send requests"""
        return self._executor

    def _execute(self, apidef, object_id=None, related_id=None, params=None, body=None):
        return self._executor.execute(apidef, object_id, related_id, params, body)
