"""
A factory for the Mambu resource services, all sharing a single connection to a Mambu tenant
"""
import logging
from collections.abc import Mapping

from .connection import MambuAPIService
from .executor import RequestExecutor
from .serialize import JSONSerializer
from .exceptions import ConfigurationException
from . import services as svcs

class MambuAPIFactory:
    """
    a factory for creating the resource services (e.g. :py:class:`~mambu.apisdk.services.LoansService`)
    that access a particular Mambu tenant.

    The factory is configured with the parameters described in
    :py:class:`~mambu.apisdk.connection.MambuAPIService` plus:

    ``date_format``
         (str) _optional_.  the strftime format used to write datetime values into JSON requests
    """

    def __init__(self, config: Mapping, log: logging.Logger=None):
        """
        create the factory, setting up its connection to Mambu
        :param dict config:  the configuration parameters
        :param Logger  log:  the Logger to send messages to; the services' loggers are children of it
        :raises ConfigurationException:  if the configuration is missing required parameters or has
                                         bad values
        """
        if not isinstance(config, Mapping):
            raise ConfigurationException("MambuAPIFactory: config is not a dictionary")
        if not log:
            log = logging.getLogger("mambu.apisdk")
        self.log = log
        self.cfg = config

        self._service = MambuAPIService(config, log.getChild("connection"))
        self._executor = RequestExecutor(self._service, JSONSerializer(config.get('date_format')),
                                         log.getChild("executor"))

    @property
    def service(self) -> MambuAPIService:
        """the connection to Mambu shared by all the services"""
        return self._service

    @property
    def executor(self) -> RequestExecutor:
        """the RequestExecutor shared by all the services"""
        return self._executor

    def _create(self, svccls):
        return svccls(self._executor, self.log.getChild(svccls.__name__))

    def get_repayments_service(self) -> svcs.RepaymentsService:
        return self._create(svcs.RepaymentsService)

    def get_loans_service(self) -> svcs.LoansService:
        return self._create(svcs.LoansService)

    def get_clients_service(self) -> svcs.ClientsService:
        return self._create(svcs.ClientsService)

    def get_savings_service(self) -> svcs.SavingsService:
        return self._create(svcs.SavingsService)

    def get_documents_service(self) -> svcs.DocumentsService:
        return self._create(svcs.DocumentsService)

    def get_organization_service(self) -> svcs.OrganizationService:
        return self._create(svcs.OrganizationService)

    def get_tasks_service(self) -> svcs.TasksService:
        return self._create(svcs.TasksService)
