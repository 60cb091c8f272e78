"""
Service classes providing typed access to the Mambu API, one per domain resource.

Each service holds a fixed set of :py:class:`~mambu.apisdk.apidef.ApiDefinition`s, built once as class
attributes, and exposes methods that assemble the request parameters from their arguments and hand
the matching definition to a :py:class:`~mambu.apisdk.executor.RequestExecutor`.  Errors raised by
the executor are passed through unchanged.
"""
from .base import MambuService
from .repayments import RepaymentsService
from .loans import LoansService
from .clients import ClientsService
from .savings import SavingsService
from .documents import DocumentsService
from .organization import OrganizationService
from .tasks import TasksService
