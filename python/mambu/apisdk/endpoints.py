"""
The registry of Mambu entity kinds and the URL path endpoints used to access them.

Each kind of Mambu entity that can be requested from (or sent to) the API is identified by an
:py:class:`EntityKind` tag.  Several kinds may share an endpoint: a ``LOAN_ACCOUNT`` and the
``LOAN_ACCOUNT_EXPANDED`` form used to create one are both accessed under ``loans``.

The process-wide registry, :py:data:`registry`, is built once when this module is imported and is
read-only thereafter.
"""
from enum import Enum
from types import MappingProxyType
from collections.abc import Mapping

from . import apidata
from .exceptions import EndpointNotRegistered, InvalidArgument

class EntityKind(Enum):
    """
    the kinds of entities that can be requested from the Mambu API
    """
    CLIENT = "Client"
    CLIENT_EXPANDED = "ClientExpanded"
    GROUP = "Group"
    GROUP_EXPANDED = "GroupExpanded"
    LOAN_ACCOUNT = "LoanAccount"
    LOAN_ACCOUNT_EXPANDED = "LoanAccountExpanded"
    LOAN_TRANSACTION = "LoanTransaction"
    REPAYMENT = "Repayment"
    SAVINGS_ACCOUNT = "SavingsAccount"
    JSON_SAVINGS_ACCOUNT = "JSONSavingsAccount"
    SAVINGS_TRANSACTION = "SavingsTransaction"
    BRANCH = "Branch"
    USER = "User"
    CENTRE = "Centre"
    CURRENCY = "Currency"
    TRANSACTION_CHANNEL = "TransactionChannel"
    TASK = "Task"
    JSON_TASK = "JSONTask"
    LOAN_PRODUCT = "LoanProduct"
    SAVINGS_PRODUCT = "SavingsProduct"
    DOCUMENT = "Document"
    JSON_DOCUMENT = "JSONDocument"
    CUSTOM_FIELD_SET = "CustomFieldSet"
    CUSTOM_FIELD = "CustomField"
    CUSTOM_FIELD_VALUE = "CustomFieldValue"
    GL_ACCOUNT = "GLAccount"
    GL_JOURNAL_ENTRY = "GLJournalEntry"
    INDICATOR = "Indicator"
    CUSTOM_VIEW = "CustomView"
    ACTIVITY = "Activity"
    IMAGE = "Image"
    SEARCH_RESULT = "SearchResult"

    @classmethod
    def lookup(cls, name: str):
        """
        return the EntityKind matching the given name.  The name may be either the member name
        (e.g. "LOAN_ACCOUNT") or its value (e.g. "LoanAccount"), compared case-insensitively.
        :raises InvalidArgument:  if no kind matches the name
        """
        if isinstance(name, cls):
            return name
        find = str(name).replace('-', '_').lower()
        for kind in cls:
            if kind.name.lower() == find or kind.value.lower() == find:
                return kind
        raise InvalidArgument("Not a recognized entity kind: "+str(name))

_K = EntityKind
DEFAULT_ENDPOINTS = MappingProxyType({
    _K.CLIENT:                apidata.CLIENTS,
    _K.CLIENT_EXPANDED:       apidata.CLIENTS,
    _K.GROUP:                 apidata.GROUPS,
    _K.GROUP_EXPANDED:        apidata.GROUPS,

    _K.LOAN_ACCOUNT:          apidata.LOANS,
    _K.LOAN_ACCOUNT_EXPANDED: apidata.LOANS,
    _K.LOAN_TRANSACTION:      apidata.TRANSACTIONS,
    _K.REPAYMENT:             apidata.REPAYMENTS,

    _K.SAVINGS_ACCOUNT:       apidata.SAVINGS,
    _K.JSON_SAVINGS_ACCOUNT:  apidata.SAVINGS,
    _K.SAVINGS_TRANSACTION:   apidata.TRANSACTIONS,

    _K.BRANCH:                apidata.BRANCHES,
    _K.USER:                  apidata.USERS,
    _K.CENTRE:                apidata.CENTRES,
    _K.CURRENCY:              apidata.CURRENCIES,
    _K.TRANSACTION_CHANNEL:   apidata.TRANSACTION_CHANNELS,

    _K.TASK:                  apidata.TASKS,
    _K.JSON_TASK:             apidata.TASKS,

    _K.LOAN_PRODUCT:          apidata.LOANPRODUCTS,
    _K.SAVINGS_PRODUCT:       apidata.SAVINGSPRODUCTS,

    _K.DOCUMENT:              apidata.DOCUMENTS,
    _K.JSON_DOCUMENT:         apidata.DOCUMENTS,

    _K.CUSTOM_FIELD_SET:      apidata.CUSTOM_FIELD_SETS,
    _K.CUSTOM_FIELD:          apidata.CUSTOM_FIELDS,
    _K.CUSTOM_FIELD_VALUE:    apidata.CUSTOM_INFORMATION,

    _K.GL_ACCOUNT:            apidata.GLACCOUNTS,
    _K.GL_JOURNAL_ENTRY:      apidata.GLJOURNALENTRIES,
    _K.INDICATOR:             apidata.INDICATORS,

    _K.CUSTOM_VIEW:           apidata.VIEWS,
    _K.ACTIVITY:              apidata.ACTIVITIES,
    _K.IMAGE:                 apidata.IMAGES,
    _K.SEARCH_RESULT:         apidata.SEARCH,
})
del _K

class EndpointRegistry:
    """
    a read-only lookup of the URL path endpoint for each registered :py:class:`EntityKind`.
    """

    def __init__(self, endpoints: Mapping):
        """
        create the registry
        :param Mapping endpoints:  the table mapping EntityKinds to their URL path endpoints.  The
                                   table is copied; later changes to it are not seen by the registry.
        """
        self._eps = MappingProxyType(dict(endpoints))

    def resolve(self, kind: EntityKind) -> str:
        """
        return the URL path endpoint registered for the given entity kind
        :raises InvalidArgument:        if kind is None
        :raises EndpointNotRegistered:  if no endpoint is registered for the kind
        """
        if kind is None:
            raise InvalidArgument("Entity kind must not be None")
        try:
            return self._eps[kind]
        except (KeyError, TypeError):
            raise EndpointNotRegistered(kind) from None

    def is_registered(self, kind: EntityKind) -> bool:
        """
        return True if an endpoint is registered for the given entity kind
        """
        try:
            return kind in self._eps
        except TypeError:
            return False

    def kinds(self):
        """
        return the entity kinds registered with this registry
        """
        return list(self._eps.keys())

registry = EndpointRegistry(DEFAULT_ENDPOINTS)
