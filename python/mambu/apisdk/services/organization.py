"""
Service for retrieving a tenant's organizational set-up:  branches, centres, currencies, transaction
channels, and custom field definitions
"""
from typing import List

from .base import MambuService
from .. import apidata
from ..apidef import ApiDefinition, ApiType
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..params import ParamsMap

_K = EntityKind

class OrganizationService(MambuService):
    """
    a service for retrieving the organization's configuration
    """

    _get_branch = ApiDefinition(ApiType.GET_ENTITY_DETAILS, _K.BRANCH)
    _get_branches = ApiDefinition(ApiType.GET_LIST, _K.BRANCH)
    _get_centre = ApiDefinition(ApiType.GET_ENTITY_DETAILS, _K.CENTRE)
    _get_centres = ApiDefinition(ApiType.GET_LIST, _K.CENTRE)
    _get_currencies = ApiDefinition(ApiType.GET_LIST, _K.CURRENCY)
    _get_transaction_channels = ApiDefinition(ApiType.GET_LIST, _K.TRANSACTION_CHANNEL)
    _get_custom_field = ApiDefinition(ApiType.GET_ENTITY, _K.CUSTOM_FIELD)
    _get_custom_field_sets = ApiDefinition(ApiType.GET_LIST, _K.CUSTOM_FIELD_SET)

    def get_branch(self, branch_id: str) -> MambuEntity:
        """
        return the full description of a branch
        """
        return self._execute(self._get_branch, branch_id)

    def get_branches(self, offset=None, limit=None) -> List[MambuEntity]:
        """
        return the organization's branches
        """
        params = ParamsMap()
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_branches, params=params)

    def get_centre(self, centre_id: str) -> MambuEntity:
        """
        return the full description of a centre
        """
        return self._execute(self._get_centre, centre_id)

    def get_centres(self, branch_id: str=None, offset=None, limit=None) -> List[MambuEntity]:
        """
        return the organization's centres, optionally only those of one branch
        """
        params = ParamsMap()
        params.put(apidata.BRANCH_ID, branch_id)
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_centres, params=params)

    def get_currencies(self) -> List[MambuEntity]:
        """
        return the currencies used by the organization
        """
        return self._execute(self._get_currencies)

    def get_transaction_channels(self) -> List[MambuEntity]:
        """
        return the transaction channels (payment methods) defined for the organization
        """
        return self._execute(self._get_transaction_channels)

    def get_custom_field(self, field_id: str) -> MambuEntity:
        """
        return the definition of a custom field
        """
        return self._execute(self._get_custom_field, field_id)

    def get_custom_field_sets(self, custom_field_type: str=None) -> List[MambuEntity]:
        """
        return the custom field sets, optionally only those applying to one type of entity
        (e.g. "CLIENT_INFO", "LOAN_ACCOUNT_INFO")
        """
        params = ParamsMap()
        params.put(apidata.TYPE, custom_field_type)
        return self._execute(self._get_custom_field_sets, params=params)
