"""
Service for managing clients and groups
"""
from typing import List

from .base import MambuService
from .. import apidata
from ..apidef import ApiDefinition, ApiType
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..params import ParamsMap

_K = EntityKind

class ClientsService(MambuService):
    """
    a service for retrieving and updating clients and groups
    """

    _get_client = ApiDefinition(ApiType.GET_ENTITY, _K.CLIENT)
    _get_client_details = ApiDefinition(ApiType.GET_ENTITY_DETAILS, _K.CLIENT_EXPANDED)
    _get_clients = ApiDefinition(ApiType.GET_LIST, _K.CLIENT)
    _create_client = ApiDefinition(ApiType.CREATE_JSON_ENTITY, _K.CLIENT_EXPANDED)
    _update_client = ApiDefinition(ApiType.UPDATE_JSON, _K.CLIENT_EXPANDED)

    _get_group = ApiDefinition(ApiType.GET_ENTITY, _K.GROUP)
    _get_group_details = ApiDefinition(ApiType.GET_ENTITY_DETAILS, _K.GROUP_EXPANDED)
    _get_groups = ApiDefinition(ApiType.GET_LIST, _K.GROUP)

    _update_custom_field = ApiDefinition(ApiType.PATCH_OWNED_ENTITY, _K.CLIENT, _K.CUSTOM_FIELD_VALUE)
    _delete_custom_field = ApiDefinition(ApiType.DELETE_OWNED_ENTITY, _K.CLIENT, _K.CUSTOM_FIELD_VALUE)

    def get_client(self, client_id: str) -> MambuEntity:
        """
        return the client with the given ID (or encoded key)
        """
        return self._execute(self._get_client, client_id)

    def get_client_details(self, client_id: str) -> MambuEntity:
        """
        return the full description of a client, including its addresses, identification documents,
        and custom field values
        """
        return self._execute(self._get_client_details, client_id)

    def get_clients(self, active: bool=None, offset=None, limit=None) -> List[MambuEntity]:
        """
        return a list of clients
        :param bool active:  if given, restrict to active (True) or inactive (False) clients
        """
        params = ParamsMap()
        params.put(apidata.ACTIVE, active)
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_clients, params=params)

    def get_clients_by_name(self, first_name: str=None, last_name: str=None,
                            birth_date=None) -> List[MambuEntity]:
        """
        return the clients matching the given name (and, optionally, birth date)
        """
        params = ParamsMap()
        params.put(apidata.FIRST_NAME, first_name)
        params.put(apidata.LAST_NAME, last_name)
        params.put(apidata.BIRTH_DATE, birth_date)
        return self._execute(self._get_clients, params=params)

    def create_client(self, client) -> MambuEntity:
        """
        create a new client
        :param client:  the full (expanded) description of the client, as a MambuEntity or a
                        dictionary
        :return:  the created client, as returned by Mambu
        """
        return self._execute(self._create_client, body=client)

    def update_client(self, client_id: str, client) -> MambuEntity:
        """
        update an existing client with a full (expanded) description
        """
        return self._execute(self._update_client, client_id, body=client)

    def get_group(self, group_id: str) -> MambuEntity:
        """
        return the group with the given ID (or encoded key)
        """
        return self._execute(self._get_group, group_id)

    def get_group_details(self, group_id: str) -> MambuEntity:
        """
        return the full description of a group, including its members and roles
        """
        return self._execute(self._get_group_details, group_id)

    def get_groups(self, offset=None, limit=None) -> List[MambuEntity]:
        """
        return a list of groups
        """
        params = ParamsMap()
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_groups, params=params)

    def update_client_custom_field(self, client_id: str, field_id: str, value) -> bool:
        """
        set the value of a single custom field of a client
        :return:  True, if the update succeeded
        """
        # E.g. PATCH clients/CLIENT_ID/custominformation/FIELD_ID  {"value": "..."}
        return self._execute(self._update_custom_field, client_id, field_id, body={"value": value})

    def delete_client_custom_field(self, client_id: str, field_id: str) -> bool:
        """
        remove the value of a custom field from a client
        :return:  True, if the deletion succeeded
        """
        return self._execute(self._delete_custom_field, client_id, field_id)
