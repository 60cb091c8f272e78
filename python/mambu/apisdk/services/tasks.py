"""
Service for creating and retrieving tasks
"""
from typing import List

from .base import MambuService
from .. import apidata
from ..apidef import ApiDefinition, ApiType
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..params import ParamsMap

class TasksService(MambuService):
    """
    a service for managing tasks assigned to users
    """

    _create_task = ApiDefinition(ApiType.CREATE_FORM_ENTITY, EntityKind.TASK)
    _get_tasks = ApiDefinition(ApiType.GET_LIST, EntityKind.TASK)

    def create_task(self, title: str, username: str, description: str=None, due_date=None,
                    client_id: str=None, group_id: str=None) -> MambuEntity:
        """
        create a task, sending its properties as form parameters
        :param str title:     the task's title
        :param str username:  the user name of the user the task is assigned to
        :param due_date:      the date the task is due (as a date or a YYYY-MM-DD string)
        :param str client_id: the client the task is about
        :param str group_id:  the group the task is about
        :return:  the created task
        """
        params = ParamsMap()
        params.put(apidata.TITLE, title)
        params.put(apidata.USERNAME, username)
        params.put(apidata.DESCRIPTION, description)
        params.put(apidata.DUE_DATE, due_date)
        params.put(apidata.CLIENT_ID, client_id)
        params.put(apidata.GROUP_ID, group_id)
        return self._execute(self._create_task, params=params)

    def get_tasks(self, username: str=None, client_id: str=None, status: str=None, offset=None,
                  limit=None) -> List[MambuEntity]:
        """
        return the tasks matching the given filters
        :param str status:  the task status to match (e.g. "OPEN", "COMPLETED")
        """
        params = ParamsMap()
        params.put(apidata.USERNAME, username)
        params.put(apidata.CLIENT_ID, client_id)
        params.put(apidata.STATUS, status)
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_tasks, params=params)
