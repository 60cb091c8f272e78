"""
Service for retrieving loan repayments
"""
from typing import List

from .base import MambuService
from .. import apidata
from ..apidef import ApiDefinition, ApiType
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..params import ParamsMap

class RepaymentsService(MambuService):
    """
    a service for retrieving the repayments scheduled for loan accounts
    """

    _get_repayments = ApiDefinition(ApiType.GET_LIST, EntityKind.REPAYMENT)
    _get_repayments_for_loan = ApiDefinition(ApiType.GET_OWNED_ENTITIES, EntityKind.LOAN_ACCOUNT,
                                             EntityKind.REPAYMENT)

    def get_loan_account_repayments(self, account_id: str, offset=None, limit=None) -> List[MambuEntity]:
        """
        return the repayments of a loan account.

        The offset and limit values are always passed on to Mambu when given; however, Mambu has
        been observed to return all of an account's repayments regardless of them.

        :param str account_id:  the ID (or encoded key) of the loan account
        :param offset:  the index of the first repayment to return
        :param limit:   the maximum number of repayments to return
        :rtype: list of MambuEntity
        """
        # E.g. GET /api/loans/LOAN_ID/repayments?offset=0&limit=50
        params = ParamsMap()
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_repayments_for_loan, account_id, params=params)

    def get_repayments_due_from_to(self, due_from, due_to) -> List[MambuEntity]:
        """
        return all repayments due within a range of dates
        :param due_from:  the earliest due date (as a date or a YYYY-MM-DD string)
        :param due_to:    the latest due date (as a date or a YYYY-MM-DD string)
        :rtype: list of MambuEntity
        """
        # E.g. GET /api/repayments?dueFrom=2011-01-05&dueTo=2011-06-07
        params = ParamsMap()
        params.put(apidata.DUE_FROM, due_from)
        params.put(apidata.DUE_TO, due_to)
        return self._execute(self._get_repayments, params=params)
