"""
Service for managing savings accounts and their transactions
"""
from typing import List

from .base import MambuService
from .. import apidata
from ..apidef import ApiDefinition, ApiType
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..params import ParamsMap

_K = EntityKind

class SavingsService(MambuService):
    """
    a service for retrieving, creating, and transacting on savings accounts
    """

    _get_account = ApiDefinition(ApiType.GET_ENTITY, _K.SAVINGS_ACCOUNT)
    _get_account_details = ApiDefinition(ApiType.GET_ENTITY_DETAILS, _K.SAVINGS_ACCOUNT)
    _get_accounts = ApiDefinition(ApiType.GET_LIST, _K.SAVINGS_ACCOUNT)
    _get_accounts_for_client = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.CLIENT,
                                             _K.SAVINGS_ACCOUNT)
    # a JSONSavingsAccount (account plus custom information) is sent; a SavingsAccount comes back
    _create_account = ApiDefinition(ApiType.CREATE_JSON_ENTITY, _K.JSON_SAVINGS_ACCOUNT,
                                    _K.SAVINGS_ACCOUNT)
    _post_account_change = ApiDefinition(ApiType.POST_ENTITY_ACTION, _K.SAVINGS_ACCOUNT,
                                         _K.SAVINGS_TRANSACTION)
    _post_account_transaction = ApiDefinition(ApiType.POST_OWNED_ENTITY, _K.SAVINGS_ACCOUNT,
                                              _K.SAVINGS_TRANSACTION)
    _get_account_transactions = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.SAVINGS_ACCOUNT,
                                              _K.SAVINGS_TRANSACTION)
    _get_products = ApiDefinition(ApiType.GET_LIST, _K.SAVINGS_PRODUCT)

    def get_savings_account(self, account_id: str) -> MambuEntity:
        """
        return the savings account with the given ID (or encoded key)
        """
        return self._execute(self._get_account, account_id)

    def get_savings_account_details(self, account_id: str) -> MambuEntity:
        """
        return the savings account with the given ID, with full details
        """
        return self._execute(self._get_account_details, account_id)

    def get_savings_accounts(self, branch_id: str=None, credit_officer: str=None,
                             account_state: str=None, offset=None, limit=None) -> List[MambuEntity]:
        """
        return the savings accounts matching the given filters
        """
        params = ParamsMap()
        params.put(apidata.BRANCH_ID, branch_id)
        params.put(apidata.CREDIT_OFFICER_USER_NAME, credit_officer)
        params.put(apidata.ACCOUNT_STATE, account_state)
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_accounts, params=params)

    def get_savings_accounts_for_client(self, client_id: str) -> List[MambuEntity]:
        """
        return the savings accounts held by a client
        """
        return self._execute(self._get_accounts_for_client, client_id)

    def create_savings_account(self, account) -> MambuEntity:
        """
        create a new savings account
        :param account:  the account description with its custom information
        :return:  the created savings account
        """
        return self._execute(self._create_account, body=account)

    def approve_savings_account(self, account_id: str, notes: str=None) -> MambuEntity:
        """
        approve a savings account that is pending approval
        :return:  the approved savings account
        """
        params = ParamsMap()
        params.put(apidata.TYPE, apidata.TYPE_APPROVAL)
        params.put(apidata.NOTES, notes)
        return self._execute(self._post_account_change, account_id, params=params)

    def _transact(self, account_id, type, amount, date, payment_method, receipt_number, notes):
        params = ParamsMap()
        params.put(apidata.TYPE, type)
        params.put(apidata.AMOUNT, amount)
        params.put(apidata.DATE, date)
        params.put(apidata.PAYMENT_METHOD, payment_method)
        params.put(apidata.RECEIPT_NUMBER, receipt_number)
        params.put(apidata.NOTES, notes)
        return self._execute(self._post_account_transaction, account_id, params=params)

    def make_deposit(self, account_id: str, amount, date=None, payment_method: str=None,
                     receipt_number: str=None, notes: str=None) -> MambuEntity:
        """
        deposit money into a savings account
        :return:  the deposit transaction
        """
        return self._transact(account_id, apidata.TYPE_DEPOSIT, amount, date, payment_method,
                              receipt_number, notes)

    def make_withdrawal(self, account_id: str, amount, date=None, payment_method: str=None,
                        receipt_number: str=None, notes: str=None) -> MambuEntity:
        """
        withdraw money from a savings account
        :return:  the withdrawal transaction
        """
        return self._transact(account_id, apidata.TYPE_WITHDRAWAL, amount, date, payment_method,
                              receipt_number, notes)

    def get_savings_account_transactions(self, account_id: str, offset=None,
                                         limit=None) -> List[MambuEntity]:
        """
        return the transactions made on a savings account
        """
        params = ParamsMap()
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_account_transactions, account_id, params=params)

    def get_savings_products(self) -> List[MambuEntity]:
        """
        return all savings products
        """
        return self._execute(self._get_products)
