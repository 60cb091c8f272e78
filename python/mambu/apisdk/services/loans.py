"""
Service for managing loan accounts, their transactions, and loan products
"""
from typing import List

from .base import MambuService
from .. import apidata
from ..apidef import ApiDefinition, ApiType
from ..endpoints import EntityKind
from ..model import MambuEntity
from ..params import ParamsMap

_K = EntityKind

class LoansService(MambuService):
    """
    a service for retrieving, creating, and acting on loan accounts
    """

    _get_account = ApiDefinition(ApiType.GET_ENTITY, _K.LOAN_ACCOUNT)
    _get_account_details = ApiDefinition(ApiType.GET_ENTITY_DETAILS, _K.LOAN_ACCOUNT)
    _get_accounts = ApiDefinition(ApiType.GET_LIST, _K.LOAN_ACCOUNT)
    _get_accounts_for_client = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.CLIENT, _K.LOAN_ACCOUNT)
    _get_accounts_for_group = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.GROUP, _K.LOAN_ACCOUNT)
    _create_account = ApiDefinition(ApiType.CREATE_JSON_ENTITY, _K.LOAN_ACCOUNT_EXPANDED)
    _update_account = ApiDefinition(ApiType.UPDATE_JSON, _K.LOAN_ACCOUNT_EXPANDED)
    _delete_account = ApiDefinition(ApiType.DELETE_ENTITY, _K.LOAN_ACCOUNT)

    # actions that change the account's state return the account
    _post_account_change = ApiDefinition(ApiType.POST_ENTITY_ACTION, _K.LOAN_ACCOUNT,
                                         _K.LOAN_TRANSACTION)
    # transactions that move money return the transaction
    _post_account_transaction = ApiDefinition(ApiType.POST_OWNED_ENTITY, _K.LOAN_ACCOUNT,
                                              _K.LOAN_TRANSACTION)
    _get_account_transactions = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.LOAN_ACCOUNT,
                                              _K.LOAN_TRANSACTION)
    _get_transactions = ApiDefinition(ApiType.GET_RELATED_ENTITIES, _K.LOAN_ACCOUNT,
                                      _K.LOAN_TRANSACTION)

    _get_products = ApiDefinition(ApiType.GET_LIST, _K.LOAN_PRODUCT)
    _get_product = ApiDefinition(ApiType.GET_ENTITY, _K.LOAN_PRODUCT)

    def get_loan_account(self, account_id: str) -> MambuEntity:
        """
        return the loan account with the given ID (or encoded key)
        """
        return self._execute(self._get_account, account_id)

    def get_loan_account_details(self, account_id: str) -> MambuEntity:
        """
        return the loan account with the given ID, with full details (e.g. custom field values)
        """
        return self._execute(self._get_account_details, account_id)

    def get_loan_accounts(self, branch_id: str=None, centre_id: str=None, credit_officer: str=None,
                          account_state: str=None, offset=None, limit=None) -> List[MambuEntity]:
        """
        return the loan accounts matching the given filters
        :param str branch_id:       restrict to accounts managed by this branch
        :param str centre_id:       restrict to accounts managed by this centre
        :param str credit_officer:  restrict to accounts assigned to this credit officer's user name
        :param str account_state:   restrict to accounts in this state (e.g. "ACTIVE")
        :param offset:  the index of the first account to return
        :param limit:   the maximum number of accounts to return
        """
        params = ParamsMap()
        params.put(apidata.BRANCH_ID, branch_id)
        params.put(apidata.CENTRE_ID, centre_id)
        params.put(apidata.CREDIT_OFFICER_USER_NAME, credit_officer)
        params.put(apidata.ACCOUNT_STATE, account_state)
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_accounts, params=params)

    def get_loan_accounts_for_client(self, client_id: str) -> List[MambuEntity]:
        """
        return the loan accounts held by a client
        """
        return self._execute(self._get_accounts_for_client, client_id)

    def get_loan_accounts_for_group(self, group_id: str) -> List[MambuEntity]:
        """
        return the loan accounts held by a group
        """
        return self._execute(self._get_accounts_for_group, group_id)

    def create_loan_account(self, account) -> MambuEntity:
        """
        create a new loan account
        :param account:  the expanded description of the account (with its custom information), as
                         a MambuEntity or a dictionary
        :return:  the created account, as returned by Mambu
        """
        return self._execute(self._create_account, body=account)

    def update_loan_account(self, account_id: str, account) -> MambuEntity:
        """
        update an existing loan account
        :param str account_id:  the ID (or encoded key) of the account to update
        :param account:  the expanded description of the account's new state
        """
        return self._execute(self._update_account, account_id, body=account)

    def delete_loan_account(self, account_id: str) -> bool:
        """
        delete a loan account (allowed only for accounts that are pending approval)
        """
        return self._execute(self._delete_account, account_id)

    def _change_account(self, account_id, type, notes=None, **more):
        # the params (including type) travel as the form body of the POST, not the query string
        params = ParamsMap()
        params.put(apidata.TYPE, type)
        params.put(apidata.NOTES, notes)
        for name, val in more.items():
            params.put(name, val)
        return self._execute(self._post_account_change, account_id, params=params)

    def approve_loan_account(self, account_id: str, notes: str=None) -> MambuEntity:
        """
        approve a loan account that is pending approval
        :return:  the approved loan account
        """
        # E.g. POST loans/822/transactions  type=APPROVAL
        return self._change_account(account_id, apidata.TYPE_APPROVAL, notes)

    def undo_approve_loan_account(self, account_id: str, notes: str=None) -> MambuEntity:
        """
        return an approved loan account back to the pending-approval state
        """
        return self._change_account(account_id, apidata.TYPE_UNDO_APPROVAL, notes)

    def reject_loan_account(self, account_id: str, notes: str=None) -> MambuEntity:
        """
        reject a loan account that is pending approval
        """
        return self._change_account(account_id, apidata.TYPE_REJECT, notes)

    def disburse_loan_account(self, account_id: str, amount=None, disbursement_date=None,
                              first_repayment_date=None, payment_method: str=None,
                              notes: str=None) -> MambuEntity:
        """
        disburse an approved loan account
        :param amount:  the amount to disburse (default: the approved amount)
        :param disbursement_date:     the date of the disbursement (default: today)
        :param first_repayment_date:  the date of the first repayment
        :param str payment_method:    the transaction channel used
        :return:  the disbursement transaction
        """
        params = ParamsMap()
        params.put(apidata.TYPE, apidata.TYPE_DISBURSEMENT)
        params.put(apidata.AMOUNT, amount)
        params.put(apidata.DATE, disbursement_date)
        params.put(apidata.FIRST_REPAYMENT_DATE, first_repayment_date)
        params.put(apidata.PAYMENT_METHOD, payment_method)
        params.put(apidata.NOTES, notes)
        return self._execute(self._post_account_transaction, account_id, params=params)

    def make_loan_repayment(self, account_id: str, amount, date=None, payment_method: str=None,
                            receipt_number: str=None, notes: str=None) -> MambuEntity:
        """
        enter a repayment on a loan account
        :return:  the repayment transaction
        """
        # E.g. POST loans/822/transactions  type=REPAYMENT&amount=100
        params = ParamsMap()
        params.put(apidata.TYPE, apidata.TYPE_REPAYMENT)
        params.put(apidata.AMOUNT, amount)
        params.put(apidata.DATE, date)
        params.put(apidata.PAYMENT_METHOD, payment_method)
        params.put(apidata.RECEIPT_NUMBER, receipt_number)
        params.put(apidata.NOTES, notes)
        return self._execute(self._post_account_transaction, account_id, params=params)

    def get_loan_account_transactions(self, account_id: str, offset=None,
                                      limit=None) -> List[MambuEntity]:
        """
        return the transactions made on a loan account
        """
        params = ParamsMap()
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_account_transactions, account_id, params=params)

    def get_loan_transactions(self, offset=None, limit=None) -> List[MambuEntity]:
        """
        return transactions across all loan accounts
        """
        # E.g. GET loans/transactions?offset=0&limit=50
        params = ParamsMap()
        params.put(apidata.OFFSET, offset)
        params.put(apidata.LIMIT, limit)
        return self._execute(self._get_transactions, params=params)

    def get_loan_products(self) -> List[MambuEntity]:
        """
        return all loan products
        """
        return self._execute(self._get_products)

    def get_loan_product(self, product_id: str) -> MambuEntity:
        """
        return the loan product with the given ID
        """
        return self._execute(self._get_product, product_id)
