"""
Service for uploading and retrieving documents attached to Mambu entities
"""
from typing import List

from .base import MambuService
from ..apidef import ApiDefinition, ApiType, ApiReturnFormat
from ..endpoints import EntityKind
from ..model import MambuEntity

_K = EntityKind

class DocumentsService(MambuService):
    """
    a service for managing documents attached to clients, groups, and accounts
    """

    # a JSONDocument (the document's metadata plus its base64-encoded content) is sent; the
    # Document metadata comes back
    _upload_document = ApiDefinition(ApiType.CREATE_JSON_ENTITY, _K.JSON_DOCUMENT, _K.DOCUMENT)
    # Mambu returns a document's content as a base64-encoded string, not as JSON
    _get_document = ApiDefinition(ApiType.GET_ENTITY, _K.DOCUMENT,
                                  return_format=ApiReturnFormat.RESPONSE_STRING)
    _delete_document = ApiDefinition(ApiType.DELETE_ENTITY, _K.DOCUMENT)
    _get_client_documents = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.CLIENT, _K.DOCUMENT)
    _get_loan_documents = ApiDefinition(ApiType.GET_OWNED_ENTITIES, _K.LOAN_ACCOUNT, _K.DOCUMENT)

    def upload_document(self, document) -> MambuEntity:
        """
        attach a document to an entity
        :param document:  the document to upload (with ``document`` and ``documentContent``
                          properties), as a MambuEntity or dictionary
        :return:  the metadata describing the uploaded document
        """
        return self._execute(self._upload_document, body=document)

    def get_document_content(self, document_id: str) -> str:
        """
        return the base64-encoded content of a document
        """
        return self._execute(self._get_document, document_id)

    def delete_document(self, document_id: str) -> bool:
        """
        delete a document
        """
        return self._execute(self._delete_document, document_id)

    def get_client_documents(self, client_id: str) -> List[MambuEntity]:
        """
        return the descriptions of the documents attached to a client
        """
        return self._execute(self._get_client_documents, client_id)

    def get_loan_account_documents(self, account_id: str) -> List[MambuEntity]:
        """
        return the descriptions of the documents attached to a loan account
        """
        return self._execute(self._get_loan_documents, account_id)
