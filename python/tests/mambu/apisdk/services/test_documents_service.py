import os, sys, pdb, json
import unittest as test
from unittest.mock import Mock

from mambu.apisdk.services import DocumentsService
from mambu.apisdk.connection import HTTPResult
from mambu.apisdk.apidef import Method, ContentType
from mambu.apisdk.endpoints import EntityKind
from mambu.apisdk.model import MambuEntity
from mambu.apisdk.exceptions import MambuResourceNotFound

K = EntityKind

document = { "encodedKey": "8a8086c0", "id": 12, "name": "contract", "type": "pdf",
             "documentHolderKey": "8a80867c", "documentHolderType": "CLIENT" }

def mock_service(status=200, text="", reason="OK"):
    svc = Mock()
    svc.send.side_effect = lambda meth, path, ct, params=None, body=None: \
        HTTPResult(status, reason, text, "https://demo.mambu.com/api/"+path)
    return svc

class TestDocumentsService(test.TestCase):

    def use_response(self, text, status=200):
        self.svc = mock_service(status, text)
        self.docs = DocumentsService(self.svc)

    def assertSent(self, meth, path, params, ct=ContentType.WWW_FORM):
        args = self.svc.send.call_args[0]
        self.assertEqual(args[0], meth)
        self.assertEqual(args[1], path)
        self.assertEqual(args[2], ct)
        self.assertEqual(dict(args[3]), params)
        return args[4]

    def test_upload(self):
        self.use_response(json.dumps(document), 201)
        upload = MambuEntity(K.JSON_DOCUMENT, {
            "document": { "documentHolderKey": "8a80867c", "documentHolderType": "CLIENT",
                          "name": "contract", "type": "pdf" },
            "documentContent": "JVBERi0xLjQK"
        })
        doc = self.docs.upload_document(upload)
        body = self.assertSent(Method.POST, "documents", {}, ContentType.JSON)
        self.assertEqual(json.loads(body)["documentContent"], "JVBERi0xLjQK")
        self.assertIs(doc.kind, K.DOCUMENT)
        self.assertEqual(doc.id, 12)

    def test_get_content(self):
        self.use_response("JVBERi0xLjQK")
        content = self.docs.get_document_content("8a8086c0")
        self.assertSent(Method.GET, "documents/8a8086c0", {})
        self.assertEqual(content, "JVBERi0xLjQK")

        self.use_response('{"returnCode": 2, "returnStatus": "INVALID_DOCUMENT_ID"}', 404)
        with self.assertRaises(MambuResourceNotFound):
            self.docs.get_document_content("goober")

    def test_delete(self):
        self.use_response('{"returnCode": 0, "returnStatus": "SUCCESS"}')
        self.assertIs(self.docs.delete_document("8a8086c0"), True)
        self.assertSent(Method.DELETE, "documents/8a8086c0", {})

    def test_list_documents(self):
        self.use_response(json.dumps([document]))
        docs = self.docs.get_client_documents("8832")
        self.assertSent(Method.GET, "clients/8832/documents", {})
        self.assertIs(docs[0].kind, K.DOCUMENT)

        docs = self.docs.get_loan_account_documents("822")
        self.assertSent(Method.GET, "loans/822/documents", {})
        self.assertEqual(docs[0].name, "contract")

        self.use_response("")
        self.assertEqual(self.docs.get_client_documents("8832"), [])


if __name__ == '__main__':
    test.main()
