import os, sys, pdb, json
import unittest as test
from unittest.mock import patch, Mock

from mambu.apisdk.factory import MambuAPIFactory
from mambu.apisdk.connection import MambuAPIService
from mambu.apisdk.executor import RequestExecutor
from mambu.apisdk import services as svcs
from mambu.apisdk.endpoints import EntityKind
from mambu.apisdk.exceptions import ConfigurationException

class TestMambuAPIFactory(test.TestCase):

    def setUp(self):
        self.config = {
            "domain": "demo.mambu.com",
            "date_format": "%Y-%m-%d",
            "auth": { "type": "apikey", "key": "abc123" }
        }
        self.fact = MambuAPIFactory(self.config)

    def test_ctor(self):
        self.assertTrue(isinstance(self.fact.service, MambuAPIService))
        self.assertEqual(self.fact.service.baseurl, "https://demo.mambu.com/api")
        self.assertTrue(isinstance(self.fact.executor, RequestExecutor))
        self.assertIs(self.fact.executor.service, self.fact.service)
        self.assertEqual(self.fact.executor.serializer.date_format, "%Y-%m-%d")

        with self.assertRaises(ConfigurationException):
            MambuAPIFactory({})
        with self.assertRaises(ConfigurationException):
            MambuAPIFactory("demo.mambu.com")

    def test_services(self):
        for getter, cls in [ (self.fact.get_repayments_service, svcs.RepaymentsService),
                             (self.fact.get_loans_service, svcs.LoansService),
                             (self.fact.get_clients_service, svcs.ClientsService),
                             (self.fact.get_savings_service, svcs.SavingsService),
                             (self.fact.get_documents_service, svcs.DocumentsService),
                             (self.fact.get_organization_service, svcs.OrganizationService),
                             (self.fact.get_tasks_service, svcs.TasksService) ]:
            svc = getter()
            self.assertTrue(isinstance(svc, cls), cls.__name__)
            self.assertIs(svc.executor, self.fact.executor)
            self.assertTrue(svc.log.name.endswith(cls.__name__))

    @patch('requests.request')
    def test_end_to_end(self, mock_req):
        resp = Mock()
        resp.status_code = 200
        resp.reason = "OK"
        resp.text = json.dumps([{"encodedKey": "8a1", "state": "PAID"}])
        mock_req.return_value = resp

        reps = self.fact.get_repayments_service().get_loan_account_repayments("822", 0, 10)
        self.assertEqual(len(reps), 1)
        self.assertIs(reps[0].kind, EntityKind.REPAYMENT)
        self.assertEqual(reps[0].state, "PAID")

        args, kw = mock_req.call_args
        self.assertEqual(args, ("GET", "https://demo.mambu.com/api/loans/822/repayments"))
        self.assertEqual(dict(kw['params']), {"offset": "0", "limit": "10"})
        self.assertEqual(kw['headers']['apiKey'], "abc123")

        resp.text = json.dumps({"id": "822", "accountState": "APPROVED"})
        acct = self.fact.get_loans_service().approve_loan_account("822")
        args, kw = mock_req.call_args
        self.assertEqual(args, ("POST", "https://demo.mambu.com/api/loans/822/transactions"))
        self.assertEqual(kw['data'], {"type": "APPROVAL"})
        self.assertIsNone(kw['params'])
        self.assertIs(acct.kind, EntityKind.LOAN_ACCOUNT)


if __name__ == '__main__':
    test.main()
