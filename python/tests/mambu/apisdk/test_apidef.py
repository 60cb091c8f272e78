import os, sys, pdb
import unittest as test

from mambu.apisdk import apidef
from mambu.apisdk.apidef import (ApiDefinition, ApiType, ApiReturnFormat, Method, ContentType,
                                 BOOLEAN_RESULT, STRING_RESULT)
from mambu.apisdk.endpoints import EntityKind, EndpointRegistry, registry
from mambu.apisdk.exceptions import (InvalidArgument, MissingRelatedEntity, EndpointNotRegistered,
                                     ConfigurationException, StateException)

K = EntityKind

OWNED_TYPES = [ ApiType.GET_OWNED_ENTITIES, ApiType.GET_RELATED_ENTITIES, ApiType.POST_OWNED_ENTITY,
                ApiType.PATCH_OWNED_ENTITY, ApiType.DELETE_OWNED_ENTITY, ApiType.POST_ENTITY_ACTION ]

class TestApiType(test.TestCase):

    def test_members(self):
        # no two categories may collapse into aliases of one another
        self.assertEqual(len(list(ApiType)), 13)
        self.assertEqual(len(ApiType.__members__), 13)

    def test_rules(self):
        t = ApiType.GET_ENTITY_DETAILS
        self.assertIs(t.method, Method.GET)
        self.assertIs(t.content_type, ContentType.WWW_FORM)
        self.assertTrue(t.requires_object_id)
        self.assertTrue(t.with_full_details)
        self.assertFalse(t.requires_related_entity)
        self.assertIs(t.return_format, ApiReturnFormat.OBJECT)

        t = ApiType.GET_RELATED_ENTITIES
        self.assertFalse(t.requires_object_id)
        self.assertTrue(t.requires_related_entity)
        self.assertIs(t.return_format, ApiReturnFormat.COLLECTION)

        t = ApiType.PATCH_OWNED_ENTITY
        self.assertIs(t.method, Method.PATCH)
        self.assertIs(t.content_type, ContentType.JSON)
        self.assertIs(t.return_format, ApiReturnFormat.BOOLEAN)

        t = ApiType.CREATE_FORM_ENTITY
        self.assertIs(t.method, Method.POST)
        self.assertIs(t.content_type, ContentType.WWW_FORM)
        self.assertFalse(t.requires_object_id)

        for t in (ApiType.POST_OWNED_ENTITY, ApiType.POST_ENTITY_ACTION):
            self.assertIs(t.method, Method.POST)
            self.assertIs(t.content_type, ContentType.WWW_FORM)
            self.assertTrue(t.requires_object_id)
            self.assertTrue(t.requires_related_entity)

        self.assertEqual([t for t in ApiType if t.with_full_details], [ApiType.GET_ENTITY_DETAILS])
        self.assertEqual(set(t for t in ApiType if t.requires_related_entity), set(OWNED_TYPES))

class TestResolvers(test.TestCase):

    def test_exhaustive(self):
        for t in ApiType:
            self.assertIn(t, apidef._resolvers)
        apidef._check_resolvers(apidef._resolvers)

    def test_incomplete_table(self):
        resolvers = dict(apidef._resolvers)
        del resolvers[ApiType.DELETE_ENTITY]
        with self.assertRaises(StateException) as cm:
            apidef._check_resolvers(resolvers)
        self.assertIn("DELETE_ENTITY", str(cm.exception))

        with self.assertRaises(StateException):
            apidef._check_resolvers({})

class TestApiDefinition(test.TestCase):

    def test_get_entity(self):
        d = ApiDefinition(ApiType.GET_ENTITY, K.LOAN_ACCOUNT)
        self.assertIs(d.api_type, ApiType.GET_ENTITY)
        self.assertIs(d.entity_kind, K.LOAN_ACCOUNT)
        self.assertEqual(d.endpoint, "loans")
        self.assertIsNone(d.related_entity)
        self.assertIs(d.return_format, ApiReturnFormat.OBJECT)
        self.assertIs(d.result_type, K.LOAN_ACCOUNT)
        self.assertIs(d.method, Method.GET)
        self.assertIs(d.content_type, ContentType.WWW_FORM)
        self.assertTrue(d.requires_object_id)
        self.assertFalse(d.with_full_details)

        # a second kind is ignored
        d = ApiDefinition(ApiType.GET_ENTITY, K.LOAN_ACCOUNT, K.REPAYMENT)
        self.assertIs(d.result_type, K.LOAN_ACCOUNT)
        self.assertIsNone(d.related_entity)

    def test_get_details_and_list(self):
        d = ApiDefinition(ApiType.GET_ENTITY_DETAILS, K.CLIENT_EXPANDED)
        self.assertEqual(d.endpoint, "clients")
        self.assertTrue(d.with_full_details)
        self.assertIs(d.result_type, K.CLIENT_EXPANDED)

        d = ApiDefinition(ApiType.GET_LIST, K.BRANCH)
        self.assertEqual(d.endpoint, "branches")
        self.assertIs(d.return_format, ApiReturnFormat.COLLECTION)
        self.assertIs(d.result_type, K.BRANCH)
        self.assertFalse(d.requires_object_id)

        d = ApiDefinition(ApiType.CREATE_FORM_ENTITY, K.TASK)
        self.assertIs(d.result_type, K.TASK)
        self.assertIs(d.method, Method.POST)

    def test_create_json(self):
        d = ApiDefinition(ApiType.CREATE_JSON_ENTITY, K.JSON_DOCUMENT, K.DOCUMENT)
        self.assertEqual(d.endpoint, "documents")
        self.assertIsNone(d.related_entity)
        self.assertIs(d.result_type, K.DOCUMENT)
        self.assertIs(d.content_type, ContentType.JSON)

        d = ApiDefinition(ApiType.CREATE_JSON_ENTITY, K.CLIENT_EXPANDED)
        self.assertIs(d.result_type, K.CLIENT_EXPANDED)

        d = ApiDefinition(ApiType.UPDATE_JSON, K.LOAN_ACCOUNT_EXPANDED, K.LOAN_ACCOUNT)
        self.assertIs(d.result_type, K.LOAN_ACCOUNT)
        self.assertTrue(d.requires_object_id)

    def test_related_required(self):
        for t in OWNED_TYPES:
            with self.assertRaises(MissingRelatedEntity) as cm:
                ApiDefinition(t, K.LOAN_ACCOUNT)
            self.assertTrue(isinstance(cm.exception, InvalidArgument))
            self.assertTrue(isinstance(cm.exception, ConfigurationException))
            self.assertIn(t.name, str(cm.exception))

            d = ApiDefinition(t, K.LOAN_ACCOUNT, K.REPAYMENT)
            self.assertEqual(d.related_entity, registry.resolve(K.REPAYMENT))
            self.assertEqual(d.endpoint, "loans")

    def test_owned_results(self):
        d = ApiDefinition(ApiType.GET_OWNED_ENTITIES, K.LOAN_ACCOUNT, K.REPAYMENT)
        self.assertEqual(d.related_entity, "repayments")
        self.assertIs(d.result_type, K.REPAYMENT)
        self.assertIs(d.return_format, ApiReturnFormat.COLLECTION)

        d = ApiDefinition(ApiType.GET_RELATED_ENTITIES, K.LOAN_ACCOUNT, K.LOAN_TRANSACTION)
        self.assertEqual(d.related_entity, "transactions")
        self.assertFalse(d.requires_object_id)
        self.assertIs(d.result_type, K.LOAN_TRANSACTION)

        d = ApiDefinition(ApiType.POST_OWNED_ENTITY, K.LOAN_ACCOUNT, K.LOAN_TRANSACTION)
        self.assertIs(d.result_type, K.LOAN_TRANSACTION)
        self.assertIs(d.return_format, ApiReturnFormat.OBJECT)

        d = ApiDefinition(ApiType.PATCH_OWNED_ENTITY, K.CLIENT, K.CUSTOM_FIELD_VALUE)
        self.assertEqual(d.related_entity, "custominformation")
        self.assertIs(d.result_type, BOOLEAN_RESULT)
        self.assertIs(d.return_format, ApiReturnFormat.BOOLEAN)

        d = ApiDefinition(ApiType.DELETE_OWNED_ENTITY, K.CLIENT, K.CUSTOM_FIELD_VALUE)
        self.assertIs(d.result_type, BOOLEAN_RESULT)
        self.assertIs(d.method, Method.DELETE)

    def test_entity_action(self):
        d = ApiDefinition(ApiType.POST_ENTITY_ACTION, K.LOAN_ACCOUNT, K.LOAN_TRANSACTION)
        self.assertEqual(d.endpoint, "loans")
        self.assertEqual(d.related_entity, "transactions")
        self.assertIs(d.result_type, K.LOAN_ACCOUNT)
        self.assertIs(d.return_format, ApiReturnFormat.OBJECT)
        self.assertIs(d.method, Method.POST)

    def test_delete_entity(self):
        d = ApiDefinition(ApiType.DELETE_ENTITY, K.LOAN_ACCOUNT)
        self.assertIs(d.result_type, BOOLEAN_RESULT)
        self.assertIsNone(d.related_entity)

        d = ApiDefinition(ApiType.DELETE_ENTITY, K.LOAN_ACCOUNT, K.REPAYMENT)
        self.assertIs(d.result_type, BOOLEAN_RESULT)
        self.assertIsNone(d.related_entity)

    def test_format_override(self):
        d = ApiDefinition(ApiType.GET_ENTITY, K.DOCUMENT, return_format=ApiReturnFormat.RESPONSE_STRING)
        self.assertIs(d.return_format, ApiReturnFormat.RESPONSE_STRING)
        self.assertEqual(d.endpoint, "documents")

        d = ApiDefinition(ApiType.GET_OWNED_ENTITIES, K.CLIENT, K.DOCUMENT,
                          ApiReturnFormat.RESPONSE_STRING)
        self.assertIs(d.result_type, STRING_RESULT)

        d = ApiDefinition(ApiType.POST_OWNED_ENTITY, K.LOAN_ACCOUNT, K.LOAN_TRANSACTION,
                          ApiReturnFormat.BOOLEAN)
        self.assertIs(d.result_type, BOOLEAN_RESULT)

    def test_bad_args(self):
        with self.assertRaises(InvalidArgument):
            ApiDefinition(None, K.LOAN_ACCOUNT)
        with self.assertRaises(InvalidArgument):
            ApiDefinition("GET_ENTITY", K.LOAN_ACCOUNT)
        with self.assertRaises(InvalidArgument):
            ApiDefinition(ApiType.GET_ENTITY, None)
        with self.assertRaises(InvalidArgument):
            ApiDefinition(ApiType.GET_ENTITY, K.LOAN_ACCOUNT, return_format="object")

    def test_unregistered(self):
        reg = EndpointRegistry({ K.LOAN_ACCOUNT: "loans" })
        d = ApiDefinition(ApiType.GET_ENTITY, K.LOAN_ACCOUNT, registry=reg)
        self.assertEqual(d.endpoint, "loans")

        with self.assertRaises(EndpointNotRegistered):
            ApiDefinition(ApiType.GET_ENTITY, K.CLIENT, registry=reg)
        with self.assertRaises(EndpointNotRegistered):
            ApiDefinition(ApiType.GET_OWNED_ENTITIES, K.LOAN_ACCOUNT, K.REPAYMENT, registry=reg)

    def test_immutable(self):
        d = ApiDefinition(ApiType.GET_OWNED_ENTITIES, K.LOAN_ACCOUNT, K.REPAYMENT)
        with self.assertRaises(AttributeError):
            d._endpoint = "savings"
        with self.assertRaises(AttributeError):
            d.endpoint = "savings"
        with self.assertRaises(AttributeError):
            d.goober = "gurn"
        with self.assertRaises(AttributeError):
            del d._related
        self.assertEqual(d.endpoint, "loans")
        self.assertEqual(d.related_entity, "repayments")

    def test_result_markers_immutable(self):
        for marker, name, pytype in ((BOOLEAN_RESULT, "BOOLEAN_RESULT", bool),
                                     (STRING_RESULT, "STRING_RESULT", str)):
            with self.assertRaises(AttributeError):
                marker.name = "goober"
            with self.assertRaises(AttributeError):
                marker.type = int
            with self.assertRaises(AttributeError):
                marker.extra = "gurn"
            with self.assertRaises(AttributeError):
                del marker.type
            self.assertEqual(marker.name, name)
            self.assertIs(marker.type, pytype)
            self.assertEqual(repr(marker), name)

        d = ApiDefinition(ApiType.DELETE_ENTITY, K.LOAN_ACCOUNT)
        self.assertIs(d.result_type, BOOLEAN_RESULT)
        self.assertIs(d.result_type.type, bool)

    def test_eq(self):
        d1 = ApiDefinition(ApiType.GET_OWNED_ENTITIES, K.LOAN_ACCOUNT, K.REPAYMENT)
        d2 = ApiDefinition(ApiType.GET_OWNED_ENTITIES, K.LOAN_ACCOUNT, K.REPAYMENT)
        self.assertEqual(d1, d2)
        self.assertEqual(hash(d1), hash(d2))
        self.assertNotEqual(d1, ApiDefinition(ApiType.GET_LIST, K.REPAYMENT))
        self.assertNotEqual(d1, "loans/repayments")
        self.assertIn("GET_OWNED_ENTITIES", repr(d1))
        self.assertIn("repayments", repr(d1))


if __name__ == '__main__':
    test.main()
