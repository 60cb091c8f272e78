"""
Declarative specifications of Mambu API requests.

An :py:class:`ApiDefinition` describes how to build one class of API calls:  the shape of the URL path,
the HTTP method and content type, whether an object ID or the ``fullDetails`` flag is needed, and the
shape of the response expected from Mambu.  Definitions are built once (typically as class attributes
of a service class) and executed many times by a :py:class:`~mambu.apisdk.executor.RequestExecutor`
with the IDs and parameters given for each call.

The URL path built for a definition has the form::

    endpoint[/objectId][/relatedEntity[/relatedEntityId]]

for example, ``loans``, ``savings/1234``, ``clients/456/loans``, ``loans/4556/repayments``.

Most definitions are created from one of the standard request categories enumerated by
:py:class:`ApiType` and only need the entity kind(s) involved::

    ApiDefinition(ApiType.GET_ENTITY_DETAILS, EntityKind.LOAN_ACCOUNT)   # GET loans/ID?fullDetails=true
    ApiDefinition(ApiType.GET_OWNED_ENTITIES, EntityKind.CLIENT,
                  EntityKind.LOAN_ACCOUNT)                               # GET clients/ID/loans

Note that a definition does not include any of the input parameters of a request; these are passed
in by the service at call time.  The one exception is the ``fullDetails`` parameter, which is added
automatically for the request types that require it.
"""
from enum import Enum

from .endpoints import EntityKind, EndpointRegistry, registry as default_registry
from .exceptions import InvalidArgument, MissingRelatedEntity, StateException

__all__ = [ "Method", "ContentType", "ApiReturnFormat", "ApiType", "ApiDefinition",
            "BOOLEAN_RESULT", "STRING_RESULT" ]

class Method(Enum):
    """
    the HTTP methods used by Mambu API requests
    """
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"

class ContentType(Enum):
    """
    the content types used to send Mambu API requests
    """
    WWW_FORM = "application/x-www-form-urlencoded; charset=UTF-8"
    JSON = "application/json; charset=UTF-8"

class ApiReturnFormat(Enum):
    """
    the shape of the response returned by Mambu: a single object, a collection of objects, a simple
    success indicator, or a string to be returned as is.
    """
    OBJECT = "object"
    COLLECTION = "collection"
    BOOLEAN = "boolean"
    RESPONSE_STRING = "string"

class _ResultMarker:
    """
    a marker for the result type of requests that do not return entities.  Markers are shared
    process-wide and cannot be changed.
    """
    __slots__ = ("name", "type")

    def __init__(self, name, pytype):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "type", pytype)

    def __setattr__(self, name, value):
        raise AttributeError("result markers are immutable")

    def __delattr__(self, name):
        raise AttributeError("result markers are immutable")

    def __repr__(self):
        return self.name

BOOLEAN_RESULT = _ResultMarker("BOOLEAN_RESULT", bool)
STRING_RESULT = _ResultMarker("STRING_RESULT", str)

# symbolic names used to make the ApiType definitions readable
_withObjectId = True
_noObjectId = False
_hasRelatedEntityPart = True
_noRelatedEntityPart = False
_fullDetails = True
_noFullDetails = False

class ApiType(Enum):
    """
    the standard categories of Mambu API requests.  Each fixes the HTTP method and content type,
    whether an object ID goes in the path, whether the fullDetails parameter must be sent, whether
    a related entity part goes in the path, and the default format of the response.
    """

    # Get an entity without details.  Example: GET clients/3444
    GET_ENTITY = ("get_entity", Method.GET, ContentType.WWW_FORM,
        _withObjectId, _noFullDetails, _noRelatedEntityPart, ApiReturnFormat.OBJECT)

    # Get an entity with full details.  Example: GET loans/5566?fullDetails=true
    GET_ENTITY_DETAILS = ("get_entity_details", Method.GET, ContentType.WWW_FORM,
        _withObjectId, _fullDetails, _noRelatedEntityPart, ApiReturnFormat.OBJECT)

    # Get a list of entities.  Example: GET savings
    GET_LIST = ("get_list", Method.GET, ContentType.WWW_FORM,
        _noObjectId, _noFullDetails, _noRelatedEntityPart, ApiReturnFormat.COLLECTION)

    # Get the entities owned by another entity.  Example: GET clients/1233/loans
    GET_OWNED_ENTITIES = ("get_owned_entities", Method.GET, ContentType.WWW_FORM,
        _withObjectId, _noFullDetails, _hasRelatedEntityPart, ApiReturnFormat.COLLECTION)

    # Get entities of a type related to another type.  Example: GET loans/transactions
    GET_RELATED_ENTITIES = ("get_related_entities", Method.GET, ContentType.WWW_FORM,
        _noObjectId, _noFullDetails, _hasRelatedEntityPart, ApiReturnFormat.COLLECTION)

    # Update an entity owned by another entity.
    # Example: PATCH clients/CLIENT_ID/custominformation/CUSTOM_FIELD_ID
    PATCH_OWNED_ENTITY = ("patch_owned_entity", Method.PATCH, ContentType.JSON,
        _withObjectId, _noFullDetails, _hasRelatedEntityPart, ApiReturnFormat.BOOLEAN)

    # Delete an entity owned by another entity.
    # Example: DELETE clients/CLIENT_ID/custominformation/CUSTOM_FIELD_ID
    DELETE_OWNED_ENTITY = ("delete_owned_entity", Method.DELETE, ContentType.WWW_FORM,
        _withObjectId, _noFullDetails, _hasRelatedEntityPart, ApiReturnFormat.BOOLEAN)

    # Create an entity from a JSON description.  Example: POST clients
    CREATE_JSON_ENTITY = ("create_json_entity", Method.POST, ContentType.JSON,
        _noObjectId, _noFullDetails, _noRelatedEntityPart, ApiReturnFormat.OBJECT)

    # Create an entity from form parameters (for older APIs not using JSON)
    CREATE_FORM_ENTITY = ("create_form_entity", Method.POST, ContentType.WWW_FORM,
        _noObjectId, _noFullDetails, _noRelatedEntityPart, ApiReturnFormat.OBJECT)

    # Update an entity from a JSON description.  Example: POST loans/88666
    UPDATE_JSON = ("update_json", Method.POST, ContentType.JSON,
        _withObjectId, _noFullDetails, _noRelatedEntityPart, ApiReturnFormat.OBJECT)

    # Delete an entity.  Example: DELETE clients/976
    DELETE_ENTITY = ("delete_entity", Method.DELETE, ContentType.WWW_FORM,
        _withObjectId, _noFullDetails, _noRelatedEntityPart, ApiReturnFormat.BOOLEAN)

    # Post an entity owned by another.  Example: POST loans/822/transactions?type=REPAYMENT;
    # returns the owned entity (a LoanTransaction)
    POST_OWNED_ENTITY = ("post_owned_entity", Method.POST, ContentType.WWW_FORM,
        _withObjectId, _noFullDetails, _hasRelatedEntityPart, ApiReturnFormat.OBJECT)

    # Post a change to an entity.  Example: POST loans/822/transactions?type=APPROVAL;
    # returns the changed entity (a LoanAccount)
    POST_ENTITY_ACTION = ("post_entity_action", Method.POST, ContentType.WWW_FORM,
        _withObjectId, _noFullDetails, _hasRelatedEntityPart, ApiReturnFormat.OBJECT)

    def __init__(self, label, method, content_type, requires_object_id, with_full_details,
                 requires_related_entity, return_format):
        self.label = label
        self.method = method
        self.content_type = content_type
        self.requires_object_id = requires_object_id
        self.with_full_details = with_full_details
        self.requires_related_entity = requires_related_entity
        self.return_format = return_format

#
# The resolvers below determine, for each ApiType, the result type and related entity endpoint of a
# definition.  Each takes (apitype, entity_kind, result_kind, return_format, registry) and returns a
# (result_type, related_entity) tuple.
#

def _result_is_entity(apitype, kind, result_kind, fmt, reg):
    return kind, None

def _result_is_given_or_entity(apitype, kind, result_kind, fmt, reg):
    # e.g. a JSON_DOCUMENT is sent to create a DOCUMENT
    return (result_kind or kind), None

def _result_is_related(apitype, kind, result_kind, fmt, reg):
    if result_kind is None:
        raise MissingRelatedEntity(apitype.name)
    related = reg.resolve(result_kind)
    if fmt in (ApiReturnFormat.OBJECT, ApiReturnFormat.COLLECTION):
        return result_kind, related
    if fmt == ApiReturnFormat.BOOLEAN:
        return BOOLEAN_RESULT, related
    if fmt == ApiReturnFormat.RESPONSE_STRING:
        return STRING_RESULT, related
    raise StateException("Unsupported return format: "+str(fmt))

def _result_is_boolean(apitype, kind, result_kind, fmt, reg):
    return BOOLEAN_RESULT, None

def _result_is_acted_on_entity(apitype, kind, result_kind, fmt, reg):
    # the related kind only provides the action's sub-path
    if result_kind is None:
        raise MissingRelatedEntity(apitype.name)
    return kind, reg.resolve(result_kind)

_resolvers = {
    ApiType.GET_ENTITY:            _result_is_entity,
    ApiType.GET_ENTITY_DETAILS:    _result_is_entity,
    ApiType.GET_LIST:              _result_is_entity,
    ApiType.CREATE_FORM_ENTITY:    _result_is_entity,
    ApiType.CREATE_JSON_ENTITY:    _result_is_given_or_entity,
    ApiType.UPDATE_JSON:           _result_is_given_or_entity,
    ApiType.GET_OWNED_ENTITIES:    _result_is_related,
    ApiType.GET_RELATED_ENTITIES:  _result_is_related,
    ApiType.POST_OWNED_ENTITY:     _result_is_related,
    ApiType.PATCH_OWNED_ENTITY:    _result_is_related,
    ApiType.DELETE_OWNED_ENTITY:   _result_is_related,
    ApiType.DELETE_ENTITY:         _result_is_boolean,
    ApiType.POST_ENTITY_ACTION:    _result_is_acted_on_entity,
}

def _check_resolvers(resolvers):
    missing = [t.name for t in ApiType if t not in resolvers]
    if missing:
        raise StateException("No result resolver defined for ApiType(s): "+", ".join(missing))

_check_resolvers(_resolvers)


class ApiDefinition:
    """
    an immutable specification of a class of Mambu API requests.

    Instances are safe to share between threads and services:  all of the properties are fixed
    at construction time.
    """
    __slots__ = ("_apitype", "_kind", "_endpoint", "_related", "_fmt", "_result")

    def __init__(self, api_type: ApiType, entity_kind: EntityKind, result_kind: EntityKind=None,
                 return_format: ApiReturnFormat=None, registry: EndpointRegistry=None):
        """
        define a class of API requests

        :param ApiType api_type:       the category of the request
        :param EntityKind entity_kind: the kind of entity that determines the request's endpoint
                                       (e.g. LOAN_ACCOUNT for ``loans``)
        :param EntityKind result_kind: the kind of entity returned by the request.  This is required
                                       for the types that access an owned or related entity, where it
                                       also determines the related entity part of the path (e.g.
                                       REPAYMENT for ``loans/ID/repayments``) and for POST_ENTITY_ACTION
                                       (where it only determines the related part).  It is optional
                                       for CREATE_JSON_ENTITY and UPDATE_JSON, for when the
                                       representation sent differs from the one returned, and ignored
                                       for other types.
        :param ApiReturnFormat return_format:  the format of the response, overriding the default
                                       for the api_type
        :param EndpointRegistry registry:  the registry to resolve endpoints with; if not provided,
                                       the default registry will be used.
        :raises InvalidArgument:       if api_type or entity_kind is not provided or invalid
        :raises MissingRelatedEntity:  if result_kind is required but not provided
        :raises EndpointNotRegistered: if no endpoint is registered for one of the given kinds
        """
        if api_type is None:
            raise InvalidArgument("api_type must not be None")
        if not isinstance(api_type, ApiType):
            raise InvalidArgument("api_type is not an ApiType: "+repr(api_type))
        if entity_kind is None:
            raise InvalidArgument("entity_kind must not be None")
        if return_format is not None and not isinstance(return_format, ApiReturnFormat):
            raise InvalidArgument("return_format is not an ApiReturnFormat: "+repr(return_format))
        if not registry:
            registry = default_registry

        fmt = return_format or api_type.return_format
        endpoint = registry.resolve(entity_kind)

        resolver = _resolvers.get(api_type)
        if not resolver:
            raise StateException("No result resolver defined for ApiType "+api_type.name)
        result, related = resolver(api_type, entity_kind, result_kind, fmt, registry)

        _set = object.__setattr__
        _set(self, "_apitype", api_type)
        _set(self, "_kind", entity_kind)
        _set(self, "_endpoint", endpoint)
        _set(self, "_related", related)
        _set(self, "_fmt", fmt)
        _set(self, "_result", result)

    def __setattr__(self, name, value):
        raise AttributeError("ApiDefinition is immutable")

    def __delattr__(self, name):
        raise AttributeError("ApiDefinition is immutable")

    @property
    def api_type(self) -> ApiType:
        """the category of this request"""
        return self._apitype

    @property
    def entity_kind(self) -> EntityKind:
        """the kind of entity that determines this request's endpoint"""
        return self._kind

    @property
    def endpoint(self) -> str:
        """the first segment of the URL path (e.g. "loans")"""
        return self._endpoint

    @property
    def related_entity(self) -> str:
        """the related entity segment of the URL path (e.g. "repayments"), or None if not used"""
        return self._related

    @property
    def return_format(self) -> ApiReturnFormat:
        """the format of the response expected from Mambu"""
        return self._fmt

    @property
    def result_type(self):
        """
        the type of result returned:  an EntityKind for OBJECT and COLLECTION formats,
        BOOLEAN_RESULT or STRING_RESULT otherwise (except where the format was overridden
        for a request type that normally returns entities)
        """
        return self._result

    @property
    def method(self) -> Method:
        return self._apitype.method

    @property
    def content_type(self) -> ContentType:
        return self._apitype.content_type

    @property
    def requires_object_id(self) -> bool:
        return self._apitype.requires_object_id

    @property
    def with_full_details(self) -> bool:
        return self._apitype.with_full_details

    def __eq__(self, other):
        if not isinstance(other, ApiDefinition):
            return NotImplemented
        return (self._apitype, self._kind, self._endpoint, self._related, self._fmt, self._result) == \
               (other._apitype, other._kind, other._endpoint, other._related, other._fmt, other._result)

    def __hash__(self):
        return hash((self._apitype, self._kind, self._related, self._fmt))

    def __repr__(self):
        out = "ApiDefinition({0}, {1}".format(self._apitype.name,
                                              getattr(self._kind, "name", self._kind))
        if self._related:
            out += ", related="+self._related
        return out + ", returns {0} {1})".format(self._fmt.name, repr(self._result))
