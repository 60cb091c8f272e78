"""
A client library for the Mambu REST API.

API calls are described declaratively by :py:class:`~mambu.apisdk.apidef.ApiDefinition` instances,
built once from a request category (:py:class:`~mambu.apisdk.apidef.ApiType`) and one or two entity 
kinds (:py:class:`~mambu.apisdk.endpoints.EntityKind`).  A 
:py:class:`~mambu.apisdk.executor.RequestExecutor` turns a definition plus the ids and parameters 
given at call time into an HTTP request and parses the response into a typed result.  The service 
classes in :py:mod:`mambu.apisdk.services` simply pair definitions with parameters.
"""
from .exceptions import *
from .endpoints import EntityKind, registry
from .apidef import ApiDefinition, ApiType, ApiReturnFormat

try:
    from .version import __version__
except ImportError:
    __version__ = "(unset)"
