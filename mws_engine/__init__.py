"""Declarative MWS operation catalog and wire-parameter serializer."""

from mws_engine.catalog import (
    CatalogEnum,
    KeyValueShape,
    OperationDescriptor,
    ParameterDescriptor,
    RequestDefaults,
    Section,
    ValueType,
    define_enum,
    get_operation,
    get_section,
    init_catalog,
    list_sections,
    register_section,
)
from mws_engine.models.errors import (
    CatalogError,
    SerializationError,
    SerializationErrorCode,
    SerializationFailed,
    UnknownOperationError,
)
from mws_engine.services.coercion import coerce
from mws_engine.services.request_builder import PreparedRequest, build_request, encode_query
from mws_engine.services.serializer import SerializationResult, WireParameter, serialize

__version__ = "0.1.0"

__all__ = [
    "CatalogEnum",
    "CatalogError",
    "KeyValueShape",
    "OperationDescriptor",
    "ParameterDescriptor",
    "PreparedRequest",
    "RequestDefaults",
    "Section",
    "SerializationError",
    "SerializationErrorCode",
    "SerializationFailed",
    "SerializationResult",
    "UnknownOperationError",
    "ValueType",
    "WireParameter",
    "build_request",
    "coerce",
    "define_enum",
    "encode_query",
    "get_operation",
    "get_section",
    "init_catalog",
    "list_sections",
    "register_section",
    "serialize",
]
