from .descriptors import (
    KeyValueShape,
    OperationDescriptor,
    ParameterDescriptor,
    RequestDefaults,
    ValueType,
    composite,
    operation,
    param,
)
from .enums import CatalogEnum, define_enum, get_enum
from .registry import (
    Section,
    get_operation,
    get_section,
    init_catalog,
    list_sections,
    register_section,
    reset_catalog,
)

__all__ = [
    "CatalogEnum",
    "KeyValueShape",
    "OperationDescriptor",
    "ParameterDescriptor",
    "RequestDefaults",
    "Section",
    "ValueType",
    "composite",
    "define_enum",
    "get_enum",
    "get_operation",
    "get_section",
    "init_catalog",
    "list_sections",
    "operation",
    "param",
    "register_section",
    "reset_catalog",
]
