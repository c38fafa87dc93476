from .errors import (
    CatalogError,
    SerializationError,
    SerializationErrorCode,
    SerializationFailed,
    TypeMismatch,
    UnknownOperationError,
)

__all__ = [
    "CatalogError",
    "SerializationError",
    "SerializationErrorCode",
    "SerializationFailed",
    "TypeMismatch",
    "UnknownOperationError",
]
