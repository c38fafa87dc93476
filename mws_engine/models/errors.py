"""Error taxonomy for catalog loading and request serialization.

Two families live here:

- ``CatalogError`` / ``UnknownOperationError`` are raised. A catalog error
  means the declarative tables themselves are broken (dangling enum name,
  list of composites, ...) and is fatal at startup.
- ``SerializationError`` is a value. ``serialize`` returns it inside a
  ``SerializationResult`` instead of raising, so callers always get a
  structured failure for bad input. ``SerializationFailed`` wraps it for
  callers that prefer exceptions.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SerializationErrorCode(str, Enum):
    """Reason codes surfaced to callers for bad request arguments."""
    MISSING_REQUIRED_PARAMETER = "MissingRequiredParameter"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    TYPE_MISMATCH = "TypeMismatch"
    EMPTY_REQUIRED_LIST = "EmptyRequiredList"
    MALFORMED_INPUT_SHAPE = "MalformedInputShape"


class SerializationError(BaseModel):
    """First failure found while serializing an operation's arguments."""
    model_config = ConfigDict(frozen=True)

    code: SerializationErrorCode
    parameter: str = Field(..., description="Logical parameter name, dotted for composite members")
    value: Optional[str] = Field(None, description="repr() of the offending input, when there was one")
    message: str = ""

    def __str__(self) -> str:
        text = f"{self.code.value}({self.parameter})"
        if self.message:
            text = f"{text}: {self.message}"
        return text


class CatalogError(RuntimeError):
    """The operation catalog is inconsistent and cannot be loaded."""


class UnknownOperationError(KeyError):
    """No section/operation registered under the requested name."""


class SerializationFailed(ValueError):
    """Exception form of a ``SerializationError``."""

    def __init__(self, error: SerializationError):
        super().__init__(str(error))
        self.error = error


class TypeMismatch(ValueError):
    """Raised by the coercers; converted into a ``SerializationError``."""
