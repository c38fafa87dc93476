"""Declarative descriptors for catalog operations and their parameters.

Descriptors are plain frozen records. They carry no behavior beyond
construction-time consistency checks; the serializer interprets all of them
uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from mws_engine.catalog.enums import CatalogEnum
from mws_engine.models.errors import CatalogError


class ValueType(str, Enum):
    """Wire type a parameter value is coerced to."""
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    RAW = "raw"


class KeyValueShape(str, Enum):
    """How a key-value parameter is flattened.

    PAIRS emits ``<wire>.<i>.Key`` / ``<wire>.<i>.Value`` for each entry,
    ATTRIBUTES emits ``<wire>.<key>`` directly.
    """
    PAIRS = "pairs"
    ATTRIBUTES = "attributes"


EnumRef = Union[str, CatalogEnum, None]


@dataclass(frozen=True)
class RequestDefaults:
    """Static per-section request envelope."""

    name: str
    group: str
    path: str
    version: str


@dataclass(frozen=True)
class ParameterDescriptor:
    """One declared operation parameter.

    ``wire_name`` is the dot-delimited name the remote service expects and
    defaults to ``logical_name``. It may contain literal index segments, e.g.
    ``FeesEstimateRequestList.FeesEstimateRequest.1.IdType``.

    ``enum_ref`` is either an inlined ``CatalogEnum`` or the name of one;
    names are resolved when the owning section is registered.

    ``fields`` turns the parameter into a composite: its members are emitted
    under ``<wire_name>.<member wire name>``. A composite can be neither a
    list nor a key-value parameter.
    """

    logical_name: str
    wire_name: Optional[str] = None
    required: bool = False
    is_list: bool = False
    is_key_value: bool = False
    key_value_shape: KeyValueShape = KeyValueShape.PAIRS
    enum_ref: EnumRef = None
    value_type: ValueType = ValueType.STRING
    fields: Tuple["ParameterDescriptor", ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.logical_name:
            raise CatalogError("Parameter descriptor needs a logical name")
        if self.wire_name is None:
            object.__setattr__(self, "wire_name", self.logical_name)
        object.__setattr__(self, "value_type", ValueType(self.value_type))
        object.__setattr__(self, "key_value_shape", KeyValueShape(self.key_value_shape))
        object.__setattr__(self, "fields", tuple(self.fields))

        if self.is_list and self.is_key_value:
            raise CatalogError(
                f"Parameter {self.logical_name!r} cannot be both a list and a key-value map"
            )
        # Lists only flatten scalars at a single path (``<wire>.<i>``). A list
        # of composites would need ``<wire>.<i>.<member>`` and must instead be
        # declared as fixed-index scalar parameters.
        if self.fields and (self.is_list or self.is_key_value):
            raise CatalogError(
                f"Parameter {self.logical_name!r}: lists of composite values are not supported"
            )

    @property
    def is_composite(self) -> bool:
        return bool(self.fields)


@dataclass(frozen=True)
class OperationDescriptor:
    """A named remote operation and its parameter contract."""

    name: str
    parameters: Tuple[ParameterDescriptor, ...] = field(default_factory=tuple)
    defaults: Optional[RequestDefaults] = None
    # Dot path of the interesting part of the response (informational only).
    response_data_path: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        _check_unique_names(self.name, self.parameters)

    def parameter(self, logical_name: str) -> ParameterDescriptor:
        for descriptor in self.parameters:
            if descriptor.logical_name == logical_name:
                return descriptor
        raise KeyError(logical_name)


def _check_unique_names(owner: str, parameters: Iterable[ParameterDescriptor]) -> None:
    seen = set()
    for descriptor in parameters:
        if descriptor.logical_name in seen:
            raise CatalogError(
                f"{owner}: parameter {descriptor.logical_name!r} is declared twice"
            )
        seen.add(descriptor.logical_name)
        if descriptor.fields:
            _check_unique_names(f"{owner}.{descriptor.logical_name}", descriptor.fields)


# ---- Catalog authoring helpers --------------------------------------------


def param(logical_name: str, wire_name: Optional[str] = None, **options) -> ParameterDescriptor:
    """Shorthand used by the section tables."""

    return ParameterDescriptor(logical_name=logical_name, wire_name=wire_name, **options)


def composite(
    logical_name: str,
    members: Iterable[ParameterDescriptor],
    *,
    wire_name: Optional[str] = None,
    required: bool = False,
) -> ParameterDescriptor:
    return ParameterDescriptor(
        logical_name=logical_name,
        wire_name=wire_name,
        required=required,
        fields=tuple(members),
    )


def operation(name: str, *parameters: ParameterDescriptor, **options) -> OperationDescriptor:
    return OperationDescriptor(name=name, parameters=parameters, **options)
