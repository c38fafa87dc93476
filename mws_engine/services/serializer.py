"""Validate and flatten operation arguments into MWS wire parameters.

``serialize`` walks an operation's parameter descriptors in declaration order
and produces ``(name, value)`` pairs in the flattened dot-and-index format the
remote service expects:

- scalar        ``MarketplaceId=ATVPDKIKX0DER``
- list          ``ASINList.ASIN.1=B000123456``, ``ASINList.ASIN.2=...``
- key-value     ``AttributeList.member.1.Key=sqsQueueUrl`` /
                ``AttributeList.member.1.Value=https://...`` (PAIRS) or
                ``Attributes.color=red`` (ATTRIBUTES)
- composite     ``Destination.DeliveryChannel=SQS``

Lists only flatten scalars at a single path. Operations that take a list of
composite objects (``GetMyFeesEstimate``) are declared with literal index
segments in their wire names and can therefore only send one entry.

Validation is fail-fast: the first failure in declaration order is returned
as a ``SerializationError`` inside the result. Nothing is raised for bad
caller input. The function holds no state and is safe to call from any
thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from mws_engine.catalog.descriptors import (
    KeyValueShape,
    OperationDescriptor,
    ParameterDescriptor,
)
from mws_engine.catalog.enums import CatalogEnum, get_enum
from mws_engine.models.errors import (
    SerializationError,
    SerializationErrorCode,
    SerializationFailed,
    TypeMismatch,
)
from mws_engine.services.coercion import coerce, stringify
from mws_engine.utils.logger import logger


class WireParameter(NamedTuple):
    name: str
    value: str


@dataclass(frozen=True)
class SerializationResult:
    """Outcome of ``serialize``: either ``params`` or ``error`` is meaningful."""

    operation: str
    params: Tuple[WireParameter, ...] = ()
    error: Optional[SerializationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> Dict[str, str]:
        return {p.name: p.value for p in self.params}

    def raise_for_error(self) -> Tuple[WireParameter, ...]:
        if self.error is not None:
            raise SerializationFailed(self.error)
        return self.params


class _Failure(Exception):
    def __init__(self, error: SerializationError):
        super().__init__(str(error))
        self.error = error


def _fail(
    code: SerializationErrorCode,
    parameter: str,
    message: str,
    value: Any = None,
) -> _Failure:
    shown = None if value is None else _shown(value)
    return _Failure(SerializationError(code=code, parameter=parameter, value=shown, message=message))


def _shown(value: Any) -> str:
    try:
        return repr(value)[:200]
    except ValueError:
        # ints past the interpreter's digit limit cannot be rendered
        return f"<{type(value).__name__} too large to display>"


def serialize(operation: OperationDescriptor, args: Optional[Mapping[str, Any]]) -> SerializationResult:
    """Flatten ``args`` according to ``operation``'s parameter descriptors.

    On success the result carries every wire parameter in declaration order,
    followed by the envelope fields ``Action`` and ``Version``.
    """

    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        error = SerializationError(
            code=SerializationErrorCode.MALFORMED_INPUT_SHAPE,
            parameter=operation.name,
            value=_shown(args),
            message="arguments must be a mapping of parameter names to values",
        )
        return SerializationResult(operation=operation.name, error=error)

    out: List[WireParameter] = []
    try:
        for descriptor in operation.parameters:
            _serialize_parameter(descriptor, args, out, "", "")
    except _Failure as failure:
        logger.debug("[serialize] %s rejected: %s", operation.name, failure.error)
        return SerializationResult(operation=operation.name, error=failure.error)

    declared = {d.logical_name for d in operation.parameters}
    undeclared = [name for name in args if name not in declared]
    if undeclared:
        logger.debug("[serialize] %s ignoring undeclared arguments: %s", operation.name, undeclared)

    out.append(WireParameter("Action", operation.name))
    if operation.defaults is not None and operation.defaults.version:
        out.append(WireParameter("Version", operation.defaults.version))

    return SerializationResult(operation=operation.name, params=tuple(out))


def _serialize_parameter(
    descriptor: ParameterDescriptor,
    args: Mapping[str, Any],
    out: List[WireParameter],
    wire_prefix: str,
    logical_prefix: str,
) -> None:
    logical = logical_prefix + descriptor.logical_name
    wire = wire_prefix + descriptor.wire_name
    value = args.get(descriptor.logical_name)

    if value is None:
        if descriptor.required:
            raise _fail(
                SerializationErrorCode.MISSING_REQUIRED_PARAMETER,
                logical,
                "required parameter is missing",
            )
        return

    if descriptor.is_composite:
        if not isinstance(value, Mapping):
            raise _fail(
                SerializationErrorCode.MALFORMED_INPUT_SHAPE,
                logical,
                "expected a mapping of member values",
                value,
            )
        for member in descriptor.fields:
            _serialize_parameter(member, value, out, wire + ".", logical + ".")
        return

    if descriptor.is_list:
        _flatten_list(descriptor, value, out, wire, logical)
    elif descriptor.is_key_value:
        _flatten_key_value(descriptor, value, out, wire, logical)
    else:
        _check_enum(descriptor, value, logical)
        out.append(WireParameter(wire, _coerce(descriptor, value, logical)))


def _flatten_list(
    descriptor: ParameterDescriptor,
    value: Any,
    out: List[WireParameter],
    wire: str,
    logical: str,
) -> None:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise _fail(
            SerializationErrorCode.MALFORMED_INPUT_SHAPE,
            logical,
            "expected a list of values",
            value,
        )
    if not value:
        if descriptor.required:
            raise _fail(
                SerializationErrorCode.EMPTY_REQUIRED_LIST,
                logical,
                "required list is empty",
            )
        return

    for index, item in enumerate(value, start=1):
        _check_present(item, logical)
        _check_enum(descriptor, item, logical)
        out.append(WireParameter(f"{wire}.{index}", _coerce(descriptor, item, logical)))


def _flatten_key_value(
    descriptor: ParameterDescriptor,
    value: Any,
    out: List[WireParameter],
    wire: str,
    logical: str,
) -> None:
    if not isinstance(value, Mapping):
        raise _fail(
            SerializationErrorCode.MALFORMED_INPUT_SHAPE,
            logical,
            "expected a mapping of keys to values",
            value,
        )
    if not value:
        if descriptor.required:
            raise _fail(
                SerializationErrorCode.EMPTY_REQUIRED_LIST,
                logical,
                "required key-value map is empty",
            )
        return

    for index, (key, item) in enumerate(value.items(), start=1):
        if not isinstance(key, str) or not key:
            raise _fail(
                SerializationErrorCode.TYPE_MISMATCH,
                logical,
                "keys must be non-empty strings",
                key,
            )
        _check_present(item, logical)
        _check_enum(descriptor, item, logical)
        text = _coerce(descriptor, item, logical)
        if descriptor.key_value_shape is KeyValueShape.PAIRS:
            out.append(WireParameter(f"{wire}.{index}.Key", key))
            out.append(WireParameter(f"{wire}.{index}.Value", text))
        else:
            out.append(WireParameter(f"{wire}.{key}", text))


def _check_enum(descriptor: ParameterDescriptor, value: Any, logical: str) -> None:
    enum_ref = descriptor.enum_ref
    if enum_ref is None:
        return
    if not isinstance(enum_ref, CatalogEnum):
        enum_ref = get_enum(enum_ref)
    if not enum_ref.contains(stringify(value)):
        raise _fail(
            SerializationErrorCode.INVALID_ENUM_VALUE,
            logical,
            f"not one of {enum_ref.name}: {', '.join(enum_ref.values)}",
            value,
        )


def _check_present(item: Any, logical: str) -> None:
    if item is None:
        raise _fail(SerializationErrorCode.TYPE_MISMATCH, logical, "null element")


def _coerce(descriptor: ParameterDescriptor, value: Any, logical: str) -> str:
    try:
        return coerce(descriptor.value_type, value)
    except TypeMismatch as exc:
        raise _fail(SerializationErrorCode.TYPE_MISMATCH, logical, str(exc), value) from None
