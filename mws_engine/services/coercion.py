from __future__ import annotations

import math
import sys
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation, Overflow
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from mws_engine.catalog.descriptors import ValueType
from mws_engine.models.errors import TypeMismatch


_DATETIME = TypeAdapter(datetime)
_CONTAINERS = (Mapping, list, tuple, set, frozenset)


def coerce(value_type: ValueType, raw: Any) -> str:
    """Convert a caller value into the wire string for ``value_type``.

    Raises ``TypeMismatch`` when the value cannot be represented.
    """

    coercer = _COERCERS[ValueType(value_type)]
    return coercer(raw)


def stringify(raw: Any) -> str:
    """Best-effort text form of ``raw`` used for enum membership checks."""

    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (int, float, Decimal)):
        try:
            return coerce_number(raw)
        except TypeMismatch:
            # Not representable on the wire, so never an enum member.
            return ""
    return str(raw)


def coerce_string(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (int, float, Decimal)):
        return coerce_number(raw)
    if isinstance(raw, (datetime, date)):
        return coerce_date(raw)
    if isinstance(raw, _CONTAINERS):
        raise TypeMismatch(f"expected a scalar, got {type(raw).__name__}")
    return str(raw)


def coerce_boolean(raw: Any) -> str:
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in ("true", "false"):
            return text
    shown = repr(raw[:50]) if isinstance(raw, str) else type(raw).__name__
    raise TypeMismatch(f"expected a boolean or 'true'/'false', got {shown}")


def coerce_number(raw: Any) -> str:
    if isinstance(raw, bool):
        raise TypeMismatch("expected a number, got a boolean")
    if isinstance(raw, int):
        # int/float comparison is exact, no conversion of huge ints happens.
        if abs(raw) > sys.float_info.max:
            raise TypeMismatch("integer is outside the double range")
        return str(raw)
    if isinstance(raw, float):
        value = raw
    elif isinstance(raw, (Decimal, str)):
        try:
            parsed = raw if isinstance(raw, Decimal) else Decimal(raw.strip())
        except InvalidOperation:
            raise TypeMismatch(f"expected a numeric string, got {raw[:50]!r}") from None
        # NaN (including signaling NaN) cannot go through float().
        if parsed.is_nan():
            raise TypeMismatch("expected a finite number, got NaN")
        value = float(parsed)
    else:
        raise TypeMismatch(f"expected a number, got {type(raw).__name__}")

    # Values are bounded to doubles: "1e400" is infinite, "1e-400" is 0.
    if not math.isfinite(value):
        raise TypeMismatch("expected a finite number within the double range")
    number = Decimal(repr(value))
    try:
        # Plain notation, trailing zeros dropped: 10.0 -> "10", 1.50 -> "1.5".
        text = format(number.normalize(), "f")
    except (InvalidOperation, Overflow):
        raise TypeMismatch("number cannot be represented in plain notation") from None
    return "0" if text == "-0" else text


def coerce_date(raw: Any) -> str:
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, date):
        value = datetime(raw.year, raw.month, raw.day)
    elif isinstance(raw, str):
        try:
            value = _DATETIME.validate_python(raw.strip())
        except ValidationError:
            raise TypeMismatch(f"expected an ISO-8601 date, got {raw!r}") from None
    else:
        raise TypeMismatch(f"expected a date, got {type(raw).__name__}")

    # Naive values are taken as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    try:
        value = value.astimezone(timezone.utc)
    except OverflowError:
        raise TypeMismatch(f"date is outside the representable UTC range: {raw!r}") from None
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def coerce_raw(raw: Any) -> str:
    if not isinstance(raw, str):
        raise TypeMismatch(f"raw parameters must already be strings, got {type(raw).__name__}")
    return raw


_COERCERS = {
    ValueType.STRING: coerce_string,
    ValueType.BOOLEAN: coerce_boolean,
    ValueType.NUMBER: coerce_number,
    ValueType.DATE: coerce_date,
    ValueType.RAW: coerce_raw,
}
