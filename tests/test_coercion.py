from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from mws_engine.catalog.descriptors import ValueType
from mws_engine.models.errors import TypeMismatch
from mws_engine.services.coercion import coerce, stringify


@pytest.mark.parametrize("raw", [True, "true", "TRUE", "True", " true "])
def test_boolean_true_forms_are_equivalent(raw):
    assert coerce(ValueType.BOOLEAN, raw) == "true"


@pytest.mark.parametrize("raw", [False, "false", "FALSE", "False"])
def test_boolean_false_forms_are_equivalent(raw):
    assert coerce(ValueType.BOOLEAN, raw) == "false"


@pytest.mark.parametrize("raw", ["yes", 1, 0, "", None, [True]])
def test_boolean_rejects_everything_else(raw):
    with pytest.raises(TypeMismatch):
        coerce(ValueType.BOOLEAN, raw)


def test_boolean_coercion_is_idempotent():
    once = coerce(ValueType.BOOLEAN, "TRUE")
    assert coerce(ValueType.BOOLEAN, once) == once


@pytest.mark.parametrize(
    "raw, expected",
    [
        (5, "5"),
        (-42, "-42"),
        (10.0, "10"),
        (12.5, "12.5"),
        (0.1, "0.1"),
        ("12.50", "12.5"),
        (" 7 ", "7"),
        ("1e3", "1000"),
        (Decimal("19.990"), "19.99"),
        (-0.0, "0"),
    ],
)
def test_number_canonical_text(raw, expected):
    assert coerce(ValueType.NUMBER, raw) == expected


@pytest.mark.parametrize(
    "raw",
    [True, "abc", "", float("nan"), float("inf"), "Infinity", "sNaN", "1e400", "1e1000000", Decimal("1e400"), [1], None],
)
def test_number_rejects_non_numeric(raw):
    with pytest.raises(TypeMismatch):
        coerce(ValueType.NUMBER, raw)


def test_date_from_datetime_with_offset_is_converted_to_utc():
    from datetime import timedelta

    value = datetime(2017, 1, 1, 10, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert coerce(ValueType.DATE, value) == "2017-01-01T08:00:00.000Z"


def test_date_naive_values_are_treated_as_utc():
    assert coerce(ValueType.DATE, datetime(2020, 5, 6, 7, 8, 9, 123456)) == "2020-05-06T07:08:09.123Z"
    assert coerce(ValueType.DATE, date(2020, 5, 6)) == "2020-05-06T00:00:00.000Z"


def test_date_from_iso_string():
    assert coerce(ValueType.DATE, "2017-01-01T10:00:00+02:00") == "2017-01-01T08:00:00.000Z"
    assert coerce(ValueType.DATE, "2017-01-01T10:00:00Z") == "2017-01-01T10:00:00.000Z"


@pytest.mark.parametrize(
    "raw",
    [
        "not a date",
        "2017-13-45",
        True,
        {"year": 2017},
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
    ],
)
def test_date_rejects_unparsable_input(raw):
    with pytest.raises(TypeMismatch):
        coerce(ValueType.DATE, raw)


def test_string_conversion():
    assert coerce(ValueType.STRING, "abc") == "abc"
    assert coerce(ValueType.STRING, 3) == "3"
    assert coerce(ValueType.STRING, 2.50) == "2.5"
    assert coerce(ValueType.STRING, False) == "false"


@pytest.mark.parametrize("raw", [["a"], ("a",), {"a": 1}, {"a"}])
def test_string_rejects_containers(raw):
    with pytest.raises(TypeMismatch):
        coerce(ValueType.STRING, raw)


def test_raw_passes_strings_through_unchanged():
    assert coerce(ValueType.RAW, " As Is ") == " As Is "
    with pytest.raises(TypeMismatch):
        coerce(ValueType.RAW, 12)


def test_stringify_matches_wire_text_for_primitives():
    assert stringify("New") == "New"
    assert stringify(True) == "true"
    assert stringify(1.0) == "1"


@pytest.mark.parametrize("value_type", [ValueType.NUMBER, ValueType.STRING])
def test_integers_beyond_double_range_are_rejected(value_type):
    with pytest.raises(TypeMismatch):
        coerce(value_type, 10 ** 5000)
    with pytest.raises(TypeMismatch):
        coerce(value_type, -(10 ** 400))


def test_large_integers_within_double_range_keep_every_digit():
    assert coerce(ValueType.NUMBER, 10 ** 300) == "1" + "0" * 300


def test_numbers_below_double_precision_collapse_to_zero():
    assert coerce(ValueType.NUMBER, "1e-400") == "0"


def test_stringify_of_unrepresentable_number_is_empty():
    assert stringify(10 ** 5000) == ""
