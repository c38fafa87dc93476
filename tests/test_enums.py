import pytest

from mws_engine.catalog.enums import CatalogEnum, define_enum, get_enum, has_enum
from mws_engine.models.errors import CatalogError


def test_contains_is_case_sensitive_exact_match():
    conditions = CatalogEnum("ItemConditions", ["New", "Used"])

    assert conditions.contains("New")
    assert "Used" in conditions
    assert not conditions.contains("new")
    assert not conditions.contains("New ")
    assert not conditions.contains(None)


def test_values_keep_declaration_order_and_fold_duplicates():
    enum = CatalogEnum("Colors", ["red", "green", "red", "blue"])

    assert enum.values == ("red", "green", "blue")
    assert len(enum) == 3
    assert list(enum) == ["red", "green", "blue"]


def test_enum_is_immutable():
    enum = CatalogEnum("Colors", ["red"])
    with pytest.raises(AttributeError):
        enum._values = ("blue",)


def test_define_enum_last_write_wins():
    define_enum("Sizes", ["S", "M"])
    define_enum("Sizes", ["L"])

    assert get_enum("Sizes").values == ("L",)


def test_get_enum_unknown_name_is_a_catalog_error():
    assert not has_enum("Missing")
    with pytest.raises(CatalogError):
        get_enum("Missing")
