"""Named finite value sets used to validate enum-typed parameters.

The registry is process-wide. Catalog authors are trusted: redefining an enum
name replaces the previous definition and duplicate values are folded.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, Tuple

from mws_engine.models.errors import CatalogError
from mws_engine.utils.logger import logger


class CatalogEnum:
    """Ordered, immutable, case-sensitive set of permitted wire values."""

    __slots__ = ("_name", "_values", "_members")

    def __init__(self, name: str, values: Iterable[str]):
        ordered: Dict[str, None] = {}
        for value in values:
            ordered[str(value)] = None
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_values", tuple(ordered))
        object.__setattr__(self, "_members", frozenset(ordered))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"CatalogEnum {self._name!r} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def values(self) -> Tuple[str, ...]:
        return self._values

    def contains(self, value: Any) -> bool:
        return isinstance(value, str) and value in self._members

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"CatalogEnum({self._name!r}, {list(self._values)!r})"


_ENUMS: Dict[str, CatalogEnum] = {}
_LOCK = threading.Lock()


def define_enum(name: str, values: Iterable[str]) -> CatalogEnum:
    """Create an enum and register it under ``name`` (last write wins)."""

    enum = CatalogEnum(name, values)
    with _LOCK:
        if name in _ENUMS:
            logger.debug("[catalog] Redefining enum %s", name)
        _ENUMS[name] = enum
    return enum


def get_enum(name: str) -> CatalogEnum:
    try:
        return _ENUMS[name]
    except KeyError:
        raise CatalogError(f"Enum {name!r} is not defined") from None


def has_enum(name: str) -> bool:
    return name in _ENUMS


def clear_enums() -> None:
    """Drop every registered enum. Only meant for tests."""

    with _LOCK:
        _ENUMS.clear()
