"""Central registry of MWS catalog sections.

This module is the single source of truth for:
- which sections (Products, Subscriptions, ...) are known
- each section's request defaults (group, path, version)
- the operation descriptors of each section, with enum names resolved
- descriptive code tables shipped with a section (``types``)

Registration is the only place where the catalog is validated. Every named
enum reference must resolve when the section is registered; a dangling name
is a corrupt catalog and raises ``CatalogError`` immediately instead of
surfacing on the first request.

The registry is written during startup (``init_catalog`` or explicit
``register_section`` calls) and only read afterwards.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union

from mws_engine.catalog.descriptors import (
    OperationDescriptor,
    ParameterDescriptor,
    RequestDefaults,
)
from mws_engine.catalog.enums import CatalogEnum, define_enum, get_enum, has_enum, clear_enums
from mws_engine.config import settings
from mws_engine.models.errors import CatalogError, UnknownOperationError
from mws_engine.utils.logger import logger


EnumSource = Union[CatalogEnum, Iterable[str]]


@dataclass(frozen=True)
class Section:
    """A namespace of operations sharing the same request defaults."""

    name: str
    defaults: RequestDefaults
    operations: Mapping[str, OperationDescriptor] = field(default_factory=dict)
    enums: Mapping[str, CatalogEnum] = field(default_factory=dict)
    types: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def operation(self, name: str) -> OperationDescriptor:
        try:
            return self.operations[name]
        except KeyError:
            raise UnknownOperationError(f"{self.name}.{name}") from None

    def describe(self, type_name: str, code: str) -> Optional[str]:
        """Human description of ``code`` in one of the section's code tables."""

        return self.types.get(type_name, {}).get(str(code))


_SECTIONS: Dict[str, Section] = {}
_LOCK = threading.Lock()
_INIT_LOCK = threading.Lock()
_initialized = False


def register_section(
    name: str,
    defaults: RequestDefaults,
    operations: Iterable[OperationDescriptor],
    enums: Optional[Mapping[str, EnumSource]] = None,
    types: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> Section:
    """Assemble a section and make it available for lookups.

    Section enums are defined in the global enum registry as well, so other
    sections can refer to them by name. Re-registering a section name
    replaces the previous one.
    """

    local_enums: Dict[str, CatalogEnum] = {}
    for enum_name, source in (enums or {}).items():
        values = source.values if isinstance(source, CatalogEnum) else source
        local_enums[enum_name] = define_enum(enum_name, values)

    resolved: Dict[str, OperationDescriptor] = {}
    for op in operations:
        if op.name in resolved:
            raise CatalogError(f"{name}: operation {op.name!r} is declared twice")
        params = tuple(
            _resolve_parameter(f"{name}.{op.name}", descriptor, local_enums)
            for descriptor in op.parameters
        )
        resolved[op.name] = replace(op, parameters=params, defaults=op.defaults or defaults)

    section = Section(
        name=name,
        defaults=defaults,
        operations=MappingProxyType(resolved),
        enums=MappingProxyType(local_enums),
        types=MappingProxyType({k: MappingProxyType(dict(v)) for k, v in (types or {}).items()}),
    )

    with _LOCK:
        if name in _SECTIONS:
            logger.info("[catalog] Replacing section %s", name)
        _SECTIONS[name] = section

    logger.debug(
        "[catalog] Registered section %s (%d operations, %d enums)",
        name,
        len(resolved),
        len(local_enums),
    )
    return section


def _resolve_parameter(
    owner: str,
    descriptor: ParameterDescriptor,
    local_enums: Mapping[str, CatalogEnum],
) -> ParameterDescriptor:
    enum_ref = descriptor.enum_ref
    if isinstance(enum_ref, str):
        if enum_ref in local_enums:
            enum_ref = local_enums[enum_ref]
        elif has_enum(enum_ref):
            enum_ref = get_enum(enum_ref)
        else:
            raise CatalogError(
                f"{owner}: parameter {descriptor.logical_name!r} refers to undefined enum {enum_ref!r}"
            )

    fields = tuple(
        _resolve_parameter(f"{owner}.{descriptor.logical_name}", member, local_enums)
        for member in descriptor.fields
    )
    return replace(descriptor, enum_ref=enum_ref, fields=fields)


def init_catalog() -> None:
    """Register the built-in sections once. Safe to call repeatedly.

    Built-in sections whose name is already registered are left alone, so a
    caller-supplied section is never replaced.
    """

    global _initialized
    if _initialized:
        return

    from mws_engine.sections import BUILTIN_SECTIONS

    with _INIT_LOCK:
        if _initialized:
            return
        for module in BUILTIN_SECTIONS:
            if module.REQUEST_DEFAULTS.name in _SECTIONS:
                logger.info("[catalog] Keeping registered section %s", module.REQUEST_DEFAULTS.name)
                continue
            module.register()
        _initialized = True

    logger.info("[catalog] Loaded %d built-in sections", len(BUILTIN_SECTIONS))


def _ensure_loaded(name: Optional[str] = None) -> None:
    if (name is None or name not in _SECTIONS) and not _initialized and settings.MWS_AUTOLOAD_SECTIONS:
        init_catalog()


def get_section(name: str) -> Section:
    """Return the section registered under ``name``.

    Raises ``UnknownOperationError`` (a ``KeyError``) for unknown names.
    """

    _ensure_loaded(name)
    try:
        return _SECTIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def get_operation(section_name: str, operation_name: str) -> OperationDescriptor:
    return get_section(section_name).operation(operation_name)


def list_sections() -> List[str]:
    _ensure_loaded()
    return sorted(_SECTIONS)


def reset_catalog() -> None:
    """Forget every section and enum. Only meant for tests."""

    global _initialized
    with _INIT_LOCK, _LOCK:
        _SECTIONS.clear()
        _initialized = False
    clear_enums()
