from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote

from mws_engine.catalog.registry import get_section
from mws_engine.config import settings
from mws_engine.services.serializer import WireParameter, serialize
from mws_engine.utils.logger import logger, request_event_log


@dataclass(frozen=True)
class PreparedRequest:
    """Everything the transport layer needs to sign and send one call."""

    section: str
    operation: str
    group: str
    path: str
    version: str
    params: Tuple[WireParameter, ...]
    response_data_path: Optional[str] = None

    def query_string(self) -> str:
        return encode_query(self.params)

    def as_dict(self) -> Dict[str, str]:
        return {p.name: p.value for p in self.params}


def build_request(section_name: str, operation_name: str, args: Optional[Mapping[str, Any]] = None) -> PreparedRequest:
    """Look up an operation, serialize ``args`` and attach the request envelope.

    Raises ``UnknownOperationError`` for unknown names and
    ``SerializationFailed`` when the arguments are rejected.
    """

    section = get_section(section_name)
    op = section.operation(operation_name)
    defaults = op.defaults or section.defaults

    result = serialize(op, args)
    if settings.MWS_RECORD_EVENTS:
        request_event_log.record(
            section.name,
            op.name,
            params=result.as_dict() if result.ok else None,
            args=args if isinstance(args, Mapping) else None,
            status="ok" if result.ok else "rejected",
            error=str(result.error) if result.error else None,
        )
    if not result.ok:
        logger.info("[request] %s.%s rejected: %s", section.name, op.name, result.error)
    params = result.raise_for_error()

    return PreparedRequest(
        section=section.name,
        operation=op.name,
        group=defaults.group,
        path=defaults.path,
        version=defaults.version,
        params=params,
        response_data_path=op.response_data_path,
    )


def encode_query(params: Iterable[WireParameter]) -> str:
    """Render ``name=value`` pairs in emission order, RFC 3986 encoded."""

    return "&".join(
        f"{quote(name, safe='-_.~')}={quote(value, safe='-_.~')}"
        for name, value in params
    )
