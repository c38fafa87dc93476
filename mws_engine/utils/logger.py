import logging
import sys
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from mws_engine.config import settings

if settings.MWS_CONFIGURE_LOGGING:
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

logger = logging.getLogger("mws_engine")
logger.setLevel(settings.log_level)


class RequestEventLog:
    """Bounded in-memory history of prepared requests.

    Each entry keeps the wire parameters (on success) and the caller's
    original arguments. Callers often pass credentials for the transport layer
    (SellerId, MWSAuthToken, ...) in the same argument bag; those are masked in
    both before the entry is stored.
    """

    SENSITIVE_KEYS = (
        "AWSAccessKeyId", "MWSAuthToken", "SellerId", "Merchant",
        "Signature", "SecretKey",
    )

    def __init__(self, max_events: Optional[int] = None):
        self.events: List[Dict[str, Any]] = []
        self.max_events = max_events or settings.MWS_EVENT_LOG_SIZE
        self._lock = threading.Lock()

    def record(
        self,
        section: str,
        operation: str,
        params: Optional[Dict[str, str]] = None,
        args: Optional[Mapping[str, Any]] = None,
        status: str = "ok",
        error: Optional[str] = None
    ) -> Dict[str, Any]:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "section": section,
            "operation": operation,
            "params": self._sanitize_credentials(params) if params else None,
            "args": self._sanitize_credentials(args) if args else None,
            "status": status,
            "error": error,
        }

        with self._lock:
            self.events.append(entry)
            if len(self.events) > self.max_events:
                self.events.pop(0)

        log_msg = f"[{section}.{operation}] request {status}"
        if error:
            logger.warning(f"{log_msg} - Error: {error}")
        else:
            logger.debug(log_msg)

        return entry

    def _sanitize_credentials(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        sanitized = dict(data)
        for key in self.SENSITIVE_KEYS:
            if key in sanitized:
                value = sanitized[key]
                if isinstance(value, str) and len(value) > 8:
                    sanitized[key] = f"{value[:4]}...{value[-4:]}"
                else:
                    sanitized[key] = "***"
        return sanitized

    def get_events(self, limit: Optional[int] = None) -> list:
        with self._lock:
            if limit:
                return list(self.events[-limit:])
            return list(self.events)

    def clear(self):
        with self._lock:
            self.events = []
        logger.info("Cleared request event log")


request_event_log = RequestEventLog()
