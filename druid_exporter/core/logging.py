"""Logging for the exporter.

A thin wrapper over stdlib ``logging`` that carries structured context on
every record.  Use ``logger.with_context(...)`` to derive a child logger
that tags its messages, e.g. with the collector's enabled groups.
"""

import logging
from typing import Any, MutableMapping

_LOGGER_NAME = "druid_exporter"

# LogRecord attributes; logging refuses an ``extra`` that overwrites them.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


def _safe_key(key: str) -> str:
    return f"ctx_{key}" if key in _RESERVED_ATTRS else key


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter that merges bound context into each record's ``extra``.

    Context keys that clash with ``LogRecord`` attributes are stored with a
    ``ctx_`` prefix.
    """

    def __init__(self, base: logging.Logger, context: dict[str, Any] | None = None) -> None:
        super().__init__(base, {_safe_key(k): v for k, v in (context or {}).items()})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        extra.update({_safe_key(k): v for k, v in (kwargs.get("extra") or {}).items()})
        kwargs["extra"] = extra
        if extra:
            rendered = " ".join(f"{k}={v}" for k, v in extra.items())
            msg = f"{msg} [{rendered}]"
        return msg, kwargs

    def with_context(self, **context: Any) -> "ContextualLogger":
        """Return a child logger with *context* merged over the current one."""
        merged = dict(self.extra or {})
        merged.update(context)
        return ContextualLogger(self.logger, merged)


logger = ContextualLogger(logging.getLogger(_LOGGER_NAME))
