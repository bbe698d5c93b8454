"""
Event-style logging for pingmole.

Every record is an event name plus context fields, rendered either as
``level logger event key=value ...`` or as one JSON object per line.

[Logger][pingmole.core.logger.Logger] attaches the context fields to the
stdlib record under ``structured_kv``;
[StructuredFormatter][pingmole.core.logger.StructuredFormatter], installed
on the root handler by the CLI, renders them. Records emitted through a
plain ``logging.getLogger("pingmole.<layer>")`` (the pinger, catalog, and
utils layers log that way) go through the same formatter and only lack the
extra fields.

Examples:
    ```python
    from pingmole.core.logger import Logger

    log = Logger("pingmole.app")
    log.info("relays_loaded", count=42)
    # info pingmole.app relays_loaded count=42
    # or, with StructuredFormatter(json_output=True) on the handler:
    # {"timestamp": "...", "level": "info", "logger": "pingmole.app",
    #  "message": "relays_loaded", "count": 42}
    ```
"""

import datetime
import json
import logging
from typing import Any, ClassVar


_QUOTE_TRIGGERS = frozenset(" =\"'")


def _truncate(text: str, max_length: int | None) -> str:
    if max_length and len(text) > max_length:
        return text[:max_length] + f"...<truncated {len(text) - max_length} chars>"
    return text


def _render_value(value: Any, max_length: int | None) -> str:
    text = _truncate(str(value), max_length)
    if text and not _QUOTE_TRIGGERS.intersection(text):
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Render context fields as ``key=value`` pairs joined by spaces.

    Empty values and values containing spaces, ``=`` or quotes are quoted
    with backslash escaping.

    Args:
        kwargs: Context fields in insertion order.
        max_value_length: Per-value character cap, None for no cap.
        prefix: Prepended when there is at least one pair.

    Returns:
        e.g. ``' ip=193.32.248.66 city="Los Angeles"'``, or ``""`` when
        there are no fields.
    """
    if not kwargs:
        return ""
    return prefix + " ".join(
        f"{key}={_render_value(value, max_value_length)}" for key, value in kwargs.items()
    )


class StructuredFormatter(logging.Formatter):
    """Renders records as ``level logger message key=value ...``.

    With ``json_output`` each record becomes one JSON object instead, with
    the context fields merged in as top-level keys. A traceback, when
    present, follows on the next lines or goes under ``exc_info``.
    """

    def __init__(self, *, json_output: bool = False) -> None:
        super().__init__()
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = getattr(record, "structured_kv", {})
        if self._json_output:
            return self._format_json(record, fields)
        line = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        line += format_kv_pairs(fields)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line

    def _format_json(self, record: logging.LogRecord, fields: dict[str, Any]) -> str:
        payload = {
            "timestamp": datetime.datetime.fromtimestamp(record.created, datetime.UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            **fields,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class Logger:
    """Thin wrapper over a stdlib logger taking context as keyword arguments.

    Examples:
        ```python
        log = Logger("pingmole.cli")
        log.info("run_completed", relays=12)
        log.error("run_failed", error="Couldn't find any relays")
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        max_value_length: int | None = None,
    ) -> None:
        """
        Args:
            name: Name of the underlying ``logging`` logger.
            max_value_length: Per-value character cap (default 1000).
        """
        self._logger = logging.getLogger(name)
        self._max_value_length = (
            self._DEFAULT_MAX_VALUE_LENGTH if max_value_length is None else max_value_length
        )

    @property
    def name(self) -> str:
        return self._logger.name

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Build the ``extra`` mapping read by the formatter.

        Over-long values are replaced by their truncated text; everything
        else is passed through unchanged.
        """
        if not kwargs:
            return {}
        fields: dict[str, Any] = {}
        for key, value in kwargs.items():
            text = str(value)
            short = _truncate(text, self._max_value_length)
            fields[key] = value if short == text else short
        return {"structured_kv": fields}

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], **opts: Any) -> None:
        self._logger.log(level, msg, extra=self._make_extra(kwargs), **opts)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log at ERROR with the active exception's traceback attached."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
