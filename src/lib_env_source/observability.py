"""Structured logging helpers for environment collection.

Purpose
    Emit diagnostics about collected and excluded variables in a predictable,
    contextual shape without forcing applications onto a logging backend.

Contents
    - ``TRACE_ID``: context variable carrying the active trace identifier.
    - ``get_logger``: returns the package logger (silent until a host attaches
      handlers).
    - ``bind_trace_id``: binds or clears the trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: structured emitters.
    - ``make_event``: builder for ``layer``/``origin`` event payloads.

System Integration
    Used by the environment adapter and the composition root. Records carry a
    ``context`` attribute so log processors can read fields without parsing
    messages. Variable values are never logged, only key names and counts.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_env_source_trace_id", default=None)
"""Trace identifier attached to every structured record emitted by the package."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_env_source")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger so host applications can attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind *trace_id* for subsequent records; ``None`` clears the binding.

    Examples
    --------
    >>> bind_trace_id('req-7')
    >>> TRACE_ID.get()
    'req-7'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug record carrying the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info record carrying the trace context."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error record carrying the trace context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    layer: str,
    origin: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured payload describing a source lifecycle event.

    Inputs
        layer: Logical source name (``"env"``).
        origin: Provenance tag of the values involved, if any.
        payload: Optional extra diagnostic fields.
    Outputs
        dict[str, Any]: Fields ready to unpack into :func:`log_*` helpers.

    Examples
    --------
    >>> make_event('env', 'the environment', {'keys': 2})
    {'layer': 'env', 'origin': 'the environment', 'keys': 2}
    """

    event: dict[str, Any] = {"layer": layer, "origin": origin}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send *message* through the package logger with trace-aware context."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    _LOGGER.log(level, message, extra={"context": context})
