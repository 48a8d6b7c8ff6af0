"""Public package surface for the environment configuration source.

Exports the adapter, its immutable options record, the typed value model, the
``Source`` port, and the one-call helpers from :mod:`lib_env_source.core`, so
``import lib_env_source`` is enough to wire the environment into an aggregator.
"""

from __future__ import annotations

from .adapters.env.default import EnvironmentSource
from .application.ports import Source
from .core import collect_environment, collect_environment_raw
from .domain.config import EnvSourceConfig
from .domain.errors import ConfigError, SourceError
from .domain.values import ENV_ORIGIN, TypedValue, ValueKind, infer_value, plain_values
from .observability import bind_trace_id, get_logger

__all__ = [
    "ENV_ORIGIN",
    "ConfigError",
    "EnvSourceConfig",
    "EnvironmentSource",
    "Source",
    "SourceError",
    "TypedValue",
    "ValueKind",
    "bind_trace_id",
    "collect_environment",
    "collect_environment_raw",
    "get_logger",
    "infer_value",
    "plain_values",
]
