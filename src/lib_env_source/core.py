"""Composition root for ``lib_env_source``.

Purpose
-------
Offer one-call entry points that wire :class:`EnvSourceConfig` into an
:class:`EnvironmentSource`, collect it, and optionally flatten the result
into plain Python data with provenance for serialisation.

Contents
--------
* :func:`collect_environment` – typed mapping in one call.
* :func:`collect_environment_raw` – ``(data, provenance)`` with primitives.

System Role
-----------
Used by the CLI and by applications that do not run a full aggregator. Errors
from the source propagate unchanged as :class:`SourceError`.
"""

from __future__ import annotations

from typing import Mapping

from .adapters.env.default import LAYER_NAME, EnvironmentSource
from .domain.config import EnvSourceConfig
from .domain.errors import ConfigError, SourceError
from .domain.values import TypedValue, plain_values
from .observability import log_info, make_event


def collect_environment(
    *,
    prefix: str | None = None,
    separator: str | None = None,
    ignore_empty: bool = False,
    try_parsing: bool = False,
    environ: Mapping[str, str] | None = None,
) -> dict[str, TypedValue]:
    """Return the environment's contribution as typed values.

    Parameters
    ----------
    prefix / separator / ignore_empty / try_parsing:
        Fields of :class:`EnvSourceConfig`.
    environ:
        Optional mapping replacing :data:`os.environ` (useful in tests).

    Examples
    --------
    >>> values = collect_environment(prefix='app', try_parsing=True, environ={'APP_RETRIES': '3'})
    >>> values['retries'].value
    3
    """

    config = EnvSourceConfig(
        prefix=prefix,
        separator=separator,
        ignore_empty=ignore_empty,
        try_parsing=try_parsing,
    )
    return EnvironmentSource(config, environ=environ).collect()


def collect_environment_raw(
    *,
    prefix: str | None = None,
    separator: str | None = None,
    ignore_empty: bool = False,
    try_parsing: bool = False,
    environ: Mapping[str, str] | None = None,
) -> tuple[dict[str, bool | int | float | str], dict[str, dict[str, object]]]:
    """Return collected data as primitives plus provenance keyed by dotted key.

    Why
    ----
    Tooling (CLI output, JSON dumps) wants plain values while still being able
    to explain where each value came from and which type was inferred.

    Returns
    -------
    tuple[dict[str, bool | int | float | str], dict[str, dict[str, object]]]
        ``(data, provenance)`` where provenance entries look like
        ``{"layer": "env", "origin": "the environment", "kind": "integer", "key": "port"}``.

    Examples
    --------
    >>> data, meta = collect_environment_raw(separator='_', try_parsing=True, environ={'DB_PORT': '5432'})
    >>> data
    {'db.port': 5432}
    >>> meta['db.port']['kind']
    'integer'
    """

    values = collect_environment(
        prefix=prefix,
        separator=separator,
        ignore_empty=ignore_empty,
        try_parsing=try_parsing,
        environ=environ,
    )
    provenance: dict[str, dict[str, object]] = {
        key: {"layer": LAYER_NAME, "origin": value.origin, "kind": value.kind.value, "key": key}
        for key, value in values.items()
    }
    log_info("environment_collected", **make_event(LAYER_NAME, None, {"total_keys": len(values)}))
    return plain_values(values), provenance


__all__ = [
    "ConfigError",
    "SourceError",
    "collect_environment",
    "collect_environment_raw",
]
