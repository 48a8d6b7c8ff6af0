"""Environment variable source adapter.

Purpose
-------
Translate process environment variables into a flat mapping of dotted
configuration keys to :class:`~lib_env_source.domain.values.TypedValue`
objects. It satisfies the :class:`~lib_env_source.application.ports.Source`
port so an aggregator can merge it with file and default sources.

Key behaviours
--------------
* Optional prefix filtering (``CONFIG_DEBUG`` → ``debug`` with prefix
  ``config``), case-insensitive.
* Optional separator rewriting (``REDIS_PASSWORD`` → ``redis.password`` with
  separator ``_``).
* Optional empty-value filtering and scalar inference (bools, ints, floats).
* Emits structured logging via :mod:`lib_env_source.observability`.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...domain.config import EnvSourceConfig
from ...domain.errors import SourceError
from ...domain.keys import normalize_key, prefix_pattern
from ...domain.values import ENV_ORIGIN, TypedValue, infer_value
from ...observability import log_debug, log_error, make_event

LAYER_NAME = "env"


class EnvironmentSource:
    """Collect environment variables that belong to the configuration namespace."""

    def __init__(
        self,
        config: EnvSourceConfig | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialise the source with *config* and an optional ``environ`` mapping.

        Parameters
        ----------
        config:
            Immutable options record. Defaults to :class:`EnvSourceConfig()`.
        environ:
            Mapping to read from instead of :data:`os.environ`. It is copied
            once per :meth:`collect` call, never written.
        """

        self._config = config if config is not None else EnvSourceConfig()
        self._environ = environ

    @classmethod
    def for_prefix(cls, prefix: str, *, environ: Mapping[str, str] | None = None) -> EnvironmentSource:
        """Return a source that only keeps variables starting with *prefix*."""

        return cls(EnvSourceConfig.for_prefix(prefix), environ=environ)

    @property
    def config(self) -> EnvSourceConfig:
        """Return the immutable options record."""

        return self._config

    def with_prefix(self, prefix: str) -> EnvironmentSource:
        """Return a copy that only keeps variables starting with *prefix*."""

        return self._with_config(self._config.with_prefix(prefix))

    def with_separator(self, separator: str) -> EnvironmentSource:
        """Return a copy that rewrites *separator* occurrences to dots."""

        return self._with_config(self._config.with_separator(separator))

    def with_ignore_empty(self, ignore: bool) -> EnvironmentSource:
        """Return a copy that drops (or keeps) empty-valued variables."""

        return self._with_config(self._config.with_ignore_empty(ignore))

    def with_try_parsing(self, try_parsing: bool) -> EnvironmentSource:
        """Return a copy that enables or disables scalar type inference."""

        return self._with_config(self._config.with_try_parsing(try_parsing))

    def collect(self) -> dict[str, TypedValue]:
        """Return dotted keys mapped to typed values from one environment snapshot.

        Why
        ----
        The aggregator calls every source the same way; unrelated variables
        must never abort loading, so exclusions and failed parses are silent.

        Returns
        -------
        dict[str, TypedValue]
            Fresh mapping; each value carries the ``"the environment"`` origin.

        Raises
        ------
        SourceError
            When the environment snapshot itself cannot be read.

        Side Effects
        ------------
        Reads the environment once. Emits an ``env_variables_collected`` debug
        event with the collected key names (never the values).

        Examples
        --------
        >>> env = {'CONFIG_DEBUG': 'true', 'CONFIG_PORT': '8080', 'OTHER': 'ignored'}
        >>> source = EnvironmentSource.for_prefix('config', environ=env).with_separator('_').with_try_parsing(True)
        >>> values = source.collect()
        >>> sorted(values)
        ['debug', 'port']
        >>> values['port'].value, values['debug'].value
        (8080, True)
        """

        config = self._config
        pattern = prefix_pattern(config.prefix, config.separator)
        collected: dict[str, TypedValue] = {}
        empty = 0
        out_of_scope = 0
        for name, raw in self._snapshot().items():
            if config.ignore_empty and raw == "":
                empty += 1
                continue
            key = normalize_key(name, pattern, config.separator)
            if key is None:
                out_of_scope += 1
                continue
            collected[key] = infer_value(raw, config.try_parsing)
        log_debug(
            "env_variables_collected",
            **make_event(
                LAYER_NAME,
                ENV_ORIGIN,
                {"keys": sorted(collected), "skipped_empty": empty, "skipped_prefix": out_of_scope},
            ),
        )
        return collected

    def _snapshot(self) -> dict[str, str]:
        """Copy the environment once so a collection sees a consistent view."""

        source = self._environ if self._environ is not None else os.environ
        try:
            return dict(source)
        except Exception as exc:  # noqa: BLE001 - surfaced through the Source contract
            log_error("env_source_failed", **make_event(LAYER_NAME, ENV_ORIGIN, {"error": str(exc)}))
            raise SourceError(LAYER_NAME, f"Failed to read environment: {exc}") from exc

    def _with_config(self, config: EnvSourceConfig) -> EnvironmentSource:
        """Return a new source sharing this environment with *config*."""

        return type(self)(config, environ=self._environ)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"
