"""Immutable configuration record for the environment source.

Purpose
-------
Anchor the :class:`EnvSourceConfig` value object that tells the environment
adapter which variables to keep and how to shape them. The record belongs to
the domain layer and performs no I/O.

Contents
--------
* :class:`EnvSourceConfig` – frozen dataclass with a fluent ``with_*`` builder
  surface and the :meth:`EnvSourceConfig.for_prefix` convenience constructor.

System Role
-----------
Held by :class:`lib_env_source.adapters.env.default.EnvironmentSource` for its
whole lifetime. Each builder call returns a new instance so holders of an
earlier record never observe a change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class EnvSourceConfig:
    """Options controlling prefix filtering, key rewriting, and value parsing.

    Why
    ----
    Sharing one read-only record between threads and adapters avoids any
    coordination when configuration loading happens concurrently.

    Attributes
    ----------
    prefix:
        Optional marker each variable name must start with (case-insensitive),
        glued to the rest of the name by the group separator. ``None`` keeps
        every variable.
    separator:
        Optional sequence that separates key segments. Each occurrence is
        rewritten to ``.``. ``None`` or ``""`` leaves keys untouched.
    ignore_empty:
        Treat variables with an empty value as unset.
    try_parsing:
        Infer booleans, integers and floats before falling back to strings.

    Examples
    --------
    >>> base = EnvSourceConfig()
    >>> tuned = base.with_prefix("app").with_separator("__").with_try_parsing(True)
    >>> tuned.prefix, tuned.separator, tuned.try_parsing
    ('app', '__', True)
    >>> base.prefix is None
    True
    """

    prefix: str | None = None
    separator: str | None = None
    ignore_empty: bool = False
    try_parsing: bool = False

    @classmethod
    def for_prefix(cls, prefix: str) -> EnvSourceConfig:
        """Return a default record with *prefix* already set.

        Examples
        --------
        >>> EnvSourceConfig.for_prefix("config")
        EnvSourceConfig(prefix='config', separator=None, ignore_empty=False, try_parsing=False)
        """

        return cls(prefix=prefix)

    def with_prefix(self, prefix: str) -> EnvSourceConfig:
        """Return a copy that only keeps variables starting with *prefix*."""

        return replace(self, prefix=prefix)

    def with_separator(self, separator: str) -> EnvSourceConfig:
        """Return a copy that rewrites *separator* occurrences to dots."""

        return replace(self, separator=separator)

    def with_ignore_empty(self, ignore: bool) -> EnvSourceConfig:
        """Return a copy that drops (or keeps) empty-valued variables."""

        return replace(self, ignore_empty=ignore)

    def with_try_parsing(self, try_parsing: bool) -> EnvSourceConfig:
        """Return a copy that enables or disables scalar type inference.

        Enabling inference attempts up to three parses per variable
        (bool, int, float) before settling on a string.
        """

        return replace(self, try_parsing=try_parsing)
