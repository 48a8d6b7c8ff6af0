"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the environment adapter, the composition
root, and consuming aggregators. The hierarchy lives in the domain layer so
outer layers may depend on it without the reverse.

Contents
--------
* :class:`ConfigError` – umbrella base class for all library errors.
* :class:`SourceError` – a configuration source failed to produce its mapping.

System Role
-----------
Key normalization and value inference never raise: unmatched prefixes, failed
parses and empty values are exclusion or fallback paths. The only failure
channel is :class:`SourceError`, raised by ``collect()`` when the environment
snapshot itself cannot be read. Aggregators catch :class:`ConfigError` to
decide whether a failing source is fatal or skippable.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_env_source``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class SourceError(ConfigError):
    """Raised when a configuration source cannot produce its contribution.

    Why
    ----
    The ``Source`` contract is fallible. Aggregators need the failing source's
    name to report which layer broke without parsing messages.

    Attributes
    ----------
    source:
        Logical name of the failing source (``"env"`` for this adapter).

    Examples
    --------
    >>> err = SourceError("env", "environment unreadable")
    >>> err.source, str(err)
    ('env', 'environment unreadable')
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source
