"""Key normalization for environment variable names.

Purpose
-------
Turn raw variable names such as ``CONFIG_REDIS_PASSWORD`` into dotted
configuration keys such as ``redis.password``, or report that a name falls
outside the configured namespace.

Contents
--------
* :data:`DEFAULT_GROUP_SEPARATOR` – glue between prefix and key when no
  separator is configured.
* :func:`group_separator` – resolves the separator that joins prefix and key.
* :func:`prefix_pattern` – lowercase marker a name must start with.
* :func:`normalize_key` – lowercase, strip, rewrite; ``None`` means excluded.

System Role
-----------
Pure helpers used by the environment adapter once per variable. Exclusion is
signalled with ``None`` rather than an exception because unrelated variables
are expected in every environment.
"""

from __future__ import annotations

from typing import Final

DEFAULT_GROUP_SEPARATOR: Final[str] = "_"


def group_separator(separator: str | None) -> str:
    """Return the sequence that glues a prefix to the remainder of a name.

    Examples
    --------
    >>> group_separator(None), group_separator(""), group_separator("__")
    ('_', '_', '__')
    """

    return separator or DEFAULT_GROUP_SEPARATOR


def prefix_pattern(prefix: str | None, separator: str | None) -> str | None:
    """Return the lowercase marker names must start with, or ``None``.

    The pattern is built independently of whether segment rewriting is
    enabled: a prefix always needs its group separator.

    Examples
    --------
    >>> prefix_pattern("Config", None)
    'config_'
    >>> prefix_pattern("app", "__")
    'app__'
    >>> prefix_pattern(None, "_") is None
    True
    """

    if prefix is None:
        return None
    return f"{prefix}{group_separator(separator)}".lower()


def normalize_key(name: str, pattern: str | None, separator: str | None) -> str | None:
    """Return the dotted key for *name* or ``None`` when it is out of scope.

    Parameters
    ----------
    name:
        Raw environment variable name (any case).
    pattern:
        Result of :func:`prefix_pattern`; ``None`` keeps every name.
    separator:
        Segment separator rewritten to ``.``; ``None`` or ``""`` disables
        rewriting.

    Examples
    --------
    >>> normalize_key("CONFIG_DEBUG", "config_", "_")
    'debug'
    >>> normalize_key("REDIS_PASSWORD", None, "_")
    'redis.password'
    >>> normalize_key("OTHER", "config_", "_") is None
    True
    >>> normalize_key("CONFIG_", "config_", None)
    ''
    """

    key = name.lower()
    if pattern is not None:
        if not key.startswith(pattern):
            return None
        key = key[len(pattern) :]
    if separator:
        key = key.replace(separator, ".")
    return key
