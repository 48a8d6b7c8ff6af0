"""Application-layer ports describing source responsibilities.

Purpose
-------
Define the structural contract that configuration sources satisfy so an
aggregator can combine them without depending on concrete implementations.

Contents
--------
* :class:`Source` – produces a mapping of dotted keys to typed values.

System Role
-----------
Adapters (environment, files, defaults) are independent value types that each
satisfy :class:`Source` structurally. No inheritance is required; the protocol
is ``runtime_checkable`` so aggregators and contract tests can verify an
adapter with ``isinstance``.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from ..domain.values import TypedValue


@runtime_checkable
class Source(Protocol):
    """Produce one origin's contribution to the merged configuration.

    Why
    ----
    Keep the merge engine agnostic of where values come from while giving it a
    single fallible operation to call.
    """

    def collect(self) -> Mapping[str, TypedValue]:
        """Return keys mapped to typed values or raise :class:`~lib_env_source.domain.errors.SourceError`."""
