"""Builder semantics of the immutable ``EnvSourceConfig`` record."""

from __future__ import annotations

import dataclasses

import pytest

from lib_env_source.domain.config import EnvSourceConfig


def test_defaults() -> None:
    config = EnvSourceConfig()
    assert config.prefix is None
    assert config.separator is None
    assert config.ignore_empty is False
    assert config.try_parsing is False


def test_for_prefix_presets_only_the_prefix() -> None:
    assert EnvSourceConfig.for_prefix("config") == EnvSourceConfig(prefix="config")


def test_builder_calls_return_new_records() -> None:
    base = EnvSourceConfig()
    tuned = base.with_prefix("app").with_separator("__").with_ignore_empty(True).with_try_parsing(True)
    assert tuned == EnvSourceConfig(prefix="app", separator="__", ignore_empty=True, try_parsing=True)
    assert base == EnvSourceConfig()


def test_builder_order_does_not_matter() -> None:
    left = EnvSourceConfig().with_try_parsing(True).with_prefix("x").with_separator("_")
    right = EnvSourceConfig().with_separator("_").with_prefix("x").with_try_parsing(True)
    assert left == right


def test_empty_separator_is_accepted() -> None:
    assert EnvSourceConfig().with_separator("").separator == ""


def test_record_is_frozen() -> None:
    config = EnvSourceConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.prefix = "nope"  # type: ignore[misc]
