from __future__ import annotations

import pytest

from lib_env_source.domain.errors import ConfigError, SourceError


def test_error_hierarchy() -> None:
    assert issubclass(SourceError, ConfigError)
    assert isinstance(SourceError("env", "boom"), ConfigError)


def test_source_error_carries_source_name() -> None:
    with pytest.raises(ConfigError, match="^boom$") as excinfo:
        raise SourceError("env", "boom")
    assert excinfo.value.source == "env"
