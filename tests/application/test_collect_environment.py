from __future__ import annotations

import json
import logging

import pytest

from lib_env_source import collect_environment, collect_environment_raw
from lib_env_source.domain.values import TypedValue

ENVIRON = {
    "CONFIG_DEBUG": "true",
    "CONFIG_PORT": "8080",
    "CONFIG_DB_RATIO": "0.75",
    "CONFIG_EMPTY": "",
    "OTHER": "ignored",
}


def test_collect_environment_builds_the_adapter() -> None:
    values = collect_environment(prefix="config", separator="_", try_parsing=True, ignore_empty=True, environ=ENVIRON)
    assert values == {
        "debug": TypedValue.boolean(True),
        "port": TypedValue.integer(8080),
        "db.ratio": TypedValue.float_(0.75),
    }


def test_collect_environment_defaults_keep_strings() -> None:
    values = collect_environment(prefix="config", environ=ENVIRON)
    assert values["port"] == TypedValue.string("8080")
    assert values["empty"] == TypedValue.string("")


def test_collect_environment_raw_returns_primitives_and_provenance() -> None:
    data, meta = collect_environment_raw(prefix="config", separator="_", try_parsing=True, environ=ENVIRON)
    assert data == {"debug": True, "port": 8080, "db.ratio": 0.75, "empty": ""}
    assert meta["port"] == {"layer": "env", "origin": "the environment", "kind": "integer", "key": "port"}
    assert meta["empty"]["kind"] == "string"
    assert set(meta) == set(data)
    json.dumps({"config": data, "provenance": meta})


def test_collect_environment_raw_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="lib_env_source")
    collect_environment_raw(prefix="config", environ=ENVIRON)
    record = caplog.records[-1]
    assert record.getMessage() == "environment_collected"
    assert getattr(record, "context")["total_keys"] == 4
