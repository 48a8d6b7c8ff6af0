"""End-to-end CLI coverage for the public commands exposed by lib-env-source.

Exercises ``collect`` against environments injected through Click's runner and
checks that ``main`` funnels through ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

import lib_cli_exit_tools

from lib_env_source import cli

ENV = {"E2E_DEMO_DEBUG": "true", "E2E_DEMO_PORT": "8080", "E2E_DEMO_EMPTY": "", "E2E_DEMO_NAME": "Demo"}


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_collect_outputs_strings_by_default() -> None:
    result = _runner().invoke(cli.cli, ["collect", "--prefix", "e2e_demo"], env=ENV)
    assert result.exit_code == 0
    assert json.loads(result.output) == {"debug": "true", "port": "8080", "empty": "", "name": "Demo"}


def test_cli_collect_with_parsing_and_ignore_empty() -> None:
    result = _runner().invoke(
        cli.cli,
        ["collect", "--prefix", "e2e", "--separator", "_", "--try-parsing", "--ignore-empty", "--indent", "2"],
        env=ENV,
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {"demo.debug": True, "demo.port": 8080, "demo.name": "Demo"}


def test_cli_collect_with_provenance() -> None:
    result = _runner().invoke(
        cli.cli,
        ["collect", "--prefix", "e2e_demo", "--try-parsing", "--provenance"],
        env=ENV,
    )
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["config"]["port"] == 8080
    assert payload["provenance"]["port"] == {
        "layer": "env",
        "origin": "the environment",
        "kind": "integer",
        "key": "port",
    }


def test_cli_info_handles_missing_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    """`cli info` must degrade gracefully when package metadata is unavailable."""

    def _raise_pkg_not_found(*_args, **_kwargs):
        raise cli.metadata.PackageNotFoundError()

    monkeypatch.setattr(cli.metadata, "metadata", _raise_pkg_not_found)
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "metadata unavailable" in result.output


def test_cli_main_restores_traceback_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """`cli main` should restore lib_cli_exit_tools tracebacks after execution."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    monkeypatch.setenv("E2E_MAIN_FLAG", "1")
    exit_code = cli.main(["--traceback", "collect", "--prefix", "e2e_main", "--try-parsing"], restore_traceback=True)
    assert exit_code == 0
    assert getattr(lib_cli_exit_tools.config, "traceback", False) == previous_traceback


def test_cli_unknown_command_fails() -> None:
    result = _runner().invoke(cli.cli, ["nope"])
    assert result.exit_code != 0


@pytest.mark.parametrize(("raw", "expected"), [("nan", "nan"), ("inf", "inf"), ("-Infinity", "-inf")])
def test_cli_collect_keeps_non_finite_floats_strict_json(raw: str, expected: str) -> None:
    result = _runner().invoke(
        cli.cli,
        ["collect", "--prefix", "e2e_special", "--try-parsing"],
        env={"E2E_SPECIAL_X": raw},
    )
    assert result.exit_code == 0
    payload = json.loads(result.output, parse_constant=_reject_constant)
    assert payload == {"x": expected}


def test_cli_collect_provenance_keeps_float_kind_for_non_finite() -> None:
    result = _runner().invoke(
        cli.cli,
        ["collect", "--prefix", "e2e_special", "--try-parsing", "--provenance"],
        env={"E2E_SPECIAL_X": "nan"},
    )
    payload = json.loads(result.output, parse_constant=_reject_constant)
    assert payload["config"]["x"] == "nan"
    assert payload["provenance"]["x"]["kind"] == "float"


def _reject_constant(name: str) -> object:
    raise ValueError(f"non-standard JSON constant {name}")
