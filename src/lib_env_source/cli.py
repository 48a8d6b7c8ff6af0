"""CLI adapter for ``lib_env_source`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators preview what the environment source would contribute to a
layered configuration (keys, inferred types, provenance) without writing
Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings so ``-h`` works.
* :func:`cli` – root group wiring traceback preferences into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_collect` – collects the live environment and prints JSON.
* :func:`main` – console-script entry point.

System Role
-----------
Outermost layer. It only talks to the composition root
(:mod:`lib_env_source.core`); ``lib_cli_exit_tools`` owns the exit-code and
traceback rendering strategy.
"""

from __future__ import annotations

import json
import math
import sys
from importlib import metadata
from typing import Final, Mapping, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import collect_environment_raw

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DISTRIBUTION: Final[str] = "lib_env_source"


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Environment variables as typed, dotted configuration keys",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=_DISTRIBUTION,
    message="lib_env_source version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command storing the traceback preference for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        click.echo(f"{_DISTRIBUTION} (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DISTRIBUTION)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("collect", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--prefix", default=None, help="Only keep variables starting with PREFIX plus the group separator")
@click.option("--separator", default=None, help="Key segment separator rewritten to '.'")
@click.option(
    "--ignore-empty/--keep-empty",
    default=False,
    help="Treat variables with an empty value as unset",
    show_default=True,
)
@click.option(
    "--try-parsing/--no-try-parsing",
    default=False,
    help="Infer booleans, integers and floats",
    show_default=True,
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
@click.option(
    "--provenance/--no-provenance",
    default=False,
    help="Include origin and inferred kind for each key",
)
def cli_collect(
    prefix: Optional[str],
    separator: Optional[str],
    ignore_empty: bool,
    try_parsing: bool,
    indent: Optional[int],
    provenance: bool,
) -> None:
    """Collect the current environment and print the result as JSON.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(
    ...     cli, ["collect", "--prefix", "demo", "--try-parsing"], env={"DEMO_PORT": "80"}
    ... )
    >>> json.loads(result.output)["port"]
    80
    """

    data, meta = collect_environment_raw(
        prefix=prefix,
        separator=separator,
        ignore_empty=ignore_empty,
        try_parsing=try_parsing,
    )
    values = _json_safe(data)
    if provenance:
        payload: object = {"config": values, "provenance": meta}
    else:
        payload = values
    rendered = json.dumps(
        payload,
        indent=indent,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    )
    click.echo(rendered)


def _json_safe(data: Mapping[str, object]) -> dict[str, object]:
    """Replace non-finite floats (``nan``, ``inf``) with their text so output stays strict JSON."""

    return {
        key: str(value) if isinstance(value, float) and not math.isfinite(value) else value
        for key, value in data.items()
    }


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=_DISTRIBUTION,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
