from contextlib import ExitStack, closing
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
import json
from pathlib import Path
from typing import Any

import typer

from iterpack.diff import (
    DiffResult,
    diff_iterables,
    render_diff_line,
    render_diff_summary,
    render_first_divergence,
)
from iterpack.inputs import INPUT_FORMATS, InputError, open_source
from iterpack.plugins import PluginError
from iterpack.setup_logging import setup_logging

app = typer.Typer(help="iterdiff CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("iterdiff")
    except PackageNotFoundError:
        from iterpack import __version__ as local_version

        return local_version


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level_callback(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"unknown level {value!r}; choose from {', '.join(LOG_LEVELS)}"
        )
    return level


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show iterdiff version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        callback=_log_level_callback,
        help="Logging level for iterdiff diagnostics.",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Also write diagnostics to this file.",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json
    setup_logging(log_level, log_file)


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _render_text(result: DiffResult, *, first_divergence: bool) -> None:
    if first_divergence:
        _echo(render_first_divergence(result))
    else:
        for entry in result.entries:
            _echo(render_diff_line(entry))
    _echo(render_diff_summary(result))


@app.command()
def diff(
    left: Path = typer.Argument(..., help="Path to the original input."),
    right: Path = typer.Argument(..., help="Path to the input to attain."),
    input_format: str = typer.Option(
        "lines",
        "--format",
        help="How inputs are read: 'lines' (one element per line) or 'json' (JSON array).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    first_divergence: bool = typer.Option(
        False,
        "--first-divergence",
        help="Stop at and print only the first divergent position.",
    ),
    changes_only: bool = typer.Option(
        False,
        "--changes-only",
        help="Omit kept positions from the listing.",
    ),
    exit_code: bool = typer.Option(
        False,
        "--exit-code",
        help="Exit with status 1 when the inputs differ.",
    ),
) -> None:
    """Diff two inputs position by position."""
    try:
        if input_format not in INPUT_FORMATS:
            raise InputError(
                f"Unsupported input format: {input_format}. "
                f"Supported values: {', '.join(INPUT_FORMATS)}."
            )
        with ExitStack() as stack:
            lhs = stack.enter_context(closing(open_source(left, input_format)))
            rhs = stack.enter_context(closing(open_source(right, input_format)))
            result = diff_iterables(
                lhs,
                rhs,
                left_label=str(left),
                right_label=str(right),
                stop_at_first_divergence=first_divergence,
                include_keeps=not changes_only,
            )
    except (InputError, PluginError, OSError, UnicodeDecodeError) as error:
        message = f"diff failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 1,
                    "message": message,
                    "left_path": str(left),
                    "right_path": str(right),
                }
            )
        else:
            _echo(message, err=True)
        raise typer.Exit(code=1) from error

    code = 1 if exit_code and not result.identical else 0

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": code,
                "message": "diff completed",
                "left_path": str(left),
                "right_path": str(right),
            }
        )
    else:
        _render_text(result, first_divergence=first_divergence)

    if code:
        raise typer.Exit(code=code)


def main() -> None:
    app()
