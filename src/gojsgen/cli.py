#! /bin/env python3
"""Command line entry point for gojs-gen.

Usage: gojs-gen [options] <filenames>+
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from gojsgen.config import load_descriptor_defaults, resolve_config_path
from gojsgen.exceptions import GojsGenError, InputValidationError
from gojsgen.inputs import build_extension_spec, validate_input_files
from gojsgen.internal_config import (
    GOJSGEN_VERSION,
    OUTPUT_DIR_ENV_VAR,
    PROGRAM_NAME,
)
from gojsgen.layout import materialize

app: typer.Typer = typer.Typer(add_completion=False)
logger: logging.Logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    _log_level = getattr(logging, log_level.upper(), None)
    if not isinstance(_log_level, int):
        raise InputValidationError(f"Invalid log level: {log_level!r}")
    logging.basicConfig(
        level=_log_level,
        format="%(relativeCreated)d [%(levelname)s] %(message)s",
    )


def resolve_output_dir(output_dir: str) -> Path:
    path = Path(output_dir).expanduser().absolute()
    if not path.is_dir():
        raise InputValidationError(f"Output directory not found: {path}")
    return path


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_NAME} {GOJSGEN_VERSION}")
        raise typer.Exit()


@app.command()
def generate(
    files: list[Path] = typer.Argument(
        ..., help="JavaScript (.js) and asset files to include."
    ),
    js_version: str = typer.Option(
        ...,
        "--js-version",
        "-j",
        help="Version of the JavaScript library (e.g. 1.2.3)",
    ),
    ext_name: str = typer.Option(
        ...,
        "--ext-name",
        "-e",
        help="Name of the extension to be generated, e.g. 'foo' will yield 'gojs_foo'",
    ),
    author: str = typer.Option(
        ..., "--author", "-a", help="Your name, not who created the JavaScript"
    ),
    title: str = typer.Option(
        ...,
        "--title",
        "-t",
        help="Title of the generated extension in the extension manager",
    ),
    output_dir: str = typer.Option(
        ".",
        "--output-dir",
        "-o",
        envvar=OUTPUT_DIR_ENV_VAR,
        help="Directory in which the extension directory is created",
    ),
    config: str = typer.Option(
        "", "--config", help="JSON5 file overriding ext_emconf.php defaults"
    ),
    staged: bool = typer.Option(
        False,
        "--staged",
        help="Build in a temporary directory and move it into place when complete",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="One of debug, info, warning, error or critical",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Generate a TYPO3 extension that includes the given JavaScript library."""
    try:
        configure_logging(log_level)
        spec = build_extension_spec(
            js_version=js_version,
            ext_name=ext_name,
            author=author,
            title=title,
        )
        input_files = validate_input_files(files)
        defaults = load_descriptor_defaults(resolve_config_path(config))
        target_dir = resolve_output_dir(output_dir)

        layout = materialize(
            spec,
            input_files,
            output_dir=target_dir,
            defaults=defaults,
            staged=staged,
        )
    except GojsGenError as exc:
        # shown regardless of --log-level
        typer.echo(f"Error: {exc}", err=True)
        logger.debug("Generation aborted", exc_info=True)
        raise typer.Exit(code=1) from exc

    logger.info(f"Extension written to {layout.root}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
