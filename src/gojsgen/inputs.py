from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from gojsgen.exceptions import InputValidationError
from gojsgen.internal_config import EXTENSION_PREFIX, MAX_FILENAME_BYTES
from gojsgen.models import ExtensionSpec, InputFile

logger: logging.Logger = logging.getLogger(__name__)

REQUIRED_OPTIONS = ("js_version", "ext_name", "author", "title")


def validate_extension_key(ext_name: str) -> str:
    """Return *ext_name* if it can be used as a single directory name."""
    if not ext_name:
        raise InputValidationError("ext_name must be specified")
    if ext_name in {".", ".."} or "/" in ext_name or "\\" in ext_name:
        raise InputValidationError(
            f"Extension name '{ext_name}' must not contain path separators"
        )
    if len(f"{EXTENSION_PREFIX}{ext_name}".encode("utf-8")) > MAX_FILENAME_BYTES:
        raise InputValidationError(
            f"Extension name is too long, '{EXTENSION_PREFIX}<name>' must fit in"
            f" {MAX_FILENAME_BYTES} bytes"
        )
    return ext_name


def build_extension_spec(
    js_version: str,
    ext_name: str,
    author: str,
    title: str,
) -> ExtensionSpec:
    values = {
        "js_version": js_version,
        "ext_name": ext_name,
        "author": author,
        "title": title,
    }
    for option in REQUIRED_OPTIONS:
        if not values[option]:
            raise InputValidationError(f"{option} must be specified")

    return ExtensionSpec(
        short_key=validate_extension_key(ext_name),
        version=js_version,
        author=author,
        title=title,
    )


def validate_input_files(paths: Iterable[Path | str]) -> list[InputFile]:
    """Check every path before anything is written and classify it."""
    input_files: list[InputFile] = []
    for path in paths:
        path = Path(path)
        try:
            exists = path.exists()
            is_dir = path.is_dir()
        except OSError as exc:
            raise InputValidationError(f"Cannot access '{path}': {exc}") from exc
        if not exists:
            raise InputValidationError(f"Given file '{path}' does not exist.")
        if is_dir:
            raise InputValidationError(f"'{path}' is a directory, not a file.")
        input_files.append(InputFile.from_path(path))

    if not input_files:
        raise InputValidationError(
            "You must specify at least one file to be included."
        )

    logger.debug(f"Accepted {len(input_files)} input file(s)")
    return input_files
