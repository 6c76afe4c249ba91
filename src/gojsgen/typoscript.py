from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

from gojsgen.identifiers import file_id
from gojsgen.internal_config import PROGRAM_NAME, STYLESHEET_SUFFIX

HEADER = f"# This file was automatically generated by {PROGRAM_NAME}\n"


def is_stylesheet(path: str) -> bool:
    return PurePosixPath(path).suffix == STYLESHEET_SUFFIX


def include_line(kind: str, extension_name: str, path: str) -> str:
    return f"page.{kind}.{file_id(extension_name, path)} = EXT:{path}\n"


def generate_typoscript_setup(
    extension_name: str,
    js_files: Iterable[str],
    asset_files: Iterable[str],
) -> str:
    """Render ext_typoscript_setup.txt.

    Scripts are included in the given order, followed by a blank line and
    the stylesheets among *asset_files*. Other assets are not referenced.
    Duplicates are kept as they are.
    """
    lines = [HEADER, "\n"]
    lines.extend(include_line("includeJS", extension_name, f) for f in js_files)
    lines.append("\n")
    lines.extend(
        include_line("includeCSS", extension_name, f)
        for f in asset_files
        if is_stylesheet(f)
    )
    return "".join(lines)
