"""Renderer for the TYPO3 extension manager descriptor (ext_emconf.php)."""

from __future__ import annotations

import datetime

from gojsgen.config import DescriptorDefaults
from gojsgen.models import ExtensionSpec

PhpValue = str | int | list | dict

INDENT = "  "

# flags and lists for features a generated extension never uses
SHY = ""
DEPENDENCIES = ""
CONFLICTS = ""
PRIORITY = ""
MODULE = ""
INTERNAL = ""
UPLOAD_FOLDER = 0
CREATE_DIRS = ""
MODIFY_TABLES = ""
CLEAR_CACHE_ON_LOAD = 0
LOCK_TYPE = ""
MD5_VALUES_WHEN_LAST_WRITTEN = ""


def php_string(value: str) -> str:
    """Quote *value* as a PHP single-quoted string literal.

    Unlike the original gojs-gen.rb, which interpolated values raw, quotes and
    backslashes are escaped, so O'Neil is written as O\\'Neil.
    """
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def php_value(value: PhpValue, depth: int = 1) -> str:
    if isinstance(value, bool):
        raise TypeError("boolean values are not part of the descriptor schema")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return php_string(value)
    if isinstance(value, list):
        if value:
            raise TypeError("only empty lists are part of the descriptor schema")
        return "array()"
    return php_array(value, depth)


def php_array(entries: dict[str, PhpValue], depth: int = 1) -> str:
    inner = INDENT * (depth + 1)
    lines = ["array("]
    for key, value in entries.items():
        lines.append(f"{inner}{php_string(key)} => {php_value(value, depth + 1)},")
    lines.append(f"{INDENT * depth})")
    return "\n".join(lines)


def build_emconf_fields(
    spec: ExtensionSpec,
    defaults: DescriptorDefaults = DescriptorDefaults(),
) -> dict[str, PhpValue]:
    """Return the descriptor entries in the order TYPO3 writes them."""
    return {
        "title": spec.title,
        "description": defaults.description,
        "category": defaults.category,
        "author": spec.author,
        "author_email": defaults.author_email,
        "shy": SHY,
        "dependencies": DEPENDENCIES,
        "conflicts": CONFLICTS,
        "priority": PRIORITY,
        "module": MODULE,
        "state": defaults.state,
        "internal": INTERNAL,
        "uploadfolder": UPLOAD_FOLDER,
        "createDirs": CREATE_DIRS,
        "modify_tables": MODIFY_TABLES,
        "clearCacheOnLoad": CLEAR_CACHE_ON_LOAD,
        "lockType": LOCK_TYPE,
        "author_company": defaults.author_company,
        "version": spec.version,
        "constraints": {
            "depends": [],
            "conflicts": [],
            "suggests": [],
        },
        "_md5_values_when_last_written": MD5_VALUES_WHEN_LAST_WRITTEN,
        "suggests": [],
    }


def generate_emconf(
    spec: ExtensionSpec,
    generated_at: datetime.datetime | None = None,
    defaults: DescriptorDefaults = DescriptorDefaults(),
) -> str:
    if generated_at is None:
        generated_at = datetime.datetime.now().astimezone()
    timestamp = generated_at.isoformat(timespec="seconds")
    fields = php_array(build_emconf_fields(spec, defaults), depth=0)
    return (
        "<?php\n"
        "\n"
        f"# Extension Manager/Repository config file for ext '{spec.name}'.\n"
        f"# Auto generated at {timestamp}\n"
        "\n"
        f"$EM_CONF[$_EXTKEY] = {fields};\n"
    )
