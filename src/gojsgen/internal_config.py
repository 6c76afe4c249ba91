from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version


def _get_package_version(name: str) -> str:
    """Return the installed version of *name*, or ``"0"`` if not found."""
    try:
        return _pkg_version(name)
    except PackageNotFoundError:
        return "0"


PROGRAM_NAME = "gojs-gen"
GOJSGEN_VERSION = _get_package_version(PROGRAM_NAME)

# "foo" yields the extension key "gojs_foo"
EXTENSION_PREFIX = "gojs_"

ASSETS_DIRECTORY = "assets"
SCRIPTS_DIRECTORY = "src"
# created in this order
SUBDIRECTORIES = (ASSETS_DIRECTORY, SCRIPTS_DIRECTORY)

SCRIPT_SUFFIX = ".js"
STYLESHEET_SUFFIX = ".css"

TYPOSCRIPT_SETUP_FILENAME = "ext_typoscript_setup.txt"
EMCONF_FILENAME = "ext_emconf.php"
ICON_FILENAME = "ext_icon.gif"

# Changing the width changes every identifier in already generated extensions.
FILE_ID_HASH_LENGTH = 4

CONFIG_ENV_VAR = "GOJSGEN_CONFIG"
OUTPUT_DIR_ENV_VAR = "GOJSGEN_OUTPUT_DIR"

# NAME_MAX on common filesystems
MAX_FILENAME_BYTES = 255
