from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path

# for parsing config files that may contain comments
import json5

from gojsgen.exceptions import ConfigurationError
from gojsgen.internal_config import CONFIG_ENV_VAR

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DescriptorDefaults:
    """Fixed ext_emconf.php values that are not taken from the command line."""

    description: str = ""
    category: str = "plugin"
    state: str = "beta"
    author_email: str = "web@gosign.de"
    author_company: str = "Gosign media. GmbH"


def _field_names() -> set[str]:
    return {field.name for field in dataclasses.fields(DescriptorDefaults)}


def resolve_config_path(config_path: str = "") -> Path | None:
    """Return the defaults file to use, honouring ``GOJSGEN_CONFIG``."""
    explicit_path = config_path.strip() or os.environ.get(CONFIG_ENV_VAR, "").strip()
    if not explicit_path:
        return None
    return Path(explicit_path).expanduser().absolute()


def load_descriptor_defaults(config_path: Path | None = None) -> DescriptorDefaults:
    """Read descriptor defaults from a JSON5 file, or return the built-ins."""
    if config_path is None:
        return DescriptorDefaults()

    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        data = json5.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(
            f"Could not read configuration file {config_path}: {exc}"
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain an object"
        )

    unknown = sorted(set(data) - _field_names())
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys in {config_path}: {', '.join(unknown)}"
        )

    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Configuration value for {key!r} must be a string"
            )

    logger.debug(f"Loaded descriptor defaults from {config_path}")
    return DescriptorDefaults(**data)
