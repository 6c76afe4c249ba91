from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from gojsgen.internal_config import (
    ASSETS_DIRECTORY,
    EXTENSION_PREFIX,
    SCRIPT_SUFFIX,
    SCRIPTS_DIRECTORY,
)

ROLE_SCRIPT = "script"
ROLE_ASSET = "asset"


def role_for_path(path: Path | str) -> str:
    """Classify a file as script or asset by its (case sensitive) suffix."""
    return ROLE_SCRIPT if Path(path).suffix == SCRIPT_SUFFIX else ROLE_ASSET


def directory_for_role(role: str) -> str:
    return SCRIPTS_DIRECTORY if role == ROLE_SCRIPT else ASSETS_DIRECTORY


@dataclass(frozen=True)
class ExtensionSpec:
    short_key: str
    version: str
    author: str
    title: str

    @property
    def name(self) -> str:
        return f"{EXTENSION_PREFIX}{self.short_key}"


@dataclass(frozen=True)
class InputFile:
    source_path: Path
    role: str

    @classmethod
    def from_path(cls, path: Path | str) -> InputFile:
        return cls(source_path=Path(path), role=role_for_path(path))


@dataclass(frozen=True)
class PlacedFile:
    """An input file after it was copied into the extension root."""

    source_path: Path
    role: str
    relative_path: str

    def extension_path(self, extension_name: str) -> str:
        """Return the path as referenced by ``EXT:`` in TypoScript."""
        return str(PurePosixPath(extension_name, self.relative_path))


@dataclass(frozen=True)
class ExtensionLayout:
    name: str
    root: Path
    placed_files: tuple[PlacedFile, ...] = ()

    @property
    def scripts(self) -> tuple[PlacedFile, ...]:
        return tuple(f for f in self.placed_files if f.role == ROLE_SCRIPT)

    @property
    def assets(self) -> tuple[PlacedFile, ...]:
        return tuple(f for f in self.placed_files if f.role == ROLE_ASSET)
