"""Create the extension directory tree and write its generated files.

Default generation is not transactional: an I/O failure leaves whatever was
written so far in place, and because the root then exists a retry is refused
until it has been removed. ``staged=True`` builds the tree in a temporary
sibling directory and renames it into place as the final step.

The existence check and the creation of the root are not atomic, so two runs
targeting the same extension name at the same time can race.
"""

from __future__ import annotations

import datetime
import logging
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from gojsgen.config import DescriptorDefaults
from gojsgen.emconf import generate_emconf
from gojsgen.exceptions import ExtensionAlreadyExistsError, GenerationIOError
from gojsgen.icon import icon_bytes
from gojsgen.internal_config import (
    EMCONF_FILENAME,
    ICON_FILENAME,
    SUBDIRECTORIES,
    TYPOSCRIPT_SETUP_FILENAME,
)
from gojsgen.models import (
    ROLE_ASSET,
    ROLE_SCRIPT,
    ExtensionLayout,
    ExtensionSpec,
    InputFile,
    PlacedFile,
    directory_for_role,
)
from gojsgen.typoscript import generate_typoscript_setup

logger: logging.Logger = logging.getLogger(__name__)


def _generation_error_message(exc: Exception) -> str:
    return f"Extension generation failed: {exc}"


def extension_root(spec: ExtensionSpec, output_dir: Path) -> Path:
    return output_dir.joinpath(spec.name)


def ensure_absent(root: Path) -> None:
    try:
        # is_symlink() catches dangling links, which exists() reports as missing
        present = root.exists() or root.is_symlink()
    except OSError as exc:
        raise GenerationIOError(_generation_error_message(exc)) from exc
    if present:
        raise ExtensionAlreadyExistsError(f"Directory '{root}' already exists.")


def partition_input_files(
    input_files: Sequence[InputFile],
) -> tuple[list[InputFile], list[InputFile]]:
    """Split into (scripts, assets), keeping the given order in each."""
    scripts = [f for f in input_files if f.role == ROLE_SCRIPT]
    assets = [f for f in input_files if f.role == ROLE_ASSET]
    return scripts, assets


def create_directories(root: Path) -> None:
    try:
        root.mkdir()
    except FileExistsError as exc:
        raise ExtensionAlreadyExistsError(
            f"Directory '{root}' already exists."
        ) from exc
    for subdirectory in SUBDIRECTORIES:
        root.joinpath(subdirectory).mkdir()


def copy_input_file(root: Path, input_file: InputFile) -> PlacedFile:
    directory = directory_for_role(input_file.role)
    relative_path = str(PurePosixPath(directory, input_file.source_path.name))
    target_path = root.joinpath(relative_path)
    shutil.copy2(input_file.source_path, target_path)
    logger.debug(f"Copied {input_file.source_path} to {target_path}")
    return PlacedFile(
        source_path=input_file.source_path,
        role=input_file.role,
        relative_path=relative_path,
    )


def write_artifacts(
    root: Path,
    spec: ExtensionSpec,
    placed_files: Sequence[PlacedFile],
    defaults: DescriptorDefaults,
    generated_at: datetime.datetime | None,
) -> None:
    js_files = [
        f.extension_path(spec.name) for f in placed_files if f.role == ROLE_SCRIPT
    ]
    asset_files = [
        f.extension_path(spec.name) for f in placed_files if f.role == ROLE_ASSET
    ]

    typoscript_path = root.joinpath(TYPOSCRIPT_SETUP_FILENAME)
    typoscript_path.write_text(
        generate_typoscript_setup(spec.name, js_files, asset_files),
        encoding="utf-8",
    )
    logger.debug(f"Wrote {typoscript_path}")

    emconf_path = root.joinpath(EMCONF_FILENAME)
    emconf_path.write_text(
        generate_emconf(spec, generated_at=generated_at, defaults=defaults),
        encoding="utf-8",
    )
    logger.debug(f"Wrote {emconf_path}")

    icon_path = root.joinpath(ICON_FILENAME)
    icon_path.write_bytes(icon_bytes())
    logger.debug(f"Wrote {icon_path}")


def _build_tree(
    root: Path,
    spec: ExtensionSpec,
    input_files: Sequence[InputFile],
    defaults: DescriptorDefaults,
    generated_at: datetime.datetime | None,
) -> tuple[PlacedFile, ...]:
    create_directories(root)

    scripts, assets = partition_input_files(input_files)
    placed_files = tuple(copy_input_file(root, f) for f in [*scripts, *assets])

    write_artifacts(root, spec, placed_files, defaults, generated_at)
    return placed_files


def _build_staged(
    root: Path,
    spec: ExtensionSpec,
    input_files: Sequence[InputFile],
    defaults: DescriptorDefaults,
    generated_at: datetime.datetime | None,
) -> tuple[PlacedFile, ...]:
    staging_dir = Path(tempfile.mkdtemp(prefix=f".{spec.name}.", dir=root.parent))
    try:
        staged_root = staging_dir.joinpath(spec.name)
        placed_files = _build_tree(
            staged_root, spec, input_files, defaults, generated_at
        )
        # another run may have created the root while we were staging
        ensure_absent(root)
        staged_root.rename(root)
    finally:
        shutil.rmtree(staging_dir, ignore_errors=True)
    return placed_files


def materialize(
    spec: ExtensionSpec,
    input_files: Sequence[InputFile],
    output_dir: Path | str = ".",
    defaults: DescriptorDefaults = DescriptorDefaults(),
    staged: bool = False,
    generated_at: datetime.datetime | None = None,
) -> ExtensionLayout:
    """Generate the extension ``gojs_<key>`` below *output_dir*."""
    root = extension_root(spec, Path(output_dir))
    ensure_absent(root)

    logger.info(f"Creating extension {spec.name} in {root}")
    try:
        if staged:
            placed_files = _build_staged(
                root, spec, input_files, defaults, generated_at
            )
        else:
            placed_files = _build_tree(root, spec, input_files, defaults, generated_at)
    except ExtensionAlreadyExistsError:
        raise
    except OSError as exc:
        raise GenerationIOError(_generation_error_message(exc)) from exc

    layout = ExtensionLayout(name=spec.name, root=root, placed_files=placed_files)
    logger.info(
        f"Created {spec.name} with {len(layout.scripts)} script(s)"
        f" and {len(layout.assets)} asset(s)"
    )
    return layout
