from __future__ import annotations

from pathlib import Path

import pytest

from gojsgen.models import ExtensionSpec


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="run slow subprocess tests",
    )
    parser.addoption(
        "--only-slow",
        action="store_true",
        default=False,
        help="run only tests marked as slow",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    only_slow = bool(config.getoption("--only-slow"))
    run_slow = bool(config.getoption("--slow")) or only_slow

    if only_slow:
        deselected = [item for item in items if "slow" not in item.keywords]
        if deselected:
            config.hook.pytest_deselected(items=deselected)
        items[:] = [item for item in items if "slow" in item.keywords]

    if run_slow:
        return

    skip_slow = pytest.mark.skip(reason="need --slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def widgets_spec() -> ExtensionSpec:
    return ExtensionSpec(
        short_key="widgets", version="1.0.0", author="Jane", title="Widgets"
    )


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A directory with one script, one stylesheet and one image."""
    directory = tmp_path / "input"
    directory.mkdir()
    directory.joinpath("button.js").write_text("console.log('button');\n")
    directory.joinpath("style.css").write_text(".button { color: red; }\n")
    directory.joinpath("logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01")
    return directory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "out"
    directory.mkdir()
    return directory
