from __future__ import annotations

from pathlib import Path

import pytest

from gojsgen import config
from gojsgen.config import DescriptorDefaults
from gojsgen.exceptions import ConfigurationError, InputValidationError


def test_load_descriptor_defaults_without_file() -> None:
    assert config.load_descriptor_defaults(None) == DescriptorDefaults()


def test_load_descriptor_defaults_reads_json5(tmp_path: Path) -> None:
    config_path = tmp_path / "gojsgen.json5"
    config_path.write_text(
        """
        {
          // company defaults
          author_company: 'Example Ltd',
          author_email: "web@example.org",
        }
        """,
        encoding="utf-8",
    )

    defaults = config.load_descriptor_defaults(config_path)

    assert defaults.author_company == "Example Ltd"
    assert defaults.author_email == "web@example.org"
    assert defaults.category == "plugin"


def test_load_descriptor_defaults_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        config.load_descriptor_defaults(tmp_path / "missing.json5")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("{ author_company: ", "Could not read"),
        ("['a', 'b']", "must contain an object"),
        ("{ title: 'x' }", "Unknown configuration keys"),
        ("{ state: 3 }", "must be a string"),
    ],
)
def test_load_descriptor_defaults_rejects_bad_content(
    tmp_path: Path, content: str, message: str
) -> None:
    config_path = tmp_path / "gojsgen.json5"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=message) as exc_info:
        config.load_descriptor_defaults(config_path)

    assert isinstance(exc_info.value, InputValidationError)


def test_resolve_config_path_prefers_explicit_value(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("GOJSGEN_CONFIG", str(tmp_path / "env.json5"))

    assert config.resolve_config_path(str(tmp_path / "cli.json5")) == (
        tmp_path / "cli.json5"
    )


def test_resolve_config_path_uses_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("GOJSGEN_CONFIG", str(tmp_path / "env.json5"))

    assert config.resolve_config_path("") == tmp_path / "env.json5"


def test_resolve_config_path_without_configuration(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("GOJSGEN_CONFIG", raising=False)

    assert config.resolve_config_path("") is None
