from __future__ import annotations

import re

import pytest

from gojsgen.identifiers import file_id

FILE_ID_PATTERN = re.compile(r"^tx_[A-Za-z0-9]+_[0-9a-f]{4}$")


def test_file_id_matches_known_sha1_prefixes() -> None:
    assert file_id("gojs_widgets", "gojs_widgets/src/button.js") == (
        "tx_gojswidgets_5c4f"
    )
    assert file_id("gojs_widgets", "gojs_widgets/assets/style.css") == (
        "tx_gojswidgets_fecf"
    )
    assert file_id("gojs_foo", "gojs_foo/src/a.js") == "tx_gojsfoo_1e9b"


def test_file_id_is_deterministic() -> None:
    first = file_id("gojs_widgets", "gojs_widgets/src/button.js")
    second = file_id("gojs_widgets", "gojs_widgets/src/button.js")

    assert first == second


@pytest.mark.parametrize(
    ("extension_name", "compact"),
    [
        ("gojs_widgets", "gojswidgets"),
        ("gojs_my_lib_2", "gojsmylib2"),
        ("plain", "plain"),
    ],
)
def test_file_id_strips_underscores_from_extension_name(
    extension_name: str, compact: str
) -> None:
    identifier = file_id(extension_name, f"{extension_name}/src/x.js")

    assert FILE_ID_PATTERN.match(identifier)
    assert identifier.split("_")[1] == compact


def test_file_id_hashes_path_not_extension_name() -> None:
    one = file_id("gojs_a", "shared/path.js")
    other = file_id("gojs_b", "shared/path.js")

    assert one[-4:] == other[-4:]
    assert one != other


def test_file_id_accepts_empty_path() -> None:
    # sha1("") starts with da39
    assert file_id("gojs_x", "") == "tx_gojsx_da39"
