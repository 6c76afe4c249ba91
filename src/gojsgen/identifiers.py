from __future__ import annotations

import hashlib

from gojsgen.internal_config import FILE_ID_HASH_LENGTH


def file_id(extension_name: str, path: str) -> str:
    """Return the TypoScript key for a file included by the extension.

    Every file added through ``page.includeJS``/``page.includeCSS`` needs a
    unique key, composed of the extension name without underscores and a
    shortened SHA-1 of the file path, e.g. ``tx_gojsfoo_ff7b``.
    """
    short_extension_name = extension_name.replace("_", "")
    digest = hashlib.sha1(path.encode("utf-8")).hexdigest()
    return f"tx_{short_extension_name}_{digest[:FILE_ID_HASH_LENGTH]}"
