from __future__ import annotations

"""Path resolution for sourcemap references and original sources.

References found in a directive or in a map's `sources` array may be:
- Relative paths (resolved against a base directory)
- Absolute paths, including Windows paths like `C:\\src\\app.ts`
- `file:` URLs
- URLs with any other scheme (`http:`, `webpack:`, ...), which are rejected

This module only ever produces local filesystem paths; nothing here touches
the network.
"""

import os
import re
from urllib.parse import unquote, urlsplit

from .errors import InvalidFileUrlError, UnsupportedSchemeError

FILE_SCHEME = "file:"

# A scheme needs at least two letters so `C:` drive prefixes are not URLs.
_URL_SCHEME = re.compile(r"^[a-zA-Z]{2,}:")
_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


def has_unsupported_scheme(url: str) -> bool:
    return bool(_URL_SCHEME.match(url)) and not url.startswith(FILE_SCHEME)


def file_url_to_path(url: str) -> str:
    """Convert a `file:` URL into a local path, decoding percent-escapes."""

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidFileUrlError(url, str(e)) from e

    if parts.scheme.lower() != "file":
        raise InvalidFileUrlError(url, "not a file URL")

    if parts.netloc not in ("", "localhost"):
        raise InvalidFileUrlError(url, f"remote host {parts.netloc!r} is not supported")

    if not parts.path.startswith("/"):
        raise InvalidFileUrlError(url, "path must be absolute")

    if "%2f" in parts.path.lower():
        raise InvalidFileUrlError(url, "must not include encoded / characters")

    path = unquote(parts.path)

    if os.name == "nt":
        if _DRIVE_PATH.match(path):
            path = path[1:]
        path = path.replace("/", "\\")

    return path


def resolve_absolute_path(base_dir: str, url: str) -> str:
    """Resolve a reference against `base_dir` into an absolute local path.

    Raises UnsupportedSchemeError for non-`file:` URLs and InvalidFileUrlError
    for `file:` URLs that don't describe a local absolute path.
    """

    filepath = url
    if has_unsupported_scheme(filepath):
        raise UnsupportedSchemeError(url)

    if filepath.startswith(FILE_SCHEME):
        filepath = file_url_to_path(filepath)

    return os.path.abspath(os.path.join(base_dir, filepath))
