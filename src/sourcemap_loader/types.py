from __future__ import annotations

"""Data model shared by the loader stages.

Raw sourcemaps are kept as plain JSON dicts so unknown fields (`names`,
`x_google_ignoreList`, ...) pass through untouched.
"""

from dataclasses import dataclass
from typing import Any

RawSourceMap = dict[str, Any]


@dataclass(frozen=True)
class ResolvedSource:
    """Outcome of resolving one entry of a map's `sources` array.

    `dependency` is set only when the content was read from disk, and
    `warning` only when something went wrong for this entry.
    """

    path: str
    content: str | None
    dependency: str | None = None
    warning: Exception | None = None


@dataclass(frozen=True)
class LoaderResult:
    code: str | bytes
    map: RawSourceMap | None = None
