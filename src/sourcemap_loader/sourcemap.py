from __future__ import annotations

"""Load the sourcemap a directive points at.

A reference is either an inline `data:` URI carrying base64 JSON, or a path /
`file:` URL to a `.map` file. Inline maps resolve their sources against the
asset's own directory; file maps against the directory holding the map.

Any failure here is fatal for the asset's map (the loader falls back to
passing the asset through untouched).
"""

import asyncio
import base64
import binascii
import json
import logging
import os
import re
from typing import Any

from .context import LoaderContext
from .errors import InlineMapParseError, MapFileParseError, MapFileReadError
from .paths import resolve_absolute_path
from .types import RawSourceMap

logger = logging.getLogger(__name__)

DATA_URL = re.compile(r"data:[^;\n]+(?:;charset=[^;\n]+)?;base64,([a-zA-Z0-9+/]+={0,2})")

SNIPPET_LENGTH = 50


def _check_shape(parsed: Any) -> RawSourceMap:
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    if not isinstance(parsed.get("sources"), list):
        raise ValueError("missing 'sources' array")
    return parsed


def decode_inline_map(payload: str) -> RawSourceMap:
    """Decode a base64 data URI payload into a sourcemap dict.

    Missing `=` padding is tolerated.
    """

    try:
        unpadded = payload.rstrip("=")
        raw = base64.b64decode(unpadded + "=" * (-len(unpadded) % 4))
        return _check_shape(json.loads(raw.decode("utf-8")))
    except (binascii.Error, ValueError, RecursionError) as e:
        raise InlineMapParseError(payload[:SNIPPET_LENGTH], e) from e


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


async def read_text(path: str) -> str:
    return await asyncio.to_thread(_read_text, path)


async def read_source_map(reference: str, context: LoaderContext) -> tuple[RawSourceMap, str]:
    """Return `(raw_map, sources_context)` for a directive reference.

    Registers the map file as a dependency once it has been read; inline maps
    register nothing.
    """

    data_url = DATA_URL.search(reference)
    if data_url:
        logger.debug("Decoding inline sourcemap (%d base64 chars)", len(data_url.group(1)))
        return decode_inline_map(data_url.group(1)), context.context

    absolute_path = resolve_absolute_path(context.context, reference)
    try:
        file_content = await read_text(absolute_path)
    except (OSError, ValueError) as e:
        raise MapFileReadError(absolute_path, e) from e

    context.add_dependency(absolute_path)
    logger.debug("Read sourcemap %s", absolute_path)

    try:
        source_map = _check_shape(json.loads(file_content))
    except (ValueError, RecursionError) as e:
        raise MapFileParseError(reference, e) from e

    return source_map, os.path.dirname(absolute_path)
