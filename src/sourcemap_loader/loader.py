from __future__ import annotations

"""Per-asset entry point.

`load()` mirrors how build tools call loaders: it answers synchronously when
there is nothing to do and only hands back an awaitable once a directive has
been found. `transform()` / `transform_sync()` wrap that for callers that
prefer one calling convention.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from typing import Any

from .config import LoaderOptions, resolve_options
from .context import LoaderContext
from .directive import DirectiveMatch, find_directive
from .enrich import enrich_source_map
from .errors import SourceMapLoaderError
from .sourcemap import read_source_map
from .types import LoaderResult, RawSourceMap

logger = logging.getLogger(__name__)


def load(
    source: str | bytes | bytearray,
    input_map: RawSourceMap | None,
    context: LoaderContext,
) -> LoaderResult | Awaitable[LoaderResult]:
    if not source or input_map is not None:
        return LoaderResult(source, input_map)

    options = resolve_options(context.options)
    text = source if isinstance(source, str) else bytes(source).decode("utf-8", errors="replace")

    directive = find_directive(text)
    if directive is None:
        return LoaderResult(text)

    logger.debug("Found %s sourceMappingURL directive: %.80s", directive.form, directive.reference)
    return _load_source_map(text, directive, context, options)


async def _load_source_map(
    text: str,
    directive: DirectiveMatch,
    context: LoaderContext,
    options: LoaderOptions,
) -> LoaderResult:
    try:
        raw_map, sources_context = await read_source_map(directive.reference, context)
        source_map = await enrich_source_map(raw_map, sources_context, context, options)
    except SourceMapLoaderError as e:
        context.emit_warning(e)
        return LoaderResult(text)

    return LoaderResult(directive.strip(text), source_map)


async def transform(
    source: str | bytes | bytearray,
    input_map: RawSourceMap | None,
    context: LoaderContext,
) -> LoaderResult:
    result: Any = load(source, input_map, context)
    if inspect.isawaitable(result):
        result = await result
    return result


def transform_sync(
    source: str | bytes | bytearray,
    input_map: RawSourceMap | None,
    context: LoaderContext,
) -> LoaderResult:
    return asyncio.run(transform(source, input_map, context))
