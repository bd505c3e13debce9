from __future__ import annotations

"""Rewrite a loaded sourcemap with resolved source paths and full contents.

Each entry of `sources` is handled independently and concurrently. A failure
for one entry only costs that entry its content; the map itself is always
returned.
"""

import asyncio
import logging

from .config import LoaderOptions
from .context import LoaderContext
from .errors import SourceMapLoaderError, SourceReadError, SourceResolutionError
from .paths import resolve_absolute_path
from .sourcemap import read_text
from .types import RawSourceMap, ResolvedSource

logger = logging.getLogger(__name__)


def _prefixed_sources(source_map: RawSourceMap) -> list[str]:
    source_root = source_map.get("sourceRoot")
    prefix = f"{source_root}/" if source_root else ""
    return [f"{prefix}{source}" for source in source_map["sources"]]


async def resolve_source(
    source: str,
    embedded: str | None,
    sources_context: str,
) -> ResolvedSource:
    try:
        absolute_path = resolve_absolute_path(sources_context, source)
    except SourceMapLoaderError as e:
        warning = SourceResolutionError(source, e)
        warning.__cause__ = e
        return ResolvedSource(source, embedded, warning=warning)

    if embedded is not None:
        return ResolvedSource(absolute_path, embedded)

    try:
        content = await read_text(absolute_path)
    except (OSError, ValueError) as e:
        warning = SourceReadError(absolute_path, e)
        warning.__cause__ = e
        return ResolvedSource(absolute_path, None, warning=warning)

    return ResolvedSource(absolute_path, content, dependency=absolute_path)


async def enrich_source_map(
    source_map: RawSourceMap,
    sources_context: str,
    context: LoaderContext,
    options: LoaderOptions,
) -> RawSourceMap:
    """Return a copy of `source_map` with `sourceRoot` folded into `sources`
    and `sourcesContent` filled in for every source.
    """

    sources = _prefixed_sources(source_map)
    sources_content = source_map.get("sourcesContent")
    if not isinstance(sources_content, list):
        sources_content = []

    def embedded(index: int) -> str | None:
        if index < len(sources_content):
            return sources_content[index]
        return None

    results = await asyncio.gather(
        *(resolve_source(source, embedded(i), sources_context) for i, source in enumerate(sources))
    )

    for result in results:
        if result.warning is not None:
            context.emit_warning(result.warning)
        if result.dependency is not None:
            context.add_dependency(result.dependency)

    enriched = {key: value for key, value in source_map.items() if key != "sourceRoot"}
    enriched["sources"] = sources if options.keep_relative_sources else [r.path for r in results]
    enriched["sourcesContent"] = [r.content for r in results]

    logger.debug(
        "Enriched sourcemap: %d sources, %d without content",
        len(results),
        sum(1 for r in results if r.content is None),
    )
    return enriched
