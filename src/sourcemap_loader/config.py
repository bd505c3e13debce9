from __future__ import annotations

"""Loader options and their merge over the defaults."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from .errors import InvalidOptionsError


@dataclass(frozen=True)
class LoaderOptions:
    # Keep `sources` as written in the map (root-prefixed) instead of
    # rewriting them as absolute paths.
    keep_relative_sources: bool = False


DEFAULT_OPTIONS = LoaderOptions()

_ALIASES = {
    "keepRelativeSources": "keep_relative_sources",
}


def resolve_options(raw: LoaderOptions | Mapping[str, Any] | None) -> LoaderOptions:
    """Merge host supplied options over `DEFAULT_OPTIONS`.

    Neither the defaults nor `raw` are modified. Unknown keys and values of
    the wrong type raise InvalidOptionsError.
    """

    if raw is None:
        return DEFAULT_OPTIONS
    if isinstance(raw, LoaderOptions):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidOptionsError(f"Options must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(LoaderOptions)}
    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise InvalidOptionsError(f"Unknown option: {key!r}")
        if not isinstance(value, bool):
            raise InvalidOptionsError(f"Option {key!r} must be a boolean, got {value!r}")
        overrides[name] = value

    return replace(DEFAULT_OPTIONS, **overrides)
