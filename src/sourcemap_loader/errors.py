from __future__ import annotations


class SourceMapLoaderError(Exception):
    """Base exception for sourcemap-loader."""


class InvalidOptionsError(SourceMapLoaderError):
    """Raised when loader options have an unknown name or a bad value."""


class UnsupportedSchemeError(SourceMapLoaderError):
    """Raised when a reference uses a URL scheme other than `file:`."""

    def __init__(self, url: str) -> None:
        super().__init__(f"URL scheme not supported: {url}")
        self.url = url


class InvalidFileUrlError(SourceMapLoaderError):
    """Raised when a `file:` URL cannot be turned into a local path."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Cannot convert file URL {url}: {reason}")
        self.url = url
        self.reason = reason


class InlineMapParseError(SourceMapLoaderError):
    """Raised when an inline (data URI) sourcemap is not valid base64 JSON."""

    def __init__(self, snippet: str, cause: BaseException | str) -> None:
        super().__init__(f"Cannot parse inline SourceMap '{snippet}': {cause}")
        self.snippet = snippet
        self.cause = cause


class MapFileReadError(SourceMapLoaderError):
    """Raised when a referenced sourcemap file cannot be read."""

    def __init__(self, path: str, cause: BaseException | str) -> None:
        super().__init__(f"Cannot open SourceMap '{path}': {cause}")
        self.path = path
        self.cause = cause


class MapFileParseError(SourceMapLoaderError):
    """Raised when a referenced sourcemap file is not a valid sourcemap."""

    def __init__(self, reference: str, cause: BaseException | str) -> None:
        super().__init__(f"Cannot parse SourceMap '{reference}': {cause}")
        self.reference = reference
        self.cause = cause


MapParseError = MapFileParseError


class SourceResolutionError(SourceMapLoaderError):
    """Raised when an original source path cannot be resolved."""

    def __init__(self, source: str, cause: BaseException | str) -> None:
        super().__init__(f"Cannot find source file '{source}': {cause}")
        self.source = source
        self.cause = cause


class SourceReadError(SourceMapLoaderError):
    """Raised when an original source file cannot be read."""

    def __init__(self, path: str, cause: BaseException | str) -> None:
        super().__init__(f"Cannot open source file '{path}': {cause}")
        self.path = path
        self.cause = cause
