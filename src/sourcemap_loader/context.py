from __future__ import annotations

"""Capabilities the loader needs from the build that runs it."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from .config import LoaderOptions

logger = logging.getLogger(__name__)


class LoaderContext(Protocol):
    context: str
    options: LoaderOptions | Mapping[str, Any] | None

    def add_dependency(self, path: str) -> None: ...

    def emit_warning(self, error: Exception) -> None: ...


@dataclass
class BuildContext:
    """Per-asset context that records dependencies and warnings.

    Hosts without their own dependency tracking can use this directly.
    """

    context: str
    options: LoaderOptions | Mapping[str, Any] | None = None
    dependencies: list[str] = field(default_factory=list)
    warnings: list[Exception] = field(default_factory=list)

    def add_dependency(self, path: str) -> None:
        self.dependencies.append(path)

    def emit_warning(self, error: Exception) -> None:
        logger.warning("%s", error)
        self.warnings.append(error)
