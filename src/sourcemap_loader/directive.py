from __future__ import annotations

"""Locate the `sourceMappingURL` directive in generated code.

Two comment forms are recognised:

    /*# sourceMappingURL=app.js.map */
    //# sourceMappingURL=app.js.map

(`@` is accepted in place of `#`.) Only the last `sourceMappingURL` in the
whole text is considered. Code often contains the marker inside string
literals (e.g. tooling that builds directives at runtime), so earlier
occurrences are never matched, even if the last one turns out not to be a
well-formed directive.
"""

import re
from dataclasses import dataclass
from typing import Literal

MARKER = "sourceMappingURL"

# Comment opener right before the marker, anchored at the marker.
_BLOCK_OPENER = re.compile(r"/\*\s*[@#]\s*\Z")
_LINE_OPENER = re.compile(r"//\s*[@#]\s*\Z")

# Everything from the marker on.
_BLOCK_TAIL = re.compile(MARKER + r"\s*=\s*(\S*)\s*\*/")
_LINE_TAIL = re.compile(MARKER + r"\s*=\s*(\S*)(?:\Z|\n|\r\n?)")


@dataclass(frozen=True)
class DirectiveMatch:
    reference: str
    start: int
    end: int
    form: Literal["block", "line"]

    def strip(self, text: str) -> str:
        """Return `text` with exactly this directive's span removed."""
        return text[: self.start] + text[self.end :]


def find_directive(text: str) -> DirectiveMatch | None:
    marker_at = text.rfind(MARKER)
    if marker_at == -1:
        return None

    head = text[:marker_at]

    opener = _BLOCK_OPENER.search(head)
    if opener is not None:
        tail = _BLOCK_TAIL.match(text, marker_at)
        if tail is not None:
            return DirectiveMatch(tail.group(1), opener.start(), tail.end(), "block")

    opener = _LINE_OPENER.search(head)
    if opener is not None:
        tail = _LINE_TAIL.match(text, marker_at)
        if tail is not None:
            return DirectiveMatch(tail.group(1), opener.start(), tail.end(), "line")

    return None
