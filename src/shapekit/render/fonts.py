"""Font utilities shared by the raster backends.

Contexts store the CSS font shorthand the caller assigned (for example
``"bold 20px Georgia"``); backends turn it into a concrete font handle via
:func:`parse_font`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_FONT_RE = re.compile(
    r"^\s*(?P<prefix>(?:[\w-]+\s+)*?)"
    r"(?P<size>\d+(?:\.\d+)?)(?P<unit>px|pt)"
    r"(?:\s*/\s*\S+)?\s+(?P<family>.+?)\s*$",
    re.IGNORECASE,
)

_BOLD_WORDS = {"bold", "bolder", "600", "700", "800", "900"}
_ITALIC_WORDS = {"italic", "oblique"}


@dataclass(frozen=True, slots=True)
class FontSpec:
    size_px: int
    family: str
    bold: bool = False
    italic: bool = False

    @property
    def families(self) -> list[str]:
        """Family fallback list with quotes stripped."""
        out = []
        for name in self.family.split(","):
            name = name.strip().strip("'\"")
            if name:
                out.append(name)
        return out


def parse_font(spec: str) -> FontSpec | None:
    """Parse a CSS font shorthand, returning None when it is not one.

    >>> parse_font("20px Georgia")
    FontSpec(size_px=20, family='Georgia', bold=False, italic=False)
    """
    if not isinstance(spec, str):
        return None
    m = _FONT_RE.match(spec)
    if m is None:
        return None
    size = float(m.group("size"))
    if m.group("unit").lower() == "pt":
        size = size * 4.0 / 3.0
    words = {w.lower() for w in m.group("prefix").split()}
    return FontSpec(
        size_px=max(1, int(round(size))),
        family=m.group("family"),
        bold=bool(words & _BOLD_WORDS),
        italic=bool(words & _ITALIC_WORDS),
    )
