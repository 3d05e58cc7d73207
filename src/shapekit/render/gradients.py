"""Gradient handles for the bundled 2D contexts.

Both gradients collect color stops and evaluate to an RGBA color for any
point of the surface. Colors outside the stop range pad with the first or
last stop. A gradient without stops is fully transparent.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from PIL import ImageColor

from .context import Color

TRANSPARENT: Color = (0, 0, 0, 0)


def parse_color(value: object) -> Color:
    """Return *value* as an RGBA tuple.

    Accepts CSS color strings (``"red"``, ``"#ff000080"``, ``"rgb(...)"``)
    and 3/4-tuples. Raises ValueError for anything else.
    """
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        parts = [int(v) for v in value]
        if len(parts) == 3:
            parts.append(255)
        r, g, b, a = parts
        return r, g, b, a
    if not isinstance(value, str):
        raise ValueError(f"unsupported color: {value!r}")
    if value.strip().lower() == "transparent":
        return TRANSPARENT
    rgba = ImageColor.getcolor(value.strip(), "RGBA")
    r, g, b, a = rgba  # type: ignore[misc]
    return int(r), int(g), int(b), int(a)


class BaseGradient:
    def __init__(self) -> None:
        self.stops: List[Tuple[float, Color]] = []

    def add_color_stop(self, offset: float, color: str) -> None:
        offset = float(offset)
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"color stop offset {offset} is outside [0, 1]")
        rgba = parse_color(color)
        # Equal offsets keep insertion order, giving a hard edge.
        idx = len(self.stops)
        while idx > 0 and self.stops[idx - 1][0] > offset:
            idx -= 1
        self.stops.insert(idx, (offset, rgba))

    def color_for_t(self, t: float) -> Color:
        stops = self.stops
        if not stops:
            return TRANSPARENT
        if t <= stops[0][0]:
            return stops[0][1]
        if t >= stops[-1][0]:
            return stops[-1][1]
        for (o0, c0), (o1, c1) in zip(stops, stops[1:]):
            if o0 <= t <= o1:
                if o1 == o0:
                    return c1
                f = (t - o0) / (o1 - o0)
                r, g, b, alpha = (
                    int(round(v0 + (v1 - v0) * f)) for v0, v1 in zip(c0, c1)
                )
                return r, g, b, alpha
        return stops[-1][1]  # pragma: no cover - loop always returns

    def color_at(self, x: float, y: float) -> Color:
        t = self.t_at(x, y)
        if t is None:
            return TRANSPARENT
        return self.color_for_t(t)

    def t_at(self, x: float, y: float) -> float | None:  # pragma: no cover
        raise NotImplementedError


class LinearGradient(BaseGradient):
    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        super().__init__()
        self.x0, self.y0, self.x1, self.y1 = (
            float(x0),
            float(y0),
            float(x1),
            float(y1),
        )

    def t_at(self, x: float, y: float) -> float | None:
        dx = self.x1 - self.x0
        dy = self.y1 - self.y0
        denom = dx * dx + dy * dy
        if denom == 0.0:
            # Zero-length axis paints nothing.
            return None
        return ((x - self.x0) * dx + (y - self.y0) * dy) / denom


class RadialGradient(BaseGradient):
    """Two-circle radial gradient.

    For a point p the color parameter is the largest omega for which p lies
    on the circle interpolated between the start and end circles with a
    non-negative radius.
    """

    def __init__(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> None:
        super().__init__()
        if r0 < 0 or r1 < 0:
            raise ValueError("radial gradient radii must be >= 0")
        self.x0, self.y0, self.r0 = float(x0), float(y0), float(r0)
        self.x1, self.y1, self.r1 = float(x1), float(y1), float(r1)

    def t_at(self, x: float, y: float) -> float | None:
        cdx = self.x1 - self.x0
        cdy = self.y1 - self.y0
        dr = self.r1 - self.r0
        pdx = x - self.x0
        pdy = y - self.y0
        a = cdx * cdx + cdy * cdy - dr * dr
        b = pdx * cdx + pdy * cdy + self.r0 * dr
        c = pdx * pdx + pdy * pdy - self.r0 * self.r0

        if self.x0 == self.x1 and self.y0 == self.y1 and self.r0 == self.r1:
            return None

        candidates: List[float] = []
        if abs(a) < 1e-12:
            if b == 0:
                return None
            candidates.append(c / (2.0 * b))
        else:
            disc = b * b - a * c
            if disc < 0:
                return None
            root = math.sqrt(disc)
            candidates.extend(((b + root) / a, (b - root) / a))

        for omega in sorted(candidates, reverse=True):
            if self.r0 + omega * dr >= 0:
                return omega
        return None
