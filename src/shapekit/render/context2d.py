"""Backend-agnostic 2D context with HTML canvas path semantics.

:class:`Context2D` records paths, keeps the mutable drawing state and
resolves paints; concrete backends only implement three raster hooks
(:meth:`Context2D._fill_polygon`, :meth:`Context2D._stroke_polyline` and
:meth:`Context2D._draw_text`).

Like a browser canvas, assignments of values the context cannot use (an
unknown color, a non-positive line width, an unparseable font) are ignored
and the previous value is kept.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Tuple

from .context import Color
from .fonts import FontSpec, parse_font
from .gradients import BaseGradient, LinearGradient, RadialGradient, parse_color

Point = Tuple[float, float]
Paint = Any  # Color tuple or gradient

LINE_CAPS = ("butt", "round", "square")
TEXT_ALIGNS = ("start", "end", "left", "right", "center")
TEXT_BASELINES = (
    "top",
    "hanging",
    "middle",
    "alphabetic",
    "ideographic",
    "bottom",
)

# Maximum angle covered by one flattened arc segment (radians).
_ARC_STEP = math.pi / 36


def _resolve_paint(value: Any) -> Paint | None:
    if isinstance(value, BaseGradient):
        return value
    try:
        return parse_color(value)
    except (ValueError, TypeError):
        return None


def arc_points(
    x: float,
    y: float,
    radius: float,
    start: float,
    end: float,
    ccw: bool = False,
) -> List[Point]:
    """Flatten a canvas arc into points, following canvas sweep rules."""
    tau = 2.0 * math.pi
    if not ccw and end - start >= tau:
        sweep = tau
    elif ccw and start - end >= tau:
        sweep = -tau
    else:
        sweep = end - start
        if not ccw:
            sweep = sweep % tau
        else:
            sweep = -((start - end) % tau)
    n = max(1, int(math.ceil(abs(sweep) / _ARC_STEP)))
    pts: List[Point] = []
    for i in range(n + 1):
        a = start + sweep * i / n
        pts.append((x + radius * math.cos(a), y + radius * math.sin(a)))
    return pts


class _Subpath:
    __slots__ = ("points", "closed")

    def __init__(self, start: Point) -> None:
        self.points: List[Point] = [start]
        self.closed = False


class Context2D:
    """Path-recording 2D context; subclasses provide the rasterizer."""

    def __init__(self) -> None:
        self._subpaths: List[_Subpath] = []
        self._line_width = 1.0
        self._stroke_paint: Paint = (0, 0, 0, 255)
        self._fill_paint: Paint = (0, 0, 0, 255)
        self._stroke_style: Any = "#000000"
        self._fill_style: Any = "#000000"
        self._line_cap = "butt"
        self._font = "10px sans-serif"
        self._font_spec: FontSpec = FontSpec(10, "sans-serif")
        self._text_baseline = "alphabetic"
        self._text_align = "start"

    # Drawing state -----------------------------------------------------
    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, value: Any) -> None:
        try:
            v = float(value)
        except (TypeError, ValueError):
            return
        if math.isfinite(v) and v > 0:
            self._line_width = v

    @property
    def stroke_style(self) -> Any:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: Any) -> None:
        paint = _resolve_paint(value)
        if paint is not None:
            self._stroke_style = value
            self._stroke_paint = paint

    @property
    def fill_style(self) -> Any:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: Any) -> None:
        paint = _resolve_paint(value)
        if paint is not None:
            self._fill_style = value
            self._fill_paint = paint

    @property
    def line_cap(self) -> str:
        return self._line_cap

    @line_cap.setter
    def line_cap(self, value: Any) -> None:
        if value in LINE_CAPS:
            self._line_cap = value

    @property
    def font(self) -> str:
        return self._font

    @font.setter
    def font(self, value: Any) -> None:
        spec = parse_font(value)
        if spec is not None:
            self._font = value
            self._font_spec = spec

    @property
    def text_baseline(self) -> str:
        return self._text_baseline

    @text_baseline.setter
    def text_baseline(self, value: Any) -> None:
        if value in TEXT_BASELINES:
            self._text_baseline = value

    @property
    def text_align(self) -> str:
        return self._text_align

    @text_align.setter
    def text_align(self, value: Any) -> None:
        if value in TEXT_ALIGNS:
            self._text_align = value

    # Path construction -------------------------------------------------
    def begin_path(self) -> None:
        self._subpaths = []

    def close_path(self) -> None:
        if not self._subpaths:
            return
        current = self._subpaths[-1]
        current.closed = True
        self._subpaths.append(_Subpath(current.points[0]))

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_Subpath((float(x), float(y))))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].points.append((float(x), float(y)))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        if radius < 0:
            raise ValueError(f"negative arc radius: {radius}")
        pts = arc_points(
            x, y, radius, start_angle, end_angle, bool(counter_clockwise)
        )
        if not self._subpaths:
            self._subpaths.append(_Subpath(pts[0]))
            pts = pts[1:]
        self._subpaths[-1].points.extend(pts)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        x, y, w, h = float(x), float(y), float(width), float(height)
        sub = _Subpath((x, y))
        sub.points.extend([(x + w, y), (x + w, y + h), (x, y + h)])
        sub.closed = True
        self._subpaths.append(sub)
        self._subpaths.append(_Subpath((x, y)))

    # Painting ----------------------------------------------------------
    def fill(self) -> None:
        for sub in self._subpaths:
            if len(sub.points) >= 3:
                self._fill_polygon(sub.points, self._fill_paint)

    def stroke(self) -> None:
        for sub in self._subpaths:
            if len(sub.points) >= 2:
                self._stroke_polyline(
                    sub.points,
                    sub.closed,
                    self._line_width,
                    self._line_cap,
                    self._stroke_paint,
                )

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._draw_text(
            str(text),
            float(x),
            float(y),
            self._font_spec,
            self._text_align,
            self._text_baseline,
            self._fill_paint,
        )

    # Gradients ---------------------------------------------------------
    def create_linear_gradient(
        self, x0: float, y0: float, x1: float, y1: float
    ) -> LinearGradient:
        return LinearGradient(x0, y0, x1, y1)

    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> RadialGradient:
        return RadialGradient(x0, y0, r0, x1, y1, r1)

    # Raster hooks ------------------------------------------------------
    def _fill_polygon(self, points: Sequence[Point], paint: Paint) -> None:
        raise NotImplementedError

    def _stroke_polyline(
        self,
        points: Sequence[Point],
        closed: bool,
        width: float,
        cap: str,
        paint: Paint,
    ) -> None:
        raise NotImplementedError

    def _draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font: FontSpec,
        align: str,
        baseline: str,
        paint: Paint,
    ) -> None:
        raise NotImplementedError


def cap_extend(points: Sequence[Point], half_width: float) -> List[Point]:
    """Extend both ends of an open polyline by *half_width* (square caps)."""
    pts = list(points)
    if len(pts) < 2 or half_width <= 0:
        return pts

    def _push(p: Point, toward: Point) -> Point:
        dx, dy = p[0] - toward[0], p[1] - toward[1]
        d = math.hypot(dx, dy)
        if d == 0:
            return p
        return (p[0] + dx / d * half_width, p[1] + dy / d * half_width)

    pts[0] = _push(pts[0], pts[1])
    pts[-1] = _push(pts[-1], pts[-2])
    return pts


def horizontal_offset(align: str, width: float) -> float:
    """Left edge of a text run relative to the anchor x (LTR)."""
    if align == "center":
        return -width / 2.0
    if align in ("right", "end"):
        return -width
    return 0.0


def color_of(paint: Paint) -> Color | None:
    """Return the solid color of *paint*, or None for gradients."""
    if isinstance(paint, BaseGradient):
        return None
    return paint
