"""Pygame-backed drawing surface with headless (offscreen) support.

This module implements a 2D context and surface using pygame. It's
suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from shapekit.platform.display.pygame_backend import PygameSurface
    from shapekit.render.shape import Shape

    surface = PygameSurface(size=(320, 240))
    shape = Shape(surface.get_context("2d"))
    shape.line(10, 10, 310, 10, {"lineWidth": 2, "strokeStyle": "yellow"})
    surface.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Sequence, Tuple

import pygame as pg

from shapekit.render.context import Color
from shapekit.render.context2d import (
    Context2D,
    Paint,
    Point,
    cap_extend,
    color_of,
    horizontal_offset,
)
from shapekit.render.fonts import FontSpec
from shapekit.render.gradients import parse_color

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _FontCache:
    fonts: Dict[FontSpec, Any]

    def __init__(self) -> None:
        self.fonts = {}

    def get(self, spec: FontSpec) -> Any:
        f = self.fonts.get(spec)
        if f is None:
            names = ",".join(spec.families) or None
            f = pg.font.SysFont(names, spec.size_px, spec.bold, spec.italic)
            self.fonts[spec] = f
        return f


class PygameContext2D(Context2D):
    """2D context drawing onto a pygame surface."""

    def __init__(self, surface: Any, font_cache: _FontCache) -> None:
        super().__init__()
        self._surface = surface
        self._font_cache = font_cache

    def _fill_polygon(self, points: Sequence[Point], paint: Paint) -> None:
        pts = list(points)
        self._paint(paint, lambda layer, ink: pg.draw.polygon(layer, ink, pts))

    def _stroke_polyline(
        self,
        points: Sequence[Point],
        closed: bool,
        width: float,
        cap: str,
        paint: Paint,
    ) -> None:
        w = max(1, int(round(width)))
        pts = list(points)
        if not closed and cap == "square":
            pts = cap_extend(pts, width / 2.0)
        self._paint(
            paint, lambda layer, ink: self._lines(layer, pts, w, cap, closed, ink)
        )

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
        if not text:
            return
        f = self._font_cache.get(font)
        w, h = f.size(text)
        left = x + horizontal_offset(align, w)
        if baseline in ("top", "hanging"):
            top = y
        elif baseline == "middle":
            top = y - h / 2.0
        elif baseline == "alphabetic":
            top = y - f.get_ascent()
        else:
            top = y - h
        dest = (int(round(left)), int(round(top)))

        def render(layer: Any, ink: Color) -> None:
            rendered = f.render(text, True, ink[:3])
            if ink[3] < 255:
                rendered.fill((255, 255, 255, ink[3]), special_flags=pg.BLEND_RGBA_MULT)
            layer.blit(rendered, dest, special_flags=pg.BLEND_RGBA_MAX)

        self._paint(paint, render)

    def measure_text(self, text: str) -> float:
        """Advance width of *text* in the current font."""
        return float(self._font_cache.get(self._font_spec).size(text)[0])

    @staticmethod
    def _lines(
        target: Any,
        pts: Sequence[Point],
        w: int,
        cap: str,
        closed: bool,
        color: Color,
    ) -> None:
        pg.draw.lines(target, color, closed, list(pts), w)
        if cap == "round" and not closed and w > 1:
            for p in (pts[0], pts[-1]):
                pg.draw.circle(target, color, p, w / 2.0)

    def _new_layer(self) -> Any:
        layer = pg.Surface(self._surface.get_size(), flags=pg.SRCALPHA)
        layer.fill((0, 0, 0, 0))
        return layer

    def _paint(self, paint: Paint, render: Callable[[Any, Color], None]) -> None:
        # pg.draw writes RGBA as-is; draw on a clear layer and blit to blend.
        layer = self._new_layer()
        color = color_of(paint)
        if color is None:
            render(layer, (255, 255, 255, 255))
            self._composite(layer, paint)
        else:
            render(layer, color)
            self._surface.blit(layer, (0, 0))

    def _composite(self, mask: Any, paint: Paint) -> None:
        bounds = mask.get_bounding_rect()
        if bounds.width == 0 or bounds.height == 0:
            return
        layer = self._new_layer()
        for py in range(bounds.top, bounds.bottom):
            for px in range(bounds.left, bounds.right):
                coverage = mask.get_at((px, py)).a
                if not coverage:
                    continue
                r, g, b, a = paint.color_at(px + 0.5, py + 0.5)
                layer.set_at((px, py), (r, g, b, a * coverage // 255))
        self._surface.blit(layer, (0, 0))


class PygameSurface:
    """Offscreen pygame surface yielding a single persistent 2D context.

    Initializes pygame (and its font module) on first construction. Set
    ``SDL_VIDEODRIVER=dummy`` to stay headless.
    """

    def __init__(
        self, size: Tuple[int, int] = (320, 240), background: Any = "white"
    ) -> None:
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        if not pg.get_init():
            pg.init()
        if not pg.font.get_init():
            pg.font.init()

        self._width, self._height = int(size[0]), int(size[1])
        self._surface = pg.Surface((self._width, self._height), flags=pg.SRCALPHA)
        self._surface.fill(parse_color(background))
        self._font_cache = _FontCache()
        self._context: PygameContext2D | None = None

    @property
    def surface(self) -> Any:
        return self._surface

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def get_context(self, kind: str = "2d") -> PygameContext2D:
        if kind != "2d":
            raise ValueError(f"unsupported context type: {kind!r}")
        if self._context is None:
            self._context = PygameContext2D(self._surface, self._font_cache)
        return self._context

    def get_pixel(self, x: int, y: int) -> Color:
        c = self._surface.get_at((int(x), int(y)))
        return int(c.r), int(c.g), int(c.b), int(c.a)

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        pg.image.save(self._surface, path)
        logger.debug("saved %dx%d frame to %s", self._width, self._height, path)
