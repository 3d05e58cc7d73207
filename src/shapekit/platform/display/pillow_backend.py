"""Pillow-backed drawing surface.

:class:`PillowSurface` owns an RGBA image and hands out a
:class:`PillowContext2D` that rasterizes recorded paths with
``ImageDraw``. Every paint is rendered onto a transparent layer and
composited source-over onto the image; gradient layers are filled pixel
by pixel through a mask of the shape.

Example:
    from shapekit.platform.display.pillow_backend import PillowSurface
    from shapekit.render.shape import Shape

    surface = PillowSurface((320, 240))
    shape = Shape(surface.get_context("2d"))
    shape.rect(10, 10, 100, 50, {"fillStyle": "orange"})
    surface.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from shapekit.render.context import Color
from shapekit.render.context2d import (
    Context2D,
    Paint,
    Point,
    cap_extend,
    color_of,
)
from shapekit.render.fonts import FontSpec
from shapekit.render.gradients import parse_color

logger = logging.getLogger(__name__)

_FALLBACK_FONT_FILES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "DejaVuSans.ttf",
]

# canvas textBaseline -> Pillow vertical anchor
_BASELINE_ANCHORS = {
    "top": "a",
    "hanging": "a",
    "middle": "m",
    "alphabetic": "s",
    "ideographic": "d",
    "bottom": "d",
}


@dataclass(slots=True)
class _FontCache:
    fonts: Dict[FontSpec, Any]

    def __init__(self) -> None:
        self.fonts = {}

    def get(self, spec: FontSpec) -> Any:
        f = self.fonts.get(spec)
        if f is None:
            candidates = [f"{name}.ttf" for name in spec.families]
            candidates += _FALLBACK_FONT_FILES
            for path in candidates:
                try:
                    f = ImageFont.truetype(path, spec.size_px)
                    break
                except OSError:
                    continue
            if f is None:
                f = ImageFont.load_default(spec.size_px)
            self.fonts[spec] = f
        return f


def _anchor(align: str, baseline: str) -> str:
    if align == "center":
        h = "m"
    elif align in ("right", "end"):
        h = "r"
    else:
        h = "l"
    return h + _BASELINE_ANCHORS.get(baseline, "s")


class PillowContext2D(Context2D):
    """2D context drawing into a Pillow RGBA image."""

    def __init__(self, img: Image.Image, fonts: _FontCache) -> None:
        super().__init__()
        self._img = img
        self._fonts = fonts
        self._ops = 0

    @property
    def ops(self) -> int:
        """Number of raster operations performed so far."""
        return self._ops

    def _fill_polygon(self, points: Sequence[Point], paint: Paint) -> None:
        pts = list(points)
        self._paint(paint, lambda draw: draw.polygon(pts, fill=255))

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
        if closed:
            pts.append(pts[0])
        elif cap == "square":
            pts = cap_extend(pts, width / 2.0)
        self._paint(paint, lambda draw: self._line(draw, pts, w, cap, closed, 255))

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
        pil_font = self._fonts.get(font)
        anchor = _anchor(align, baseline)
        self._paint(
            paint,
            lambda draw: draw.text(
                (x, y), text, fill=255, font=pil_font, anchor=anchor
            ),
        )

    def measure_text(self, text: str) -> float:
        """Advance width of *text* in the current font."""
        return float(self._fonts.get(self._font_spec).getlength(text))

    @staticmethod
    def _line(
        draw: ImageDraw.ImageDraw,
        pts: Sequence[Point],
        w: int,
        cap: str,
        closed: bool,
        fill: Any,
    ) -> None:
        draw.line(list(pts), fill=fill, width=w, joint="curve")
        if cap == "round" and not closed and w > 1:
            r = w / 2.0
            for px, py in (pts[0], pts[-1]):
                draw.ellipse((px - r, py - r, px + r, py + r), fill=fill)

    def _paint(
        self, paint: Paint, render: Callable[[ImageDraw.ImageDraw], None]
    ) -> None:
        # Coverage mask first, then source-over onto the image.
        mask = Image.new("L", self._img.size, 0)
        render(ImageDraw.Draw(mask))
        color = color_of(paint)
        if color is None:
            self._composite(mask, paint)
        else:
            r, g, b, a = color
            layer = Image.new("RGBA", self._img.size, (r, g, b, 0))
            layer.putalpha(mask.point(lambda v: v * a // 255))
            self._img.alpha_composite(layer)
        self._ops += 1

    def _composite(self, mask: Image.Image, paint: Paint) -> None:
        bbox = mask.getbbox()
        if bbox is None:
            return
        left, top, right, bottom = bbox
        layer = Image.new("RGBA", (right - left, bottom - top), (0, 0, 0, 0))
        src = mask.load()
        dst = layer.load()
        for py in range(top, bottom):
            for px in range(left, right):
                coverage = src[px, py]
                if not coverage:
                    continue
                r, g, b, a = paint.color_at(px + 0.5, py + 0.5)
                dst[px - left, py - top] = (r, g, b, a * coverage // 255)
        self._img.alpha_composite(layer, dest=(left, top))


class PillowSurface:
    """In-memory RGBA surface yielding a single persistent 2D context."""

    def __init__(
        self, size: Tuple[int, int] = (320, 240), background: Any = "white"
    ) -> None:
        self._width, self._height = int(size[0]), int(size[1])
        bg: Color = parse_color(background)
        self._img = Image.new("RGBA", (self._width, self._height), bg)
        self._fonts = _FontCache()
        self._context: PillowContext2D | None = None

    @property
    def image(self) -> Image.Image:
        return self._img

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def get_context(self, kind: str = "2d") -> PillowContext2D:
        if kind != "2d":
            raise ValueError(f"unsupported context type: {kind!r}")
        if self._context is None:
            self._context = PillowContext2D(self._img, self._fonts)
        return self._context

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b, a = self._img.getpixel((int(x), int(y)))  # type: ignore[misc]
        return int(r), int(g), int(b), int(a)

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._img.save(path, format="PNG")
        logger.debug("saved %dx%d frame to %s", self._width, self._height, path)
