"""Framework-agnostic drawing-context and surface protocols.

Defines the minimal HTML-canvas style 2D context the :class:`Shape` facade
drives, plus the surface contract used by host backends (pillow, pygame,
etc.) so different rasterizers can be plugged in.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple

Color = Tuple[int, int, int, int]


class Gradient(Protocol):
    def add_color_stop(self, offset: float, color: str) -> None:
        ...


class DrawingContext(Protocol):
    line_width: Any
    stroke_style: Any
    fill_style: Any
    line_cap: Any
    font: Any
    text_baseline: Any
    text_align: Any

    def begin_path(self) -> None:
        ...

    def close_path(self) -> None:
        ...

    def move_to(self, x: float, y: float) -> None:
        ...

    def line_to(self, x: float, y: float) -> None:
        ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        ...

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def fill(self) -> None:
        ...

    def stroke(self) -> None:
        ...

    def fill_text(self, text: str, x: float, y: float) -> None:
        ...

    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> Gradient:
        ...

    def create_linear_gradient(
        self, x0: float, y0: float, x1: float, y1: float
    ) -> Gradient:
        ...


class Surface(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def get_context(self, kind: str = "2d") -> DrawingContext:
        ...

    def save_png(self, path: str) -> None:
        ...
