from __future__ import annotations

import os
from typing import Any, Callable

import pytest

# Keep pygame headless for every test that touches the pygame backend.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

STYLE_FIELDS = (
    "line_width",
    "stroke_style",
    "fill_style",
    "line_cap",
    "font",
    "text_baseline",
    "text_align",
)


class FakeGradient:
    def __init__(self, kind: str, geometry: tuple) -> None:
        self.kind = kind
        self.geometry = geometry
        self.stops: list[tuple[float, Any]] = []

    def add_color_stop(self, offset: float, color: Any) -> None:
        self.stops.append((offset, color))


class FakeContext:
    """Records every call and style assignment in order."""

    def __init__(self) -> None:
        object.__setattr__(self, "calls", [])
        for name in STYLE_FIELDS:
            object.__setattr__(self, name, None)

    def __setattr__(self, name: str, value: Any) -> None:
        self.calls.append(("set", (name, value)))
        object.__setattr__(self, name, value)

    def _record(self, name: str, *args: Any) -> None:
        # Snapshot style so tests can see what was active at the time.
        state = {f: getattr(self, f) for f in STYLE_FIELDS}
        self.calls.append((name, args, state))

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle, counter_clockwise)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rect", x, y, width, height)

    def fill(self) -> None:
        self._record("fill")

    def stroke(self) -> None:
        self._record("stroke")

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._record("fill_text", text, x, y)

    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> FakeGradient:
        self._record("create_radial_gradient", x0, y0, r0, x1, y1, r1)
        return FakeGradient("radial", (x0, y0, r0, x1, y1, r1))

    def create_linear_gradient(
        self, x0: float, y0: float, x1: float, y1: float
    ) -> FakeGradient:
        self._record("create_linear_gradient", x0, y0, x1, y1)
        return FakeGradient("linear", (x0, y0, x1, y1))

    # Helpers -------------------------------------------------------------
    def ops(self, name: str | None = None) -> list[tuple]:
        """Non-assignment calls, optionally filtered by name."""
        out = [c for c in self.calls if c[0] != "set"]
        if name is not None:
            out = [c for c in out if c[0] == name]
        return out

    def names(self) -> list[str]:
        return [c[0] for c in self.ops()]

    def sets(self) -> list[tuple[str, Any]]:
        return [c[1] for c in self.calls if c[0] == "set"]


@pytest.fixture
def fake_context() -> FakeContext:
    return FakeContext()


@pytest.fixture(scope="session")
def make_fake_context() -> Callable[[], FakeContext]:
    return FakeContext
