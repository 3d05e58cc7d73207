"""Convenience drawing facade over a 2D drawing context.

:class:`Shape` wraps the primitive path operations of an HTML-canvas style
context (see :class:`shapekit.render.context.DrawingContext`) into
one-call primitives and adds two layout helpers that place text-bearing
circles in a row and in a stepped pyramid.

Every primitive runs the same envelope: begin a path, apply the caller's
style options, build the geometry, fill when ``fillStyle`` was supplied,
stroke, close the path.

Style is not isolated per call. Options are written onto the context's own
state and stay there until a later call overwrites them, so a primitive
called without options draws with whatever the previous call left behind.

Example::

    surface = PillowSurface((320, 240))
    shape = Shape(surface.get_context("2d"))
    shape.circle(40, 40, 20, {"fillStyle": "gold", "lineWidth": 2})
    shape.sequence_of_circles(["1", "2", "?", "3"], 30, 120, 15, "blue")
    surface.save_png("/tmp/shapes.png")
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Sequence, Tuple

from shapekit.platform.display.registry import SurfaceRegistry, default_registry
from shapekit.settings.values import (
    SENTINEL_STYLE,
    SENTINEL_TEXT_FILL,
    SENTINEL_TOKEN,
    SEQUENCE_GAP,
)

from .context import DrawingContext, Gradient
from .style import StyleOptions

logger = logging.getLogger(__name__)

Props = StyleOptions | Mapping[str, Any] | None


class Shape:
    """Drawing facade holding a shared, replaceable context reference.

    The context is never created or validated here: ``None`` is accepted and
    the first draw call fails with whatever error touching it raises.
    Surface lookups for :meth:`set_context_from_id` go through *surfaces*
    (a :class:`~shapekit.platform.display.registry.SurfaceRegistry`) when
    given, else the process-wide host registry.
    """

    def __init__(
        self,
        context: DrawingContext | None = None,
        *,
        surfaces: SurfaceRegistry | None = None,
    ) -> None:
        self.context = context
        self._surfaces = surfaces

    # Context management ------------------------------------------------
    def set_context(self, context: DrawingContext | None) -> None:
        self.context = context
        logger.debug("context set to %r", context)

    def set_context_from_id(self, surface_id: str) -> None:
        """Resolve the surface registered as *surface_id* and draw on it.

        Lookup and ``get_context`` failures propagate unchanged.
        """
        surfaces = self._surfaces
        if surfaces is None:
            surfaces = default_registry()
        surface = surfaces.get(surface_id)
        self.set_context(surface.get_context("2d"))

    # Gradients ---------------------------------------------------------
    def generate_radial_gradient(
        self,
        x0: float,
        y0: float,
        r0: float,
        x1: float,
        y1: float,
        r1: float,
        stop_color0: Any,
        stop_pos0: float,
        stop_color1: Any,
        stop_pos1: float,
    ) -> Gradient:
        """Return a radial gradient between two circles with two color stops.

        Stop positions are forwarded as given; the context decides what an
        out-of-range position means.
        """
        grd = self.context.create_radial_gradient(x0, y0, r0, x1, y1, r1)
        grd.add_color_stop(stop_pos0, stop_color0)
        grd.add_color_stop(stop_pos1, stop_color1)
        return grd

    def generate_linear_gradient(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        stop_color0: Any,
        stop_pos0: float,
        stop_color1: Any,
        stop_pos1: float,
    ) -> Gradient:
        """Return a linear gradient from (x0, y0) to (x1, y1) with two stops."""
        grd = self.context.create_linear_gradient(x0, y0, x1, y1)
        grd.add_color_stop(stop_pos0, stop_color0)
        grd.add_color_stop(stop_pos1, stop_color1)
        return grd

    # Styling -----------------------------------------------------------
    def set_styling_properties(self, props: Props = None) -> StyleOptions:
        """Write every recognized key of *props* onto the context.

        Unrecognized keys are ignored. Returns the parsed options so callers
        can check which keys were present.
        """
        options = StyleOptions.from_props(props)
        options.apply(self.context)
        return options

    # Primitives --------------------------------------------------------
    def line(
        self, x1: float, y1: float, x2: float, y2: float, props: Props = None
    ) -> None:
        self.context.begin_path()
        self.set_styling_properties(props)
        self.context.move_to(x1, y1)
        self.context.line_to(x2, y2)
        self.context.stroke()
        self.context.close_path()

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
        props: Props = None,
    ) -> None:
        """Stroke an arc; angles are radians and are not normalized."""
        self.context.begin_path()
        self.set_styling_properties(props)
        self.context.arc(x, y, radius, start_angle, end_angle, counter_clockwise)
        self.context.stroke()
        self.context.close_path()

    def rect(
        self, x: float, y: float, width: float, height: float, props: Props = None
    ) -> None:
        self.context.begin_path()
        options = self.set_styling_properties(props)
        self.context.rect(x, y, width, height)
        if options.has_fill:
            self.context.fill()
        self.context.stroke()
        self.context.close_path()

    def circle(self, x: float, y: float, radius: float, props: Props = None) -> None:
        self.context.begin_path()
        options = self.set_styling_properties(props)
        self.context.arc(x, y, radius, 0, math.pi * 2, False)
        if options.has_fill:
            self.context.fill()
        self.context.stroke()
        self.context.close_path()

    def circle_with_text(
        self,
        x: float,
        y: float,
        radius: float,
        text: Any,
        text_fill: Any,
        props: Props = None,
    ) -> None:
        """Draw a circle and write *text* at its centre in *text_fill*.

        The circle is filled (when ``fillStyle`` is present) before the fill
        style is switched to *text_fill*, so the text color does not leak into
        the circle. Font, alignment and baseline come from the context's
        current state.
        """
        self.context.begin_path()
        options = self.set_styling_properties(props)
        self.context.arc(x, y, radius, 0, math.pi * 2, False)
        if options.has_fill:
            self.context.fill()
        self.context.fill_style = text_fill
        self.context.fill_text(str(text), x, y)
        self.context.stroke()
        self.context.close_path()

    # Layout ------------------------------------------------------------
    def sequence_of_circles(
        self,
        seq: Sequence[Any],
        x: float,
        y: float,
        radius: float,
        text_fill: Any,
        props: Props = None,
    ) -> float:
        """Draw *seq* as a left-to-right row of text circles.

        Centres are ``SEQUENCE_GAP * radius`` apart on a constant *y*. Items
        equal to the sentinel token are drawn with the emphasis style
        instead of *text_fill*/*props*. Returns the x of the circle that
        would follow the last one, so rows can be chained.
        """
        for item in seq:
            if item == SENTINEL_TOKEN:
                self.circle_with_text(
                    x, y, radius, item, SENTINEL_TEXT_FILL, dict(SENTINEL_STYLE)
                )
            else:
                self.circle_with_text(x, y, radius, item, text_fill, props)
            x += SEQUENCE_GAP * radius
        return x

    def pyramid_of_circles(
        self,
        seq: Sequence[Sequence[Any]],
        x: float,
        y: float,
        radius: float,
        text_fill: Any,
        props: Props = None,
    ) -> Tuple[float, float]:
        """Draw a jagged list of rows, each inset and lowered from the last.

        After each row x advances by ``SEQUENCE_GAP * radius / 2`` and y by
        ``radius * (SEQUENCE_GAP - 1)``. Returns the (x, y) where a further
        row would start.
        """
        for row in seq:
            self.sequence_of_circles(row, x, y, radius, text_fill, props)
            x = x + (radius * SEQUENCE_GAP) / 2
            y = y + radius * (SEQUENCE_GAP - 1)
        return x, y
