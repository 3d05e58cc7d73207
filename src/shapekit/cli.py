"""Command-line interface for shapekit.

Renders a row and/or a pyramid of text circles onto an offscreen surface
and writes it to a PNG::

    shapekit --sequence "1,2,?,3" --pyramid "1,2,3;4,5;6" --out out.png
"""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Any, List, Tuple

from shapekit import __version__
from shapekit.config import RenderConfig, make_render_config
from shapekit.platform.display.registry import SurfaceRegistry
from shapekit.render.shape import Shape
from shapekit.settings.schema import BACKENDS

logger = logging.getLogger(__name__)

SURFACE_ID = "main"


def _parse_size(s: str) -> Tuple[int, int]:
    try:
        w, h = s.lower().split("x", 1)
        size = int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {s!r}") from None
    if min(size) <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {s!r}")
    return size


def _positive_float(s: str) -> float:
    try:
        v = float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {s!r}") from None
    if not (math.isfinite(v) and v > 0):
        raise argparse.ArgumentTypeError(f"must be a positive number, got {s!r}")
    return v


def _parse_row(s: str) -> List[str]:
    return [item.strip() for item in s.split(",")]


def _parse_pyramid(s: str) -> List[List[str]]:
    return [_parse_row(row) for row in s.split(";")]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(description="Draw rows and pyramids of circles")
    p.add_argument(
        "--sequence",
        type=_parse_row,
        default=None,
        help='Comma separated row of items, e.g. "1,2,?,3"',
    )
    p.add_argument(
        "--pyramid",
        type=_parse_pyramid,
        default=None,
        help='Rows separated by ";", items by ",", e.g. "1,2,3;4,5;6"',
    )
    p.add_argument("--x", type=float, default=None, help="Centre x of first circle")
    p.add_argument("--y", type=float, default=None, help="Centre y of first circle")
    p.add_argument(
        "--radius", type=_positive_float, default=None, help="Circle radius in px"
    )
    p.add_argument(
        "--text-fill", dest="text_fill", default=None, help="Text color in circles"
    )
    p.add_argument("--fill", default=None, help="Circle fill color (default: none)")
    p.add_argument("--background", default=None, help="Surface background color")
    p.add_argument("--backend", choices=BACKENDS, default=None)
    p.add_argument(
        "--size", type=_parse_size, default=None, help="Surface size as WxH"
    )
    p.add_argument(
        "--out", type=Path, default=Path("shapekit.png"), help="Output PNG path"
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def make_surface(cfg: RenderConfig) -> Any:
    """Create the offscreen surface for the configured backend."""
    if cfg.backend == "pygame":
        from shapekit.platform.display.pygame_backend import PygameSurface

        return PygameSurface(size=cfg.size, background=cfg.background)
    from shapekit.platform.display.pillow_backend import PillowSurface

    return PillowSurface(size=cfg.size, background=cfg.background)


def run(args: argparse.Namespace) -> Path:
    """Render what *args* asks for and return the written PNG path."""
    cfg = make_render_config(args=args)
    surface = make_surface(cfg)
    registry = SurfaceRegistry()
    registry.register(SURFACE_ID, surface)

    shape = Shape(surfaces=registry)
    shape.set_context_from_id(SURFACE_ID)

    radius = cfg.radius
    x = args.x if args.x is not None else radius * 1.5
    y = args.y if args.y is not None else radius * 1.5
    if args.sequence:
        end_x = shape.sequence_of_circles(
            args.sequence, x, y, radius, cfg.text_fill, cfg.style
        )
        logger.info("drew %d circles, next x=%s", len(args.sequence), end_x)
        y += radius * 3
    if args.pyramid:
        shape.pyramid_of_circles(args.pyramid, x, y, radius, cfg.text_fill, cfg.style)
        logger.info("drew pyramid with %d rows", len(args.pyramid))

    surface.save_png(str(args.out))
    registry.unregister(SURFACE_ID)
    return args.out


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the shapekit CLI."""
    args = parse_args(argv)
    if args.version:
        print(f"shapekit {__version__}")
        return
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    out = run(args)
    print(out)


if __name__ == "__main__":
    main()
