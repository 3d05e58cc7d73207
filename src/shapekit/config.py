"""Runtime configuration helpers.

Small aggregator that merges the persisted :class:`RenderSettings` with
optional CLI overrides into the :class:`RenderConfig` used by the command
line renderer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .settings.schema import RenderSettings
from .settings.store import SettingsStore


@dataclass(slots=True)
class RenderConfig:
    size: Tuple[int, int]
    background: str
    backend: str
    radius: float
    text_fill: str
    style: Dict[str, Any] = field(default_factory=dict)


def make_render_config(
    *, args: Optional[object] = None, settings: RenderSettings | None = None
) -> RenderConfig:
    """Build a RenderConfig from persisted settings and CLI overrides.

    Rules:
    - Persisted settings (``SettingsStore.load()`` unless *settings* is
      given) provide the defaults.
    - Attributes of *args* (argparse.Namespace-like) that are not None
      override them for the current run: ``size``, ``background``,
      ``backend``, ``radius``, ``text_fill`` and ``fill``. ``fill`` adds a
      ``fillStyle`` to the circle style.
    """
    if settings is None:
        settings = SettingsStore.load()

    size = (settings.width, settings.height)
    background = settings.background
    backend = settings.backend
    radius = settings.radius
    text_fill = settings.text_fill
    style: Dict[str, Any] = {
        "font": settings.font,
        "strokeStyle": settings.stroke_style,
        "lineWidth": settings.line_width,
        "textAlign": "center",
        "textBaseline": "middle",
    }

    if args is not None:
        a_size = getattr(args, "size", None)
        if a_size is not None:
            size = (int(a_size[0]), int(a_size[1]))
        a_bg = getattr(args, "background", None)
        if a_bg is not None:
            background = str(a_bg)
        a_backend = getattr(args, "backend", None)
        if a_backend is not None:
            backend = str(a_backend)
        a_radius = getattr(args, "radius", None)
        if a_radius is not None:
            radius = float(a_radius)
        a_text_fill = getattr(args, "text_fill", None)
        if a_text_fill is not None:
            text_fill = str(a_text_fill)
        a_fill = getattr(args, "fill", None)
        if a_fill is not None:
            style["fillStyle"] = str(a_fill)

    return RenderConfig(
        size=size,
        background=background,
        backend=backend,
        radius=radius,
        text_fill=text_fill,
        style=style,
    )
