"""Pydantic model for persisted render settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .values import THEME

BACKENDS = ("pillow", "pygame")

_DEFAULTS = THEME.get("defaults", {})


class RenderSettings(BaseModel):
    """Render defaults persisted to disk.

    Parameters
    ----------
    width, height: Surface size in pixels.
    background: CSS color the surface is cleared to.
    backend: Raster backend, ``pillow`` or ``pygame``.
    radius: Default circle radius for sequence and pyramid layouts.
    text_fill: Default text color inside circles.
    font: CSS font shorthand applied before drawing text circles.
    stroke_style: Default circle outline color.
    line_width: Default circle outline width.
    """

    width: int = Field(default=480)
    height: int = Field(default=320)
    background: str = Field(
        default=str(THEME.get("surface", {}).get("background", "white"))
    )
    backend: str = Field(default=BACKENDS[0])
    radius: float = Field(default=float(_DEFAULTS.get("radius", 20)))
    text_fill: str = Field(default=str(_DEFAULTS.get("text_fill", "black")))
    font: str = Field(default=str(_DEFAULTS.get("font", "16px sans-serif")))
    stroke_style: str = Field(default=str(_DEFAULTS.get("stroke_style", "black")))
    line_width: float = Field(default=float(_DEFAULTS.get("line_width", 1)))

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("surface dimensions must be > 0 px")
        return v

    @field_validator("radius", "line_width")
    @classmethod
    def _chk_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("radius and line_width must be > 0")
        return v

    @field_validator("backend")
    @classmethod
    def _chk_backend(cls, v: str) -> str:
        if v not in BACKENDS:
            raise ValueError("invalid backend: must be one of " + ", ".join(BACKENDS))
        return v
