"""Pydantic model for per-call styling options."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .context import DrawingContext

# Field name -> context attribute. The two coincide; kept explicit so the
# set of context fields the facade may touch is visible in one place.
CONTEXT_FIELDS: dict[str, str] = {
    "line_width": "line_width",
    "stroke_style": "stroke_style",
    "fill_style": "fill_style",
    "line_cap": "line_cap",
    "font": "font",
    "text_baseline": "text_baseline",
    "text_align": "text_align",
}


class StyleOptions(BaseModel):
    """Recognized presentation properties applied to a context before a draw.

    Parameters
    ----------
    line_width: Stroke width (``lineWidth``).
    stroke_style: Stroke color or gradient (``strokeStyle``).
    fill_style: Fill color or gradient (``fillStyle``). Its *presence*, not
        its value, makes the fillable primitives fill.
    line_cap: ``butt``, ``round`` or ``square`` (``lineCap``).
    font: CSS font shorthand such as ``"20px Georgia"`` (``font``).
    text_baseline: Canvas baseline keyword (``textBaseline``).
    text_align: Canvas alignment keyword (``textAlign``).

    Values are forwarded to the context untouched; whatever the context does
    with an odd value is its business.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    line_width: Any = Field(default=None, alias="lineWidth")
    stroke_style: Any = Field(default=None, alias="strokeStyle")
    fill_style: Any = Field(default=None, alias="fillStyle")
    line_cap: Any = Field(default=None, alias="lineCap")
    font: Any = Field(default=None, alias="font")
    text_baseline: Any = Field(default=None, alias="textBaseline")
    text_align: Any = Field(default=None, alias="textAlign")

    @classmethod
    def from_props(
        cls, props: "StyleOptions | Mapping[str, Any] | None"
    ) -> "StyleOptions":
        if props is None:
            return cls()
        if isinstance(props, StyleOptions):
            return props
        return cls.model_validate(dict(props))

    @property
    def present(self) -> list[str]:
        """Field names explicitly supplied, in declaration order."""
        return [name for name in CONTEXT_FIELDS if name in self.model_fields_set]

    @property
    def has_fill(self) -> bool:
        # Key presence, not truthiness: fillStyle=None/""/False still fills.
        return "fill_style" in self.model_fields_set

    def apply(self, context: DrawingContext) -> None:
        """Set the context field of every present key and nothing else."""
        for name in self.present:
            setattr(context, CONTEXT_FIELDS[name], getattr(self, name))
