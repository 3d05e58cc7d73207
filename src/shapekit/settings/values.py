"""Centralized layout and theme values loaded from YAML.

The master source is ``values.yml`` in this package. On import the YAML is
parsed; a missing or corrupt file falls back to the hard-coded literals
below so rendering keeps working and tests stay stable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ----------------------------------------------------
_FALLBACK_SEQUENCE_GAP = 3
_FALLBACK_SENTINEL_TOKEN = "?"
_FALLBACK_SENTINEL_TEXT_FILL = "red"
_FALLBACK_SENTINEL_STYLE = {
    "strokeStyle": "red",
    "lineWidth": 3,
    "font": "20px Georgia",
}
_FALLBACK_THEME = {
    "surface": {"background": "white"},
    "defaults": {
        "radius": 20,
        "text_fill": "black",
        "stroke_style": "black",
        "line_width": 1,
        "font": "16px sans-serif",
    },
}

# --- Load YAML ------------------------------------------------------------
_sequence_gap: float = _FALLBACK_SEQUENCE_GAP
_sentinel_token: str = _FALLBACK_SENTINEL_TOKEN
_sentinel_text_fill: str = _FALLBACK_SENTINEL_TEXT_FILL
_sentinel_style: Dict[str, Any] = dict(_FALLBACK_SENTINEL_STYLE)
_theme: Dict[str, Any] = {k: dict(v) for k, v in _FALLBACK_THEME.items()}

if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        layout = raw.get("layout", {})
        gap = layout.get("sequence_gap")
        if isinstance(gap, (int, float)) and not isinstance(gap, bool):
            _sequence_gap = gap
        sentinel = raw.get("sentinel", {})
        if isinstance(sentinel.get("token"), str):
            _sentinel_token = sentinel["token"]
        if isinstance(sentinel.get("text_fill"), str):
            _sentinel_text_fill = sentinel["text_fill"]
        style = sentinel.get("style")
        if isinstance(style, dict):
            _sentinel_style = dict(style)
        theme = raw.get("theme")
        if isinstance(theme, dict):
            for section in ("surface", "defaults"):
                sub = theme.get(section)
                if isinstance(sub, dict):
                    _theme[section].update(sub)
    except (OSError, yaml.YAMLError, AttributeError):  # pragma: no cover
        pass

# --- Public accessors -----------------------------------------------------
SEQUENCE_GAP: float = _sequence_gap
SENTINEL_TOKEN: str = _sentinel_token
SENTINEL_TEXT_FILL: str = _sentinel_text_fill
SENTINEL_STYLE: Dict[str, Any] = dict(_sentinel_style)
THEME: Dict[str, Any] = dict(_theme)

__all__ = [
    "SEQUENCE_GAP",
    "SENTINEL_TOKEN",
    "SENTINEL_TEXT_FILL",
    "SENTINEL_STYLE",
    "THEME",
]
