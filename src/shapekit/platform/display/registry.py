"""Lookup of drawable surfaces by string id.

This is the host side of
:meth:`shapekit.render.shape.Shape.set_context_from_id`: applications
register the surfaces they create under an id and shapes resolve them by
that id later, the way a browser page looks up a canvas element.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator

from shapekit.render.context import Surface

logger = logging.getLogger(__name__)


class SurfaceNotFoundError(LookupError):
    """No surface is registered under the requested id."""


class SurfaceRegistry:
    def __init__(self) -> None:
        self._surfaces: Dict[str, Surface] = {}

    def register(self, surface_id: str, surface: Surface) -> None:
        """Register *surface* under *surface_id*, replacing any previous one."""
        self._surfaces[surface_id] = surface
        logger.debug("registered surface %r (%r)", surface_id, surface)

    def unregister(self, surface_id: str) -> None:
        if self._surfaces.pop(surface_id, None) is not None:
            logger.debug("unregistered surface %r", surface_id)

    def get(self, surface_id: str) -> Surface:
        try:
            return self._surfaces[surface_id]
        except KeyError:
            raise SurfaceNotFoundError(
                f"no surface registered with id {surface_id!r}"
            ) from None

    def clear(self) -> None:
        self._surfaces.clear()

    def __contains__(self, surface_id: object) -> bool:
        return surface_id in self._surfaces

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._surfaces))

    def __len__(self) -> int:
        return len(self._surfaces)


_DEFAULT = SurfaceRegistry()


def default_registry() -> SurfaceRegistry:
    """Return the process-wide host registry."""
    return _DEFAULT
