"""Console entrypoint for the shapekit renderer.

This module delegates to :mod:`shapekit.cli` so that running
``python -m shapekit`` or the installed ``shapekit`` console script
executes the same code.
"""

from __future__ import annotations

from shapekit.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`shapekit.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
