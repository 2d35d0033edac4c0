"""shapekit – 2D outline construction for vector-graphics descriptions."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
