"""Software renderer and demoscene effects for a 192x192 pixel frame."""

__version__ = "0.1.0"

__all__ = ["gfx", "matrix", "raster3d", "mesh", "effects"]