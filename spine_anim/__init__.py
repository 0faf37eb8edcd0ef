"""Read Spine JSON skeleton models and compute posed, textured quads for drawing."""

__version__ = "0.1.0"