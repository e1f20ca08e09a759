"""Ray intersection geometry, textures and tile rendering helpers for a path tracer."""

__version__ = "0.1.0"