"""The interface shared by every surface texture."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .aabb import Vector


class Texture(ABC):
    """A texture maps surface coordinates and a point to a colour."""

    @abstractmethod
    def value(self, u: float, v: float, p: Vector) -> Vector:
        """Return the colour at parametric ``(u, v)`` and point ``p``."""