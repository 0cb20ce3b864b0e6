"""Drizzle ORM target."""

from .backend import DrizzleBackend
from .generators import DrizzleGenerator, render_drizzle

__all__ = ["DrizzleBackend", "DrizzleGenerator", "render_drizzle"]
