"""Worm model — the worm itself and the facade around it."""

from worms.model.facade import Facade
from worms.model.worm import Worm

__all__ = ["Worm", "Facade"]
