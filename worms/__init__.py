"""Worms — kinematics and action-point model of a single worm."""

from worms.exceptions import (
    BadOrientationError,
    InvalidArgumentError,
    ModelError,
    PreconditionViolationError,
    WormError,
)
from worms.model import Facade, Worm

__all__ = [
    "Worm",
    "Facade",
    "WormError",
    "InvalidArgumentError",
    "BadOrientationError",
    "PreconditionViolationError",
    "ModelError",
]
