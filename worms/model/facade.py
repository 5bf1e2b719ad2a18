"""Facade — the outward API of the worm model.

Every method delegates to Worm. Failures of the model are re-raised as
ModelError with the original exception as the cause; action points are
narrowed to signed 32-bit integers.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import structlog

from worms.exceptions import ModelError, WormError
from worms.model.worm import Worm

logger = structlog.get_logger()

_INT32_RANGE = 1 << 32
_INT32_MIN = -(1 << 31)


def to_int32(value: int) -> int:
    """Narrow an integer to a signed 32-bit value with two's-complement wraparound."""
    return (value - _INT32_MIN) % _INT32_RANGE + _INT32_MIN


@contextmanager
def _wrap_model_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except WormError as exc:
        logger.debug(
            "model_error_wrapped",
            operation=operation,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise ModelError(str(exc)) from exc


class Facade:
    """Adapter exposing the worm model with a single error kind."""

    def create_worm(
        self, x: float, y: float, direction: float, radius: float, name: str
    ) -> Worm:
        """Create a worm with the maximal number of action points."""
        with _wrap_model_errors("create_worm"):
            return Worm(name, x, y, direction, radius)

    def can_move(self, worm: Worm, nb_steps: int) -> bool:
        return worm.can_move(nb_steps)

    def move(self, worm: Worm, nb_steps: int) -> None:
        with _wrap_model_errors("move"):
            worm.move(nb_steps)

    def can_turn(self, worm: Worm, angle: float) -> bool:
        return worm.is_valid_rotation_angle(angle)

    def turn(self, worm: Worm, angle: float) -> None:
        with _wrap_model_errors("turn"):
            worm.turn(angle)

    def jump(self, worm: Worm) -> None:
        with _wrap_model_errors("jump"):
            worm.jump()

    def get_jump_time(self, worm: Worm) -> float:
        with _wrap_model_errors("get_jump_time"):
            return worm.jump_time()

    def get_jump_step(self, worm: Worm, t: float) -> tuple[float, float]:
        with _wrap_model_errors("get_jump_step"):
            return worm.jump_step(t)

    def get_x(self, worm: Worm) -> float:
        return worm.x

    def get_y(self, worm: Worm) -> float:
        return worm.y

    def get_orientation(self, worm: Worm) -> float:
        return worm.orientation

    def get_radius(self, worm: Worm) -> float:
        return worm.radius

    def set_radius(self, worm: Worm, new_radius: float) -> None:
        with _wrap_model_errors("set_radius"):
            worm.radius = new_radius

    def get_minimal_radius(self, worm: Worm) -> float:
        return worm.minimal_radius

    def get_action_points(self, worm: Worm) -> int:
        return to_int32(worm.action_points)

    def get_max_action_points(self, worm: Worm) -> int:
        return to_int32(worm.max_action_points)

    def get_name(self, worm: Worm) -> str:
        return worm.name

    def rename(self, worm: Worm, new_name: str) -> None:
        with _wrap_model_errors("rename"):
            worm.name = new_name

    def get_mass(self, worm: Worm) -> float:
        return worm.mass
