"""Worm model — position, orientation, size and the action-point budget.

A worm lives in a 2D plane and can move, turn and jump. Every action
costs action points; the maximal number of action points is derived from
the worm's mass, which in turn follows from its radius and the shared
density of all worms.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Optional

import structlog

from worms.config import get_settings
from worms.exceptions import (
    BadOrientationError,
    InvalidArgumentError,
    PreconditionViolationError,
)

logger = structlog.get_logger()

_NAME_PATTERN = re.compile(r"[A-Z][A-Za-z '\"]+")

_FULL_TURN = 2 * math.pi

# Largest Java long; Math.round saturates here
_MAX_ROUNDED = 2 ** 63 - 1


class Worm:
    """A single worm and the rules governing how its state evolves.

    Invariants:
        - radius >= minimal_radius
        - 0 <= orientation < 2π
        - 0 <= action_points <= max_action_points, except right after a
          radius decrease, which does not reclamp the current budget.
    """

    # Shared by all worms (kg/m³)
    DENSITY: float = 1062.0
    # Standard gravity (m/s²), drives the jump physics
    STANDARD_ACCELERATION: float = 9.80665
    MINIMAL_RADIUS: float = 0.25

    def __init__(
        self,
        name: str,
        x: float,
        y: float,
        orientation: float,
        radius: float,
        action_points: Optional[int] = None,
        *,
        check_preconditions: Optional[bool] = None,
    ) -> None:
        """Initialize a worm.

        Args:
            name: Name of the worm; see is_valid_name().
            x: Initial horizontal position.
            y: Initial vertical position.
            orientation: Initial orientation in radians, in [0, 2π).
            radius: Initial radius, at least MINIMAL_RADIUS.
            action_points: Initial number of action points. If None, the
                worm starts with its maximal number. A number outside
                [0, max_action_points] leaves the worm with 0.
            check_preconditions: Raise PreconditionViolationError for
                violated caller preconditions instead of asserting. If
                None, taken from the settings.

        Raises:
            InvalidArgumentError: The name or the radius is not valid.
            PreconditionViolationError: The orientation is outside [0, 2π)
                and preconditions are checked.
        """
        if check_preconditions is None:
            check_preconditions = get_settings().check_preconditions
        self._check_preconditions = check_preconditions
        self._minimal_radius = self.MINIMAL_RADIUS

        if not self.is_valid_name(name):
            raise InvalidArgumentError(f"Not a valid name: {name!r}")
        if not self.is_valid_radius(radius):
            raise InvalidArgumentError(f"Not a valid radius: {radius!r}")
        self._require(
            self.is_valid_orientation(orientation),
            f"orientation {orientation!r} is outside [0, 2π)",
        )

        self._name = name
        self._x = float(x)
        self._y = float(y)
        self._orientation = float(orientation)
        self._radius = float(radius)
        self._action_points = 0
        if action_points is None:
            action_points = self.max_action_points
        self._set_action_points(action_points)

        logger.debug(
            "worm_created",
            name=self._name,
            x=self._x,
            y=self._y,
            orientation=self._orientation,
            radius=self._radius,
            action_points=self._action_points,
        )

    def __repr__(self) -> str:
        return (
            f"Worm(name={self._name!r}, x={self._x!r}, y={self._y!r}, "
            f"orientation={self._orientation!r}, radius={self._radius!r}, "
            f"action_points={self._action_points!r})"
        )

    # ------------------------------------------------------------------
    # Name
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not self.is_valid_name(name):
            raise InvalidArgumentError(f"Not a valid name: {name!r}")
        self._name = name

    @staticmethod
    def is_valid_name(name: object) -> bool:
        """Check whether the given name is valid for any worm.

        A valid name starts with an uppercase letter followed by at least
        one letter, space, single quote or double quote.
        """
        return isinstance(name, str) and _NAME_PATTERN.fullmatch(name) is not None

    # ------------------------------------------------------------------
    # Position and orientation
    # ------------------------------------------------------------------

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def orientation(self) -> float:
        return self._orientation

    @staticmethod
    def is_valid_orientation(orientation: float) -> bool:
        """Return True if and only if 0 <= orientation < 2π."""
        return 0 <= orientation < _FULL_TURN

    # ------------------------------------------------------------------
    # Radius and mass
    # ------------------------------------------------------------------

    @property
    def minimal_radius(self) -> float:
        return self._minimal_radius

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, radius: float) -> None:
        """Set the radius. Does not reclamp action_points to the new maximum."""
        if not self.is_valid_radius(radius):
            raise InvalidArgumentError(f"Not a valid radius: {radius!r}")
        self._radius = float(radius)

    def is_valid_radius(self, radius: float) -> bool:
        """Return True if the radius is at least this worm's minimal radius."""
        return self._minimal_radius <= radius

    @property
    def mass(self) -> float:
        """Mass of a sphere with this worm's radius and the shared density."""
        return self.DENSITY * (4.0 / 3.0) * math.pi * self._radius * self._radius * self._radius

    # ------------------------------------------------------------------
    # Action points
    # ------------------------------------------------------------------

    @property
    def max_action_points(self) -> int:
        """Mass rounded half-up to the nearest integer; recomputed on every call.

        Saturates at 2**63 - 1 for huge or infinite masses.
        """
        mass = self.mass
        if not math.isfinite(mass):
            return _MAX_ROUNDED
        return min(math.floor(mass + 0.5), _MAX_ROUNDED)

    @property
    def action_points(self) -> int:
        return self._action_points

    def is_valid_action_points(self, number: int) -> bool:
        """Return True for a whole number in [0, max_action_points]."""
        return isinstance(number, numbers.Integral) and 0 <= number <= self.max_action_points

    def _set_action_points(self, number: int) -> None:
        # Out-of-range values are ignored, never clamped.
        if self.is_valid_action_points(number):
            self._action_points = number

    def _remove_action_points(self, cost: int) -> None:
        self._set_action_points(self._action_points - cost)

    # ------------------------------------------------------------------
    # Moving
    # ------------------------------------------------------------------

    def move_cost(self, steps: int) -> int:
        """Action points needed to move the given number of steps.

        Moving vertically is four times as expensive as moving horizontally.
        """
        o = self._orientation
        return math.ceil(steps * (abs(math.cos(o)) + 4 * abs(math.sin(o))))

    def can_move(self, steps: int) -> bool:
        """Return True if steps >= 0 and the worm can afford to move that far."""
        return steps >= 0 and self._action_points - self.move_cost(steps) >= 0

    def move(self, steps: int) -> None:
        """Move the worm the given number of steps in the direction it faces.

        Each step covers one radius.

        Args:
            steps: Number of steps, at least 0.

        Raises:
            InvalidArgumentError: can_move(steps) is False.
        """
        if not self.can_move(steps):
            logger.info(
                "move_rejected",
                name=self._name,
                steps=steps,
                action_points=self._action_points,
            )
            raise InvalidArgumentError(f"{self._name} cannot move {steps} steps")

        cost = self.move_cost(steps)
        self._remove_action_points(cost)
        self._x += math.cos(self._orientation) * self._radius * steps
        self._y += math.sin(self._orientation) * self._radius * steps

        logger.debug(
            "worm_moved",
            name=self._name,
            steps=steps,
            cost=cost,
            x=self._x,
            y=self._y,
        )

    # ------------------------------------------------------------------
    # Turning
    # ------------------------------------------------------------------

    @staticmethod
    def turn_cost(angle: float) -> int:
        """Action points needed to turn by the given angle (60 for a full turn)."""
        return math.ceil(abs(angle) * 60 / _FULL_TURN)

    def is_valid_rotation_angle(self, angle: float) -> bool:
        """Return True if the angle is finite and the worm can afford the turn."""
        if not math.isfinite(angle):
            return False
        return self.turn_cost(angle) <= self._action_points

    def turn(self, angle: float) -> None:
        """Turn the worm by the given angle, keeping the orientation in [0, 2π).

        Args:
            angle: Rotation in radians; negative turns clockwise.

        Raises:
            PreconditionViolationError: The worm cannot afford the turn and
                preconditions are checked.
        """
        self._require(
            self.is_valid_rotation_angle(angle),
            f"{self._name} cannot afford to turn by {angle!r}",
        )

        cost = self.turn_cost(angle)
        self._remove_action_points(cost)
        orientation = math.fmod(self._orientation + angle, _FULL_TURN)
        if orientation < 0:
            orientation += _FULL_TURN
        # A tiny negative remainder rounds up to exactly 2π.
        if orientation >= _FULL_TURN:
            orientation = 0.0
        self._orientation = orientation

        logger.debug(
            "worm_turned",
            name=self._name,
            angle=angle,
            cost=cost,
            orientation=self._orientation,
        )

    # ------------------------------------------------------------------
    # Jumping
    # ------------------------------------------------------------------

    def initial_velocity(self) -> float:
        """Launch speed for the current action points.

        The force exerted on the ground is 5 N per action point plus the
        worm's weight; it acts for half a second.
        """
        mass = self.mass
        force = 5 * self._action_points + mass * self.STANDARD_ACCELERATION
        return force / (mass * 2)

    def jump_distance(self) -> float:
        """Signed horizontal range of a jump from the current state."""
        velocity = self.initial_velocity()
        return velocity ** 2 * math.sin(2 * self._orientation) / self.STANDARD_ACCELERATION

    def jump_displacement(self) -> float:
        """Horizontal displacement of a jump; negative when facing left."""
        distance = self.jump_distance()
        if self._orientation > math.pi / 2:
            return -abs(distance)
        return distance

    def jump(self) -> None:
        """Jump, spending all action points.

        Only the horizontal position changes; the worm lands at the height
        it took off from.

        Raises:
            InvalidArgumentError: The worm has no action points.
            BadOrientationError: The worm faces downward (orientation > π).
        """
        if self._action_points == 0:
            logger.info("jump_rejected", name=self._name, reason="no_action_points")
            raise InvalidArgumentError(f"{self._name} has no action points left to jump")
        if self._orientation > math.pi:
            logger.info(
                "jump_rejected",
                name=self._name,
                reason="facing_down",
                orientation=self._orientation,
            )
            raise BadOrientationError("Worms cannot tunnel!")

        displacement = self.jump_displacement()
        self._set_action_points(0)
        self._x += displacement

        logger.debug(
            "worm_jumped",
            name=self._name,
            displacement=displacement,
            x=self._x,
        )

    def jump_time(self) -> float:
        """Duration of a jump from the current state, in seconds.

        Raises:
            BadOrientationError: The worm faces downward (orientation > π).
        """
        if self._orientation > math.pi:
            raise BadOrientationError(
                f"{self._name} faces downward (orientation {self._orientation!r})"
            )
        return self.jump_distance() / (self.initial_velocity() * math.cos(self._orientation))

    def jump_step(self, time: float) -> tuple[float, float]:
        """Position of the worm the given time after the start of a jump.

        Does not change the worm.

        Args:
            time: Seconds since take-off, in [0, jump_time()].

        Returns:
            (x, y) on the jump's trajectory.

        Raises:
            PreconditionViolationError: The worm has no action points or the
                time lies outside the jump, and preconditions are checked.
        """
        self._require(
            self._action_points > 0,
            f"{self._name} has no action points left to jump",
        )
        self._require(time >= 0, f"jump time {time!r} is negative")
        if self._orientation <= math.pi:
            self._require(
                time <= self.jump_time(),
                f"jump time {time!r} exceeds the duration of the jump",
            )

        if self._action_points == 0:
            return self._x, self._y
        if self._orientation > math.pi:
            time = 0.0

        velocity = self.initial_velocity()
        vx = velocity * math.cos(self._orientation)
        vy = velocity * math.sin(self._orientation)
        return (
            self._x + vx * time,
            self._y + vy * time - 0.5 * self.STANDARD_ACCELERATION * time ** 2,
        )

    # ------------------------------------------------------------------

    def _require(self, condition: bool, message: str) -> None:
        """Enforce a caller precondition.

        Raises PreconditionViolationError when checks are enabled, falls
        back to a debug assertion otherwise.
        """
        if self._check_preconditions:
            if not condition:
                logger.info("precondition_violated", message=message)
                raise PreconditionViolationError(message)
        else:
            assert condition, f"Precondition: {message}"
