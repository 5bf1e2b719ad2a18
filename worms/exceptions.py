"""Error hierarchy for the worms model."""

from __future__ import annotations


class WormError(Exception):
    """Base class for every failure raised by the worm model."""


class InvalidArgumentError(WormError, ValueError):
    """An argument is not acceptable for the requested operation.

    Raised for invalid names and radii, for moves the worm cannot
    afford, and for jumping without action points. The worm is left
    untouched.
    """


class BadOrientationError(WormError):
    """The worm faces downward (orientation > π) and cannot jump."""


class PreconditionViolationError(InvalidArgumentError):
    """A caller precondition does not hold.

    Covers construction with an orientation outside [0, 2π), turning
    by an angle the worm cannot afford, and asking for a jump step with
    no action points or outside the jump's duration.
    """


class ModelError(Exception):
    """Single error kind exposed by the Facade.

    Always raised ``from`` the underlying WormError, so ``__cause__``
    holds the original failure.
    """
