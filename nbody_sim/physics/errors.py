"""Exceptions raised by the physics engine."""


class InvalidBodyError(ValueError):
    """Raised when a body cannot take part in a simulation (bad mass or vectors)."""
