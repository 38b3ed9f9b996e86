class PhysicsError(ValueError):
    """Base class for domain errors raised by the model."""


class InvalidParameter(PhysicsError):
    """A mass, radius or slider value outside the model's domain."""


class NoStableOrbit(PhysicsError):
    """No circular orbit exists for the requested angular momentum."""


class TemporalSingularity(PhysicsError):
    """The inspiral was evaluated at or after coalescence (t <= 0)."""
