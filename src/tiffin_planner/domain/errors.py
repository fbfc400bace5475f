"""Domain errors raised by planner services and adapters."""


class PlannerError(Exception):
    """Base class for planner errors."""


class ValidationError(PlannerError):
    """Client input was rejected."""

    def __init__(
        self, message: str, day: str | None = None, slot: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.day = day
        self.slot = slot


class AuthenticationError(PlannerError):
    """Credentials or token could not be verified."""


class ConflictError(PlannerError):
    """A write collided with an existing unique key."""


class StorageError(PlannerError):
    """The persistence store failed or returned no data."""
