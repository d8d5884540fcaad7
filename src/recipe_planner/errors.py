"""Application error types."""


class ValidationError(ValueError):
    """User input rejected before any state change."""


class NotFoundError(LookupError):
    """A referenced recipe, item, or slot does not exist."""
