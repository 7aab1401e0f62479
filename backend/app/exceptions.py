class NullArgumentError(ValueError):
    """A required argument was None (or empty) and no database call was attempted."""
