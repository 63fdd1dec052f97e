class InvalidConfiguration(ValueError):
    """Raised when a wheel is set up with values it can never spin with.

    Covers empty segment lists, weight vectors that don't match the
    segment count, negative or non-finite weights and non-positive turn
    counts.
    """
