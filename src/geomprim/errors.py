"""Exception raised for violated geometric preconditions."""


class GeometryError(ValueError):
    """Raised when an operation is called with geometrically invalid input.

    Queries without a well-defined answer (parallel lines, a singular
    three-plane system, ...) return ``None`` instead of raising.
    """

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}
