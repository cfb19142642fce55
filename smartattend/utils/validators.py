import math

from smartattend.exceptions import MissingInput


def require_fields(message: str, *values) -> None:
    """Raise MissingInput unless every value is present and non-empty."""
    if not all(values):
        raise MissingInput(message)


def require_coordinates(message: str, *values) -> None:
    """Coordinates may be 0.0, but not null, NaN or infinite."""
    for value in values:
        if value is None:
            raise MissingInput(message)
        if not math.isfinite(value):
            raise MissingInput("Coordinates must be finite numbers")
