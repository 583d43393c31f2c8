"""Custom exceptions for MBTA subway queries."""


class MbtaSubwayError(Exception):
    """Base exception for MBTA subway query errors."""

    pass


class FetchError(MbtaSubwayError):
    """Raised when route or stop data cannot be fetched or decoded."""

    pass


class StopNotFoundError(MbtaSubwayError, LookupError):
    """Raised when a stop name is not served by any subway route."""

    def __init__(self, stop_name: str, suggestions: list[str] | None = None):
        self.stop_name = stop_name
        self.suggestions = suggestions or []
        message = f"Stop '{stop_name}' does not exist"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)


class ValidationError(MbtaSubwayError):
    """Raised when input validation fails."""

    pass
