class TimezoneLookupError(Exception):
    """Base class for errors raised by the timezone lookup."""


class ValidationError(TimezoneLookupError, ValueError):
    """Latitude/longitude missing, non-numeric, NaN or out of range."""


class NotInitializedError(TimezoneLookupError, RuntimeError):
    """lookup() called before initialize() succeeded."""


class DataLoadError(TimezoneLookupError):
    """The timezone dataset could not be fetched, parsed, or has the wrong shape."""
