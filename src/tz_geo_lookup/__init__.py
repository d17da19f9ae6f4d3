"""Resolve latitude/longitude to a timezone name and UTC offset from GeoJSON polygons."""

from .errors import DataLoadError, NotInitializedError, TimezoneLookupError, ValidationError
from .lookup import TimezoneLookup
from .parse import LookupResult

__all__ = [
    "DataLoadError",
    "LookupResult",
    "NotInitializedError",
    "TimezoneLookup",
    "TimezoneLookupError",
    "ValidationError",
]
