"""
Timezone lookup service: GPS -> (timezone name, UTC offset).

Scans timezone polygons in dataset order; the first polygon that contains the
point *and* carries a usable offset wins. Polygons whose metadata yields no
offset are passed over, so a later overlapping polygon can still answer.
Points exactly on a polygon edge count as inside that polygon.
"""

import logging
import math
import os
from numbers import Real
from typing import Optional

from .errors import DataLoadError, NotInitializedError, ValidationError
from .geo import build_features, iter_matches, make_point
from .parse import LookupResult, resolve
from .source import Source, features_of, load_feature_collection

log = logging.getLogger(__name__)

DEFAULT_GEOJSON = os.environ.get("TZLOOKUP_GEOJSON", "data/timezones.geojson")


def validate_coordinates(lat, lon) -> None:
    for label, value, limit in (("latitude", lat, 90), ("longitude", lon, 180)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(f"{label} must be a number, got {value!r}")
        try:
            v = float(value)
        except OverflowError:
            raise ValidationError(f"{label} is too large")
        if not math.isfinite(v):
            raise ValidationError(f"{label} must be finite, got {value!r}")
        if not -limit <= v <= limit:
            raise ValidationError(f"{label} {value} outside [-{limit}, {limit}]")


class TimezoneLookup:
    def __init__(self):
        self._features = None

    @property
    def is_ready(self) -> bool:
        return self._features is not None

    @property
    def feature_count(self) -> int:
        return len(self._features) if self._features is not None else 0

    def initialize(self, source: Optional[Source] = None) -> None:
        """
        Load the timezone FeatureCollection. Safe to call again: once ready it
        does nothing, and after a DataLoadError it can simply be retried.
        """
        if self.is_ready:
            log.info("TimezoneLookup is already initialized")
            return
        source = DEFAULT_GEOJSON if source is None else source
        where = "<in-memory>" if not isinstance(source, (str, os.PathLike)) else source
        try:
            features = build_features(features_of(load_feature_collection(source)))
        except DataLoadError as e:
            log.error("TimezoneLookup: failed to initialize from %s: %s", where, e)
            raise
        self._features = features
        log.info("TimezoneLookup: initialized with %d features from %s", len(features), where)

    def _candidates(self, lat, lon):
        if not self.is_ready:
            raise NotInitializedError("TimezoneLookup not initialized, call initialize() first")
        validate_coordinates(lat, lon)
        return iter_matches(make_point(lat, lon), self._features)

    def lookup(self, lat, lon) -> Optional[LookupResult]:
        """Timezone name and offset at (lat, lon), or None if no polygon answers."""
        for feat in self._candidates(lat, lon):
            result = resolve(feat.properties)
            if result is not None:
                return result
        return None

    def properties_at(self, lat, lon) -> Optional[dict]:
        """
        Raw properties of the first polygon containing (lat, lon), unresolved.
        Polygons with no properties object never match, so they are not returned here.
        """
        for feat in self._candidates(lat, lon):
            return dict(feat.properties)
        return None
