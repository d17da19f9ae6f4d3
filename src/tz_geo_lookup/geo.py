import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from shapely.errors import ShapelyError
from shapely.geometry import Point, shape
from shapely.geometry.base import BaseGeometry

log = logging.getLogger(__name__)

_POLYGONAL = ("Polygon", "MultiPolygon")


@dataclass(frozen=True)
class Feature:
    """One timezone region: a shapely geometry (or None if unusable) plus its raw properties."""
    geometry: Optional[BaseGeometry]
    properties: Optional[Mapping]
    index: int = 0


def make_point(lat: float, lon: float) -> Point:
    return Point(float(lon), float(lat))  # shapely expects (x=lon, y=lat)


def _to_shape(geometry, index: int) -> Optional[BaseGeometry]:
    if not geometry:
        return None
    try:
        geom = shape(geometry)
    except (ShapelyError, ValueError, TypeError, KeyError, IndexError, AttributeError) as e:
        log.debug("feature %d: unusable geometry (%s)", index, e)
        return None
    if geom.geom_type not in _POLYGONAL:
        log.debug("feature %d: %s is not a polygon, skipped", index, geom.geom_type)
        return None
    return geom


def build_features(raw_features: Iterable[Mapping]) -> tuple:
    """
    Turn GeoJSON feature dicts into Feature records, keeping dataset order.
    Features with missing or malformed geometry are kept but never match.
    """
    out = []
    for i, feat in enumerate(raw_features):
        if not isinstance(feat, Mapping):
            out.append(Feature(None, None, i))
            continue
        props = feat.get("properties")
        props = MappingProxyType(dict(props)) if isinstance(props, Mapping) else None
        out.append(Feature(_to_shape(feat.get("geometry"), i), props, i))
    return tuple(out)


def covers(geometry: BaseGeometry, pt: Point) -> bool:
    # boundary-inclusive: a point on an edge or vertex counts as inside
    try:
        return bool(geometry.covers(pt))
    except (ShapelyError, ValueError) as e:
        log.debug("containment test failed, treating as no match (%s)", e)
        return False


def iter_matches(pt: Point, features: Iterable[Feature]) -> Iterator[Feature]:
    """Yield every feature whose geometry covers pt, in dataset order."""
    for feat in features:
        if feat.geometry is None or feat.properties is None:
            continue
        if covers(feat.geometry, pt):
            yield feat


def match(pt: Point, features: Iterable[Feature]) -> Optional[Feature]:
    """First feature containing pt, or None."""
    return next(iter_matches(pt, features), None)
