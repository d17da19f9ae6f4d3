import pytest

UNIT_SQUARE = [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]


def polygon(*rings):
    return {"type": "Polygon", "coordinates": list(rings)}


def square(x0, y0, size=1):
    x1, y1 = x0 + size, y0 + size
    return [[x0, y0], [x0, y1], [x1, y1], [x1, y0], [x0, y0]]


def feature(geometry, **props):
    return {"type": "Feature", "geometry": geometry, "properties": props}


def collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture
def unit_square_collection():
    return collection(feature(polygon(UNIT_SQUARE), zone=-5, name="Test"))
