import json
import os
from pathlib import Path
from typing import Mapping, Union

import requests

from .errors import DataLoadError

HTTP_TIMEOUT = float(os.environ.get("TZLOOKUP_HTTP_TIMEOUT", "60"))

Source = Union[str, Path, Mapping]


def load_feature_collection(source: Source) -> Mapping:
    """
    source can be an already-parsed FeatureCollection, a local path
    ('data/timezones.geojson') or an http(s) URL. Returns the parsed JSON.
    """
    if isinstance(source, Mapping):
        return source
    if not isinstance(source, (str, Path)):
        raise DataLoadError(f"unsupported GeoJSON source: {source!r}")
    try:
        if isinstance(source, str) and source.startswith(("http://", "https://")):
            r = requests.get(source, timeout=HTTP_TIMEOUT)
            r.raise_for_status()
            return r.json()
        with open(source, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError, requests.RequestException) as e:
        raise DataLoadError(f"could not load GeoJSON from {source}: {e}") from e


def features_of(collection) -> list:
    if not isinstance(collection, Mapping):
        raise DataLoadError("GeoJSON root is not an object")
    features = collection.get("features")
    if not isinstance(features, list):
        raise DataLoadError("GeoJSON has no 'features' list")
    return features
