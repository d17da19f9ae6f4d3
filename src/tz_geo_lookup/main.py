import json
import logging
import sys

from .errors import DataLoadError, ValidationError
from .lookup import DEFAULT_GEOJSON, TimezoneLookup

USAGE = "Usage: tz-lookup [-v] <lat> <lon> [geojson path or URL]"


def run(lat: float, lon: float, source: str = DEFAULT_GEOJSON) -> dict:
    tz = TimezoneLookup()
    tz.initialize(source)
    result = tz.lookup(lat, lon)
    if result is None:
        raise SystemExit(f"No timezone found at lat={lat}, lon={lon}")
    out = {"lat": lat, "lon": lon, **result.as_dict()}
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return out


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    verbose = "-v" in argv or "--verbose" in argv
    argv = [a for a in argv if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s tz-lookup %(levelname)s %(message)s",
    )

    if len(argv) not in (2, 3):
        raise SystemExit(USAGE)
    try:
        lat, lon = float(argv[0]), float(argv[1])
    except ValueError:
        raise SystemExit(USAGE)

    try:
        run(lat, lon, *argv[2:])
    except ValidationError as e:
        raise SystemExit(f"Invalid coordinates: {e}")
    except DataLoadError as e:
        raise SystemExit(f"Could not load timezone data: {e}")


if __name__ == "__main__":
    main()
