import math
import re
from dataclasses import dataclass
from typing import Mapping, Optional

# leading decimal number, read the way a lenient float parser would ("5.5 hrs" -> 5.5)
_LEADING_NUMBER = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


@dataclass(frozen=True)
class LookupResult:
    name: str
    offset: str

    def as_dict(self) -> dict:
        return {"name": self.name, "offset": self.offset}


def _text(value) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _number(value) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        v = float(value)
    except OverflowError:
        return None
    return v if math.isfinite(v) else None


@dataclass(frozen=True)
class TimezoneProperties:
    """
    The metadata fields we understand, pulled out of a feature's properties.
    A field of the wrong type (or an empty string) is treated as absent.
    """
    utc_format: Optional[str] = None
    time_zone: Optional[str] = None
    zone: Optional[float] = None
    name: Optional[str] = None
    tz_name1st: Optional[str] = None
    places: Optional[str] = None

    @classmethod
    def from_mapping(cls, props: Mapping) -> "TimezoneProperties":
        return cls(
            utc_format=_text(props.get("utc_format")),
            time_zone=_text(props.get("time_zone")),
            zone=_number(props.get("zone")),
            name=_text(props.get("name")),
            tz_name1st=_text(props.get("tz_name1st")),
            places=_text(props.get("places")),
        )


def format_offset(hours: float) -> str:
    """
    Fractional hours -> "UTC±HH:MM".

    >>> format_offset(-9.5)
    'UTC-09:30'
    """
    sign = "-" if hours < 0 else "+"
    v = abs(hours)
    whole = math.floor(v)
    minutes = math.floor((v - whole) * 60 + 0.5)  # half-up, not banker's rounding
    return f"UTC{sign}{whole:02d}:{minutes:02d}"


def numeric_name(name: Optional[str]) -> Optional[float]:
    """Offset hours encoded in a bare numeric name ("-5", "5.5"), if any."""
    if not name or name.upper().startswith("UTC"):
        return None
    m = _LEADING_NUMBER.match(name)
    if not m:
        return None
    v = float(m.group(1))
    return v if math.isfinite(v) else None


def resolve_offset(tp: TimezoneProperties) -> Optional[str]:
    if tp.utc_format:
        return tp.utc_format
    if tp.time_zone:
        return tp.time_zone
    if tp.zone is not None:
        return format_offset(tp.zone)
    v = numeric_name(tp.name)
    if v is not None:
        return format_offset(v)
    return None


def resolve_name(tp: TimezoneProperties, offset: str) -> str:
    return tp.tz_name1st or tp.places or tp.name or offset


def resolve(props: Mapping) -> Optional[LookupResult]:
    """
    (name, offset) for a feature's properties, or None when no offset can be
    derived and the feature should be passed over.
    """
    tp = TimezoneProperties.from_mapping(props)
    offset = resolve_offset(tp)
    if offset is None:
        return None
    return LookupResult(resolve_name(tp, offset), offset)
