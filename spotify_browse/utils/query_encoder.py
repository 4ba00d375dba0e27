"""
Query string encoding for browse requests.
Turns optional scalars, min/target/max ranges, seed lists and pagination
into ordered (key, value) string pairs. Absent values produce no pairs.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union
from urllib.parse import urlencode

from spotify_browse.models.localization import Locale

T = TypeVar("T")

QueryPair = Tuple[str, str]

RANGE_PREFIXES = ("min_", "target_", "max_")

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0


class EncodingError(ValueError):
    """Exception raised when a parameter value cannot be written to a query string."""
    pass


@dataclass(frozen=True)
class Range(Generic[T]):
    """Min/target/max bounds for a tunable attribute; each bound is optional."""
    min: Optional[T] = None
    target: Optional[T] = None
    max: Optional[T] = None

    @classmethod
    def none(cls) -> "Range":
        return cls()

    def as_tuple(self) -> Tuple[Optional[T], Optional[T], Optional[T]]:
        return (self.min, self.target, self.max)

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.target is None and self.max is None


RangeLike = Union[Range, Tuple[Any, Any, Any], None]


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise EncodingError(f"Cannot encode non-finite number: {value}")

    # repr() gives the shortest round-tripping digits
    return _format_decimal(Decimal(repr(value)))


def _format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        raise EncodingError(f"Cannot encode non-finite number: {value}")

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def to_query_value(value: Any) -> str:
    """
    Render a parameter value the way the Web API expects it.

    Args:
        value: A present (non-None) parameter value

    Returns:
        Canonical string form

    Raises:
        EncodingError: If the value has no query string representation
    """
    if isinstance(value, Enum):
        return to_query_value(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return _format_decimal(value)
    if isinstance(value, Locale):
        return str(value)
    if isinstance(value, datetime):
        return value.replace(tzinfo=None).strftime("%Y-%m-%dT%H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()

    raise EncodingError(f"Unsupported query parameter type: {type(value).__name__}")


def encode_optional(key: str, value: Optional[Any]) -> List[QueryPair]:
    """Encode a single optional parameter: one pair if present, none if absent."""
    if value is None:
        return []
    return [(key, to_query_value(value))]


def encode_range(attr: str, value: RangeLike) -> List[QueryPair]:
    """
    Encode a min/target/max range as up to three ``<prefix><attr>`` pairs.

    Each bound is checked on its own; an all-absent range yields no pairs.
    """
    if value is None:
        return []
    if isinstance(value, Range):
        bounds = value.as_tuple()
    elif isinstance(value, (list, tuple)):
        bounds = tuple(value)
        if len(bounds) != 3:
            raise EncodingError(
                f"Range for {attr} must have exactly 3 bounds (min, target, max), got {len(bounds)}"
            )
    else:
        raise EncodingError(
            f"Range for {attr} must be a Range or a (min, target, max) tuple, got {type(value).__name__}"
        )

    pairs: List[QueryPair] = []
    for prefix, bound in zip(RANGE_PREFIXES, bounds):
        pairs.extend(encode_optional(f"{prefix}{attr}", bound))
    return pairs


def encode_seeds(key: str, seeds: Optional[Sequence[str]]) -> List[QueryPair]:
    """Encode a seed list as one comma-joined pair; blank seeds are dropped and an empty list encodes to nothing."""
    if not seeds:
        return []
    if isinstance(seeds, str):
        seeds = [seeds]

    present = [seed for seed in seeds if seed and seed.strip()]
    if not present:
        return []
    return [(key, ",".join(present))]


def encode_pagination(limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> List[QueryPair]:
    """Encode limit and offset; both are always sent."""
    return [("limit", to_query_value(limit)), ("offset", to_query_value(offset))]


def concat(*parts: Iterable[QueryPair]) -> List[QueryPair]:
    """Join partial encodings in order. Repeated keys are kept as they are."""
    query: List[QueryPair] = []
    for part in parts:
        query.extend(part)
    return query


def to_query_string(query: Iterable[QueryPair]) -> str:
    """URL-encode pairs, preserving order."""
    return urlencode(list(query))
