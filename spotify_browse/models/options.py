"""
Request options for the browse endpoints.
One dataclass per call, each with documented defaults and a fixed query order.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Union

from spotify_browse.models.localization import Country, Locale, parse_country
from spotify_browse.utils.query_encoder import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    QueryPair,
    Range,
    RangeLike,
    concat,
    encode_optional,
    encode_pagination,
    encode_range,
    encode_seeds,
)

# Order in which tunable attributes are written to the recommendations query
RECOMMENDATION_ATTRIBUTES = (
    "acousticness",
    "danceability",
    "duration_ms",
    "energy",
    "instrumentalness",
    "key",
    "liveness",
    "loudness",
    "mode",
    "popularity",
    "speechiness",
    "tempo",
    "time_signature",
    "valence",
)

CountryLike = Union[Country, str, None]
LocaleLike = Union[Locale, str, None]


def _country(value: CountryLike) -> Optional[Country]:
    return None if value is None else parse_country(value)


def _locale(value: LocaleLike) -> Optional[Locale]:
    return None if value is None else Locale.parse(value)


@dataclass
class FeaturedPlaylistsOptions:
    """
    Parameters for ``GET /browse/featured-playlists``.

    Query order: locale, country, timestamp, limit, offset.
    """
    locale: LocaleLike = None
    country: CountryLike = None
    timestamp: Optional[datetime] = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def __post_init__(self):
        self.locale = _locale(self.locale)
        self.country = _country(self.country)

    def to_query(self) -> List[QueryPair]:
        return concat(
            encode_optional("locale", self.locale),
            encode_optional("country", self.country),
            encode_optional("timestamp", self.timestamp),
            encode_pagination(self.limit, self.offset),
        )


@dataclass
class NewReleasesOptions:
    """Parameters for ``GET /browse/new-releases``. Query order: country, limit, offset."""
    country: CountryLike = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def __post_init__(self):
        self.country = _country(self.country)

    def to_query(self) -> List[QueryPair]:
        return concat(
            encode_optional("country", self.country),
            encode_pagination(self.limit, self.offset),
        )


@dataclass
class CategoryOptions:
    """Parameters for ``GET /browse/categories/{id}``. Query order: country, locale."""
    country: CountryLike = None
    locale: LocaleLike = None

    def __post_init__(self):
        self.country = _country(self.country)
        self.locale = _locale(self.locale)

    def to_query(self) -> List[QueryPair]:
        return concat(
            encode_optional("country", self.country),
            encode_optional("locale", self.locale),
        )


@dataclass
class CategoriesOptions:
    """Parameters for ``GET /browse/categories``. Query order: country, locale, limit, offset."""
    country: CountryLike = None
    locale: LocaleLike = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def __post_init__(self):
        self.country = _country(self.country)
        self.locale = _locale(self.locale)

    def to_query(self) -> List[QueryPair]:
        return concat(
            encode_optional("country", self.country),
            encode_optional("locale", self.locale),
            encode_pagination(self.limit, self.offset),
        )


@dataclass
class CategoryPlaylistsOptions:
    """Parameters for ``GET /browse/categories/{id}/playlists``. Query order: country, limit, offset."""
    country: CountryLike = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def __post_init__(self):
        self.country = _country(self.country)

    def to_query(self) -> List[QueryPair]:
        return concat(
            encode_optional("country", self.country),
            encode_pagination(self.limit, self.offset),
        )


@dataclass
class RecommendationOptions:
    """
    Parameters for the recommendations endpoint.

    Query order: limit, market, seed_artists, seed_genres, seed_tracks, then
    min/target/max bounds for each attribute in ``RECOMMENDATION_ATTRIBUTES``.
    Ranges may be given as ``Range`` objects or ``(min, target, max)`` tuples.

    Spotify caps the combined number of seeds at 5; that limit is left to the
    API to enforce.
    """
    limit: int = DEFAULT_LIMIT
    market: CountryLike = None
    acousticness_range: RangeLike = field(default_factory=Range)
    danceability_range: RangeLike = field(default_factory=Range)
    duration_ms_range: RangeLike = field(default_factory=Range)
    energy_range: RangeLike = field(default_factory=Range)
    instrumentalness_range: RangeLike = field(default_factory=Range)
    key_range: RangeLike = field(default_factory=Range)
    liveness_range: RangeLike = field(default_factory=Range)
    loudness_range: RangeLike = field(default_factory=Range)
    mode_range: RangeLike = field(default_factory=Range)
    popularity_range: RangeLike = field(default_factory=Range)
    speechiness_range: RangeLike = field(default_factory=Range)
    tempo_range: RangeLike = field(default_factory=Range)
    time_signature_range: RangeLike = field(default_factory=Range)
    valence_range: RangeLike = field(default_factory=Range)
    seed_artists: Sequence[str] = ()
    seed_genres: Sequence[str] = ()
    seed_tracks: Sequence[str] = ()

    def __post_init__(self):
        self.market = _country(self.market)

    def to_query(self) -> List[QueryPair]:
        ranges = [
            encode_range(attr, getattr(self, f"{attr}_range"))
            for attr in RECOMMENDATION_ATTRIBUTES
        ]
        return concat(
            encode_optional("limit", self.limit),
            encode_optional("market", self.market),
            encode_seeds("seed_artists", self.seed_artists),
            encode_seeds("seed_genres", self.seed_genres),
            encode_seeds("seed_tracks", self.seed_tracks),
            *ranges,
        )
