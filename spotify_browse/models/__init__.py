"""Data models for the browse client."""

from .localization import Country, Locale, parse_country
from .browse import (
    Category,
    FeaturedPlaylists,
    Image,
    NewReleases,
    Page,
    Recommendation,
    RecommendationSeed,
    SimpleAlbum,
    SimpleArtist,
    SimplePlaylist,
    SimpleTrack
)

__all__ = [
    'Country',
    'Locale',
    'parse_country',
    'Category',
    'FeaturedPlaylists',
    'Image',
    'NewReleases',
    'Page',
    'Recommendation',
    'RecommendationSeed',
    'SimpleAlbum',
    'SimpleArtist',
    'SimplePlaylist',
    'SimpleTrack'
]
