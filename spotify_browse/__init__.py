"""Typed async client for the Spotify Web API browse resources."""

from .api import (
    APIError,
    AuthenticationError,
    BrowseApi,
    DecodeError,
    HttpError,
    ResourceDispatcher,
    SpotifyClient
)
from .models import Country, Locale
from .models.options import (
    CategoriesOptions,
    CategoryOptions,
    CategoryPlaylistsOptions,
    FeaturedPlaylistsOptions,
    NewReleasesOptions,
    RecommendationOptions
)
from .utils import EncodingError, Range

__all__ = [
    'APIError',
    'AuthenticationError',
    'BrowseApi',
    'DecodeError',
    'HttpError',
    'ResourceDispatcher',
    'SpotifyClient',
    'Country',
    'Locale',
    'CategoriesOptions',
    'CategoryOptions',
    'CategoryPlaylistsOptions',
    'FeaturedPlaylistsOptions',
    'NewReleasesOptions',
    'RecommendationOptions',
    'EncodingError',
    'Range'
]

__version__ = "1.0.0"
