"""API clients for the Spotify Web API browse resources."""

from .base_client import (
    APIError,
    AuthenticationError,
    BaseAPIClient,
    DecodeError,
    HttpError,
    ResourceDispatcher
)
from .spotify_client import SpotifyClient
from .browse import BrowseApi

__all__ = [
    'APIError',
    'AuthenticationError',
    'BaseAPIClient',
    'DecodeError',
    'HttpError',
    'ResourceDispatcher',
    'SpotifyClient',
    'BrowseApi'
]
