"""
Pytest configuration and shared fixtures for the browse client tests.
"""

import pytest

from config.settings import Settings
from unittest.mock import AsyncMock, Mock

from spotify_browse.api.base_client import ResourceDispatcher

@pytest.fixture
def mock_settings():
    """Mock settings for testing."""
    settings = Mock(spec=Settings)
    settings.spotify = Mock(base_url="https://api.example.test/v1", timeout=5, max_retries=2)
    settings.SPOTIFY_CLIENT_ID = "test_client_id"
    settings.SPOTIFY_CLIENT_SECRET = "test_client_secret"
    settings.SPOTIFY_ACCESS_TOKEN = None
    settings.SPOTIFY_AUTH_URL = "https://accounts.example.test/api/token"
    settings.log_level = "DEBUG"
    settings.log_format = "%(levelname)s %(message)s"
    return settings

@pytest.fixture
def mock_dispatcher():
    """Dispatcher double that records calls instead of touching the network."""
    dispatcher = AsyncMock(spec=ResourceDispatcher)
    dispatcher.get_with_token.return_value = None
    return dispatcher

@pytest.fixture
def category_payload():
    """Body of GET /browse/categories/dinner."""
    return {
        "href": "https://api.spotify.com/v1/browse/categories/dinner",
        "icons": [{"url": "https://t.scdn.co/images/dinner.jpg", "height": 274, "width": 274}],
        "id": "dinner",
        "name": "Dinner"
    }

@pytest.fixture
def playlist_payload():
    """A simplified playlist object."""
    return {
        "id": "37i9dQZF1DX4dyzvuaRJ0n",
        "name": "mint",
        "description": "The world's biggest dance hits.",
        "collaborative": False,
        "public": True,
        "owner": {"id": "spotify", "display_name": "Spotify"},
        "images": [{"url": "https://i.scdn.co/image/mint.jpg"}],
        "snapshot_id": "MTY4",
        "tracks": {"href": "https://api.spotify.com/v1/playlists/37i9dQZF1DX4dyzvuaRJ0n/tracks", "total": 75},
        "uri": "spotify:playlist:37i9dQZF1DX4dyzvuaRJ0n",
        "external_urls": {"spotify": "https://open.spotify.com/playlist/37i9dQZF1DX4dyzvuaRJ0n"}
    }

@pytest.fixture
def categories_envelope(category_payload):
    """Body of GET /browse/categories, with the page under "categories"."""
    return {
        "categories": {
            "href": "https://api.spotify.com/v1/browse/categories?offset=0&limit=20",
            "items": [category_payload],
            "limit": 20,
            "next": "https://api.spotify.com/v1/browse/categories?offset=20&limit=20",
            "offset": 0,
            "previous": None,
            "total": 52
        }
    }

@pytest.fixture
def recommendation_payload():
    """Body of a recommendations response."""
    return {
        "seeds": [
            {
                "id": "pop",
                "type": "GENRE",
                "href": None,
                "initialPoolSize": 500,
                "afterFilteringSize": 380,
                "afterRelinkingSize": 365
            }
        ],
        "tracks": [
            {
                "id": "4NHQUGzhtTLFvgF5SZesLK",
                "name": "Tusen Tankar",
                "artists": [{"id": "0oSGxfWSnnOXhD2fKuz2Gy", "name": "David Bowie"}],
                "duration_ms": 220000,
                "explicit": False,
                "preview_url": None,
                "uri": "spotify:track:4NHQUGzhtTLFvgF5SZesLK"
            }
        ]
    }
