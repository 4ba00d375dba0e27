#!/usr/bin/env python3
"""
Unit tests for BrowseApi.
Each resource is checked for the path, query, model and unwrap key it hands to the dispatcher.
"""

import pytest
from datetime import datetime

from spotify_browse.api.base_client import BaseAPIClient, HttpError
from spotify_browse.api.browse import BrowseApi, RECOMMENDATIONS
from spotify_browse.models.browse import (
    Category,
    FeaturedPlaylists,
    NewReleases,
    Page,
    Recommendation,
    SimplePlaylist
)
from spotify_browse.models.localization import Country, Locale
from spotify_browse.models.options import CategoryOptions, FeaturedPlaylistsOptions, RecommendationOptions
from spotify_browse.utils.query_encoder import EncodingError, Range

class TestBrowseApi:
    """Unit tests for BrowseApi against a mocked dispatcher."""

    @pytest.mark.asyncio
    async def test_featured_playlists_defaults(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.featured_playlists()

        mock_dispatcher.get_with_token.assert_called_once_with(
            "browse/featured-playlists",
            [("limit", "20"), ("offset", "0")],
            model=FeaturedPlaylists
        )

    @pytest.mark.asyncio
    async def test_featured_playlists_with_options(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)
        options = FeaturedPlaylistsOptions(
            locale=Locale("sv", "SE"),
            country=Country.SE,
            timestamp=datetime(2014, 10, 23, 9, 0)
        )

        await api.featured_playlists(options)

        _, query = mock_dispatcher.get_with_token.call_args.args
        assert query == [
            ("locale", "sv_SE"),
            ("country", "SE"),
            ("timestamp", "2014-10-23T09:00:00"),
            ("limit", "20"),
            ("offset", "0")
        ]

    @pytest.mark.asyncio
    async def test_keyword_overrides_build_options(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.new_releases(country=Country.US, limit=5, offset=10)

        mock_dispatcher.get_with_token.assert_called_once_with(
            "browse/new-releases",
            [("country", "US"), ("limit", "5"), ("offset", "10")],
            model=NewReleases
        )

    @pytest.mark.asyncio
    async def test_options_and_overrides_are_exclusive(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        with pytest.raises(TypeError):
            await api.category("dining", CategoryOptions(), country=Country.US)

        mock_dispatcher.get_with_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_category(self, mock_dispatcher, category_payload):
        mock_dispatcher.get_with_token.return_value = Category.model_validate(category_payload)
        api = BrowseApi(mock_dispatcher)

        result = await api.category("dining", CategoryOptions(country=Country.US, locale=None))

        mock_dispatcher.get_with_token.assert_called_once_with(
            "browse/categories/dining",
            [("country", "US")],
            model=Category
        )
        assert isinstance(result, Category)
        assert result.id == "dinner"

    @pytest.mark.asyncio
    async def test_category_id_is_quoted(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.category("hip hop/rap")

        path = mock_dispatcher.get_with_token.call_args.args[0]
        assert path == "browse/categories/hip%20hop%2Frap"

    @pytest.mark.asyncio
    async def test_empty_category_id_rejected(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        with pytest.raises(ValueError, match="category_id"):
            await api.category_playlists("")

        mock_dispatcher.get_with_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_categories_unwraps_envelope(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.categories(country=Country.US, locale="es_MX", limit=2)

        mock_dispatcher.get_with_token.assert_called_once_with(
            "browse/categories",
            [("country", "US"), ("locale", "es_MX"), ("limit", "2"), ("offset", "0")],
            model=Page[Category],
            unwrap_key="categories"
        )

    @pytest.mark.asyncio
    async def test_category_playlists_unwraps_envelope(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.category_playlists("party", country=Country.BR, offset=40)

        mock_dispatcher.get_with_token.assert_called_once_with(
            "browse/categories/party/playlists",
            [("country", "BR"), ("limit", "20"), ("offset", "40")],
            model=Page[SimplePlaylist],
            unwrap_key="playlists"
        )

    @pytest.mark.asyncio
    async def test_recommendations(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.recommendations(
            limit=10,
            seed_genres=["pop"],
            danceability_range=(0.4, None, 0.8)
        )

        mock_dispatcher.get_with_token.assert_called_once_with(
            RECOMMENDATIONS,
            [
                ("limit", "10"),
                ("seed_genres", "pop"),
                ("min_danceability", "0.4"),
                ("max_danceability", "0.8")
            ],
            model=Recommendation
        )

    @pytest.mark.asyncio
    async def test_recommendations_custom_path(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher, recommendations_path="recommendations")

        await api.recommendations(RecommendationOptions(seed_tracks=["4NHQUGzhtTLFvgF5SZesLK"]))

        path, query = mock_dispatcher.get_with_token.call_args.args
        assert path == "recommendations"
        assert query == [("limit", "20"), ("seed_tracks", "4NHQUGzhtTLFvgF5SZesLK")]

    @pytest.mark.asyncio
    async def test_recommendations_default_path(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        await api.recommendations(seed_genres=["pop"])

        path, _ = mock_dispatcher.get_with_token.call_args.args
        assert path == "browse/recommendations"

    @pytest.mark.asyncio
    async def test_encoding_error_raised_before_dispatch(self, mock_dispatcher):
        api = BrowseApi(mock_dispatcher)

        with pytest.raises(EncodingError):
            await api.recommendations(energy_range=Range(target=float("nan")))

        mock_dispatcher.get_with_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_dispatcher_errors_propagate(self, mock_dispatcher):
        mock_dispatcher.get_with_token.side_effect = HttpError(404, '{"error": "not found"}')
        api = BrowseApi(mock_dispatcher)

        with pytest.raises(HttpError) as exc_info:
            await api.category("missing")

        assert exc_info.value.status == 404
        mock_dispatcher.get_with_token.assert_called_once()

    @pytest.mark.asyncio
    async def test_category_end_to_end_decoding(self, category_payload):
        """The dispatcher's decode step turns the body into a Category."""

        class StubClient(BaseAPIClient):
            def __init__(self):
                super().__init__(base_url="https://api.spotify.com/v1")
                self.requests = []

            async def authenticate(self):
                return "token"

            async def _fetch_json(self, path, query):
                self.requests.append((self.build_url(path), query))
                return category_payload

        client = StubClient()
        api = BrowseApi(client)

        result = await api.category("dining", country=Country.US)

        assert client.requests == [("https://api.spotify.com/v1/browse/categories/dining", [("country", "US")])]
        assert result == Category.model_validate(category_payload)
