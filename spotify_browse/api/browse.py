"""
Browse resources of the Spotify Web API: featured playlists, new releases,
categories, category playlists and recommendations.

Each call encodes its options into an ordered query and issues exactly one
GET through the injected dispatcher.

See https://developer.spotify.com/documentation/web-api/reference/get-featured-playlists
"""

import logging
from typing import Optional
from urllib.parse import quote

from spotify_browse.api.base_client import ResourceDispatcher
from spotify_browse.models.browse import (
    Category,
    FeaturedPlaylists,
    NewReleases,
    Page,
    Recommendation,
    SimplePlaylist,
)
from spotify_browse.models.options import (
    CategoriesOptions,
    CategoryOptions,
    CategoryPlaylistsOptions,
    FeaturedPlaylistsOptions,
    NewReleasesOptions,
    RecommendationOptions,
)

logger = logging.getLogger(__name__)

BROWSE = "browse"
FEATURED_PLAYLISTS = f"{BROWSE}/featured-playlists"
NEW_RELEASES = f"{BROWSE}/new-releases"
CATEGORIES = f"{BROWSE}/categories"
RECOMMENDATIONS = f"{BROWSE}/recommendations"


def _options(options, options_cls, overrides):
    if options is not None and overrides:
        raise TypeError(f"Pass either a {options_cls.__name__} or keyword arguments, not both")
    return options if options is not None else options_cls(**overrides)


def _category_path(category_id: str) -> str:
    if not category_id:
        raise ValueError("category_id must not be empty")
    return f"{CATEGORIES}/{quote(category_id, safe='')}"


class BrowseApi:
    """Browse endpoints, dispatched through a ``ResourceDispatcher``."""

    def __init__(self, dispatcher: ResourceDispatcher, recommendations_path: str = RECOMMENDATIONS):
        """
        Args:
            dispatcher: Performs the authenticated GETs (e.g. ``SpotifyClient``)
            recommendations_path: Path of the recommendations resource; the
                Web API currently serves it at ``recommendations``
        """
        self.dispatcher = dispatcher
        self.recommendations_path = recommendations_path

    async def featured_playlists(
        self, options: Optional[FeaturedPlaylistsOptions] = None, **overrides
    ) -> FeaturedPlaylists:
        """Get a list of Spotify featured playlists."""
        options = _options(options, FeaturedPlaylistsOptions, overrides)
        return await self.dispatcher.get_with_token(
            FEATURED_PLAYLISTS, options.to_query(), model=FeaturedPlaylists
        )

    async def new_releases(
        self, options: Optional[NewReleasesOptions] = None, **overrides
    ) -> NewReleases:
        """Get a list of new album releases."""
        options = _options(options, NewReleasesOptions, overrides)
        return await self.dispatcher.get_with_token(
            NEW_RELEASES, options.to_query(), model=NewReleases
        )

    async def category(
        self, category_id: str, options: Optional[CategoryOptions] = None, **overrides
    ) -> Category:
        """Get a single category used to tag items in Spotify."""
        path = _category_path(category_id)
        options = _options(options, CategoryOptions, overrides)
        return await self.dispatcher.get_with_token(path, options.to_query(), model=Category)

    async def categories(
        self, options: Optional[CategoriesOptions] = None, **overrides
    ) -> Page[Category]:
        """Get a page of categories."""
        options = _options(options, CategoriesOptions, overrides)
        return await self.dispatcher.get_with_token(
            CATEGORIES, options.to_query(), model=Page[Category], unwrap_key="categories"
        )

    async def category_playlists(
        self, category_id: str, options: Optional[CategoryPlaylistsOptions] = None, **overrides
    ) -> Page[SimplePlaylist]:
        """Get a page of playlists tagged with a category."""
        path = f"{_category_path(category_id)}/playlists"
        options = _options(options, CategoryPlaylistsOptions, overrides)
        return await self.dispatcher.get_with_token(
            path, options.to_query(), model=Page[SimplePlaylist], unwrap_key="playlists"
        )

    async def recommendations(
        self, options: Optional[RecommendationOptions] = None, **overrides
    ) -> Recommendation:
        """
        Get track recommendations from seed artists, genres and tracks.

        Tunable attributes are passed as ``<attr>_range=(min, target, max)``;
        any bound may be None.
        """
        options = _options(options, RecommendationOptions, overrides)
        query = options.to_query()
        logger.debug(f"Requesting recommendations with {len(query)} query parameters")
        return await self.dispatcher.get_with_token(
            self.recommendations_path, query, model=Recommendation
        )
