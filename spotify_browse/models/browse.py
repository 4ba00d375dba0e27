"""
Response models for the browse endpoints.
Only the fields this client reads are declared; anything else in the payload is ignored.
"""

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class SpotifyModel(BaseModel):
    """Base for all Web API payloads."""
    model_config = ConfigDict(extra="ignore")


class Image(SpotifyModel):
    url: str
    height: Optional[int] = None
    width: Optional[int] = None


class Page(SpotifyModel, Generic[T]):
    """A paginated collection of items plus its pagination metadata."""
    href: Optional[str] = None
    items: List[T] = Field(default_factory=list)
    limit: int = 20
    next: Optional[str] = None
    offset: int = 0
    previous: Optional[str] = None
    total: int = 0

    @property
    def has_next(self) -> bool:
        return self.next is not None


class Category(SpotifyModel):
    id: str
    name: str
    href: Optional[str] = None
    icons: List[Image] = Field(default_factory=list)


class SimpleArtist(SpotifyModel):
    id: str
    name: str
    uri: Optional[str] = None
    external_urls: Dict[str, str] = Field(default_factory=dict)


class SimpleAlbum(SpotifyModel):
    id: str
    name: str
    album_type: Optional[str] = None
    artists: List[SimpleArtist] = Field(default_factory=list)
    available_markets: List[str] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    release_date: Optional[str] = None
    uri: Optional[str] = None
    external_urls: Dict[str, str] = Field(default_factory=dict)


class PlaylistOwner(SpotifyModel):
    id: str
    display_name: Optional[str] = None


class PlaylistTracksRef(SpotifyModel):
    href: Optional[str] = None
    total: int = 0


class SimplePlaylist(SpotifyModel):
    id: str
    name: str
    description: Optional[str] = None
    collaborative: bool = False
    public: Optional[bool] = None
    owner: Optional[PlaylistOwner] = None
    images: List[Image] = Field(default_factory=list)
    snapshot_id: Optional[str] = None
    tracks: Optional[PlaylistTracksRef] = None
    uri: Optional[str] = None
    external_urls: Dict[str, str] = Field(default_factory=dict)


class SimpleTrack(SpotifyModel):
    id: Optional[str] = None  # null for local or unplayable tracks
    name: str
    artists: List[SimpleArtist] = Field(default_factory=list)
    duration_ms: int = 0
    explicit: bool = False
    preview_url: Optional[str] = None
    uri: Optional[str] = None
    external_urls: Dict[str, str] = Field(default_factory=dict)


class FeaturedPlaylists(SpotifyModel):
    message: Optional[str] = None
    playlists: Page[SimplePlaylist]


class NewReleases(SpotifyModel):
    albums: Page[SimpleAlbum]


class RecommendationSeed(SpotifyModel):
    id: str
    type: str
    href: Optional[str] = None
    initialPoolSize: Optional[int] = None
    afterFilteringSize: Optional[int] = None
    afterRelinkingSize: Optional[int] = None


class Recommendation(SpotifyModel):
    seeds: List[RecommendationSeed] = Field(default_factory=list)
    tracks: List[SimpleTrack] = Field(default_factory=list)
