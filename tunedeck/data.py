"""Application data: the user's library, in-memory caches and file caches."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Optional, Union

from cachetools import TTLCache

from tunedeck.model import (
    Album,
    Artist,
    Category,
    Context,
    ContextId,
    Playlist,
    PlaylistFolderItem,
    PlaylistFolderNode,
    SearchResults,
    SpotifyId,
    Track,
    context_uri,
    item_from_dict,
    item_to_dict,
)

logger = logging.getLogger(__name__)

TTL_CACHE_DURATION = timedelta(hours=3)
"""Default time-to-live of in-memory cache entries."""

CACHE_SIZE = 64


class FileCacheKey(enum.Enum):
    """Kinds of data persisted in the cache folder."""

    PLAYLISTS = "Playlists"
    PLAYLIST_FOLDERS = "PlaylistFolders"
    FOLLOWED_ARTISTS = "FollowedArtists"
    SAVED_ALBUMS = "SavedAlbums"
    SAVED_TRACKS = "SavedTracks"

    @property
    def file_name(self) -> str:
        return f"{self.value}_cache.json"


def _node_to_dict(node: PlaylistFolderNode) -> dict[str, Any]:
    return {
        "name": node.name,
        "type": node.node_type,
        "uri": node.uri,
        "children": [_node_to_dict(c) for c in node.children],
    }


_ENCODERS: dict[FileCacheKey, Callable[[Any], Any]] = {
    FileCacheKey.PLAYLISTS: lambda items: [item_to_dict(i) for i in items],
    FileCacheKey.PLAYLIST_FOLDERS: _node_to_dict,
    FileCacheKey.FOLLOWED_ARTISTS: lambda artists: [a.to_dict() for a in artists],
    FileCacheKey.SAVED_ALBUMS: lambda albums: [a.to_dict() for a in albums],
    FileCacheKey.SAVED_TRACKS: lambda tracks: {k: t.to_dict() for k, t in tracks.items()},
}

_DECODERS: dict[FileCacheKey, Callable[[Any], Any]] = {
    FileCacheKey.PLAYLISTS: lambda raw: [item_from_dict(i) for i in raw],
    FileCacheKey.PLAYLIST_FOLDERS: PlaylistFolderNode.from_dict,
    FileCacheKey.FOLLOWED_ARTISTS: lambda raw: [Artist.from_dict(a) for a in raw],
    FileCacheKey.SAVED_ALBUMS: lambda raw: [Album.from_dict(a) for a in raw],
    FileCacheKey.SAVED_TRACKS: lambda raw: {k: Track.from_dict(t) for k, t in raw.items()},
}


def store_data_into_file_cache(
    key: FileCacheKey, cache_folder: Union[str, Path], data: Any
) -> None:
    """Write ``data`` as JSON into the cache file for ``key``."""
    path = Path(cache_folder) / key.file_name
    with path.open("w", encoding="utf-8") as f:
        json.dump(_ENCODERS[key](data), f)


def load_data_from_file_cache(key: FileCacheKey, cache_folder: Union[str, Path]) -> Any:
    """Read the cache file for ``key``; ``None`` if it is missing or unreadable."""
    path = Path(cache_folder) / key.file_name
    if not path.exists():
        return None
    logger.info("Loading %s data from %s...", key.value, path)
    with path.open(encoding="utf-8") as f:
        try:
            data = _DECODERS[key](json.load(f))
        except (ValueError, KeyError, TypeError, AttributeError) as err:
            logger.error("Failed to load %s data: %s", key.value, err)
            return None
    logger.info("Successfully loaded %s data!", key.value)
    return data


def _in_folder(item: PlaylistFolderItem, folder_id: int) -> bool:
    if isinstance(item, Playlist):
        return item.current_folder_id == folder_id
    return item.current_id == folder_id


@dataclass
class UserData:
    """The current user's library."""

    user: Optional[SpotifyId] = None
    playlists: list[PlaylistFolderItem] = field(default_factory=list)
    playlist_folder_node: Optional[PlaylistFolderNode] = None
    followed_artists: list[Artist] = field(default_factory=list)
    saved_albums: list[Album] = field(default_factory=list)
    saved_tracks: dict[str, Track] = field(default_factory=dict)

    @classmethod
    def from_file_caches(cls, cache_folder: Union[str, Path]) -> "UserData":
        """Build user data from whatever file caches exist in ``cache_folder``."""

        def load(key: FileCacheKey, default: Any) -> Any:
            value = load_data_from_file_cache(key, cache_folder)
            return default if value is None else value

        return cls(
            user=None,
            playlists=load(FileCacheKey.PLAYLISTS, []),
            playlist_folder_node=load_data_from_file_cache(
                FileCacheKey.PLAYLIST_FOLDERS, cache_folder
            ),
            followed_artists=load(FileCacheKey.FOLLOWED_ARTISTS, []),
            saved_albums=load(FileCacheKey.SAVED_ALBUMS, []),
            saved_tracks=load(FileCacheKey.SAVED_TRACKS, {}),
        )

    def modifiable_playlist_items(
        self, folder_id: Optional[int] = None
    ) -> list[PlaylistFolderItem]:
        """Items possibly modifiable by the user, optionally limited to one folder."""
        if self.user is None:
            return []
        return [
            item
            for item in self.playlists
            if (folder_id is None or _in_folder(item, folder_id))
            and (
                not isinstance(item, Playlist)
                or item.owner[1] == self.user
                or item.collaborative
            )
        ]

    def folder_playlists_items(self, folder_id: int) -> list[PlaylistFolderItem]:
        """Items that sit directly in the given folder."""
        return [item for item in self.playlists if _in_folder(item, folder_id)]

    def is_liked_track(self, track: Track) -> bool:
        return track.id.uri() in self.saved_tracks


def _ttl_cache() -> TTLCache:
    return TTLCache(maxsize=CACHE_SIZE, ttl=TTL_CACHE_DURATION.total_seconds())


@dataclass
class MemoryCaches:
    """In-memory caches of contexts and search results, keyed by URI or query."""

    context: "TTLCache[str, Context]" = field(default_factory=_ttl_cache)
    search: "TTLCache[str, SearchResults]" = field(default_factory=_ttl_cache)


@dataclass
class BrowseData:
    categories: list[Category] = field(default_factory=list)
    category_playlists: dict[str, list[Playlist]] = field(default_factory=dict)


@dataclass
class AppData:
    """All data held by the application."""

    user_data: UserData = field(default_factory=UserData)
    caches: MemoryCaches = field(default_factory=MemoryCaches)
    browse: BrowseData = field(default_factory=BrowseData)

    @classmethod
    def from_cache_folder(cls, cache_folder: Union[str, Path]) -> "AppData":
        return cls(user_data=UserData.from_file_caches(cache_folder))

    def context_tracks(self, context_id: ContextId) -> Optional[list[Track]]:
        """The (mutable) track list of a cached context, if present."""
        context = self.caches.context.get(context_uri(context_id))
        return None if context is None else context.tracks