"""Data model of tracks, albums, artists, playlists and playback contexts."""

from __future__ import annotations

import enum
import html
import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional, Union

from tunedeck.utils import map_join


class ItemType(enum.Enum):
    """Kind of item a Spotify ID refers to."""

    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    USER = "user"


@dataclass(frozen=True)
class SpotifyId:
    """A typed Spotify identifier."""

    kind: ItemType
    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("empty Spotify id")
        if self.kind is not ItemType.USER and not (self.id.isascii() and self.id.isalnum()):
            raise ValueError(f"invalid {self.kind.value} id: {self.id!r}")

    @classmethod
    def from_uri(cls, uri: str) -> "SpotifyId":
        """Parse a ``spotify:{type}:{id}`` URI."""
        parts = uri.split(":")
        if len(parts) != 3 or parts[0] != "spotify":
            raise ValueError(f"invalid Spotify URI: {uri!r}")
        try:
            kind = ItemType(parts[1])
        except ValueError:
            raise ValueError(f"unknown item type in URI: {uri!r}") from None
        return cls(kind, parts[2])

    def uri(self) -> str:
        return f"spotify:{self.kind.value}:{self.id}"


class AlbumType(enum.Enum):
    ALBUM = "album"
    SINGLE = "single"
    APPEARS_ON = "appears_on"
    COMPILATION = "compilation"


class RepeatState(enum.Enum):
    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"


def _artists_from_simplified(items: list[dict[str, Any]]) -> list["Artist"]:
    return [a for a in (Artist.from_simplified(d) for d in items) if a is not None]


@dataclass
class Artist:
    id: SpotifyId
    name: str

    @classmethod
    def from_simplified(cls, data: dict[str, Any]) -> Optional["Artist"]:
        """Build from an API artist object; ``None`` when it has no id."""
        if data.get("id") is None:
            return None
        return cls(SpotifyId(ItemType.ARTIST, data["id"]), data["name"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id.uri(), "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Artist":
        return cls(SpotifyId.from_uri(data["id"]), data["name"])

    def __str__(self) -> str:
        return self.name


@dataclass
class Album:
    id: SpotifyId
    release_date: str
    name: str
    artists: list[Artist] = field(default_factory=list)
    album_type: Optional[AlbumType] = None

    @classmethod
    def from_simplified(cls, data: dict[str, Any]) -> Optional["Album"]:
        """Build from a simplified API album; ``None`` when it has no id."""
        if data.get("id") is None:
            return None
        raw_type = data.get("album_type")
        album_type = None
        if raw_type is not None:
            try:
                album_type = AlbumType(raw_type.lower())
            except ValueError:
                album_type = None
        return cls(
            id=SpotifyId(ItemType.ALBUM, data["id"]),
            release_date=data.get("release_date") or "",
            name=data["name"],
            artists=_artists_from_simplified(data.get("artists", [])),
            album_type=album_type,
        )

    @classmethod
    def from_full(cls, data: dict[str, Any]) -> "Album":
        """Build from a full API album."""
        return cls(
            id=SpotifyId(ItemType.ALBUM, data["id"]),
            release_date=data["release_date"],
            name=data["name"],
            artists=_artists_from_simplified(data.get("artists", [])),
            album_type=AlbumType(data["album_type"].lower()),
        )

    def year(self) -> str:
        return self.release_date.split("-")[0]

    def album_type_name(self) -> str:
        return self.album_type.value if self.album_type is not None else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.uri(),
            "release_date": self.release_date,
            "name": self.name,
            "artists": [a.to_dict() for a in self.artists],
            "album_type": self.album_type.value if self.album_type else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Album":
        raw_type = data.get("album_type")
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            release_date=data["release_date"],
            name=data["name"],
            artists=[Artist.from_dict(a) for a in data.get("artists", [])],
            album_type=AlbumType(raw_type) if raw_type else None,
        )

    def __str__(self) -> str:
        artists = map_join(self.artists, lambda a: a.name, ", ")
        return f"{self.name} • {artists} ({self.year()})"


def _track_id(data: dict[str, Any]) -> Optional[SpotifyId]:
    linked = data.get("linked_from")
    raw = linked["id"] if linked else data.get("id")
    return None if raw is None else SpotifyId(ItemType.TRACK, raw)


@dataclass
class Track:
    id: SpotifyId
    name: str
    artists: list[Artist] = field(default_factory=list)
    album: Optional[Album] = None
    duration: timedelta = timedelta(0)
    explicit: bool = False
    added_at: int = 0

    @classmethod
    def _from_api(cls, data: dict[str, Any], album: Optional[Album]) -> Optional["Track"]:
        if not data.get("is_playable", True):
            return None
        track_id = _track_id(data)
        if track_id is None:
            return None
        return cls(
            id=track_id,
            name=data["name"],
            artists=_artists_from_simplified(data.get("artists", [])),
            album=album,
            duration=timedelta(milliseconds=data.get("duration_ms", 0)),
            explicit=bool(data.get("explicit", False)),
        )

    @classmethod
    def from_simplified(cls, data: dict[str, Any]) -> Optional["Track"]:
        """Build from a simplified API track; ``None`` if unplayable or id-less."""
        return cls._from_api(data, None)

    @classmethod
    def from_full(cls, data: dict[str, Any]) -> Optional["Track"]:
        """Build from a full API track; ``None`` if unplayable or id-less."""
        album_data = data.get("album")
        album = Album.from_simplified(album_data) if album_data else None
        return cls._from_api(data, album)

    def artists_info(self) -> str:
        return map_join(self.artists, lambda a: a.name, ", ")

    def album_info(self) -> str:
        return self.album.name if self.album is not None else ""

    def display_name(self) -> str:
        return f"{self.name} (E)" if self.explicit else self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.uri(),
            "name": self.name,
            "artists": [a.to_dict() for a in self.artists],
            "album": self.album.to_dict() if self.album else None,
            "duration_ms": self.duration // timedelta(milliseconds=1),
            "explicit": self.explicit,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Track":
        album = data.get("album")
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            name=data["name"],
            artists=[Artist.from_dict(a) for a in data.get("artists", [])],
            album=Album.from_dict(album) if album else None,
            duration=timedelta(milliseconds=data["duration_ms"]),
            explicit=data["explicit"],
        )

    def __str__(self) -> str:
        return f"{self.display_name()} • {self.artists_info()} ▎ {self.album_info()}"


_HTML_TAG = re.compile(r"(<.*?>|</.*?>)")


@dataclass
class Playlist:
    id: SpotifyId
    collaborative: bool
    name: str
    owner: tuple[str, SpotifyId]
    desc: str = ""
    current_folder_id: int = 0

    @classmethod
    def _from_api(cls, data: dict[str, Any], desc: str) -> "Playlist":
        owner = data["owner"]
        return cls(
            id=SpotifyId(ItemType.PLAYLIST, data["id"]),
            collaborative=bool(data.get("collaborative", False)),
            name=data["name"],
            owner=(owner.get("display_name") or "", SpotifyId(ItemType.USER, owner["id"])),
            desc=desc,
        )

    @classmethod
    def from_simplified(cls, data: dict[str, Any]) -> "Playlist":
        return cls._from_api(data, "")

    @classmethod
    def from_full(cls, data: dict[str, Any]) -> "Playlist":
        """Build from a full API playlist, stripping HTML from the description."""
        desc = data.get("description") or ""
        return cls._from_api(data, html.unescape(_HTML_TAG.sub("", desc)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.uri(),
            "collaborative": self.collaborative,
            "name": self.name,
            "owner": [self.owner[0], self.owner[1].uri()],
            "desc": self.desc,
            "current_folder_id": self.current_folder_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Playlist":
        owner_name, owner_uri = data["owner"]
        return cls(
            id=SpotifyId.from_uri(data["id"]),
            collaborative=data["collaborative"],
            name=data["name"],
            owner=(owner_name, SpotifyId.from_uri(owner_uri)),
            desc=data["desc"],
            current_folder_id=data.get("current_folder_id", 0),
        )

    def __str__(self) -> str:
        return f"{self.name} • {self.owner[0]}"


@dataclass
class PlaylistFolder:
    """A folder entry in the playlist tree."""

    name: str
    current_id: int
    target_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "current_id": self.current_id, "target_id": self.target_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlaylistFolder":
        return cls(data["name"], data["current_id"], data["target_id"])

    def __str__(self) -> str:
        return f"{self.name}/"


PlaylistFolderItem = Union[Playlist, PlaylistFolder]


def item_to_dict(item: PlaylistFolderItem) -> dict[str, Any]:
    """Serialize a playlist-folder item as a tagged mapping."""
    if isinstance(item, Playlist):
        return {"Playlist": item.to_dict()}
    return {"Folder": item.to_dict()}


def item_from_dict(data: dict[str, Any]) -> PlaylistFolderItem:
    """Inverse of :func:`item_to_dict`."""
    if len(data) != 1:
        raise ValueError("expected exactly one tag in playlist folder item")
    ((tag, body),) = data.items()
    if tag == "Playlist":
        return Playlist.from_dict(body)
    if tag == "Folder":
        return PlaylistFolder.from_dict(body)
    raise ValueError(f"unknown playlist folder item tag: {tag!r}")


@dataclass
class PlaylistFolderNode:
    """A node of an externally produced playlist folder hierarchy."""

    name: Optional[str]
    node_type: str
    uri: str = ""
    children: list["PlaylistFolderNode"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlaylistFolderNode":
        if "type" not in data:
            raise ValueError("playlist folder node is missing 'type'")
        return cls(
            name=data.get("name"),
            node_type=data["type"],
            uri=data.get("uri", ""),
            children=[cls.from_dict(c) for c in data.get("children", [])],
        )


@dataclass
class Category:
    id: str
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Device:
    id: str
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Optional["Device"]:
        """Build from an API device; ``None`` when it has no id."""
        if data.get("id") is None:
            return None
        return cls(data["id"], data["name"])


@dataclass(frozen=True)
class TracksId:
    """Identifier of a plain list of tracks."""

    uri: str
    kind: str


USER_TOP_TRACKS_ID = TracksId("tracks:user-top-tracks", "Top Tracks")
USER_RECENTLY_PLAYED_TRACKS_ID = TracksId(
    "tracks:user-recently-played-tracks", "Recently Played Tracks"
)
USER_LIKED_TRACKS_ID = TracksId("tracks:user-liked-tracks", "Liked Tracks")

ContextId = Union[SpotifyId, TracksId]


def context_uri(context_id: ContextId) -> str:
    """URI of a context id."""
    if isinstance(context_id, TracksId):
        return context_id.uri
    return context_id.uri()


@dataclass
class PlaylistContext:
    playlist: Playlist
    tracks: list[Track] = field(default_factory=list)

    def description(self) -> str:
        return f"{self.playlist.name} | {self.playlist.owner[0]} | {len(self.tracks)} songs"


@dataclass
class AlbumContext:
    album: Album
    tracks: list[Track] = field(default_factory=list)

    def description(self) -> str:
        return f"{self.album.name} | {self.album.release_date} | {len(self.tracks)} songs"


@dataclass
class ArtistContext:
    artist: Artist
    top_tracks: list[Track] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    related_artists: list[Artist] = field(default_factory=list)

    @property
    def tracks(self) -> list[Track]:
        return self.top_tracks

    def description(self) -> str:
        return self.artist.name


@dataclass
class TracksContext:
    tracks: list[Track]
    desc: str

    def description(self) -> str:
        return f"{self.desc} | {len(self.tracks)} songs"


Context = Union[PlaylistContext, AlbumContext, ArtistContext, TracksContext]


class TrackOrder(enum.Enum):
    ADDED_AT = "added_at"
    TRACK_NAME = "track_name"
    ALBUM = "album"
    ARTISTS = "artists"
    DURATION = "duration"

    def _key(self, track: Track) -> Any:
        if self is TrackOrder.ADDED_AT:
            return track.added_at
        if self is TrackOrder.TRACK_NAME:
            return track.name
        if self is TrackOrder.ALBUM:
            return track.album_info()
        if self is TrackOrder.ARTISTS:
            return track.artists_info()
        return track.duration

    def compare(self, x: Track, y: Track) -> int:
        """Return -1, 0 or 1 as ``x`` sorts before, with or after ``y``."""
        a, b = self._key(x), self._key(y)
        return (a > b) - (a < b)


Offset = Union[str, int, None]


@dataclass
class ContextPlayback:
    """Playback of a context, with an optional URI or position offset."""

    context_id: ContextId
    offset: Offset = None

    def uri_offset(self, uri: str, limit: int) -> "ContextPlayback":
        return ContextPlayback(self.context_id, uri)


@dataclass
class UrisPlayback:
    """Playback of an explicit list of tracks, with an optional offset."""

    ids: list[SpotifyId]
    offset: Offset = None

    def uri_offset(self, uri: str, limit: int) -> "UrisPlayback":
        """New playback starting at ``uri``, windowed to at most ``limit`` tracks."""
        if len(self.ids) < limit:
            ids = list(self.ids)
        else:
            pos = next((i for i, tid in enumerate(self.ids) if tid.uri() == uri), 0)
            left = max(pos - limit // 2, 0)
            right = min(left + limit, len(self.ids))
            ids = self.ids[left:right]
        return UrisPlayback(ids, uri)


@dataclass
class PlaybackMetadata:
    device_name: str
    device_id: Optional[str]
    volume: Optional[int]
    is_playing: bool
    repeat_state: RepeatState
    shuffle_state: bool
    mute_state: Optional[int] = None
    fake_track_repeat_state: bool = False


@dataclass
class SearchResults:
    tracks: list[Track] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    playlists: list[Playlist] = field(default_factory=list)