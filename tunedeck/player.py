"""Player state: devices, the current playback and the queue."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional

from tunedeck.model import (
    ContextId,
    Device,
    ItemType,
    PlaybackMetadata,
    RepeatState,
    SpotifyId,
    Track,
)
from tunedeck.utils import parse_uri

_CONTEXT_KINDS = {
    "playlist": ItemType.PLAYLIST,
    "album": ItemType.ALBUM,
    "artist": ItemType.ARTIST,
}


@dataclass
class PlaybackContext:
    """The playback reported by the server at a point in time."""

    device_name: str
    device_id: Optional[str]
    volume: Optional[int]
    is_playing: bool
    repeat_state: RepeatState
    shuffle_state: bool
    progress: Optional[timedelta] = None
    item: Any = None
    context_type: Optional[str] = None
    context_uri: Optional[str] = None


@dataclass
class PlayerState:
    """What is known about the player; playback metadata may be buffered."""

    devices: list[Device] = field(default_factory=list)
    playback: Optional[PlaybackContext] = None
    playback_last_updated_time: Optional[float] = None
    buffered_playback: Optional[PlaybackMetadata] = None
    queue: Optional[list[Any]] = None

    def _elapsed(self) -> timedelta:
        if self.playback_last_updated_time is None:
            raise RuntimeError("playback has no last-updated time")
        return timedelta(seconds=max(time.monotonic() - self.playback_last_updated_time, 0.0))

    def current_playback(self) -> Optional[PlaybackContext]:
        """Estimated current playback, with progress advanced and buffered metadata applied."""
        if self.playback is None:
            return None
        playback = dataclasses.replace(self.playback)
        if playback.progress is not None and playback.is_playing:
            playback.progress = playback.progress + self._elapsed()
        buffered = self.buffered_playback
        if buffered is not None:
            playback = dataclasses.replace(
                playback,
                device_name=buffered.device_name,
                device_id=buffered.device_id,
                is_playing=buffered.is_playing,
                volume=buffered.volume,
                repeat_state=buffered.repeat_state,
                shuffle_state=buffered.shuffle_state,
            )
        return playback

    def current_playing_track(self) -> Optional[Track]:
        if self.playback is None or not isinstance(self.playback.item, Track):
            return None
        return self.playback.item

    def playback_progress(self) -> Optional[timedelta]:
        """Estimated playback progress; ``None`` without a playback."""
        playback = self.playback
        if playback is None:
            return None
        if playback.progress is None:
            raise RuntimeError("playback has no progress")
        if playback.is_playing:
            return playback.progress + self._elapsed()
        return playback.progress

    def playing_context_id(self) -> Optional[ContextId]:
        """Id of the playlist, album or artist being played, if any."""
        playback = self.playback
        if playback is None or playback.context_uri is None:
            return None
        kind = _CONTEXT_KINDS.get(playback.context_type or "")
        if kind is None:
            return None
        try:
            context_id = SpotifyId.from_uri(parse_uri(playback.context_uri))
        except ValueError:
            return None
        return context_id if context_id.kind is kind else None