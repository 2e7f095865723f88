"""Popup UI state: list popups, search and playlist creation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from tunedeck.line_input import LineInput
from tunedeck.model import Album, Artist, Playlist, SpotifyId, Track
from tunedeck.page_state import SelectionState


class PlaylistCreateField(enum.Enum):
    """Which field of the playlist-creation popup has focus."""

    NAME = "name"
    DESC = "desc"


class ArtistPopupAction(enum.Enum):
    """What choosing an artist in an artist popup does."""

    BROWSE = "browse"
    SHOW_ACTIONS = "show_actions"


@dataclass(frozen=True)
class BrowsePlaylists:
    """Browse the user's playlists inside a folder."""

    folder_id: int


@dataclass(frozen=True)
class AddTrackToPlaylist:
    """Pick a playlist inside a folder to add a track to."""

    folder_id: int
    track_id: SpotifyId


PlaylistPopupAction = Union[BrowsePlaylists, AddTrackToPlaylist]

ActionItem = Union[Track, Artist, Album, Playlist]


def _action_desc(action: Any) -> str:
    if isinstance(action, enum.Enum):
        return action.name
    return str(action)


@dataclass
class ActionListItem:
    """An item together with the actions that can be applied to it."""

    item: ActionItem
    actions: list[Any] = field(default_factory=list)

    def n_actions(self) -> int:
        return len(self.actions)

    def name(self) -> str:
        return self.item.name

    def actions_desc(self) -> list[str]:
        return [_action_desc(a) for a in self.actions]


@dataclass
class SearchPopup:
    query: str = ""


@dataclass
class UserPlaylistListPopup:
    action: PlaylistPopupAction
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class UserFollowedArtistListPopup:
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class UserSavedAlbumListPopup:
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class DeviceListPopup:
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class ArtistListPopup:
    action: ArtistPopupAction
    artists: list[Artist] = field(default_factory=list)
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class ThemeListPopup:
    themes: list[Any] = field(default_factory=list)
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class ActionListPopup:
    item: ActionListItem
    list_state: SelectionState = field(default_factory=SelectionState)


@dataclass
class PlaylistCreatePopup:
    name: LineInput = field(default_factory=LineInput)
    desc: LineInput = field(default_factory=LineInput)
    current_field: PlaylistCreateField = PlaylistCreateField.NAME


PopupState = Union[
    SearchPopup,
    UserPlaylistListPopup,
    UserFollowedArtistListPopup,
    UserSavedAlbumListPopup,
    DeviceListPopup,
    ArtistListPopup,
    ThemeListPopup,
    ActionListPopup,
    PlaylistCreatePopup,
]


def list_state(popup: PopupState) -> Optional[SelectionState]:
    """The list selection of a list popup; ``None`` for other popups."""
    if isinstance(popup, (SearchPopup, PlaylistCreatePopup)):
        return None
    return popup.list_state


def list_selected(popup: PopupState) -> Optional[int]:
    """Selected position of a list popup."""
    state = list_state(popup)
    return None if state is None else state.selected


def list_select(popup: PopupState, index: Optional[int]) -> None:
    """Select a position in a list popup; other popups are left alone."""
    state = list_state(popup)
    if state is not None:
        state.select(index)