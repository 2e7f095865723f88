"""Per-page UI state: focused windows, selections and scroll offsets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, TypeVar, Union

from tunedeck.line_input import LineInput
from tunedeck.model import Category, ContextId, ItemType, TracksId


@dataclass
class SelectionState:
    """Selected row of a list or table window."""

    selected: Optional[int] = None

    def select(self, index: Optional[int]) -> None:
        self.selected = index

    def adjust(self, length: int) -> None:
        """Clamp the selection to a window of ``length`` items."""
        if self.selected is not None:
            if self.selected >= length:
                self.selected = length - 1 if length > 0 else 0
        elif length > 0:
            self.selected = 0


@dataclass
class ScrollState:
    """Scroll offset of a scrollable window."""

    offset: int = 0

    def select(self, index: int) -> None:
        self.offset = index

    @property
    def selected(self) -> int:
        return self.offset


WindowState = Union[SelectionState, ScrollState]


class PageType(enum.Enum):
    LIBRARY = "library"
    CONTEXT = "context"
    SEARCH = "search"
    BROWSE = "browse"
    QUEUE = "queue"
    COMMAND_HELP = "command_help"


_E = TypeVar("_E", bound=enum.Enum)


def _shift(member: _E, step: int) -> _E:
    """Member ``step`` places away from ``member``, cycling in definition order."""
    members = list(type(member))
    return members[(members.index(member) + step) % len(members)]


class LibraryFocusState(enum.Enum):
    PLAYLISTS = 0
    SAVED_ALBUMS = 1
    FOLLOWED_ARTISTS = 2

    def next(self) -> "LibraryFocusState":
        return _shift(self, 1)

    def previous(self) -> "LibraryFocusState":
        return _shift(self, -1)


class ArtistFocusState(enum.Enum):
    TOP_TRACKS = 0
    ALBUMS = 1
    RELATED_ARTISTS = 2

    def next(self) -> "ArtistFocusState":
        return _shift(self, 1)

    def previous(self) -> "ArtistFocusState":
        return _shift(self, -1)


class SearchFocusState(enum.Enum):
    INPUT = 0
    TRACKS = 1
    ALBUMS = 2
    ARTISTS = 3
    PLAYLISTS = 4

    def next(self) -> "SearchFocusState":
        return _shift(self, 1)

    def previous(self) -> "SearchFocusState":
        return _shift(self, -1)


@dataclass
class LibraryPageUIState:
    playlist_list: SelectionState = field(default_factory=SelectionState)
    saved_album_list: SelectionState = field(default_factory=SelectionState)
    followed_artist_list: SelectionState = field(default_factory=SelectionState)
    focus: LibraryFocusState = LibraryFocusState.PLAYLISTS
    playlist_folder_id: int = 0


@dataclass
class SearchPageUIState:
    track_list: SelectionState = field(default_factory=SelectionState)
    album_list: SelectionState = field(default_factory=SelectionState)
    artist_list: SelectionState = field(default_factory=SelectionState)
    playlist_list: SelectionState = field(default_factory=SelectionState)
    focus: SearchFocusState = SearchFocusState.INPUT


@dataclass(frozen=True)
class CurrentPlaying:
    """A context page showing whatever is being played."""


@dataclass(frozen=True)
class Browsing:
    """A context page showing a specific context."""

    context_id: ContextId


ContextPageType = Union[CurrentPlaying, Browsing]

_KIND_TITLES = {
    ItemType.PLAYLIST: "Playlist",
    ItemType.ALBUM: "Album",
    ItemType.ARTIST: "Artist",
}


def context_page_title(page_type: ContextPageType) -> str:
    """Title shown on a context page."""
    if isinstance(page_type, CurrentPlaying):
        return "Current Playing"
    context_id = page_type.context_id
    if isinstance(context_id, TracksId):
        return context_id.kind
    try:
        return _KIND_TITLES[context_id.kind]
    except KeyError:
        raise ValueError(f"not a context id: {context_id!r}") from None


@dataclass
class PlaylistPageUIState:
    track_table: SelectionState = field(default_factory=SelectionState)


@dataclass
class AlbumPageUIState:
    track_table: SelectionState = field(default_factory=SelectionState)


@dataclass
class ArtistPageUIState:
    top_track_table: SelectionState = field(default_factory=SelectionState)
    album_table: SelectionState = field(default_factory=SelectionState)
    related_artist_list: SelectionState = field(default_factory=SelectionState)
    focus: ArtistFocusState = ArtistFocusState.TOP_TRACKS


@dataclass
class TracksPageUIState:
    track_table: SelectionState = field(default_factory=SelectionState)


ContextPageUIState = Union[
    PlaylistPageUIState, AlbumPageUIState, ArtistPageUIState, TracksPageUIState
]


@dataclass
class CategoryListUIState:
    state: SelectionState = field(default_factory=SelectionState)


@dataclass
class CategoryPlaylistListUIState:
    category: Category
    state: SelectionState = field(default_factory=SelectionState)


BrowsePageUIState = Union[CategoryListUIState, CategoryPlaylistListUIState]


@dataclass
class LibraryPage:
    state: LibraryPageUIState = field(default_factory=LibraryPageUIState)


@dataclass
class ContextPage:
    id: Optional[ContextId]
    context_page_type: ContextPageType
    state: Optional[ContextPageUIState] = None


@dataclass
class SearchPage:
    line_input: LineInput = field(default_factory=LineInput)
    current_query: str = ""
    state: SearchPageUIState = field(default_factory=SearchPageUIState)


@dataclass
class BrowsePage:
    state: BrowsePageUIState = field(default_factory=CategoryListUIState)


@dataclass
class QueuePage:
    scroll_offset: ScrollState = field(default_factory=ScrollState)


@dataclass
class CommandHelpPage:
    scroll_offset: ScrollState = field(default_factory=ScrollState)


PageState = Union[LibraryPage, ContextPage, SearchPage, BrowsePage, QueuePage, CommandHelpPage]

_PAGE_TYPES = {
    LibraryPage: PageType.LIBRARY,
    ContextPage: PageType.CONTEXT,
    SearchPage: PageType.SEARCH,
    BrowsePage: PageType.BROWSE,
    QueuePage: PageType.QUEUE,
    CommandHelpPage: PageType.COMMAND_HELP,
}


def page_type(page: PageState) -> PageType:
    try:
        return _PAGE_TYPES[type(page)]
    except KeyError:
        raise TypeError(f"not a page: {page!r}") from None


def focus_window_state(page: PageState) -> Optional[WindowState]:
    """State of the currently focused window of the page, if any."""
    if isinstance(page, LibraryPage):
        state = page.state
        return {
            LibraryFocusState.PLAYLISTS: state.playlist_list,
            LibraryFocusState.SAVED_ALBUMS: state.saved_album_list,
            LibraryFocusState.FOLLOWED_ARTISTS: state.followed_artist_list,
        }[state.focus]
    if isinstance(page, SearchPage):
        state = page.state
        return {
            SearchFocusState.INPUT: None,
            SearchFocusState.TRACKS: state.track_list,
            SearchFocusState.ALBUMS: state.album_list,
            SearchFocusState.ARTISTS: state.artist_list,
            SearchFocusState.PLAYLISTS: state.playlist_list,
        }[state.focus]
    if isinstance(page, ContextPage):
        state = page.state
        if state is None:
            return None
        if isinstance(state, ArtistPageUIState):
            return {
                ArtistFocusState.TOP_TRACKS: state.top_track_table,
                ArtistFocusState.ALBUMS: state.album_table,
                ArtistFocusState.RELATED_ARTISTS: state.related_artist_list,
            }[state.focus]
        return state.track_table
    if isinstance(page, BrowsePage):
        return page.state.state
    if isinstance(page, (QueuePage, CommandHelpPage)):
        return page.scroll_offset
    raise TypeError(f"not a page: {page!r}")


def select(page: PageState, index: int) -> None:
    """Select the ``index``-th item in the page's focused window."""
    state = focus_window_state(page)
    if state is not None:
        state.select(index)


def selected(page: PageState) -> Optional[int]:
    """Selected position in the page's focused window."""
    state = focus_window_state(page)
    return None if state is None else state.selected


def _move_focus(page: PageState, forward: bool) -> None:
    holder: object = None
    if isinstance(page, (SearchPage, LibraryPage)):
        holder = page.state
    elif isinstance(page, ContextPage) and isinstance(page.state, ArtistPageUIState):
        holder = page.state
    if holder is not None:
        focus = holder.focus
        holder.focus = focus.next() if forward else focus.previous()
    select(page, 0)


def focus_next(page: PageState) -> None:
    """Move focus to the next window and reset its selection."""
    _move_focus(page, True)


def focus_previous(page: PageState) -> None:
    """Move focus to the previous window and reset its selection."""
    _move_focus(page, False)