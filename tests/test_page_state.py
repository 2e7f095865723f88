import pytest

from tunedeck.model import Category, ItemType, SpotifyId, TracksId
from tunedeck.page_state import (
    AlbumPageUIState,
    ArtistFocusState,
    ArtistPageUIState,
    BrowsePage,
    Browsing,
    CategoryListUIState,
    CategoryPlaylistListUIState,
    CommandHelpPage,
    ContextPage,
    CurrentPlaying,
    LibraryFocusState,
    LibraryPage,
    PageType,
    PlaylistPageUIState,
    QueuePage,
    ScrollState,
    SearchFocusState,
    SearchPage,
    SelectionState,
    TracksPageUIState,
    context_page_title,
    focus_next,
    focus_previous,
    focus_window_state,
    page_type,
    select,
    selected,
)


def test_adjust_selects_first_when_unselected():
    state = SelectionState()
    state.adjust(4)
    assert state.selected == 0


def test_adjust_leaves_unselected_empty_window():
    state = SelectionState()
    state.adjust(0)
    assert state.selected is None


def test_adjust_clamps_out_of_range():
    length = 3
    state = SelectionState(10)
    state.adjust(length)
    assert state.selected == length - 1


def test_adjust_empty_window_selects_zero():
    state = SelectionState(5)
    state.adjust(0)
    assert state.selected == 0


def test_adjust_keeps_valid_selection():
    state = SelectionState(1)
    state.adjust(3)
    assert state.selected == 1


def test_scroll_state_select():
    state = ScrollState()
    state.select(7)
    assert state.selected == 7
    assert state.offset == 7


@pytest.mark.parametrize("enum_cls", [LibraryFocusState, ArtistFocusState, SearchFocusState])
def test_focus_cycle_round_trip(enum_cls):
    for member in enum_cls:
        assert member.next().previous() is member
        state = member
        for _ in enum_cls:
            state = state.next()
        assert state is member


def test_focus_orders():
    assert LibraryFocusState.PLAYLISTS.next() is LibraryFocusState.SAVED_ALBUMS
    assert LibraryFocusState.FOLLOWED_ARTISTS.next() is LibraryFocusState.PLAYLISTS
    assert ArtistFocusState.TOP_TRACKS.previous() is ArtistFocusState.RELATED_ARTISTS
    assert SearchFocusState.PLAYLISTS.next() is SearchFocusState.INPUT
    assert SearchFocusState.INPUT.next() is SearchFocusState.TRACKS


def test_context_page_titles():
    assert context_page_title(CurrentPlaying()) == "Current Playing"
    assert context_page_title(Browsing(SpotifyId(ItemType.PLAYLIST, "abc"))) == "Playlist"
    assert context_page_title(Browsing(SpotifyId(ItemType.ALBUM, "abc"))) == "Album"
    assert context_page_title(Browsing(SpotifyId(ItemType.ARTIST, "abc"))) == "Artist"
    tracks = TracksId("tracks:user-liked-tracks", "Liked Tracks")
    assert context_page_title(Browsing(tracks)) == "Liked Tracks"


def test_context_page_title_rejects_track_id():
    with pytest.raises(ValueError):
        context_page_title(Browsing(SpotifyId(ItemType.TRACK, "abc")))


def test_page_types():
    assert page_type(LibraryPage()) is PageType.LIBRARY
    assert page_type(SearchPage()) is PageType.SEARCH
    assert page_type(BrowsePage()) is PageType.BROWSE
    assert page_type(QueuePage()) is PageType.QUEUE
    assert page_type(CommandHelpPage()) is PageType.COMMAND_HELP
    assert page_type(ContextPage(None, CurrentPlaying())) is PageType.CONTEXT


def test_page_type_rejects_non_page():
    with pytest.raises(TypeError):
        page_type("library")


def test_library_select_targets_focused_list():
    page = LibraryPage()
    page.state.focus = LibraryFocusState.SAVED_ALBUMS
    select(page, 4)
    assert page.state.saved_album_list.selected == 4
    assert page.state.playlist_list.selected is None
    assert selected(page) == 4


def test_search_input_focus_has_no_window():
    page = SearchPage()
    assert focus_window_state(page) is None
    select(page, 2)
    assert selected(page) is None


def test_search_focus_next_resets_selection():
    page = SearchPage()
    page.state.track_list.select(9)
    focus_next(page)
    assert page.state.focus is SearchFocusState.TRACKS
    assert page.state.track_list.selected == 0


def test_search_focus_previous_wraps():
    page = SearchPage()
    focus_previous(page)
    assert page.state.focus is SearchFocusState.PLAYLISTS
    assert selected(page) == 0


def test_context_page_without_state():
    page = ContextPage(None, CurrentPlaying())
    assert focus_window_state(page) is None
    assert selected(page) is None


@pytest.mark.parametrize(
    "ui_state", [PlaylistPageUIState(), AlbumPageUIState(), TracksPageUIState()]
)
def test_context_track_table_selected(ui_state):
    page = ContextPage(None, CurrentPlaying(), ui_state)
    select(page, 3)
    assert ui_state.track_table.selected == 3
    focus_next(page)
    assert ui_state.track_table.selected == 0


def test_artist_page_focus_moves_between_windows():
    ui_state = ArtistPageUIState()
    page = ContextPage(SpotifyId(ItemType.ARTIST, "abc"), CurrentPlaying(), ui_state)
    focus_next(page)
    assert ui_state.focus is ArtistFocusState.ALBUMS
    assert focus_window_state(page) is ui_state.album_table
    select(page, 2)
    assert ui_state.album_table.selected == 2
    assert ui_state.top_track_table.selected is None


def test_browse_pages_use_list_state():
    page = BrowsePage(CategoryListUIState())
    select(page, 5)
    assert selected(page) == 5
    category_page = BrowsePage(CategoryPlaylistListUIState(Category("id1", "Pop")))
    select(category_page, 1)
    assert category_page.state.state.selected == 1


@pytest.mark.parametrize("page_cls", [QueuePage, CommandHelpPage])
def test_scroll_pages(page_cls):
    page = page_cls()
    select(page, 6)
    assert page.scroll_offset.offset == 6
    focus_next(page)
    assert selected(page) == 0