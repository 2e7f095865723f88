import enum

import pytest

from tunedeck.line_input import LineInput
from tunedeck.model import Artist, ItemType, SpotifyId, Track
from tunedeck.page_state import SelectionState
from tunedeck.popup_state import (
    ActionListItem,
    ActionListPopup,
    AddTrackToPlaylist,
    ArtistListPopup,
    ArtistPopupAction,
    BrowsePlaylists,
    DeviceListPopup,
    PlaylistCreateField,
    PlaylistCreatePopup,
    SearchPopup,
    ThemeListPopup,
    UserFollowedArtistListPopup,
    UserPlaylistListPopup,
    UserSavedAlbumListPopup,
    list_select,
    list_selected,
    list_state,
)


class Action(enum.Enum):
    AddToQueue = 1
    GoToAlbum = 2


def _track():
    return Track(id=SpotifyId(ItemType.TRACK, "abc123"), name="Song")


def _list_popups():
    artist = Artist(SpotifyId(ItemType.ARTIST, "art1"), "Someone")
    return [
        UserPlaylistListPopup(BrowsePlaylists(0)),
        UserPlaylistListPopup(AddTrackToPlaylist(1, SpotifyId(ItemType.TRACK, "abc123"))),
        UserFollowedArtistListPopup(),
        UserSavedAlbumListPopup(),
        DeviceListPopup(),
        ArtistListPopup(ArtistPopupAction.BROWSE, [artist]),
        ThemeListPopup(["dark"]),
        ActionListPopup(ActionListItem(_track(), [Action.AddToQueue])),
    ]


@pytest.mark.parametrize("popup", _list_popups())
def test_list_popups_expose_their_state(popup):
    assert list_state(popup) is popup.list_state
    assert list_selected(popup) is None
    list_select(popup, 2)
    assert list_selected(popup) == 2
    assert popup.list_state.selected == 2


@pytest.mark.parametrize("popup", [SearchPopup("q"), PlaylistCreatePopup()])
def test_non_list_popups_have_no_state(popup):
    assert list_state(popup) is None
    list_select(popup, 3)
    assert list_selected(popup) is None


def test_list_select_none_clears():
    popup = DeviceListPopup(SelectionState(1))
    list_select(popup, None)
    assert list_selected(popup) is None


def test_action_list_item():
    item = ActionListItem(_track(), [Action.AddToQueue, Action.GoToAlbum])
    assert item.n_actions() == 2
    assert item.name() == "Song"
    assert item.actions_desc() == ["AddToQueue", "GoToAlbum"]


def test_action_list_item_for_artist():
    artist = Artist(SpotifyId(ItemType.ARTIST, "art1"), "Someone")
    item = ActionListItem(artist, [])
    assert item.name() == "Someone"
    assert item.n_actions() == 0
    assert item.actions_desc() == []


def test_playlist_create_defaults():
    popup = PlaylistCreatePopup(name=LineInput("abc"))
    assert popup.current_field is PlaylistCreateField.NAME
    assert popup.name.text() == "abc"
    assert popup.desc.is_empty()