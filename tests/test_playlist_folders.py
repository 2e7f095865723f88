from tunedeck.model import ItemType, Playlist, PlaylistFolder, PlaylistFolderNode, SpotifyId
from tunedeck.playlist_folders import structurize


def playlist(pid):
    return Playlist(
        id=SpotifyId(ItemType.PLAYLIST, pid),
        collaborative=False,
        name=pid.upper(),
        owner=("Owner", SpotifyId(ItemType.USER, "owner")),
        current_folder_id=7,
    )


def node(node_type, uri, name=None, children=None):
    return PlaylistFolderNode(name=name, node_type=node_type, uri=uri, children=children or [])


def test_structurize_basic_tree():
    nodes = [
        node("folder", "spotify:user:x:folder:f1", "Rock",
             [node("playlist", "spotify:playlist:p1")]),
        node("playlist", "spotify:playlist:p2"),
    ]
    result = structurize([playlist("p1"), playlist("p2"), playlist("p3")], nodes)
    assert result[0] == PlaylistFolder("Rock", 0, 1)
    assert result[1] == PlaylistFolder("← Rock", 1, 0)
    assert [(p.id.id, p.current_folder_id) for p in result[2:]] == [("p1", 1), ("p2", 0), ("p3", 0)]


def test_unnamed_folder_uses_parent_id():
    nodes = [node("folder", "spotify:folder:a", "Outer",
                  [node("folder", "spotify:folder:b")])]
    result = structurize([], nodes)
    assert result[2] == PlaylistFolder("folder_1", 1, 2)
    assert result[3] == PlaylistFolder("← folder_1", 2, 1)


def test_nodes_without_colon_are_skipped():
    nodes = [node("folder", "nocolon", "Skip", [node("playlist", "spotify:playlist:p1")])]
    result = structurize([playlist("p1")], nodes)
    assert len(result) == 1
    assert result[0].current_folder_id == 0


def test_every_playlist_appears_once():
    playlists = [playlist(f"p{i}") for i in range(5)]
    nodes = [node("playlist", "spotify:playlist:p3"), node("playlist", "spotify:playlist:p3")]
    result = structurize(playlists, nodes)
    assert sorted(p.id.id for p in result) == sorted(p.id.id for p in playlists)
    assert playlists[0].current_folder_id == 7