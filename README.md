# tunedeck

`tunedeck` holds the application state behind a terminal music player. It covers
the library model (tracks, albums, artists and playlists), playlist folders, cached
user data, playback state and UI state (pages, popups, focus and selection). It does
no drawing, so any front end can sit on top of it.

## Installation

```
pip install tunedeck
```

To run the tests, install the `test` extra and run pytest:

```
pip install "tunedeck[test]"
pytest
```

## Modules

- `tunedeck.utils` has three helpers:
  - `format_duration` formats seconds or a `timedelta` as `m:ss`.
  - `map_join` joins mapped items with a separator.
  - `parse_uri` shortens `spotify:user:{user}:{type}:{id}` URIs to `spotify:{type}:{id}`.
- `tunedeck.model` holds the data model:
  - `SpotifyId`, with `from_uri` and `uri`.
  - `Track`, `Album`, `Artist` and `Playlist`. Each is built from API-shaped dicts with `from_simplified` or `from_full`, and round-trips through `to_dict` and `from_dict`. `Playlist.from_full` strips HTML tags and entities from the description.
  - `PlaylistFolder`, `PlaylistFolderNode`, and `item_to_dict` / `item_from_dict` for tagged playlist-folder items.
  - The context types: `PlaylistContext`, `AlbumContext`, `ArtistContext` and `TracksContext`, each with `description()`. `context_uri` gives the URI of a context id.
  - `TrackOrder.compare`.
  - `ContextPlayback` and `UrisPlayback`. `UrisPlayback.uri_offset` trims long track lists to a window of at most `limit` tracks around the chosen track.
  - `PlaybackMetadata` and `SearchResults`.
  - The constants `USER_TOP_TRACKS_ID`, `USER_RECENTLY_PLAYED_TRACKS_ID` and `USER_LIKED_TRACKS_ID`.
- `tunedeck.playlist_folders` provides `structurize`. It places playlists into the folder tree described by `PlaylistFolderNode`s. Each folder gets an entry and a "← name" entry that leads back up. Playlists that no node mentions go to the root.
- `tunedeck.data` holds the stored and cached data:
  - `UserData`, with `modifiable_playlist_items`, `folder_playlists_items` and `is_liked_track`.
  - `MemoryCaches`: TTL caches with 64 entries and a three-hour lifetime, one for contexts and one for search results.
  - `BrowseData` and `AppData`.
  - `store_data_into_file_cache` and `load_data_from_file_cache`. These write and read JSON files named `<Key>_cache.json`, one for each `FileCacheKey`. A missing file loads as `None`, and so does an unreadable one.
- `tunedeck.player` provides `PlayerState`:
  - `current_playback` and `playback_progress` advance the progress by the time elapsed since the last update while playing. `current_playback` also applies any buffered metadata.
  - `playing_context_id` works out the playlist, album or artist being played.
- `tunedeck.line_input` provides `LineInput`, a single-line editor:
  - `input` takes single characters or `InputKey.BACKSPACE`, `LEFT` and `RIGHT`. It returns an `InputEffect`, or `None` for keys it ignores.
  - `segments` gives the text split around the cursor for display.
- `tunedeck.page_state` holds the page states: `LibraryPage`, `ContextPage`, `SearchPage`, `BrowsePage`, `QueuePage` and `CommandHelpPage`. It also provides:
  - the focus enums, which cycle with `next`/`previous`;
  - `SelectionState`, whose `adjust` clamps a selection to a list length, and `ScrollState`;
  - the functions `page_type`, `focus_window_state`, `select`, `selected`, `focus_next`, `focus_previous` and `context_page_title`.
- `tunedeck.popup_state` holds the popup states (search, list popups, playlist creation) and `ActionListItem`. `list_state`, `list_selected` and `list_select` work on the selection of list popups.
- `tunedeck.ui_state` provides `UIState` and `Orientation`:
  - `UIState` keeps the page history and the popup, and filters items by an open search query. An item matches when its text contains every space-separated word of the query, ignoring case.
  - `Orientation.from_size` picks horizontal when columns / rows > 2.3.

## Example

```python
from tunedeck.utils import format_duration, parse_uri

format_duration(185)                           # "3:05"
parse_uri("spotify:user:alice:playlist:abc")   # "spotify:playlist:abc"
```

```python
from tunedeck.ui_state import UIState

ui = UIState()
ui.new_search_popup()
ui.popup.query = "blue"
ui.search_filtered_items(["Blue Train", "Giant Steps"])   # ["Blue Train"]
```

## What it does not do

`tunedeck` is state only:

- It does not render a terminal interface.
- It does not talk to a music service or play audio.
- It does not read a configuration file.
- It does not provide a command to run.

The library data comes from API-shaped dicts or from the JSON file caches, and the caller supplies it. Themes, key sequences and actions are held as opaque values.