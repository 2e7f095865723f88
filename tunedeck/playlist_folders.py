"""Arrange a flat playlist list into the folder tree."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from tunedeck.model import Playlist, PlaylistFolder, PlaylistFolderItem, PlaylistFolderNode


def structurize(
    playlists: Iterable[Playlist], nodes: Iterable[PlaylistFolderNode]
) -> list[PlaylistFolderItem]:
    """Place playlists into folders described by ``nodes``.

    Each folder yields a folder entry and an "up" entry; playlists not
    referenced by any node end up at the root.
    """
    remaining = {p.id.id: p for p in playlists}
    result: list[PlaylistFolderItem] = []
    last_id = 0

    def visit(children: Iterable[PlaylistFolderNode]) -> None:
        nonlocal last_id
        current = last_id
        for node in children:
            if ":" not in node.uri:
                continue
            node_id = node.uri.rsplit(":", 1)[1]
            if node.node_type == "folder":
                last_id += 1
                name = node.name if node.name is not None else f"folder_{current}"
                result.append(PlaylistFolder(name, current, last_id))
                result.append(PlaylistFolder(f"← {name}", last_id, current))
                visit(node.children)
            elif node_id in remaining:
                playlist = remaining.pop(node_id)
                result.append(dataclasses.replace(playlist, current_folder_id=current))

    visit(nodes)
    result.extend(dataclasses.replace(p, current_folder_id=0) for p in remaining.values())
    return result