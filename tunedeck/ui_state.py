"""Application UI state: page history, popup and layout orientation."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, TypeVar

from tunedeck.model import TracksId
from tunedeck.page_state import Browsing, ContextPage, LibraryPage, PageState, select
from tunedeck.popup_state import PopupState, SearchPopup

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Orientation(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def from_size(cls, columns: int, rows: int) -> "Orientation":
        """Orientation for a terminal of the given size."""
        if rows == 0:
            return cls.HORIZONTAL if columns > 0 else cls.VERTICAL
        # terminal cells are taller than wide, hence the larger ratio
        return cls.HORIZONTAL if columns / rows > 2.3 else cls.VERTICAL


def _detect_orientation() -> Orientation:
    try:
        size = os.get_terminal_size()
    except OSError as err:
        logger.warning("Unable to get terminal size, error: %s", err)
        return Orientation.HORIZONTAL
    return Orientation.from_size(size.columns, size.lines)


def _initial_history() -> list[PageState]:
    return [LibraryPage()]


@dataclass
class UIState:
    """The application's UI state."""

    is_running: bool = True
    theme: Any = None
    input_key_sequence: list[Any] = field(default_factory=list)
    orientation: Orientation = field(default_factory=_detect_orientation)
    history: list[PageState] = field(default_factory=_initial_history)
    popup: Optional[PopupState] = None
    playback_progress_bar_rect: tuple[int, int, int, int] = (0, 0, 0, 0)

    def current_page(self) -> PageState:
        if not self.history:
            raise IndexError("page history is empty")
        return self.history[-1]

    def new_search_popup(self) -> None:
        select(self.current_page(), 0)
        self.popup = SearchPopup(query="")

    def new_page(self, page: PageState) -> None:
        self.history.append(page)
        self.popup = None

    def new_radio_page(self, uri: str) -> None:
        self.new_page(
            ContextPage(
                id=None,
                context_page_type=Browsing(TracksId(f"radio:{uri}", "Recommendations")),
                state=None,
            )
        )

    def has_focused_popup(self) -> bool:
        """Whether a popup holds focus; an open search popup does not."""
        return self.popup is not None and not isinstance(self.popup, SearchPopup)

    def search_filtered_items(self, items: Iterable[T]) -> list[T]:
        """Items whose text contains every word of the search query, if searching."""
        if not isinstance(self.popup, SearchPopup):
            return list(items)
        words = [w for w in self.popup.query.lower().split(" ") if w]
        if not words:
            return list(items)
        result = []
        for item in items:
            text = str(item).lower()
            if all(w in text for w in words):
                result.append(item)
        return result