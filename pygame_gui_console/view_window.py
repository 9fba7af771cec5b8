from typing import List, Optional

from pygame_gui_console.log_buffer import LogBuffer, LogEntry, LevelVisibility


class ViewWindow:
    """
    Filtered, paged projection of a LogBuffer.

    The window holds only two pieces of sticky state, the scroll offset (index
    of the first visible entry inside the filtered sequence) and the auto
    scroll flag. Everything else is recomputed from the buffer and the level
    visibility map.
    """

    def __init__(self, buffer: LogBuffer, visibility: Optional[LevelVisibility] = None,
                 page_size: int = 8, auto_scroll: bool = True):
        if page_size <= 0:
            raise ValueError(f"Page size must be positive, got {page_size}")

        self.buffer = buffer
        self.visibility = visibility if visibility is not None else LevelVisibility()
        self._page_size = page_size
        self.auto_scroll = auto_scroll

        self.scroll_offset = 0
        self.visible_count = 0
        self._filtered: List[LogEntry] = []
        self._page: List[LogEntry] = []

        self.recompute(auto_scroll)

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int):
        if value <= 0:
            raise ValueError(f"Page size must be positive, got {value}")
        self._page_size = value
        self.recompute(self.auto_scroll)

    @property
    def max_offset(self) -> int:
        return max(0, self.visible_count - self._page_size)

    @property
    def page(self) -> List[LogEntry]:
        return list(self._page)

    @property
    def at_bottom(self) -> bool:
        return self.scroll_offset >= self.max_offset

    def recompute(self, follow_tail: bool = False):
        """Rebuild the filtered sequence and the visible page"""
        self._filtered = self.buffer.filtered(self.visibility)
        self.visible_count = len(self._filtered)

        if follow_tail:
            self.scroll_offset = self.max_offset
        else:
            self.scroll_offset = max(0, min(self.max_offset, self.scroll_offset))

        self._page = self._filtered[self.scroll_offset:self.scroll_offset + self._page_size]

    def reset(self):
        """Jump back to the first entry"""
        self.scroll_offset = 0
        self.recompute(False)

    def scroll_to_bottom(self):
        self.recompute(True)

    def page_up(self) -> bool:
        if self.scroll_offset <= 0:
            return False
        self.scroll_offset -= self._page_size
        self.recompute(False)
        return True

    def page_down(self) -> bool:
        if self.scroll_offset + self._page_size >= self.visible_count:
            return False
        self.scroll_offset += self._page_size
        self.recompute(False)
        return True

    def scroll_by(self, delta: Optional[int] = None) -> bool:
        """Scroll by delta entries (negative is up), defaults to a third of a page"""
        if delta is None:
            delta = max(1, self._page_size // 3)

        if delta < 0 and self.scroll_offset <= 0:
            return False
        if delta > 0 and self.scroll_offset + self._page_size >= self.visible_count:
            return False

        self.scroll_offset += delta
        self.recompute(False)
        return True
