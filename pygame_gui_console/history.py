from typing import List, Optional


class HistoryStore:
    """Submitted lines plus a replay cursor for Up/Down browsing"""

    def __init__(self):
        self._entries: List[str] = []
        self.replay_cursor = 0

    def add(self, line: str) -> bool:
        """Append line unless it repeats the newest entry. Always ends browsing."""
        added = False
        if not self._entries or self._entries[-1] != line:
            self._entries.append(line)
            added = True
        self.reset_cursor()
        return added

    def reset_cursor(self):
        self.replay_cursor = len(self._entries)

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        self.replay_cursor = 0
        return count

    @property
    def is_browsing(self) -> bool:
        return self.replay_cursor < len(self._entries)

    def previous(self) -> Optional[str]:
        """Step the replay cursor back, None if already at the oldest entry"""
        if not self._entries or self.replay_cursor <= 0:
            return None
        self.replay_cursor -= 1
        return self._entries[self.replay_cursor]

    def next(self) -> Optional[str]:
        """Step the replay cursor forward, stops at the newest entry"""
        # Never steps past the newest entry back to the live buffer
        if self.replay_cursor >= len(self._entries) - 1:
            return None
        self.replay_cursor += 1
        return self._entries[self.replay_cursor]

    def last(self, count: Optional[int] = None) -> List[str]:
        """Newest entries, newest first"""
        newest_first = list(reversed(self._entries))
        if count is None:
            return newest_first
        return newest_first[:max(0, count)]

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]
