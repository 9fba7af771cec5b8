from typing import List, Optional, Dict, Iterator, Deque
from dataclasses import dataclass, field
from collections import deque
import time

DEBUG_LEVEL = 255
ERROR_LEVEL = 1
DEFAULT_TIME_FORMAT = "%H:%M:%S"


def _check_level(level: int) -> int:
    if not 0 <= level <= 255:
        raise ValueError(f"Log level must be between 0 and 255, got {level}")
    return level


@dataclass(frozen=True)
class LogEntry:
    """Single timestamped console log line"""
    message: str
    level: int = 0
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self):
        _check_level(self.level)
        # Frozen dataclass, so normalise through object.__setattr__
        object.__setattr__(self, 'message', self.message.replace('\n', ' '))

    @property
    def is_debug(self) -> bool:
        return self.level == DEBUG_LEVEL

    def format(self, show_time: bool = False, show_level: bool = False,
               time_format: str = DEFAULT_TIME_FORMAT) -> str:
        """Format entry for display or saving"""
        text = ""
        if show_time:
            text += f"[{time.strftime(time_format, time.localtime(self.timestamp))}] "
        text += self.message
        if show_level:
            text += f" [{self.level}]"
        return text


class LevelVisibility:
    """Level -> visible mapping where unknown levels are visible"""

    def __init__(self):
        self._hidden: Dict[int, bool] = {}

    def is_visible(self, level: int) -> bool:
        return self._hidden.get(level, True)

    def set_visible(self, level: int, visible: bool):
        _check_level(level)
        if visible:
            self._hidden.pop(level, None)
        else:
            self._hidden[level] = False

    def toggle(self, level: int) -> bool:
        """Flip a level and return its new visibility"""
        visible = not self.is_visible(level)
        self.set_visible(level, visible)
        return visible

    @property
    def has_filters(self) -> bool:
        return bool(self._hidden)

    def __len__(self) -> int:
        return len(self._hidden)


class LogBuffer:
    """
    Chronological storage for log entries.

    A capacity of 0 lets the buffer grow freely. A positive capacity turns it
    into a FIFO: the oldest entry is dropped before a new one is appended.
    Level 255 entries are dropped unless debug messages are enabled.
    """

    def __init__(self, capacity: int = 0, log_debug_messages: bool = False):
        self._entries: Deque[LogEntry] = deque()
        self._capacity = 0
        self.log_debug_messages = log_debug_messages
        self.capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int):
        self._capacity = value if value > 0 else 0
        # Rebuilding with a smaller maxlen keeps the newest entries
        self._entries = deque(self._entries, maxlen=self._capacity or None)

    def append(self, entry: LogEntry) -> bool:
        """Append entry, returns False if it was suppressed"""
        if entry.is_debug and not self.log_debug_messages:
            return False

        self._entries.append(entry)
        return True

    def clear(self) -> int:
        """Remove every entry and return how many were removed"""
        count = len(self._entries)
        self._entries.clear()
        return count

    def filtered(self, visibility: Optional[LevelVisibility] = None) -> List[LogEntry]:
        if visibility is None or not visibility.has_filters:
            return list(self._entries)
        return [entry for entry in self._entries if visibility.is_visible(entry.level)]

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]
