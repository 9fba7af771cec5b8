from typing import List, Optional, Callable
import os

from pygame_gui_console.dispatcher import Dispatcher, ExecutionOutcome

SubmitHandler = Callable[[str, bool], ExecutionOutcome]


def longest_common_prefix(first: str, last: str) -> str:
    # Candidates are sorted, so the first/last pair bounds every other one
    return os.path.commonprefix([first, last])


class LineEditor:
    """
    Single line input buffer with a cursor.

    The cursor always satisfies 0 <= cursor <= len(text). History browsing and
    tab completion operate on the dispatcher's history and command table.
    """

    def __init__(self, dispatcher: Dispatcher, on_submit: Optional[SubmitHandler] = None):
        self.dispatcher = dispatcher
        self.on_submit = on_submit or dispatcher.submit
        self._text = ""
        self._cursor = 0
        self._tab_prefix = ""
        self._tab_candidates: Optional[List[str]] = None

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        self._text = value
        self._cursor = min(self._cursor, len(self._text))
        self._end_tab_cycle()

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int):
        self._cursor = max(0, min(len(self._text), value))

    @property
    def is_cycling_completions(self) -> bool:
        return self._tab_candidates is not None

    def _end_tab_cycle(self):
        self._tab_prefix = ""
        self._tab_candidates = None

    def _replace(self, text: str):
        """Swap the whole buffer and put the cursor at its end"""
        self._text = text
        self._cursor = len(text)

    def clear(self):
        self._text = ""
        self._cursor = 0
        self._end_tab_cycle()

    def insert_char(self, char: str):
        self._end_tab_cycle()
        if char == '\0':
            return

        self._text = self._text[:self._cursor] + char + self._text[self._cursor:]
        self._cursor += len(char)
        # Typing takes over from whatever history item was recalled
        self.dispatcher.history.reset_cursor()

    def insert_text(self, text: str):
        """Insert pasted text at the cursor"""
        self._end_tab_cycle()
        self._text = self._text[:self._cursor] + text + self._text[self._cursor:]
        self._cursor += len(text)

    def backspace(self):
        self._end_tab_cycle()
        if self._cursor > 0:
            self._text = self._text[:self._cursor - 1] + self._text[self._cursor:]
            self._cursor -= 1

    def delete(self):
        self._end_tab_cycle()
        if self._cursor < len(self._text):
            self._text = self._text[:self._cursor] + self._text[self._cursor + 1:]

    def move_left(self):
        self._end_tab_cycle()
        self.cursor = self._cursor - 1

    def move_right(self):
        self._end_tab_cycle()
        self.cursor = self._cursor + 1

    def home(self):
        self._end_tab_cycle()
        self._cursor = 0

    def end(self):
        self._end_tab_cycle()
        self._cursor = len(self._text)

    def history_up(self) -> bool:
        self._end_tab_cycle()
        item = self.dispatcher.history.previous()
        if item is None:
            return False
        self._replace(item)
        return True

    def history_down(self) -> bool:
        self._end_tab_cycle()
        item = self.dispatcher.history.next()
        if item is None:
            return False
        self._replace(item)
        return True

    def tab_complete(self) -> List[str]:
        """
        Complete the buffer against registered command names.

        A unique match replaces the buffer. Several matches shrink the buffer to
        their longest common prefix and list them in the log; pressing tab again
        without editing alternates between the first and last match, as long
        as the registered matches stay the same.
        Returns the candidates that were considered.
        """
        if self._tab_candidates is not None:
            prefix = self._tab_prefix
            candidates = self.dispatcher.commands.prefix_search(prefix)
            if candidates == self._tab_candidates:
                first, last = candidates[0], candidates[-1]
                self._replace(last if self._text == first else first)
                return list(candidates)

            # Commands changed since the last press, start over from the typed prefix
            self._end_tab_cycle()
            self._replace(prefix)

        prefix = self._text
        candidates = self.dispatcher.commands.prefix_search(prefix)
        if not candidates:
            return []

        if len(candidates) == 1:
            self._replace(candidates[0])
            return candidates

        self._replace(longest_common_prefix(candidates[0], candidates[-1]))
        log = self.dispatcher.log
        log(self.dispatcher.prefix + self._text, 0)
        for candidate in candidates:
            log(f" -> {candidate}", 0)

        self._tab_prefix = prefix
        self._tab_candidates = candidates
        return list(candidates)

    def submit(self, add_to_log: bool = True) -> ExecutionOutcome:
        """Run the buffer and reset it, whatever the outcome"""
        self._end_tab_cycle()
        text = self._text
        try:
            return self.on_submit(text, add_to_log)
        finally:
            self._text = ""
            self._cursor = 0
