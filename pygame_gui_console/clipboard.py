import pygame
from typing import Protocol

CLIPBOARD_DEBUG = False


class ClipboardProvider(Protocol):
    """Anything that can hand over the clipboard text. May block."""

    def get_text(self) -> str:
        ...


class PygameClipboard:
    """Clipboard access through pygame.scrap"""

    def __init__(self):
        self._initialized = False

    def _ensure_init(self) -> bool:
        if self._initialized:
            return True
        # scrap needs an open display window
        if not pygame.display.get_init() or pygame.display.get_surface() is None:
            return False
        try:
            pygame.scrap.init()
        except pygame.error as e:
            if CLIPBOARD_DEBUG:
                print(f"Clipboard unavailable: {e}")
            return False
        self._initialized = True
        return True

    def get_text(self) -> str:
        if not self._ensure_init():
            return ""

        if hasattr(pygame.scrap, 'get_text'):
            return pygame.scrap.get_text() or ""

        data = pygame.scrap.get(pygame.SCRAP_TEXT)
        if not data:
            return ""
        return data.decode('utf-8', errors='ignore').rstrip('\0')


class StaticClipboard:
    """Fixed clipboard contents, for tests and headless hosts"""

    def __init__(self, text: str = ""):
        self.text = text

    def get_text(self) -> str:
        return self.text
