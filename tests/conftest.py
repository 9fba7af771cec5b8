"""Pytest configuration: headless pygame and shared console fixtures."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pygame_gui_console.clipboard import StaticClipboard
from pygame_gui_console.command_table import CommandTable
from pygame_gui_console.dispatcher import Dispatcher
from pygame_gui_console.game_console import GameConsole, ConsoleConfig
from pygame_gui_console.history import HistoryStore


class RecordingLog:
    """Collects (message, level) pairs written by a dispatcher"""

    def __init__(self):
        self.lines = []

    def __call__(self, message, level):
        self.lines.append((message, level))

    @property
    def messages(self):
        return [message for message, _ in self.lines]

    def at_level(self, level):
        return [message for message, line_level in self.lines if line_level == level]


def instant_config() -> ConsoleConfig:
    config = ConsoleConfig()
    config.behavior.opening_time = 0.0
    config.behavior.closing_time = 0.0
    return config


@pytest.fixture
def recording_log():
    return RecordingLog()


@pytest.fixture
def dispatcher(recording_log):
    return Dispatcher(CommandTable(), HistoryStore(), recording_log)


@pytest.fixture
def clipboard():
    return StaticClipboard("pasted")


@pytest.fixture
def console(clipboard):
    game_console = GameConsole(instant_config(), clipboard=clipboard)
    game_console.open()
    return game_console


@pytest.fixture
def pygame_display():
    pygame.init()
    pygame.display.set_mode((400, 200))
    pygame.event.clear()
    yield
    pygame.quit()
