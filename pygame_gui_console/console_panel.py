import pygame
import pygame_gui
from pygame_gui.core import UIElement, ObjectID
from pygame_gui.core.interfaces import IContainerLikeInterface
from typing import List, Dict, Union

from pygame_gui_console.game_console import (GameConsole, ConsoleConfig, ConsoleSnapshot,
                                             UI_CONSOLE_COMMAND_EXECUTED, UI_CONSOLE_OPENED,
                                             UI_CONSOLE_CLOSED)

PANEL_DEBUG = False

_THEME_ERRORS = (KeyError, AttributeError, TypeError, ValueError)


def truncate_line(text: str, max_chars: int) -> str:
    """Shorten text to max_chars, marking the cut with '..'"""
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    if max_chars <= 2:
        return text[:max_chars]
    return text[:max_chars - 2] + ".."


def slide_offset(snapshot: ConsoleSnapshot, height: int) -> int:
    """Vertical offset for the slide-from-top animation"""
    if snapshot.is_opening:
        return -int((1.0 - snapshot.transition_progress) * height)
    if snapshot.is_closing:
        return -int(snapshot.transition_progress * height)
    return 0


class ConsoleThemeManager:
    """Manages theming for the console panel"""

    DEFAULT_COLORS = {
        'console_bg': pygame.Color(0, 0, 0, 192),
        'border': pygame.Color(80, 80, 80),
    }

    def __init__(self, ui_manager: pygame_gui.UIManager, element_ids: List[str]):
        self.ui_manager = ui_manager
        self.element_ids = element_ids
        self.themed_colors: Dict[str, pygame.Color] = {}
        self.themed_font = None
        self._update_theme_data()

    def _update_theme_data(self):
        """Update theme-dependent data with fallbacks"""
        theme = self.ui_manager.get_theme()

        self.themed_colors.clear()
        for color_name, default_color in self.DEFAULT_COLORS.items():
            try:
                theme_color = theme.get_colour(color_name, self.element_ids)
            except _THEME_ERRORS:
                theme_color = None
            self.themed_colors[color_name] = theme_color if theme_color else default_color

        try:
            self.themed_font = theme.get_font(self.element_ids)
        except _THEME_ERRORS:
            self.themed_font = None

    def apply_theme_dict(self, theme_dict: dict):
        """Force colors from a theme dictionary"""
        colours = theme_dict.get('console_panel', {}).get('colours', {})
        for color_name, color_value in colours.items():
            if color_value.startswith('#'):
                self.themed_colors[color_name] = pygame.Color(color_value)

    def get_color(self, color_name: str) -> pygame.Color:
        return self.themed_colors.get(color_name, pygame.Color(255, 255, 255))

    def get_font(self):
        if self.themed_font:
            return self.themed_font
        return pygame.font.Font(None, 16)

    def update_theme(self):
        self._update_theme_data()


class ConsolePanel(UIElement):
    """Draws a GameConsole and forwards pygame events to it"""

    def __init__(self, relative_rect: pygame.Rect,
                 manager: pygame_gui.UIManager,
                 console: GameConsole = None,
                 container: IContainerLikeInterface = None,
                 object_id: Union[ObjectID, str, None] = None,
                 anchors: Dict[str, str] = None):

        # Handle object_id properly
        if isinstance(object_id, ObjectID):
            self._object_id = object_id
        elif isinstance(object_id, str):
            self._object_id = ObjectID(object_id=object_id, class_id=None)
        else:
            self._object_id = ObjectID(object_id='#console_panel', class_id=None)

        super().__init__(relative_rect, manager, container,
                         starting_height=1, layer_thickness=1,
                         anchors=anchors, object_id=self._object_id)

        self.console = console or GameConsole()
        self.config: ConsoleConfig = self.console.config

        element_ids = [self._object_id.object_id or '#console_panel', 'console_panel']
        self.theme_manager = ConsoleThemeManager(manager, element_ids)

        self.line_height = self.config.layout.output_line_height
        self.char_width = 8
        self.chars_per_line = 0
        self.text_origin = (0, 0)

        self._calculate_layout()

        self.image = pygame.Surface(self.rect.size, pygame.SRCALPHA).convert_alpha()
        self.rebuild_image()

    def _calculate_layout(self):
        """Derive line metrics from the font and the panel rect"""
        font = self.theme_manager.get_font()
        padding = self.config.layout.panel_padding
        try:
            self.char_width = max(1, font.size("X")[0])
            self.line_height = max(self.config.layout.output_line_height, font.size("Xy")[1])
        except (AttributeError, pygame.error):
            self.char_width = 8

        self.chars_per_line = max(1, (self.rect.width - 2 * padding) // self.char_width)
        self.text_origin = (padding, padding)

        # Fit the console rows into the panel
        rows = max(1, (self.rect.height - 2 * padding) // self.line_height)
        self.console.lines = rows

    def _render_text(self, font, text: str, color: pygame.Color) -> pygame.Surface:
        if hasattr(font, 'render_premul'):
            return font.render_premul(text, color)
        return font.render(text, True, color)

    def _text_width(self, font, text: str) -> int:
        try:
            return font.size(text)[0]
        except (AttributeError, pygame.error):
            return len(text) * self.char_width

    def rebuild_image(self):
        """Rebuild the console image from a fresh snapshot"""
        self.image.fill(pygame.Color(0, 0, 0, 0))

        snapshot = self.console.snapshot()
        if not (snapshot.is_open or snapshot.is_opening or snapshot.is_closing):
            return

        offset = slide_offset(snapshot, self.rect.height)
        panel_rect = pygame.Rect(0, offset, self.rect.width, self.rect.height)

        self.image.fill(self.theme_manager.get_color('console_bg'), panel_rect)
        font = self.theme_manager.get_font()

        y = self._draw_output(snapshot, font, offset)
        if snapshot.input_enabled:
            self._draw_input(snapshot, font, y)

        border_width = self.config.layout.border_width
        if border_width > 0:
            pygame.draw.rect(self.image, self.theme_manager.get_color('border'),
                             panel_rect, border_width)

    def _draw_output(self, snapshot: ConsoleSnapshot, font, offset: int) -> int:
        """Draw the visible log page, returns the y of the next free row"""
        x, y = self.text_origin[0], self.text_origin[1] + offset

        for line in snapshot.lines:
            text = truncate_line(line.text, self.chars_per_line)
            try:
                self.image.blit(self._render_text(font, text, line.color), (x, y))
            except pygame.error as e:
                if PANEL_DEBUG:
                    print(f"Could not render console line: {e}")
            y += self.line_height

        return y

    def _draw_input(self, snapshot: ConsoleSnapshot, font, y: int):
        """Draw prefix, input text and cursor"""
        x = self.text_origin[0]
        text = truncate_line(snapshot.prefix + snapshot.input_text, self.chars_per_line)
        try:
            self.image.blit(self._render_text(font, text, snapshot.input_color), (x, y))
        except pygame.error as e:
            if PANEL_DEBUG:
                print(f"Could not render console input: {e}")

        if snapshot.cursor_visible:
            layout = self.config.layout
            cursor_x = x + self._text_width(font, snapshot.prefix + snapshot.input_text[:snapshot.cursor])
            cursor_y = y + self.line_height - layout.cursor_height + layout.cursor_bottom_margin
            cursor_rect = pygame.Rect(cursor_x, cursor_y, layout.cursor_width, layout.cursor_height)
            pygame.draw.rect(self.image, snapshot.input_color, cursor_rect)

    def process_event(self, event: pygame.event.Event) -> bool:
        """Forward events to the console"""
        consumed = self.console.process_event(event)
        if consumed:
            self.rebuild_image()
        return consumed

    def update(self, time_delta: float):
        """Advance the console and redraw"""
        super().update(time_delta)
        self.console.update(time_delta)
        self.rebuild_image()

    def set_dimensions(self, dimensions, clamp_to_container: bool = False):
        super().set_dimensions(dimensions, clamp_to_container)
        self.image = pygame.Surface(self.rect.size, pygame.SRCALPHA).convert_alpha()
        self._calculate_layout()
        self.rebuild_image()

    def apply_theme(self, theme_dict: dict):
        """Force panel colours from a theme dictionary"""
        self.theme_manager.apply_theme_dict(theme_dict)
        self.rebuild_image()

    def rebuild_from_changed_theme_data(self):
        """Rebuild when theme data changes"""
        self.theme_manager.update_theme()
        self._calculate_layout()
        self.rebuild_image()


# Default theme for console panel
CONSOLE_THEME = {
    "console_panel": {
        "colours": {
            "console_bg": "#000000C0",
            "border": "#505050"
        },
        "font": {
            "name": "courier",
            "size": "14",
            "bold": "0",
            "italic": "0"
        }
    }
}

LIGHT_CONSOLE_THEME = {
    "console_panel": {
        "colours": {
            "console_bg": "#E8E8E8E0",
            "border": "#A0A0A0"
        }
    }
}


def add_sample_commands(console: GameConsole):
    """Register sample commands for demonstration"""

    def hello_command(name: str, args: List[str], timestamp: float):
        if args:
            console.log(f"Hello, {' '.join(args)}!")
        else:
            console.log("Hello, World!")

    def add_command(name: str, args: List[str], timestamp: float):
        if len(args) < 2:
            console.exec_manual("add")
            return
        total = sum(float(arg) for arg in args)
        console.log(f"sum: {total:g}")

    def info_command(name: str, args: List[str], timestamp: float):
        import platform
        import sys

        console.log(f"Python: {sys.version.split()[0]}")
        console.log(f"Platform: {platform.platform()}")
        console.log(f"Pygame: {pygame.version.ver}")

    console.add_command("hello", hello_command, "Says hello.", "hello <name> - greets someone.")
    console.add_command("add", add_command, "Adds numbers.", "add <number> <number> [...]")
    console.add_command("info", info_command, "Shows version information.")


def main():
    """Example demonstration of the console panel"""
    pygame.init()
    screen = pygame.display.set_mode((1000, 700))
    pygame.display.set_caption("Game Console Demo")
    clock = pygame.time.Clock()

    manager = pygame_gui.UIManager((1000, 700), CONSOLE_THEME)

    config = ConsoleConfig()
    config.behavior.log_debug_messages = True
    config.log_level_colors = {1: pygame.Color(255, 80, 80), 255: pygame.Color(255, 255, 0)}

    console = GameConsole(config)
    add_sample_commands(console)

    panel = ConsolePanel(pygame.Rect(0, 0, 1000, 300), manager, console,
                         object_id=ObjectID(object_id='#console_panel', class_id='@console_panel'))

    print("\nGame Console Demo")
    print("- F1 opens and closes the console")
    print("- F2 switches between the dark and light theme")
    print("- Up/Down browse history, Tab completes, PageUp/PageDown scroll")
    print("- Try: commands, man con_set, hello you, add 1 2 3, con_tog time")

    light_theme = False
    running = True
    while running:
        time_delta = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == UI_CONSOLE_COMMAND_EXECUTED:
                if PANEL_DEBUG:
                    print(f"Command executed: {event.command} -> {event.outcome.value}")

            elif event.type in (UI_CONSOLE_OPENED, UI_CONSOLE_CLOSED):
                if PANEL_DEBUG:
                    print(f"Console open: {console.is_open}")

            consumed = manager.process_events(event)

            if (not consumed and event.type == pygame.KEYDOWN and event.key == pygame.K_F1
                    and not (console.is_open or console.is_opening or console.is_closing)):
                console.open(pygame.K_F1)

            elif not consumed and event.type == pygame.KEYDOWN and event.key == pygame.K_F2:
                light_theme = not light_theme
                panel.apply_theme(LIGHT_CONSOLE_THEME if light_theme else CONSOLE_THEME)

        # Also updates the panel, which drives the console
        manager.update(time_delta)

        screen.fill((40, 60, 80))
        manager.draw_ui(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
