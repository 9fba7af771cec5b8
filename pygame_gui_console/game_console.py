import pygame
from typing import List, Optional, Dict, Any, Callable, Union
from dataclasses import dataclass, field
from pathlib import Path
import time

from pygame_gui_console.clipboard import ClipboardProvider, PygameClipboard
from pygame_gui_console.command_table import CommandTable, Command, CommandHandler
from pygame_gui_console.dispatcher import Dispatcher, ExecutionOutcome
from pygame_gui_console.history import HistoryStore
from pygame_gui_console.line_editor import LineEditor
from pygame_gui_console.log_buffer import (LogBuffer, LogEntry, LevelVisibility,
                                          DEBUG_LEVEL, ERROR_LEVEL, DEFAULT_TIME_FORMAT)
from pygame_gui_console.view_window import ViewWindow

CONSOLE_DEBUG = False

DEFAULT_LINES = 8
DEFAULT_SAVE_PATH = "con_log"

# Define custom pygame events
UI_CONSOLE_COMMAND_EXECUTED = pygame.USEREVENT + 200
UI_CONSOLE_LOG_ENTRY_ADDED = pygame.USEREVENT + 201
UI_CONSOLE_INPUT_CHANGED = pygame.USEREVENT + 202
UI_CONSOLE_OPENED = pygame.USEREVENT + 203
UI_CONSOLE_CLOSED = pygame.USEREVENT + 204


@dataclass
class ConsoleLayoutConfig:
    """Layout and spacing configuration"""
    # Rows including the input row
    lines: int = DEFAULT_LINES

    # Rendering
    panel_padding: int = 4
    output_line_height: int = 16
    cursor_width: int = 8
    cursor_height: int = 1
    cursor_bottom_margin: int = 0
    border_width: int = 1

    # Scrolling, 0 means a third of a page
    wheel_scroll_lines: int = 0


@dataclass
class ConsoleInteractionConfig:
    """Interaction and control configuration"""
    # Keyboard shortcuts
    close_key: Optional[int] = None
    paste_key: int = pygame.K_v
    paste_modifier: int = pygame.KMOD_CTRL
    history_up: int = pygame.K_UP
    history_down: int = pygame.K_DOWN
    autocomplete_key: int = pygame.K_TAB

    # Input behavior
    enable_history: bool = True
    enable_autocomplete: bool = True
    enable_mouse_wheel: bool = True

    # Timing, 0 disables blinking
    cursor_blink_rate: float = 1.0


@dataclass
class ConsoleBehaviorConfig:
    """Behavior and feature configuration"""
    # Log
    max_log_entries: int = 0
    log_debug_messages: bool = False
    report_on_error: bool = True
    auto_scroll: bool = True

    # Display flags
    show_log_time: bool = False
    show_log_level: bool = False
    time_format: str = DEFAULT_TIME_FORMAT

    # Input
    input_enabled: bool = True

    # Open/close transitions in seconds, 0 is immediate
    opening_time: float = 0.5
    closing_time: float = 0.5

    # Misc
    register_builtin_commands: bool = True
    post_events: bool = True
    save_path: str = DEFAULT_SAVE_PATH


@dataclass
class ConsoleConfig:
    """Complete configuration for the game console"""
    layout: ConsoleLayoutConfig = field(default_factory=ConsoleLayoutConfig)
    interaction: ConsoleInteractionConfig = field(default_factory=ConsoleInteractionConfig)
    behavior: ConsoleBehaviorConfig = field(default_factory=ConsoleBehaviorConfig)

    prompt_text: str = "> "

    # Presentation only, handed to the renderer untouched
    log_default_color: Any = field(default_factory=lambda: pygame.Color(211, 211, 211))
    input_color: Any = field(default_factory=lambda: pygame.Color(255, 255, 255))
    log_level_colors: Dict[int, Any] = field(default_factory=dict)


@dataclass
class ConsoleInputEvent:
    """Passed to input_entered hooks before a line is executed"""
    input: str
    timestamp: float = field(default_factory=time.time)
    execute: bool = True
    add_to_log: bool = True


@dataclass(frozen=True)
class ConsoleLine:
    text: str
    level: int
    color: Any


@dataclass(frozen=True)
class ConsoleSnapshot:
    """Everything a renderer needs for one frame"""
    lines: List[ConsoleLine]
    prefix: str
    input_text: str
    cursor: int
    input_enabled: bool
    cursor_visible: bool
    input_color: Any
    scroll_offset: int
    visible_count: int
    total_count: int
    transition_progress: float
    is_open: bool
    is_opening: bool
    is_closing: bool


def _parse_byte(value: str) -> int:
    number = int(value)
    if not 0 <= number <= 255:
        raise ValueError(f"{value} is not a byte value")
    return number


class GameConsole:
    """
    Drop-in command console for pygame games.

    Owns the command table, the log buffer with its view window, the input
    history and the line editor. Call process_event() for every pygame event
    and update() once per frame; a renderer such as ConsolePanel reads
    snapshot() to draw it.
    """

    def __init__(self, config: ConsoleConfig = None,
                 clipboard: Optional[ClipboardProvider] = None):
        self.config = config or ConsoleConfig()
        behavior = self.config.behavior

        self.clipboard = clipboard or PygameClipboard()

        # Log
        self.buffer = LogBuffer(behavior.max_log_entries, behavior.log_debug_messages)
        self.visibility = LevelVisibility()
        self._input_enabled = behavior.input_enabled
        self.view = ViewWindow(self.buffer, self.visibility,
                               page_size=self._page_size_for(self.config.layout.lines),
                               auto_scroll=behavior.auto_scroll)

        # Commands and input
        self.commands = CommandTable()
        self.history = HistoryStore()
        self.dispatcher = Dispatcher(self.commands, self.history, self.log,
                                     prefix=self.config.prompt_text,
                                     report_on_error=behavior.report_on_error)
        self.editor = LineEditor(self.dispatcher, on_submit=self._run)

        # Display flags, owned per instance
        self.show_log_time = behavior.show_log_time
        self.show_log_level = behavior.show_log_level
        self.time_format = behavior.time_format
        self.log_default_color = self.config.log_default_color
        self.input_color = self.config.input_color
        self._log_level_colors: Dict[int, Any] = dict(self.config.log_level_colors)

        # Open/close state
        self.is_open = False
        self.is_opening = False
        self.is_closing = False
        self.close_key: Optional[int] = self.config.interaction.close_key
        self._transition_time = 0.0
        self._transition_length = 0.0

        # Cursor blinking
        self.cursor_blink_rate = self.config.interaction.cursor_blink_rate
        self._blink_time = 0.0

        # Hooks
        self.input_entered: List[Callable[[ConsoleInputEvent], None]] = []
        self.exit_handler: Optional[Callable[[], None]] = None

        if behavior.register_builtin_commands:
            self._register_builtin_commands()

        self.log("Console initialized.", DEBUG_LEVEL)

    # Properties

    def _page_size_for(self, lines: int) -> int:
        return max(1, lines - 1) if self._input_enabled else max(1, lines)

    @property
    def lines(self) -> int:
        return self.config.layout.lines

    @lines.setter
    def lines(self, value: int):
        if value > 0:
            self.config.layout.lines = value
            self.view.page_size = self._page_size_for(value)

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    @input_enabled.setter
    def input_enabled(self, value: bool):
        self._input_enabled = value
        self._blink_time = 0.0
        self.view.page_size = self._page_size_for(self.config.layout.lines)

    @property
    def prefix(self) -> str:
        return self.dispatcher.prefix

    @prefix.setter
    def prefix(self, value: str):
        self.dispatcher.prefix = value

    @property
    def report_on_error(self) -> bool:
        return self.dispatcher.report_on_error

    @report_on_error.setter
    def report_on_error(self, value: bool):
        self.dispatcher.report_on_error = value

    @property
    def log_debug_messages(self) -> bool:
        return self.buffer.log_debug_messages

    @log_debug_messages.setter
    def log_debug_messages(self, value: bool):
        self.buffer.log_debug_messages = value

    @property
    def max_log_entries(self) -> int:
        return self.buffer.capacity

    @max_log_entries.setter
    def max_log_entries(self, value: int):
        count = self.buffer.count
        self.buffer.capacity = value
        if self.buffer.count < count:
            self.view.reset()
        else:
            self.view.recompute(self.view.auto_scroll)

    @property
    def auto_scroll(self) -> bool:
        return self.view.auto_scroll

    @auto_scroll.setter
    def auto_scroll(self, value: bool):
        self.view.auto_scroll = value
        if value:
            self.view.scroll_to_bottom()

    @property
    def visible_count(self) -> int:
        return self.view.visible_count

    @property
    def total_count(self) -> int:
        return self.buffer.count

    @property
    def input(self) -> str:
        return self.editor.text

    @input.setter
    def input(self, value: str):
        self.editor.text = value

    @property
    def cursor_position(self) -> int:
        return self.editor.cursor

    @cursor_position.setter
    def cursor_position(self, value: int):
        self.editor.cursor = value

    @property
    def cursor_visible(self) -> bool:
        if self.cursor_blink_rate <= 0:
            return True
        return self._blink_time < self.cursor_blink_rate / 2.0

    @property
    def transition_progress(self) -> float:
        """0.0 at the start of an open/close transition, 1.0 when done"""
        if not (self.is_opening or self.is_closing) or self._transition_length <= 0:
            return 1.0
        return 1.0 - max(0.0, self._transition_time) / self._transition_length

    # Events

    def _post_event(self, event_type: int, **data):
        if not self.config.behavior.post_events or not pygame.display.get_init():
            return
        data['console'] = self
        pygame.event.post(pygame.event.Event(event_type, data))

    # Commands

    def add_command(self, name: str, handler: Optional[CommandHandler], *manual: str,
                    log_on_execute: bool = True,
                    history_on_execute: bool = True) -> Optional[Command]:
        """Register a handler, appending to an existing command of the same name"""
        command = self.commands.register(name, handler, *manual,
                                         log_on_execute=log_on_execute,
                                         history_on_execute=history_on_execute)
        if CONSOLE_DEBUG and command is not None:
            print(f"Command '{name}' has {len(command.handlers)} handler(s)")
        return command

    def remove_command(self, name: str):
        self.commands.unregister(name)

    def clear_commands(self) -> int:
        count = self.commands.clear()
        self.log(f"Commands cleared, {count} commands deleted.", DEBUG_LEVEL)
        return count

    def _run(self, line: str, add_to_log: bool) -> ExecutionOutcome:
        outcome = self.dispatcher.submit(line, add_to_log)
        self._post_event(UI_CONSOLE_COMMAND_EXECUTED, command=line.strip(), outcome=outcome)
        return outcome

    def execute(self, line: str, add_to_log: bool = True) -> bool:
        """Run a line as if it was typed, True if it executed without a fault"""
        return self._run(line, add_to_log) == ExecutionOutcome.SUCCESS

    def exec_manual(self, name: str) -> bool:
        return self.execute("man " + name, True)

    def submit_input(self) -> Optional[ExecutionOutcome]:
        """Execute the input line, giving input_entered hooks a chance to veto"""
        event = ConsoleInputEvent(self.editor.text)
        for hook in list(self.input_entered):
            hook(event)

        if event.execute:
            return self.editor.submit(event.add_to_log)

        self.editor.clear()
        return None

    # Log

    def log(self, message: str, level: int = 0):
        entry = LogEntry(message, level)
        if not self.buffer.append(entry):
            return
        self.view.recompute(self.view.auto_scroll)
        self._post_event(UI_CONSOLE_LOG_ENTRY_ADDED, entry=entry)

    def clear(self) -> int:
        count = self.buffer.clear()
        self.view.reset()
        self.log(f"Log cleared, {count} log entries deleted.", DEBUG_LEVEL)
        return count

    def clear_history(self) -> int:
        count = self.history.clear()
        self.log(f"History cleared, {count} history entries deleted.", DEBUG_LEVEL)
        return count

    def scroll_down(self):
        self.view.scroll_to_bottom()

    def get_log_level_visibility(self, level: int) -> bool:
        return self.visibility.is_visible(level)

    def set_log_level_visibility(self, level: int, visible: bool):
        self.visibility.set_visible(level, visible)
        self.view.reset()

    def get_log_level_color(self, level: int) -> Any:
        return self._log_level_colors.get(level, self.log_default_color)

    def set_log_level_color(self, level: int, color: Any):
        self._log_level_colors[level] = color

    def format_entry(self, entry: LogEntry) -> str:
        return entry.format(self.show_log_time, self.show_log_level, self.time_format)

    def save_log(self, write_line: Callable[[str], Any]) -> int:
        """Write every entry, oldest first, through write_line"""
        for entry in self.buffer:
            write_line(entry.format(self.show_log_time, True, self.time_format))
        return self.buffer.count

    def save_log_to_file(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        with path.open('w', encoding='utf-8') as file:
            self.save_log(lambda line: file.write(line + '\n'))
        return path

    # Open / close

    def open(self, close_key: Optional[int] = None) -> bool:
        if self.is_open or self.is_opening or self.is_closing:
            return False

        if close_key is not None:
            self.close_key = close_key
        self.is_opening = True
        self._start_transition(self.config.behavior.opening_time)
        if self._transition_length <= 0:
            self._finish_opening()
        return True

    def close(self) -> bool:
        if not self.is_open or self.is_closing:
            return False

        self.is_closing = True
        self._start_transition(self.config.behavior.closing_time)
        if self._transition_length <= 0:
            self._finish_closing()
        return True

    def toggle(self, close_key: Optional[int] = None) -> bool:
        if self.is_open:
            return self.close()
        return self.open(close_key)

    def _start_transition(self, length: float):
        self._transition_length = max(0.0, length)
        self._transition_time = self._transition_length

    def _finish_opening(self):
        self.is_opening = False
        self.is_open = True
        self.view.recompute(self.view.auto_scroll)
        self._post_event(UI_CONSOLE_OPENED)
        self.log("Console opened.", DEBUG_LEVEL)

    def _finish_closing(self):
        self.is_open = False
        self.is_closing = False
        self._post_event(UI_CONSOLE_CLOSED)
        self.log("Console closed.", DEBUG_LEVEL)

    def update(self, time_delta: float):
        """Advance transitions and cursor blinking"""
        if self.is_opening or self.is_closing:
            self._transition_time -= time_delta
            if self._transition_time <= 0.0:
                if self.is_opening:
                    self._finish_opening()
                else:
                    self._finish_closing()

        if self._input_enabled and self.cursor_blink_rate > 0.0:
            self._blink_time += time_delta
            while self._blink_time >= self.cursor_blink_rate:
                self._blink_time -= self.cursor_blink_rate

    # Input

    def paste(self) -> str:
        """Insert the clipboard text at the cursor"""
        if not (self.is_open and self._input_enabled):
            return ""
        text = self.clipboard.get_text()
        if text:
            self.editor.insert_text(text)
        return text

    def process_event(self, event: pygame.event.Event) -> bool:
        """Process events for the console, returns True if consumed"""
        if not self.is_open or self.is_closing:
            return False

        consumed = False
        text_before = self.editor.text

        if event.type == pygame.TEXTINPUT:
            if self._input_enabled:
                for char in event.text:
                    self.editor.insert_char(char)
                consumed = True

        elif event.type == pygame.KEYDOWN:
            consumed = self._handle_key_down(event)

        elif event.type == pygame.MOUSEWHEEL:
            if self.config.interaction.enable_mouse_wheel and event.y:
                lines = self.config.layout.wheel_scroll_lines or max(1, self.view.page_size // 3)
                self.view.scroll_by(-lines if event.y > 0 else lines)
                consumed = True

        if self.editor.text != text_before:
            self._post_event(UI_CONSOLE_INPUT_CHANGED, text=self.editor.text)

        return consumed

    def _handle_key_down(self, event: pygame.event.Event) -> bool:
        """Handle key down events"""
        key = event.key
        mods = getattr(event, 'mod', 0)
        interaction = self.config.interaction

        if self.close_key is not None and key == self.close_key:
            self.close()
            return True

        if key == pygame.K_PAGEUP:
            self.view.page_up()
            return True
        elif key == pygame.K_PAGEDOWN:
            self.view.page_down()
            return True

        if not self._input_enabled:
            return False

        if key == interaction.paste_key and mods & interaction.paste_modifier:
            self.paste()
            return True

        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submit_input()
        elif key == pygame.K_BACKSPACE:
            self.editor.backspace()
        elif key == pygame.K_DELETE:
            self.editor.delete()
        elif key == interaction.autocomplete_key:
            if interaction.enable_autocomplete:
                self.editor.tab_complete()
        elif key == pygame.K_LEFT:
            self.editor.move_left()
        elif key == pygame.K_RIGHT:
            self.editor.move_right()
        elif key == pygame.K_HOME:
            self.editor.home()
        elif key == pygame.K_END:
            self.editor.end()
        elif key == interaction.history_up:
            if interaction.enable_history:
                self.editor.history_up()
        elif key == interaction.history_down:
            if interaction.enable_history:
                self.editor.history_down()
        else:
            return False

        return True

    def snapshot(self) -> ConsoleSnapshot:
        lines = [ConsoleLine(self.format_entry(entry), entry.level,
                             self.get_log_level_color(entry.level))
                 for entry in self.view.page]
        return ConsoleSnapshot(lines=lines,
                               prefix=self.prefix,
                               input_text=self.editor.text,
                               cursor=self.editor.cursor,
                               input_enabled=self._input_enabled,
                               cursor_visible=self.cursor_visible,
                               input_color=self.input_color,
                               scroll_offset=self.view.scroll_offset,
                               visible_count=self.view.visible_count,
                               total_count=self.buffer.count,
                               transition_progress=self.transition_progress,
                               is_open=self.is_open,
                               is_opening=self.is_opening,
                               is_closing=self.is_closing)

    # Built-in commands

    def _register_builtin_commands(self):
        self.add_command("con_info", self._cmd_con_info,
                         "Shows some internal console informations.")
        self.add_command("commands", self._cmd_commands,
                         "Lists all currently registered commands with their first description line.",
                         "commands <part of the command> - lists only the appropriate commands.")
        self.add_command("man", self._cmd_man,
                         "Displays the manual of the provided command.",
                         "man <command>")
        self.add_command("history", self._cmd_history,
                         "Lists the input history.",
                         "history <number> - lists only the last <number> entries.")
        self.add_command("!", self._cmd_repeat,
                         "Executes the last command again.",
                         "! <number> - executes the specified command from the input history again.",
                         log_on_execute=False, history_on_execute=False)
        self.add_command("close", self._cmd_close, "Closes the console.",
                         log_on_execute=False, history_on_execute=False)
        self.add_command("exit", self._cmd_exit, "Exit the game.",
                         log_on_execute=False, history_on_execute=False)
        self.add_command("clear", self._cmd_clear,
                         "Clears the console log, the input history or the command list.",
                         "clear - clears the log.",
                         "clear history - clears the input history.",
                         "clear commands - clears all registered commands.")
        self.add_command("con_set", self._cmd_con_set,
                         "Sets properties of the console.",
                         "con_set color log <r:byte> <g:byte> <b:byte> - sets the default log text color.",
                         "con_set color input <r:byte> <g:byte> <b:byte> - sets the input text color.",
                         "con_set color level <level:byte> <r:byte> <g:byte> <b:byte> - sets the log level color.",
                         "con_set blink <float> - sets the blink speed of the cursor (in seconds).",
                         "con_set prefix <string> - sets the prefix of the input line.",
                         "con_set lines <int> - sets the maximum visible lines.",
                         "con_set capacity <int> - sets the maximum log entries (0 = unlimited).",
                         "con_set timeformat <string> - sets the strftime format for the timestamp.")
        self.add_command("con_tog", self._cmd_con_tog,
                         "Toggles boolean properties of the console.",
                         "con_tog time - toggles the visibility of the log timestamp.",
                         "con_tog level - toggles the visibility of the log level.",
                         "con_tog level <byte> - toggles the provided log level visibility.",
                         "con_tog autoscroll - toggles the auto scrolling for the log.")
        self.add_command("con_save", self._cmd_con_save,
                         "Saves the entire log to the provided file.",
                         "con_save <path> - the path can be relative or absolute.",
                         f"If no path is supplied it saves to a file named {DEFAULT_SAVE_PATH}.")

    def _cmd_con_info(self, name: str, args: List[str], timestamp: float):
        self.log(f"Log entries visible: {self.visible_count}/{self.total_count}")
        self.log(f"History entries: {len(self.history)}")
        self.log(f"Commands registered: {len(self.commands)}")

    def _cmd_commands(self, name: str, args: List[str], timestamp: float):
        if args:
            selected = self.commands.search(args[0])
            if selected:
                self.log(f"List of {len(selected)} appropriate commands for '{args[0]}':")
            else:
                self.log(f"No appropriate commands found for '{args[0]}'.")
        else:
            selected = list(self.commands)
            self.log(f"List of all {len(selected)} commands:")

        for i, command in enumerate(selected, 1):
            self.log(f"{i:03d}: {command.name} => {command.description}")

    def _cmd_man(self, name: str, args: List[str], timestamp: float):
        if not args:
            self.exec_manual("man")
            return

        command = self.commands.lookup(args[0])
        if command is None:
            self.log(f"Command '{args[0]}' not found.", ERROR_LEVEL)
            return

        self.log(f"Manual for the command '{args[0]}':")
        for line in command.manual:
            self.log(line)

    def _cmd_history(self, name: str, args: List[str], timestamp: float):
        count = int(args[0]) if args else None
        self.log(f"There are {len(self.history)} entries in the input history.")
        for i, line in enumerate(self.history.last(count), 1):
            self.log(f"{i:03d}: {line}")

    def _cmd_repeat(self, name: str, args: List[str], timestamp: float):
        index = len(self.history) - 1
        if args:
            index -= int(args[0])
            if not 0 <= index < len(self.history):
                return
        if len(self.history) > 0:
            self.execute(self.history[index])

    def _cmd_close(self, name: str, args: List[str], timestamp: float):
        self.close()

    def _cmd_exit(self, name: str, args: List[str], timestamp: float):
        if self.exit_handler is not None:
            self.exit_handler()
        elif pygame.display.get_init():
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    def _cmd_clear(self, name: str, args: List[str], timestamp: float):
        if not args:
            self.clear()
        elif args[0] == "history":
            self.clear_history()
        elif args[0] == "commands":
            self.clear_commands()
        else:
            self.log(f"Command 'clear {args[0]}' not found.", ERROR_LEVEL)

    def _cmd_con_set(self, name: str, args: List[str], timestamp: float):
        if not args:
            self.exec_manual("con_set")
            return

        setting = args[0]
        if setting == "color":
            target = args[1]
            if target == "log":
                self.log_default_color = pygame.Color(_parse_byte(args[2]), _parse_byte(args[3]),
                                                      _parse_byte(args[4]))
            elif target == "input":
                self.input_color = pygame.Color(_parse_byte(args[2]), _parse_byte(args[3]),
                                                _parse_byte(args[4]))
            elif target == "level":
                self.set_log_level_color(_parse_byte(args[2]),
                                         pygame.Color(_parse_byte(args[3]), _parse_byte(args[4]),
                                                      _parse_byte(args[5])))
            else:
                self.log(f"Command 'con_set color {target}' not found.", ERROR_LEVEL)
        elif setting == "blink":
            rate = float(args[1])
            if rate >= 0.0:
                self.cursor_blink_rate = rate
        elif setting == "prefix":
            self.prefix = args[1] + " "
        elif setting == "lines":
            self.lines = int(args[1])
        elif setting == "capacity":
            self.max_log_entries = int(args[1])
        elif setting == "timeformat":
            self.time_format = " ".join([args[1]] + args[2:])
        else:
            self.log(f"Command 'con_set {setting}' not found.", ERROR_LEVEL)

    def _cmd_con_tog(self, name: str, args: List[str], timestamp: float):
        if not args:
            self.exec_manual("con_tog")
            return

        setting = args[0]
        if setting == "time":
            self.show_log_time = not self.show_log_time
            self.log(f"ShowLogTime = {self.show_log_time}", DEBUG_LEVEL)
        elif setting == "level":
            if len(args) > 1:
                level = _parse_byte(args[1])
                visible = not self.get_log_level_visibility(level)
                self.set_log_level_visibility(level, visible)
                self.log(f"LogLevelVisibility[{level}] = {visible}", DEBUG_LEVEL)
            else:
                self.show_log_level = not self.show_log_level
                self.log(f"ShowLogLevel = {self.show_log_level}", DEBUG_LEVEL)
        elif setting == "autoscroll":
            self.auto_scroll = not self.auto_scroll
            self.log(f"AutoScroll = {self.auto_scroll}", DEBUG_LEVEL)
        else:
            self.log(f"Command 'con_tog {setting}' not found.", ERROR_LEVEL)

    def _cmd_con_save(self, name: str, args: List[str], timestamp: float):
        path = args[0] if args else self.config.behavior.save_path
        self.save_log_to_file(path)
        self.log(f"Log successfully saved: {path}")
