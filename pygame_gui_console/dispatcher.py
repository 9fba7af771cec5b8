from typing import List, Callable
from dataclasses import dataclass
from enum import Enum
import re
import time

from pygame_gui_console.command_table import CommandTable, CommandHandler
from pygame_gui_console.history import HistoryStore
from pygame_gui_console.log_buffer import ERROR_LEVEL

DISPATCH_DEBUG = False

_TOKEN_SPLIT = re.compile(r'[ \t]+')


class ExecutionOutcome(Enum):
    """Result of a single submission"""
    SUCCESS = "success"
    ARGUMENT_COUNT_FAULT = "argument_count_fault"
    ARGUMENT_FORMAT_FAULT = "argument_format_fault"
    HANDLER_FAULT = "handler_fault"
    COMMAND_NOT_FOUND = "command_not_found"


FAULT_MESSAGES = {
    ExecutionOutcome.ARGUMENT_COUNT_FAULT: "Error: The argument count doesn't match the command.",
    ExecutionOutcome.ARGUMENT_FORMAT_FAULT: "Error: One or more of the arguments have the wrong type.",
}


@dataclass(frozen=True)
class HandlerResult:
    """Tagged outcome of one handler call"""
    outcome: ExecutionOutcome = ExecutionOutcome.SUCCESS
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == ExecutionOutcome.SUCCESS

    def describe(self) -> str:
        """Diagnostic line for the console log"""
        if self.outcome in FAULT_MESSAGES:
            return FAULT_MESSAGES[self.outcome]
        return f"Error: {self.message}"


def invoke_handler(handler: CommandHandler, name: str, args: List[str],
                   timestamp: float) -> HandlerResult:
    """Call a handler and turn whatever it raises into a HandlerResult"""
    try:
        handler(name, args, timestamp)
    except IndexError as e:
        return HandlerResult(ExecutionOutcome.ARGUMENT_COUNT_FAULT, str(e))
    except ValueError as e:
        return HandlerResult(ExecutionOutcome.ARGUMENT_FORMAT_FAULT, str(e))
    except Exception as e:
        return HandlerResult(ExecutionOutcome.HANDLER_FAULT, str(e) or type(e).__name__)
    return HandlerResult()


def tokenize(line: str) -> List[str]:
    """Split on runs of spaces and tabs, dropping empty tokens"""
    return [token for token in _TOKEN_SPLIT.split(line) if token]


class Dispatcher:
    """Resolves submitted lines to commands and runs their handlers"""

    def __init__(self, commands: CommandTable, history: HistoryStore,
                 log: Callable[[str, int], None],
                 prefix: str = "> ", report_on_error: bool = True):
        self.commands = commands
        self.history = history
        self.log = log
        self.prefix = prefix
        self.report_on_error = report_on_error

    def submit(self, raw_line: str, add_to_log: bool = True) -> ExecutionOutcome:
        line = raw_line.strip()
        if not line:
            if add_to_log:
                self.log(self.prefix, 0)
            return ExecutionOutcome.SUCCESS

        tokens = tokenize(line)
        name, args = tokens[0], tokens[1:]

        command = self.commands.lookup(name)
        if command is None:
            # Same adjacent-duplicate rule as every other history append
            self.history.add(line)
            if add_to_log:
                self.log(self.prefix + line, 0)
                if self.report_on_error:
                    self.log(f"Command '{name}' not found.", ERROR_LEVEL)
            return ExecutionOutcome.COMMAND_NOT_FOUND

        history_on_execute = command.history_on_execute
        if command.log_on_execute and add_to_log:
            self.log(self.prefix + line, 0)

        timestamp = time.time()
        result = HandlerResult()
        # Snapshot so a handler registering more handlers doesn't affect this call
        for handler in list(command.handlers):
            result = invoke_handler(handler, name, list(args), timestamp)
            if not result.ok:
                break

        # Handlers may switch history off for this one call
        if command.history_on_execute:
            self.history.add(line)
        else:
            self.history.reset_cursor()
        command.history_on_execute = history_on_execute

        if not result.ok:
            if DISPATCH_DEBUG:
                print(f"Command '{name}' failed: {result.outcome.value} {result.message}")
            if add_to_log and self.report_on_error:
                self.log(result.describe(), ERROR_LEVEL)

        return result.outcome
