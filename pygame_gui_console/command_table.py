from typing import List, Optional, Dict, Callable, Iterator
from dataclasses import dataclass, field

NO_DESCRIPTION = "No description found."

# handler(name, args, timestamp)
CommandHandler = Callable[[str, List[str], float], None]


@dataclass
class Command:
    """A named console command with one or more handlers"""
    name: str
    handlers: List[CommandHandler] = field(default_factory=list)
    log_on_execute: bool = True
    history_on_execute: bool = True
    manual: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.manual:
            self.manual = [NO_DESCRIPTION]

    @property
    def description(self) -> str:
        """First manual line"""
        return self.manual[0]


class CommandTable:
    """Name to command mapping"""

    def __init__(self):
        self._commands: Dict[str, Command] = {}

    def register(self, name: str, handler: Optional[CommandHandler], *manual: str,
                 log_on_execute: bool = True,
                 history_on_execute: bool = True) -> Optional[Command]:
        """
        Register a handler under a name.

        Registering an existing name appends the handler; the flags and manual
        of the first registration are kept.
        """
        if handler is None:
            return None

        command = self._commands.get(name)
        if command is None:
            command = Command(name=name,
                              handlers=[handler],
                              log_on_execute=log_on_execute,
                              history_on_execute=history_on_execute,
                              manual=list(manual))
            self._commands[name] = command
        else:
            command.handlers.append(handler)

        return command

    def unregister(self, name: str):
        self._commands.pop(name, None)

    def lookup(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def prefix_search(self, partial: str) -> List[str]:
        """All names starting with partial, sorted ascending"""
        return sorted(name for name in self._commands if name.startswith(partial))

    def search(self, fragment: str) -> List[Command]:
        """Commands whose name contains fragment, sorted by name"""
        return [self._commands[name] for name in sorted(self._commands) if fragment in name]

    def clear(self) -> int:
        count = len(self._commands)
        self._commands.clear()
        return count

    @property
    def names(self) -> List[str]:
        return sorted(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter([self._commands[name] for name in sorted(self._commands)])
