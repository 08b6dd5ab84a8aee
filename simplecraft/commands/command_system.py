# simplecraft/commands/command_system.py
"""
Command registry and decoding.

Input text is decoded exactly once, here, into a typed Command. Handlers never
see raw strings for numeric arguments.
"""
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from simplecraft.config import (
    FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE,
    HELP_MAX_COMMANDS_PER_CATEGORY, PLUGIN_COMMAND_NAME
)

class CommandKind(Enum):
    # Crafting session
    BEGIN = "begin"
    ADD = "add"
    CANCEL = "cancel"
    COUNT = "count"
    CRAFT = "craft"
    RESTART = "restart"
    # Host
    GIVE = "give"
    INVENTORY = "inventory"
    SHOW = "show"
    VARIABLE = "var"
    SWITCH = "switch"
    HELP = "help"

@dataclass(frozen=True)
class Command:
    kind: CommandKind
    args: Tuple[int, ...] = ()
    text: str = "" # Free text payload (SHOW, HELP)

    def arg(self, index: int, default: Optional[int] = None) -> Optional[int]:
        return self.args[index] if index < len(self.args) else default

class CommandError(ValueError):
    """Raised when input text cannot be decoded into a Command."""

Handler = Callable[[Command, Any], str]

# Dictionary to store all registered commands, keyed by name and alias
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {"crafting": [], "host": []}

def command(kind: CommandKind, aliases: Optional[List[str]] = None, category: str = "host",
            help_text: str = "No help available.", args: Sequence[str] = (), takes_text: bool = False):
    """
    Decorator for registering a handler for a command kind.

    `args` names the integer arguments in order; wrap a name in brackets to
    make it optional ("[qty]"). With `takes_text` the rest of the line is
    passed through untouched as Command.text.
    """
    aliases = aliases or []

    def decorator(func: Handler) -> Handler:
        @wraps(func)
        def wrapper(*a, **kw):
            return func(*a, **kw)

        cmd_data = {
            "name": kind.value,
            "kind": kind,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
            "args": list(args),
            "takes_text": takes_text,
        }

        registered_commands[kind.value] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data
        command_groups.setdefault(category, []).append(cmd_data)
        return wrapper
    return decorator

def _usage(cmd_data: Dict[str, Any]) -> str:
    parts = [cmd_data["name"]]
    parts += [a if a.startswith("[") else f"<{a}>" for a in cmd_data["args"]]
    if cmd_data["takes_text"]:
        parts.append("<text>")
    return " ".join(parts)

def _split_word(text: str) -> Tuple[str, str]:
    """Split off the first whitespace-delimited word, keeping the remainder verbatim."""
    stripped = text.lstrip()
    for i, ch in enumerate(stripped):
        if ch.isspace():
            return stripped[:i], stripped[i + 1:]
    return stripped, ""

class CommandProcessor:
    """Decodes user input and dispatches it to the registered handler."""

    def decode(self, text: str) -> Optional[Command]:
        """Turn a line of input into a Command. Returns None for blank input."""
        word, rest = _split_word(text)
        if not word:
            return None

        # Accept the plugin-command form: "SimpleCrafting add 3"
        if word.lower() == PLUGIN_COMMAND_NAME:
            word, rest = _split_word(rest)
            if not word:
                raise CommandError(f"Usage: {PLUGIN_COMMAND_NAME} <command> [args]")

        cmd_data = registered_commands.get(word.lower())
        if not cmd_data:
            raise CommandError(f"Unknown command: {word}")

        if cmd_data["takes_text"]:
            return Command(cmd_data["kind"], (), rest.strip())

        tokens = rest.split()
        arg_names: List[str] = cmd_data["args"]
        if len(tokens) > len(arg_names):
            raise CommandError(f"Too many arguments. Usage: {_usage(cmd_data)}")

        values: List[int] = []
        for index, name in enumerate(arg_names):
            if index >= len(tokens):
                if not name.startswith("["):
                    raise CommandError(f"Usage: {_usage(cmd_data)}")
                break
            try:
                values.append(int(tokens[index]))
            except ValueError:
                raise CommandError(f"'{tokens[index]}' is not a number. Usage: {_usage(cmd_data)}") from None

        return Command(cmd_data["kind"], tuple(values))

    def dispatch(self, cmd: Command, context: Any = None) -> str:
        cmd_data = registered_commands.get(cmd.kind.value)
        if not cmd_data:
            return f"{FORMAT_ERROR}No handler for '{cmd.kind.value}'.{FORMAT_RESET}"
        return cmd_data["handler"](cmd, context)

    def process_input(self, text: str, context: Any = None) -> str:
        """Decode and execute one line of input."""
        try:
            cmd = self.decode(text)
        except CommandError as e:
            return f"{FORMAT_ERROR}{e}{FORMAT_RESET}"
        if cmd is None:
            return ""
        return self.dispatch(cmd, context)

    def get_help_text(self) -> str:
        """Generate the top-level help text listing every command by category."""
        help_text = f"{FORMAT_TITLE}===== Crafting Help ====={FORMAT_RESET}\n\n"
        categories = sorted(cat for cat, cmds in command_groups.items() if cmds)
        for category in categories:
            help_text += f"{FORMAT_CATEGORY}{category.capitalize()}{FORMAT_RESET}\n"
            commands_in_category = sorted(command_groups[category], key=lambda c: c["name"])
            for cmd in commands_in_category[:HELP_MAX_COMMANDS_PER_CATEGORY]:
                aliases = f" ({', '.join(cmd['aliases'])})" if cmd["aliases"] else ""
                first_line_help = cmd["help_text"].split("\n")[0]
                help_text += f"  {FORMAT_HIGHLIGHT}{_usage(cmd)}{aliases}{FORMAT_RESET}\n"
                help_text += f"    - {first_line_help}\n"
            if len(commands_in_category) > HELP_MAX_COMMANDS_PER_CATEGORY:
                help_text += "  ...\n"
            help_text += "\n"
        help_text += f"Crafting commands may also be written as '{FORMAT_HIGHLIGHT}SimpleCrafting <command>{FORMAT_RESET}'."
        return help_text

    def get_command_help(self, name: str) -> str:
        """Get detailed help for a specific command."""
        cmd = registered_commands.get(name.lower())
        if not cmd:
            return f"{FORMAT_ERROR}No help found for '{name}'.{FORMAT_RESET}"
        help_text = f"{FORMAT_TITLE}Command: {cmd['name'].upper()}{FORMAT_RESET}\n\n"
        help_text += f"{FORMAT_CATEGORY}Usage:{FORMAT_RESET} {_usage(cmd)}\n"
        if cmd["aliases"]:
            help_text += f"{FORMAT_CATEGORY}Aliases:{FORMAT_RESET} {', '.join(cmd['aliases'])}\n"
        help_text += f"\n{FORMAT_CATEGORY}Description:{FORMAT_RESET}\n"
        for line in cmd["help_text"].split("\n"):
            help_text += f"  {line}\n"
        return help_text
