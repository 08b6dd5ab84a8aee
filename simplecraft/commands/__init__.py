# simplecraft/commands/__init__.py
"""
Commands package initializer.
Importing the handler modules registers their commands.
"""
from .command_system import Command, CommandError, CommandKind, CommandProcessor
from . import crafting, host
