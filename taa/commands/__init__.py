"""
Line commands: argument tokenizer, the command contract and every command.
"""

from .arguments import tokenize
from .base import Command
from .registry import COMMANDS, create_command, parse_command, split_command_line

__all__ = [
    "tokenize",
    "Command",
    "COMMANDS",
    "create_command",
    "parse_command",
    "split_command_line",
]
