"""
Tokenizer for ``key/value`` command arguments and helpers for parsing values.
"""

import re
from typing import Dict, Iterable, Optional


KEY_SEPARATOR = "/"

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def tokenize(argument: str, keys: Iterable[str]) -> Dict[str, str]:
    """Split a raw argument string into a ``{key: value}`` map.

    A whitespace-separated token ``<key>/<rest>`` whose ``<key>`` is one of
    ``keys`` starts a new value; any other token is appended to the value
    being read. Text before the first recognized key is ignored, a repeated
    key keeps its last value, and the result only ever holds keys from
    ``keys``. Never raises.
    """
    recognized = set(keys)
    argument_map: Dict[str, str] = {}
    current_key: Optional[str] = None
    current_words = []

    for token in argument.split():
        key, separator, rest = token.partition(KEY_SEPARATOR)
        if separator and key in recognized:
            if current_key is not None:
                argument_map[current_key] = " ".join(current_words).strip()
            current_key = key
            current_words = [rest] if rest else []
        elif current_key is not None:
            current_words.append(token)

    if current_key is not None:
        argument_map[current_key] = " ".join(current_words).strip()

    return argument_map


def is_integer(value: str) -> bool:
    """Check whether ``value`` is a plain base-10 integer literal."""
    return _INTEGER_PATTERN.fullmatch(value.strip()) is not None


def is_number(value: str) -> bool:
    """Check whether ``value`` is a finite decimal number literal."""
    return _NUMBER_PATTERN.fullmatch(value.strip()) is not None


def contains_whitespace(value: str) -> bool:
    return any(character.isspace() for character in value)
