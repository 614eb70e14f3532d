"""Identifier case conversions used for generated names."""

import re

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+[0-9]*")


def _words(text: str) -> list:
    return _WORD.findall(text)


def snake_case(text: str) -> str:
    """Convert ``text`` to lower_snake_case."""
    return "_".join(word.lower() for word in _words(text))


def pascal_case(text: str) -> str:
    """Convert ``text`` to PascalCase."""
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(text))


def macro_case(text: str) -> str:
    """Convert ``text`` to UPPER_SNAKE_CASE."""
    return "_".join(word.upper() for word in _words(text))