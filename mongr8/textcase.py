"""Conversions between free-form names, snake case and capitalized camel case."""

from __future__ import annotations

import re

# A name is treated as snake case when it starts with a letter and ends with
# a letter or digit; anything in between is accepted.
_SNAKE_CASE = re.compile(r"[a-zA-Z].*[a-zA-Z0-9]")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def _is_snake_case(text: str) -> bool:
    return _SNAKE_CASE.fullmatch(text) is not None


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _words(text: str) -> list[str]:
    """Split on every run of characters that are not ASCII letters or digits."""
    return [word for word in _NON_ALNUM.split(text) if word]


def to_snake_case(text: str) -> str:
    """Lower-case the alphanumeric words of ``text`` and join them with ``_``."""
    return "_".join(word.lower() for word in _words(text))


def to_capitalized_camel_case(text: str) -> str:
    """Capitalize each word of a snake-case (or else space-separated) name."""
    separator = "_" if _is_snake_case(text) else " "
    return "".join(_capitalize(word) for word in text.split(separator))