"""Identifier case conversions used for plugin names."""

from __future__ import annotations

import re

# Runs of letters and digits in any script; everything else separates words.
_RUN_RE = re.compile(r"[^\W_]+")


def _starts_word(previous: str, current: str, following: str) -> bool:
    if previous.isdigit() != current.isdigit():
        return True
    if previous.islower() and current.isupper():
        return True
    # Last capital of an acronym run starts the next word ("XML|Http").
    return previous.isupper() and current.isupper() and following.islower()


def _split_run(run: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(run)):
        following = run[index + 1] if index + 1 < len(run) else ""
        if _starts_word(run[index - 1], run[index], following):
            words.append(run[start:index])
            start = index
    words.append(run[start:])
    return words


def split_words(value: str) -> list[str]:
    return [word for run in _RUN_RE.findall(value) for word in _split_run(run)]


def snake_case(value: str) -> str:
    return "_".join(word.lower() for word in split_words(value))


def start_case(value: str) -> str:
    return " ".join(word[0].upper() + word[1:] for word in split_words(value))


def camel_case(value: str) -> str:
    words = [word.lower() for word in split_words(value)]
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])
