"""Turning a line of player input into a command."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Command:
    """A parsed instruction: a verb and the words that follow it."""

    name: str = ""
    args: list[str] = field(default_factory=list)


def parse(line: str) -> Command:
    """Lower-case ``line`` and split it on whitespace into a command.

    A blank line gives an empty command.
    """
    words = line.lower().split()
    if not words:
        return Command()
    return Command(name=words[0], args=words[1:])