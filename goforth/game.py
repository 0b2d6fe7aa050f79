"""A running game session and its input loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from goforth.commands import CommandRegistry, QuitGame
from goforth.parser import parse
from goforth.player import Player
from goforth.world import World


@dataclass
class Game:
    """The full state of a game: world, player and known commands."""

    world: World
    player: Player
    registry: CommandRegistry

    def run(self, stream: Iterable[str]) -> None:
        """Read commands line by line from ``stream`` and carry them out.

        Stops at the end of input or when a handler raises QuitGame;
        any other error propagates.
        """
        for line in stream:
            try:
                self.registry.dispatch(parse(line), self)
            except QuitGame:
                return