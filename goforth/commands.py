"""Registering command handlers and dispatching parsed commands to them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from goforth.parser import Command

if TYPE_CHECKING:
    from goforth.game import Game

Handler = Callable[[list[str], "Game"], None]


class QuitGame(Exception):
    """Raised by a handler to end the game cleanly."""

    def __init__(self) -> None:
        super().__init__("quit")


class CommandRegistry:
    """Maps command names to the handlers that carry them out."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Bind ``handler`` to ``name``; an empty name is ignored."""
        if name:
            self._handlers[name] = handler

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def dispatch(self, command: Command, game: Game) -> None:
        """Run the handler registered for ``command``.

        An empty command does nothing; an unknown one prints a notice.
        Whatever the handler raises propagates.
        """
        if not command.name:
            return
        handler = self._handlers.get(command.name)
        if handler is None:
            print("I don't know how to do that.")
            return
        handler(command.args, game)