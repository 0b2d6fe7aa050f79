"""The player's position in the world."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """The person playing; knows only which room it stands in.

    Validating moves is left to the caller.
    """

    current_room: str

    def move_to(self, room_id: str) -> None:
        """Place the player in the room with the given ID."""
        self.current_room = room_id