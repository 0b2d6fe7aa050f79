"""Things that make up the game world: objects and rooms."""

from __future__ import annotations

from dataclasses import dataclass, field

from goforth.direction import Direction


@dataclass
class GameObject:
    """An item that can lie in a room or be carried by the player."""

    id: str
    name: str


@dataclass
class Room:
    """A location, linked to other rooms through directional exits."""

    id: str
    description: str
    exits: dict[Direction, str] = field(default_factory=dict)