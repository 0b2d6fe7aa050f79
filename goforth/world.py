"""The game world: rooms, objects and where each object is."""

from __future__ import annotations

from goforth.direction import Direction
from goforth.entities import GameObject, Room

_PLAYER = "player"


class InvalidRoomError(ValueError):
    """A room was given an empty ID."""

    def __init__(self) -> None:
        super().__init__("room ID must not be empty")


class InvalidObjectError(ValueError):
    """An object was given an empty ID."""

    def __init__(self) -> None:
        super().__init__("object ID must not be empty")


class RoomNotFoundError(LookupError):
    """A room ID does not name a room in the world."""

    def __init__(self, room_id: str) -> None:
        super().__init__(f'room "{room_id}" not found')
        self.id = room_id

    def __str__(self) -> str:
        return self.args[0]


class ObjectNotFoundError(LookupError):
    """An object ID does not name an object in the world."""

    def __init__(self, object_id: str) -> None:
        super().__init__(f'object "{object_id}" not found')
        self.id = object_id

    def __str__(self) -> str:
        return self.args[0]


class World:
    """All rooms and objects of a game, and the location of each object."""

    def __init__(self) -> None:
        self._rooms: dict[str, Room] = {}
        self._objects: dict[str, GameObject] = {}
        self._locations: dict[str, str] = {}

    def add_room(self, room: Room) -> None:
        """Register ``room`` under its ID."""
        if not room.id:
            raise InvalidRoomError()
        self._rooms[room.id] = room

    def add_object(self, obj: GameObject) -> None:
        """Register ``obj`` under its ID."""
        if not obj.id:
            raise InvalidObjectError()
        self._objects[obj.id] = obj

    def room_by_id(self, room_id: str) -> Room | None:
        """Return the room with this ID, or None."""
        return self._rooms.get(room_id)

    def object_by_id(self, object_id: str) -> GameObject | None:
        """Return the object with this ID, or None."""
        return self._objects.get(object_id)

    def _require_room(self, room_id: str) -> Room:
        room = self._rooms.get(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def _require_object(self, object_id: str) -> GameObject:
        obj = self._objects.get(object_id)
        if obj is None:
            raise ObjectNotFoundError(object_id)
        return obj

    def connect_rooms(self, from_id: str, direction: Direction, to_id: str) -> None:
        """Add an exit from one room to another in the given direction."""
        origin = self._require_room(from_id)
        self._require_room(to_id)
        origin.exits[direction] = to_id

    def connect_rooms_bidirectional(
        self, from_id: str, direction: Direction, to_id: str
    ) -> None:
        """Link two rooms both ways, the return exit in the opposite direction."""
        self.connect_rooms(from_id, direction, to_id)
        self.connect_rooms(to_id, Direction(direction).opposite(), from_id)

    def place_object(self, object_id: str, room_id: str) -> None:
        """Put an object in a room."""
        self._require_object(object_id)
        self._require_room(room_id)
        self._locations[object_id] = room_id

    def objects_in_room(self, room_id: str) -> list[GameObject]:
        """Return the objects currently in the given room."""
        return [
            self._objects[object_id]
            for object_id, location in self._locations.items()
            if location == room_id
        ]

    def player_inventory(self) -> list[GameObject]:
        """Return the objects the player carries."""
        return self.objects_in_room(_PLAYER)

    def move_object_to_player(self, object_id: str) -> None:
        """Give an object to the player."""
        self._require_object(object_id)
        self._locations[object_id] = _PLAYER

    def move_object_to_room(self, object_id: str, room_id: str) -> None:
        """Move an object into a room."""
        self.place_object(object_id, room_id)

    def player_has_object(self, object_id: str) -> bool:
        """Tell whether the player carries the object."""
        return self._locations.get(object_id) == _PLAYER