from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ruinlab.game.vocabulary import Direction


class ItemState(Enum):
    ROOM = "room"
    INVENTORY = "inventory"
    EQUIPPED = "equipped"  # not used by the turn logic


@dataclass
class Item:
    name: str
    description: str
    location: ItemState = ItemState.ROOM

    def to_inventory(self) -> None:
        self.location = ItemState.INVENTORY

    def to_room(self) -> None:
        self.location = ItemState.ROOM

    def is_in_inventory(self) -> bool:
        return self.location == ItemState.INVENTORY


@dataclass
class Interactable:
    id: str
    name: str
    before_interaction_description: str
    after_interaction_description: str
    interaction_description: str
    interacted: bool = False
    prerequisite_item: str = ""

    def interact(self) -> None:
        self.interacted = True

    def is_interacted(self) -> bool:
        return self.interacted

    def examine(self) -> str:
        if self.interacted:
            return self.after_interaction_description
        return self.before_interaction_description


@dataclass
class Exit:
    direction: Direction
    target: int
    locked: bool = False
    interactable_id: str = ""  # empty: no interactable controls this exit

    def is_locked(self) -> bool:
        return self.locked

    def unlock(self) -> None:
        self.locked = False


@dataclass
class Room:
    description: str
    interactables: list[Interactable] = field(default_factory=list)
    items: list[str] = field(default_factory=list)  # descriptive only
    exits: list[Exit] = field(default_factory=list)

    def find_interactable(self, name: str) -> Interactable | None:
        return next((i for i in self.interactables if i.name == name), None)

    def find_exit(self, direction: Direction) -> Exit | None:
        return next((e for e in self.exits if e.direction == direction), None)


@dataclass
class GameState:
    current_room_idx: int
    inventory: dict[str, Item]
    rooms: list[Room]
    sys_message: str = ""

    @property
    def current_room(self) -> Room:
        return self.rooms[self.current_room_idx]
