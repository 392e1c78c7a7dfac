from __future__ import annotations

from enum import Enum


class Intent(Enum):
    EXAMINE = "examine"
    INTERACT = "interact"
    INVENTORY = "inventory"  # pick up
    LIST_INVENTORY = "list_inventory"
    MOVEMENT = "movement"
    USE = "use"
    UNKNOWN = "unknown"


class Direction(Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"


LEGAL_COMMANDS: dict[str, Intent] = {
    "examine": Intent.EXAMINE,
    "inspect": Intent.EXAMINE,
    "look": Intent.EXAMINE,
    "read": Intent.EXAMINE,
    "check": Intent.EXAMINE,
    "interact": Intent.INTERACT,
    "push": Intent.INTERACT,
    "pull": Intent.INTERACT,
    "press": Intent.INTERACT,
    "open": Intent.INTERACT,
    "touch": Intent.INTERACT,
    "turn": Intent.INTERACT,
    "grab": Intent.INVENTORY,
    "take": Intent.INVENTORY,
    "get": Intent.INVENTORY,
    "pick": Intent.INVENTORY,
    "list": Intent.LIST_INVENTORY,
    "inventory": Intent.LIST_INVENTORY,
    "inv": Intent.LIST_INVENTORY,
    "go": Intent.MOVEMENT,
    "move": Intent.MOVEMENT,
    "walk": Intent.MOVEMENT,
    "run": Intent.MOVEMENT,
    "head": Intent.MOVEMENT,
    "travel": Intent.MOVEMENT,
    "use": Intent.USE,
    "insert": Intent.USE,
    "apply": Intent.USE,
    "place": Intent.USE,
}

DIRECTION_WORDS: dict[str, Direction] = {
    "north": Direction.N,
    "n": Direction.N,
    "south": Direction.S,
    "s": Direction.S,
    "east": Direction.E,
    "e": Direction.E,
    "west": Direction.W,
    "w": Direction.W,
    "northeast": Direction.NE,
    "ne": Direction.NE,
    "northwest": Direction.NW,
    "nw": Direction.NW,
    "southeast": Direction.SE,
    "se": Direction.SE,
    "southwest": Direction.SW,
    "sw": Direction.SW,
}


def is_legal_command(word: str) -> bool:
    return word in LEGAL_COMMANDS


def determine_intent(word: str) -> Intent:
    return LEGAL_COMMANDS.get(word, Intent.UNKNOWN)


def is_direction(word: str) -> bool:
    return word in DIRECTION_WORDS


def text_to_direction(word: str) -> Direction | None:
    return DIRECTION_WORDS.get(word)
