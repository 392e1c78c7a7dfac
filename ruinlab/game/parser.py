from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ruinlab.game.models import Item, Room
from ruinlab.game.vocabulary import Intent, determine_intent, is_direction, is_legal_command


class Namespace(Enum):
    KEYWORD = "keyword"
    DIRECTION = "direction"
    ITEM = "item"
    INTERACTABLE = "interactable"


@dataclass(frozen=True)
class ParsedInput:
    verb: str
    legal: bool
    intent: Intent = Intent.UNKNOWN
    object_noun: str = ""
    namespace: Namespace | None = None

    @property
    def is_direction(self) -> bool:
        return self.namespace is Namespace.DIRECTION

    @property
    def is_item(self) -> bool:
        return self.namespace is Namespace.ITEM

    @property
    def is_interactable(self) -> bool:
        return self.namespace is Namespace.INTERACTABLE


Matcher = Callable[[str, Room, dict[str, Item]], bool]

# Evaluated in order for every token; the first hit wins.
MATCHERS: list[tuple[Namespace, Matcher]] = [
    (Namespace.KEYWORD, lambda word, room, inventory: word == "inventory"),
    (Namespace.DIRECTION, lambda word, room, inventory: is_direction(word)),
    (Namespace.ITEM, lambda word, room, inventory: word in inventory),
    (Namespace.INTERACTABLE, lambda word, room, inventory: room.find_interactable(word) is not None),
]


def match_noun(word: str, room: Room, inventory: dict[str, Item]) -> Namespace | None:
    for namespace, matcher in MATCHERS:
        if matcher(word, room, inventory):
            return namespace
    return None


def parse_input(line: str, room: Room, inventory: dict[str, Item]) -> ParsedInput:
    """Classify one line of player input against the acting room and inventory.

    The first token is the verb. An illegal verb stops parsing. Otherwise the
    first remaining token found in any namespace becomes the object noun and
    every token after it is ignored.
    """
    verb, *rest = line.split()
    if not is_legal_command(verb.lower()):
        return ParsedInput(verb=verb, legal=False)

    intent = determine_intent(verb.lower())
    for token in rest:
        word = token.lower()
        namespace = match_noun(word, room, inventory)
        if namespace is not None:
            return ParsedInput(verb=verb, legal=True, intent=intent, object_noun=word, namespace=namespace)

    return ParsedInput(verb=verb, legal=True, intent=intent)
