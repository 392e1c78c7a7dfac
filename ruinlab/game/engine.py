from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Callable

from ruinlab.game.loader import DEFAULT_WORLD, load_world
from ruinlab.game.models import GameState, ItemState
from ruinlab.game.parser import ParsedInput, parse_input
from ruinlab.game.vocabulary import Intent, text_to_direction


logger = logging.getLogger(__name__)

UNABLE_TO_UNDERSTAND = "I was unable to understand your command.  Please re-enter and try again."
NO_APPROPRIATE_COMMAND = "You didn't choose an appropriate command"
WAY_IS_LOCKED = "The way is locked. You must unlock the path before you proceed."
INVENTORY_HEADER = "Your inventory:\n"
EMPTY_INVENTORY = "You have no items in your inventory"
ITEM_NOT_HELD = "You have no item of that name in your inventory"


def start_game(world_path: str | Path | None = None) -> GameState:
    return load_world(Path(world_path) if world_path else DEFAULT_WORLD)


def update(prev_state: GameState, line: str) -> GameState:
    """Apply one line of player input and return the next snapshot.

    ``prev_state`` is never modified. Every outcome, including nonsense input,
    is reported through ``sys_message`` of the returned state.
    """
    state = copy.deepcopy(prev_state)

    if not line.split():
        state.sys_message = UNABLE_TO_UNDERSTAND
        return state

    parsed = parse_input(line, state.current_room, state.inventory)
    if not parsed.legal:
        state.sys_message = f"{parsed.verb} is not a legal command\n"
        return state

    if not parsed.object_noun:
        state.sys_message = UNABLE_TO_UNDERSTAND

    handler = HANDLERS.get(parsed.intent, _unknown)
    message = handler(state, parsed)
    if message is not None:
        state.sys_message = message

    logger.debug(
        "turn %r -> intent=%s noun=%r namespace=%s room=%d",
        line,
        parsed.intent.name,
        parsed.object_noun,
        parsed.namespace.name if parsed.namespace else None,
        state.current_room_idx,
    )
    return state


# -- intent handlers --
# Each handler mutates the copied state and returns the turn message, or None
# to keep the "unable to understand" notice for an unresolved noun.


def _examine(state: GameState, parsed: ParsedInput) -> str | None:
    if parsed.is_interactable:
        return state.current_room.find_interactable(parsed.object_noun).examine()
    if parsed.is_item:
        return state.inventory[parsed.object_noun].description
    if not parsed.object_noun:
        return None
    return f"You can not examine {parsed.object_noun}"


def _interact(state: GameState, parsed: ParsedInput) -> str | None:
    if not parsed.object_noun:
        return None
    if not parsed.is_interactable:
        return f"There is no {parsed.object_noun} in this room"

    inter = state.current_room.find_interactable(parsed.object_noun)
    if inter.prerequisite_item:
        return f"You currently can not interact with {inter.name}"
    if inter.is_interacted():
        return f"You have already interacted with the {inter.name}"
    inter.interact()
    return inter.interaction_description


def _use(state: GameState, parsed: ParsedInput) -> str:
    room = state.current_room
    noun = parsed.object_noun
    item = state.inventory.get(noun)
    is_in_inventory = item is not None and item.is_in_inventory()
    inter = next((i for i in room.interactables if i.prerequisite_item == noun), None)

    # Ownership is checked before the room's interactables.
    if not is_in_inventory:
        return ITEM_NOT_HELD
    if not parsed.is_item or inter is None:
        return f"You can not use `{noun}` here"
    if inter.is_interacted():
        return f"{inter.prerequisite_item} has already been used here"

    controlled = next((e for e in room.exits if e.interactable_id == inter.id), None)
    if controlled is not None:
        controlled.unlock()
    inter.interact()
    item.to_room()
    return inter.interaction_description


def _pick_up(state: GameState, parsed: ParsedInput) -> str | None:
    if not parsed.object_noun:
        return None
    if not parsed.is_item:
        return f"There is no {parsed.object_noun} here to pick up"

    item = state.inventory[parsed.object_noun]
    if item.location == ItemState.ROOM:
        item.to_inventory()
        return f"You have picked up a {item.name}"
    return f"You already have the {item.name}"


def _list_inventory(state: GameState, parsed: ParsedInput) -> str:
    lines = [
        f"{item.name}: {item.description}\n"
        for item in state.inventory.values()
        if item.location != ItemState.ROOM
    ]
    if not lines:
        return EMPTY_INVENTORY
    return INVENTORY_HEADER + "".join(lines)


def _move(state: GameState, parsed: ParsedInput) -> str:
    if not parsed.is_direction:
        return f"There is no path to the {parsed.object_noun}"

    direction = text_to_direction(parsed.object_noun)
    ex = state.current_room.find_exit(direction)
    if ex is None:
        return f"There is no exit leaving {parsed.object_noun}"
    if ex.is_locked():
        return WAY_IS_LOCKED

    state.current_room_idx = ex.target
    return state.current_room.description


def _unknown(state: GameState, parsed: ParsedInput) -> str:
    return NO_APPROPRIATE_COMMAND


HANDLERS: dict[Intent, Callable[[GameState, ParsedInput], str | None]] = {
    Intent.EXAMINE: _examine,
    Intent.INTERACT: _interact,
    Intent.USE: _use,
    Intent.INVENTORY: _pick_up,
    Intent.LIST_INVENTORY: _list_inventory,
    Intent.MOVEMENT: _move,
}
