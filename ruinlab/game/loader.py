from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ruinlab.game.models import Exit, GameState, Interactable, Item, ItemState, Room
from ruinlab.game.vocabulary import Direction


logger = logging.getLogger(__name__)

DEFAULT_WORLD = Path(__file__).parent / "world.json"

VALID_DIRECTIONS = {d.value for d in Direction}
VALID_LOCATIONS = {s.value for s in ItemState}


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _is_noun(word: Any) -> bool:
    # players' tokens are lowercased and split on whitespace before matching
    return isinstance(word, str) and word.split() == [word] and word == word.lower()


def _expect(value: Any, kind: type, what: str) -> None:
    if not isinstance(value, kind):
        raise ValueError(f"{what} must be a {kind.__name__}, got {type(value).__name__}")


def validate_shape(world_data: Any) -> None:
    _expect(world_data, dict, "world")
    _expect(world_data.get("rooms", []), list, "rooms")
    _expect(world_data.get("items", {}), dict, "items")

    for item_id, item in world_data.get("items", {}).items():
        _expect(item, dict, f"item {item_id}")

    for idx, room in enumerate(world_data.get("rooms", [])):
        _expect(room, dict, f"room {idx}")
        for key in ("interactables", "items", "exits"):
            _expect(room.get(key, []), list, f"{key} of room {idx}")
        for inter in room.get("interactables", []):
            _expect(inter, dict, f"interactable in room {idx}")
        for ex in room.get("exits", []):
            _expect(ex, dict, f"exit in room {idx}")


def validate_world(world_data: dict[str, Any]) -> None:
    validate_shape(world_data)

    rooms = world_data.get("rooms", [])
    items = world_data.get("items", {})

    if not rooms:
        raise ValueError("world has no rooms")

    start_room = world_data.get("start_room", 0)
    if not isinstance(start_room, int) or not 0 <= start_room < len(rooms):
        raise ValueError(f"start_room {start_room} does not exist")

    for item_id, item in items.items():
        if not _is_noun(item_id):
            raise ValueError(f"item key {item_id!r} must be a single lowercase word")
        location = item.get("location", ItemState.ROOM.value)
        if not isinstance(location, str) or location not in VALID_LOCATIONS:
            raise ValueError(f"invalid location {location} for item {item_id}")

    for idx, room in enumerate(rooms):
        interactable_ids: set[str] = set()
        for inter in room.get("interactables", []):
            iid = inter.get("id")
            if not iid or not isinstance(iid, str):
                raise ValueError(f"interactable without id in room {idx}")
            if iid in interactable_ids:
                raise ValueError(f"duplicate interactable id {iid} in room {idx}")
            interactable_ids.add(iid)
            if not _is_noun(inter.get("name")):
                raise ValueError(f"interactable {iid} in room {idx} needs a single lowercase word as name")
            prerequisite = inter.get("prerequisite_item", "")
            if prerequisite and (not isinstance(prerequisite, str) or prerequisite not in items):
                raise ValueError(f"unknown prerequisite_item {prerequisite} for {iid} in room {idx}")

        directions: set[str] = set()
        for ex in room.get("exits", []):
            direction = ex.get("direction")
            if not isinstance(direction, str) or direction not in VALID_DIRECTIONS:
                raise ValueError(f"invalid exit direction {direction} in room {idx}")
            if direction in directions:
                raise ValueError(f"duplicate exit direction {direction} in room {idx}")
            directions.add(direction)

            target = ex.get("target")
            if not isinstance(target, int) or not 0 <= target < len(rooms):
                raise ValueError(f"exit {direction} in room {idx} points to unknown room {target}")

            controller = ex.get("interactable_id", "")
            if controller and (not isinstance(controller, str) or controller not in interactable_ids):
                raise ValueError(f"exit {direction} in room {idx} references unknown interactable {controller}")

        for item_id in room.get("items", []):
            if not isinstance(item_id, str) or item_id not in items:
                raise ValueError(f"unknown item {item_id} in room {idx}")


def build_state(data: dict[str, Any]) -> GameState:
    inventory: dict[str, Item] = {}
    for item_id, item in data.get("items", {}).items():
        inventory[item_id] = Item(
            name=item.get("name", item_id),
            description=item.get("description", ""),
            location=ItemState(item.get("location", ItemState.ROOM.value)),
        )

    rooms: list[Room] = []
    for room in data.get("rooms", []):
        rooms.append(
            Room(
                description=room.get("description", ""),
                interactables=[
                    Interactable(
                        id=inter["id"],
                        name=inter["name"],
                        before_interaction_description=inter.get("before_interaction_description", ""),
                        after_interaction_description=inter.get("after_interaction_description", ""),
                        interaction_description=inter.get("interaction_description", ""),
                        interacted=bool(inter.get("interacted", False)),
                        prerequisite_item=inter.get("prerequisite_item", ""),
                    )
                    for inter in room.get("interactables", [])
                ],
                items=list(room.get("items", [])),
                exits=[
                    Exit(
                        direction=Direction(ex["direction"]),
                        target=ex["target"],
                        locked=bool(ex.get("locked", False)),
                        interactable_id=ex.get("interactable_id", ""),
                    )
                    for ex in room.get("exits", [])
                ],
            )
        )

    return GameState(
        current_room_idx=data.get("start_room", 0),
        inventory=inventory,
        rooms=rooms,
        sys_message="",
    )


def load_world(path: Path) -> GameState:
    data = _load_json(path)
    validate_world(data)
    state = build_state(data)
    logger.info("Loaded world %s: %d rooms, %d items", path, len(state.rooms), len(state.inventory))
    return state
