from __future__ import annotations

from ruinlab.game.models import GameState, ItemState


def render_room(state: GameState) -> str:
    return state.current_room.description


def message_lines(message: str) -> list[str]:
    lines = message.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def describe_exits(state: GameState, room_idx: int) -> str:
    room = state.rooms[room_idx]
    if not room.exits:
        return "none"
    parts = []
    for ex in room.exits:
        label = f"{ex.direction.value} -> {ex.target}"
        if ex.is_locked():
            label += f" (locked by {ex.interactable_id})" if ex.interactable_id else " (locked)"
        parts.append(label)
    return ", ".join(parts)


def describe_room_items(state: GameState, room_idx: int) -> str:
    names = []
    for item_id in state.rooms[room_idx].items:
        item = state.inventory[item_id]
        names.append(item.name if item.location == ItemState.ROOM else f"{item.name} (taken)")
    return ", ".join(names) if names else "none"
