from ruinlab.game.models import Exit, GameState, Interactable, Item, ItemState, Room
from ruinlab.game.vocabulary import Direction


def make_inventory() -> dict[str, Item]:
    return {
        "helmet": Item("helmet", "a blue helmet covered in dirt", ItemState.ROOM),
        "buster": Item("buster", "A large cannon with four buttons", ItemState.ROOM),
        "pendant": Item("pendant", "A rusty pendant with a small seal on it.", ItemState.INVENTORY),
    }


def make_stone(prerequisite_item: str = "") -> Interactable:
    return Interactable(
        id="lab_stone",
        name="stone",
        before_interaction_description="You see a stone sitting in between two logs",
        after_interaction_description="The stone is sitting on the floor",
        interaction_description="The stone rolls onto the floor",
        prerequisite_item=prerequisite_item,
    )


def make_state(rooms: list[Room], inventory: dict[str, Item] | None = None) -> GameState:
    return GameState(
        current_room_idx=0,
        inventory=make_inventory() if inventory is None else inventory,
        rooms=rooms,
        sys_message="",
    )


def two_rooms(exit_locked: bool = False, interactables=None, controller: str = "") -> list[Room]:
    return [
        Room(
            description="Test Room 1",
            interactables=list(interactables or []),
            items=["helmet"],
            exits=[Exit(direction=Direction.S, target=1, locked=exit_locked, interactable_id=controller)],
        ),
        Room(
            description="Test Room 2",
            exits=[Exit(direction=Direction.N, target=0)],
        ),
    ]
