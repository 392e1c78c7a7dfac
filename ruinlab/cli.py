from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import typer
from importlib import metadata
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ruinlab.core.audit import append_audit
from ruinlab.core.config import GameConfig, load_game_config
from ruinlab.game.engine import start_game, update
from ruinlab.game.models import GameState
from ruinlab.game.render import describe_exits, describe_room_items, message_lines, render_room


app = typer.Typer(add_completion=False, help="Ruinlab: a small text adventure in the sands")
console = Console()
err_console = Console(stderr=True)

PROMPT = "\nWhat do you do?\n"
QUIT_WORDS = {"quit", "exit"}
WIN_WORD = "win"
WIN_TEXT = (
    "You have won the entire game.  You have seen the pain Thomas went through for me.  "
    "Will you pull the plug?  Please.  I no longer desire to exist in this world. Let me...sleep."
)


def _get_version() -> str:
    try:
        return metadata.version("ruinlab")
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


def _resolve_config_path(config_path: str) -> str:
    path = Path(config_path)
    if path.exists():
        return str(path)

    env_path = os.getenv("RUINLAB_CONFIG")
    if env_path:
        env_candidate = Path(env_path)
        if env_candidate.exists():
            return str(env_candidate)

    if config_path != "ruinlab.yaml":
        return str(path)

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / "ruinlab.yaml"
        if candidate.exists():
            return str(candidate)

    return str(path)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Ruinlab version and exit.",
        is_eager=True,
    ),
):
    if version:
        console.print(_get_version())
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


def _get_env(config_path: str, world: str | None) -> tuple[GameConfig, GameState]:
    resolved = Path(_resolve_config_path(config_path))
    if resolved.exists():
        cfg = load_game_config(resolved)
    else:
        if config_path != "ruinlab.yaml":
            console.print(f"⚠️ Config file not found: {config_path}, using defaults")
        cfg = GameConfig()
    _setup_logging(cfg.log_level)

    world_path = world or cfg.world_path
    try:
        state = start_game(world_path)
    except FileNotFoundError:
        console.print(f"❌ World file not found: {world_path}")
        raise typer.Exit(code=2)
    except (ValueError, json.JSONDecodeError) as e:
        console.print(f"❌ Invalid world: {e}")
        raise typer.Exit(code=2)
    return cfg, state


def _print_message(message: str) -> None:
    for line in message_lines(message):
        console.print(line, markup=False, highlight=False)


@app.command("play")
def play(
    config: str = typer.Option("ruinlab.yaml", "--config", help="Path to game config"),
    world: str | None = typer.Option(None, "--world", "-w", help="Path to a world JSON file"),
):
    """Play interactively, one command per line."""
    cfg, state = _get_env(config, world)
    _print_message(render_room(state))

    while True:
        try:
            line = console.input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line:
            continue
        if line.lower() in QUIT_WORDS:
            break
        if line == WIN_WORD:
            console.print(f"[bold green]{WIN_TEXT}[/bold green]")
            break

        state = update(state, line)
        _print_message(state.sys_message)

        if cfg.audit_enabled:
            append_audit(
                {
                    "event": "turn",
                    "input": line,
                    "room": state.current_room_idx,
                    "message": state.sys_message,
                },
                cfg.audit_path,
            )

    console.print("Goodbye.")


@app.command("world")
def show_world(
    config: str = typer.Option("ruinlab.yaml", "--config", help="Path to game config"),
    world: str | None = typer.Option(None, "--world", "-w", help="Path to a world JSON file"),
):
    """Validate a world file and list its rooms."""
    _, state = _get_env(config, world)

    table = Table(title="Ruinlab Rooms")
    table.add_column("#", justify="right")
    table.add_column("Description")
    table.add_column("Exits")
    table.add_column("Interactables")
    table.add_column("Items")

    for idx, room in enumerate(state.rooms):
        summary = room.description.splitlines()[0] if room.description else ""
        marker = f"{idx}*" if idx == state.current_room_idx else str(idx)
        interactables = ", ".join(
            f"{i.name} ({i.id})" + (f" needs {i.prerequisite_item}" if i.prerequisite_item else "")
            for i in room.interactables
        )
        table.add_row(
            marker,
            summary,
            describe_exits(state, idx),
            interactables or "none",
            describe_room_items(state, idx),
        )

    console.print(table)
