from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import yaml


@dataclass(frozen=True)
class GameConfig:
    world_path: str | None = None  # None: the bundled world
    audit_enabled: bool = False
    audit_path: str = "./ruinlab_audit.jsonl"
    log_level: str = "WARNING"


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _resolve_relative(base: Path, value: str) -> str:
    if Path(value).is_absolute():
        return value
    return str((base / value).resolve())


def load_game_config(path: str | Path) -> GameConfig:
    config_path = Path(path).resolve()
    raw = load_yaml(config_path)

    world_path = raw.get("world", {}).get("path")
    world_path = _resolve_relative(config_path.parent, world_path) if world_path else None

    audit_raw = raw.get("audit", {})
    audit_path = _resolve_relative(config_path.parent, audit_raw.get("path", "./ruinlab_audit.jsonl"))

    log_level = str(raw.get("logging", {}).get("level", "WARNING")).upper()

    return GameConfig(
        world_path=world_path,
        audit_enabled=bool(audit_raw.get("enabled", False)),
        audit_path=audit_path,
        log_level=log_level,
    )
