from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from datetime import datetime, timezone


def append_audit(event: dict[str, Any], path: str = "./ruinlab_audit.jsonl") -> None:
    event = dict(event)
    event["ts"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        f.write(json.dumps(event, ensure_ascii=False) + "\n")
