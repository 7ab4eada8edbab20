"""sonar_sync/io.py

Tiny filesystem helpers for sync snapshots.

JSON is written to a sibling ``.tmp`` file first and moved into place, so a
reader never sees a half-written snapshot.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def write_json(path: Path, data: Any) -> None:
    """Write pretty JSON to disk (UTF-8), atomically."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()


def read_json(path: Path) -> Any:
    """Read JSON from disk (UTF-8)."""
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
