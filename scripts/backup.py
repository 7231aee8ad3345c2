"""Backup every item of the configured store to a JSON file under ``backups/``."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hostel_management.hostel_management.database.bootstrap import build_store


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    items = build_store(settings).scan()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"hostel_items_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    out_file.write_text(json.dumps(list(items), ensure_ascii=False, indent=2, default=str), encoding="utf-8")

    print(f"OK: backup -> {out_file} ({len(items)} items)")


if __name__ == "__main__":
    main()
