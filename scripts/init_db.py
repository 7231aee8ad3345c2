from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hostel_management.hostel_management.database.bootstrap import init_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    init_store(settings)
    print(f"OK: store ready -> backend={settings.STORE_BACKEND}")


if __name__ == "__main__":
    main()
