from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hostel_management.hostel_management.auth.email_sender import LoggingEmailSender
from src.hostel_management.hostel_management.container import build_container
from src.hostel_management.hostel_management.database.bootstrap import build_store
from src.hostel_management.hostel_management.seed import DEMO_STUDENT_ID, DEMO_STUDENT_PASSWORD, seed_demo_data


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if settings.STORE_BACKEND == "memory":
        print("STORE_BACKEND=memory keeps nothing between runs; set dynamodb or mysql to seed.")
        return

    container = build_container(
        store=build_store(settings),
        email_sender=LoggingEmailSender(),
        admin_password=settings.ADMIN_PASSWORD,
    )
    seed_demo_data(container)
    print(f"OK: seeded demo data (student {DEMO_STUDENT_ID} / {DEMO_STUDENT_PASSWORD})")


if __name__ == "__main__":
    main()
