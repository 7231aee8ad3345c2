from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from werkzeug.security import generate_password_hash

from .common.datetime_utils import now_utc, to_iso
from .common.ids import slugify
from .container import Container
from .students.model import Student

logger = logging.getLogger(__name__)

DEMO_STUDENT_ID = "demo-student"
DEMO_STUDENT_PASSWORD = "student123"

_BRANCHES = (
    ("North Block", "Boys hostel near the main gate", 40),
    ("South Block", "Girls hostel next to the library", 40),
)
_ROOMS = (("north-block", "101", 2), ("north-block", "102", 3), ("south-block", "201", 2))
_MENU = (
    ("Masala Dosa", "Served with chutney and sambar", 40, "Breakfast"),
    ("Veg Thali", "Rice, dal, two curries and roti", 80, "Lunch"),
    ("Paneer Butter Masala", "With two butter naan", 120, "Dinner"),
    ("Samosa", "Two pieces", 20, "Snacks"),
)
_CONTACTS = (
    ("medical", "Campus Clinic", "+911234567890", "Round-the-clock first aid", True),
    ("security", "Main Gate Security", "+911234567891", "Security desk at the main gate", True),
    ("transport", "Hostel Shuttle", "+911234567892", "Shuttle between hostel and campus", False),
)


def seed_demo_data(container: Container, *, now: Optional[datetime] = None) -> None:
    """Idempotent demo data: branches, rooms, menu, contacts, fees and one student."""
    now = now or now_utc()

    existing_branches = {b.branch_id for b in container.branch_service.list_branches()}
    for name, description, capacity in _BRANCHES:
        branch_id = slugify(name)
        if branch_id not in existing_branches:
            container.branch_service.create_branch(name=name, description=description, capacity=capacity, now=now)

    existing_rooms = {(r.branch, r.room_number) for r in container.room_service.list_rooms()}
    for branch, number, capacity in _ROOMS:
        if (branch, number) not in existing_rooms:
            container.room_service.create_room(room_number=number, branch=branch, capacity=capacity)

    menu_names = {m.name for m in container.food_service.list_menu()}
    for name, description, price, category in _MENU:
        if name not in menu_names:
            container.food_service.add_menu_item(
                {"name": name, "description": description, "price": price, "category": category}, now=now
            )

    contact_names = {c.name for c in container.emergency_service.list_contacts()}
    for category, name, phone, description, always_on in _CONTACTS:
        if name not in contact_names:
            container.emergency_service.add_contact(
                {
                    "category": category,
                    "name": name,
                    "phone": phone,
                    "description": description,
                    "available247": always_on,
                },
                now=now,
            )

    if container.fee_service.current_configuration(now=now) is None:
        container.fee_service.save_configuration(
            {"year": str(now.year), "hostelFee": 50000, "maintenanceFee": 5000, "securityDeposit": 10000},
            now=now,
        )

    if not container.students_repo.get_by_id(DEMO_STUDENT_ID):
        container.students_repo.create(
            Student(
                student_id=DEMO_STUDENT_ID,
                password_hash=generate_password_hash(DEMO_STUDENT_PASSWORD),
                name="Demo Student",
                email="demo.student@example.com",
                phone="+919876543210",
                registration_date=to_iso(now),
            )
        )
        container.student_service.assign_room(DEMO_STUDENT_ID, "north-block", "101")

    logger.info("Demo seed ready")
