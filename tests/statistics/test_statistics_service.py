from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.hostel_management.hostel_management.statistics.service import last_months


def test_last_months_crosses_year_boundary():
    now = datetime(2026, 2, 10, tzinfo=timezone.utc)
    assert last_months(now, 5) == [
        ("2025-10", "Oct"),
        ("2025-11", "Nov"),
        ("2025-12", "Dec"),
        ("2026-01", "Jan"),
        ("2026-02", "Feb"),
    ]


@pytest.fixture
def busy_hostel(container, make_student, fixed_now):
    container.branch_service.create_branch(name="North Block")
    container.branch_service.create_branch(name="South Block")
    container.room_service.create_room(room_number="101", branch="north-block", capacity=2)
    container.room_service.create_room(room_number="201", branch="south-block", capacity=2)

    make_student("stu-1")
    make_student("stu-2", email="b@example.com")
    make_student("stu-3", email="c@example.com", fees_paid=True)
    container.student_service.assign_room("stu-1", "north-block", "101")
    container.student_service.assign_room("stu-2", "north-block", "101")

    tea = container.food_service.add_menu_item({"name": "Tea", "price": 10, "category": "Snacks"}, now=fixed_now)
    thali = container.food_service.add_menu_item({"name": "Thali", "price": 80, "category": "Lunch"}, now=fixed_now)
    container.food_service.place_order(
        "stu-1", [{"menuId": tea.menu_id, "quantity": 3}, {"menuId": thali.menu_id, "quantity": 1}], now=fixed_now
    )

    container.maintenance_service.submit("stu-1", issue="Fan", category="Electrical", now=fixed_now)
    container.maintenance_service.submit("stu-2", issue="Tap", now=fixed_now)
    container.attendance_service.mark_today("stu-1", now=fixed_now)
    return container


def test_dashboard(busy_hostel):
    assert busy_hostel.statistics_service.dashboard() == {
        "totalStudents": 3,
        "activeStudents": 3,
        "totalRooms": 2,
        "occupiedRooms": 1,
        "pendingMaintenance": 2,
        "pendingOrders": 1,
        "paidFees": 1,
        "unpaidFees": 2,
    }


def test_detailed(busy_hostel, fixed_now):
    stats = busy_hostel.statistics_service.detailed(now=fixed_now)

    assert stats["attendance"]["byBranch"][0] == {"branch": "North Block", "present": 1, "absent": 1, "total": 2}
    assert stats["attendance"]["overall"] == {"present": 1, "absent": 2, "percentage": 33.3}

    assert stats["rooms"]["byBranch"][0] == {"branch": "North Block", "total": 1, "occupied": 2, "available": 0}
    assert stats["rooms"]["overall"] == {"total": 2, "occupied": 2, "occupancyRate": 50}

    assert stats["fees"] == {"paid": 1, "unpaid": 2, "partial": 0, "total": 3, "collectionRate": 33.3}

    maintenance = stats["maintenance"]
    assert maintenance["byStatus"] == [{"status": "pending", "count": 2}]
    assert sorted(c["category"] for c in maintenance["byCategory"]) == ["Electrical", "Other"]
    assert maintenance["trends"][-1] == {"month": "Mar", "count": 2}
    assert len(maintenance["trends"]) == 5

    food = stats["food"]
    assert food["topItems"] == [{"name": "Tea", "orders": 3}, {"name": "Thali", "orders": 1}]
    assert {"category": "Snacks", "orders": 3} in food["byCategory"]
    assert food["revenue"] == 110
