from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Any, Optional

from ..attendance.repository import AttendanceRepository
from ..branches.repository import BranchRepository
from ..common.datetime_utils import iso_date, now_utc
from ..common.numbers import percentage
from ..core.constants import FOOD_CATEGORIES, MAINTENANCE_TREND_MONTHS, TOP_N_STATISTICS
from ..core.enums import MaintenanceStatus, OrderStatus
from ..food.repository import FoodOrderRepository, MenuRepository
from ..maintenance.repository import MaintenanceRepository
from ..rooms.repository import RoomRepository
from ..students.repository import StudentRepository

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def last_months(now: datetime, count: int) -> list[tuple[str, str]]:
    """``(YYYY-MM, label)`` for the ``count`` months ending with ``now``'s month, oldest first."""
    out: list[tuple[str, str]] = []
    for back in range(count - 1, -1, -1):
        index = now.year * 12 + (now.month - 1) - back
        year, month0 = divmod(index, 12)
        out.append((f"{year:04d}-{month0 + 1:02d}", _MONTHS[month0]))
    return out


def _top(counter: Counter, key: str, value: str) -> list[dict[str, Any]]:
    # most_common keeps first-seen order on ties
    return [{key: k, value: v} for k, v in counter.most_common(TOP_N_STATISTICS)]


class StatisticsService:
    """Read-only dashboard figures. Every call scans the entity types it needs."""

    def __init__(
        self,
        *,
        students: StudentRepository,
        rooms: RoomRepository,
        branches: BranchRepository,
        maintenance: MaintenanceRepository,
        food_orders: FoodOrderRepository,
        menu: MenuRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._rooms = rooms
        self._branches = branches
        self._maintenance = maintenance
        self._food_orders = food_orders
        self._menu = menu
        self._attendance = attendance

    def dashboard(self) -> dict[str, int]:
        students = self._students.list_all()
        rooms = self._rooms.list_all()
        paid = sum(1 for s in students if s.fees_paid)
        return {
            "totalStudents": len(students),
            "activeStudents": sum(1 for s in students if s.active),
            "totalRooms": len(rooms),
            "occupiedRooms": sum(1 for r in rooms if r.occupied > 0),
            "pendingMaintenance": sum(1 for m in self._maintenance.list_all() if m.status == MaintenanceStatus.PENDING),
            "pendingOrders": sum(1 for o in self._food_orders.list_all() if o.status == OrderStatus.PENDING),
            "paidFees": paid,
            "unpaidFees": len(students) - paid,
        }

    def detailed(self, *, now: Optional[datetime] = None) -> dict[str, Any]:
        now = now or now_utc()
        students = self._students.list_all()
        branches = self._branches.list_all()
        return {
            "attendance": self._attendance_stats(students, branches, iso_date(now)),
            "rooms": self._room_stats(branches),
            "fees": self._fee_stats(students),
            "maintenance": self._maintenance_stats(now),
            "food": self._food_stats(),
        }

    def _attendance_stats(self, students, branches, today: str) -> dict[str, Any]:
        present_ids = {r.student_id for r in self._attendance.list_all() if r.date == today and r.present}
        active = [s for s in students if s.active]

        by_branch = []
        for branch in branches:
            members = [s for s in active if s.branch == branch.branch_id]
            present = sum(1 for s in members if s.student_id in present_ids)
            by_branch.append(
                {"branch": branch.name, "present": present, "absent": len(members) - present, "total": len(members)}
            )

        present_today = sum(1 for s in active if s.student_id in present_ids)
        return {
            "byBranch": by_branch,
            "overall": {
                "present": present_today,
                "absent": len(active) - present_today,
                "percentage": percentage(present_today, len(active)),
            },
        }

    def _room_stats(self, branches) -> dict[str, Any]:
        rooms = self._rooms.list_all()
        by_branch = []
        for branch in branches:
            own = [r for r in rooms if r.branch == branch.branch_id]
            capacity = sum(r.capacity for r in own)
            occupied = sum(r.occupied for r in own)
            by_branch.append(
                {"branch": branch.name, "total": len(own), "occupied": occupied, "available": capacity - occupied}
            )

        capacity = sum(r.capacity for r in rooms)
        occupied = sum(r.occupied for r in rooms)
        return {
            "byBranch": by_branch,
            "overall": {"total": len(rooms), "occupied": occupied, "occupancyRate": percentage(occupied, capacity)},
        }

    @staticmethod
    def _fee_stats(students) -> dict[str, Any]:
        paid = sum(1 for s in students if s.fees_paid)
        return {
            "paid": paid,
            "unpaid": sum(1 for s in students if not s.fees_paid and s.active),
            "partial": 0,
            "total": len(students),
            "collectionRate": percentage(paid, len(students)),
        }

    def _maintenance_stats(self, now: datetime) -> dict[str, Any]:
        requests = self._maintenance.list_all()
        statuses = Counter(m.status for m in requests)
        return {
            "byStatus": [
                {"status": s.value, "count": statuses[s]} for s in MaintenanceStatus if statuses[s] > 0
            ],
            "byCategory": _top(Counter(m.category or "Other" for m in requests), "category", "count"),
            "trends": [
                {"month": label, "count": sum(1 for m in requests if m.created_at.startswith(prefix))}
                for prefix, label in last_months(now, MAINTENANCE_TREND_MONTHS)
            ],
        }

    def _food_stats(self) -> dict[str, Any]:
        orders = self._food_orders.list_all()
        menu = self._menu.list_all()
        by_id = {m.menu_id: m for m in menu}
        by_name = {m.name: m for m in menu}

        per_item: Counter = Counter()
        per_category: Counter = Counter({c: 0 for c in FOOD_CATEGORIES})
        revenue = 0.0
        for order in orders:
            for line in order.items:
                per_item[line.name] += line.quantity
                menu_item = by_id.get(line.menu_id) or by_name.get(line.name)
                per_category[menu_item.category if menu_item else "Snacks"] += line.quantity
            revenue += order.total_amount

        return {
            "topItems": _top(per_item, "name", "orders"),
            "byCategory": [{"category": c, "orders": n} for c, n in per_category.items() if n > 0],
            "revenue": round(revenue, 2),
        }
