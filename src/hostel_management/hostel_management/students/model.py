from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Note: plain data object, the repository maps it to and from store items.
    """

    student_id: str
    password_hash: str
    name: str
    email: str
    phone: str
    registration_date: str
    fees_paid: bool = False
    active: bool = True
    branch: Optional[str] = None
    room_number: Optional[str] = None

    @property
    def has_room(self) -> bool:
        return bool(self.branch and self.room_number)

    def to_dict(self, *, include_password: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {
            "studentId": self.student_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "branch": self.branch,
            "roomNumber": self.room_number,
            "registrationDate": self.registration_date,
            "feesPaid": self.fees_paid,
            "active": self.active,
        }
        if include_password:
            data["password"] = self.password_hash
        return data

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Student":
        return cls(
            student_id=str(item["studentId"]),
            password_hash=str(item.get("password", "")),
            name=item.get("name", ""),
            email=item.get("email", ""),
            phone=item.get("phone", ""),
            registration_date=item.get("registrationDate", ""),
            fees_paid=bool(item.get("feesPaid", False)),
            active=bool(item.get("active", True)),
            branch=item.get("branch") or None,
            room_number=item.get("roomNumber") or None,
        )
