from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import PaymentStatus, PaymentType


def money(value: Any) -> float:
    n = float(value or 0)
    return int(n) if n.is_integer() else n


@dataclass(frozen=True)
class FeeConfiguration:
    """Fees charged for one academic ``year`` (a string such as ``"2026"``)."""

    year: str
    hostel_fee: float
    maintenance_fee: float
    security_deposit: float
    other_fees: float
    created_at: str
    updated_at: str

    @property
    def total_fee(self) -> float:
        return money(self.hostel_fee + self.maintenance_fee + self.security_deposit + self.other_fees)

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "hostelFee": self.hostel_fee,
            "maintenanceFee": self.maintenance_fee,
            "securityDeposit": self.security_deposit,
            "otherFees": self.other_fees,
            "totalFee": self.total_fee,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "FeeConfiguration":
        return cls(
            year=str(item["year"]),
            hostel_fee=money(item.get("hostelFee")),
            maintenance_fee=money(item.get("maintenanceFee")),
            security_deposit=money(item.get("securityDeposit")),
            other_fees=money(item.get("otherFees")),
            created_at=item.get("createdAt", ""),
            updated_at=item.get("updatedAt", ""),
        )


@dataclass(frozen=True)
class Payment:
    payment_id: str
    student_id: str
    student_name: str
    amount: float
    payment_type: PaymentType
    status: PaymentStatus
    created_at: str
    completed_at: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "paymentId": self.payment_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "amount": self.amount,
            "paymentType": self.payment_type.value,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.completed_at is not None:
            data["completedAt"] = self.completed_at
        return data

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Payment":
        return cls(
            payment_id=str(item["paymentId"]),
            student_id=str(item["studentId"]),
            student_name=item.get("studentName", ""),
            amount=money(item.get("amount")),
            payment_type=PaymentType(item.get("paymentType", PaymentType.HOSTEL_FEE.value)),
            status=PaymentStatus(item.get("status", PaymentStatus.COMPLETED.value)),
            created_at=item.get("createdAt", ""),
            completed_at=item.get("completedAt"),
        )
