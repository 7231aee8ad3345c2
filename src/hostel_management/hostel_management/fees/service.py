from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import new_id
from ..common.validators import require_choice, require_non_empty, require_number
from ..core.enums import PaymentStatus, PaymentType
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import FeeConfiguration, Payment, money
from .repository import FeeConfigRepository, PaymentRepository

logger = logging.getLogger(__name__)


class FeeService:
    """Yearly fee configuration (admin) and the current year's view (student)."""

    def __init__(self, configs: FeeConfigRepository):
        self._configs = configs

    def list_configurations(self) -> Sequence[FeeConfiguration]:
        return self._configs.list_all()

    def save_configuration(self, data: dict[str, Any], *, now: Optional[datetime] = None) -> tuple[FeeConfiguration, bool]:
        """Create or replace a year's fees. Returns ``(config, created)``."""
        now = now or now_utc()
        year = data.get("year")
        if not year or data.get("hostelFee") is None:
            raise ValidationError("Year and hostel fee are required")
        year = str(year).strip()

        existing = self._configs.get(year)
        config = FeeConfiguration(
            year=year,
            hostel_fee=money(require_number(data["hostelFee"], "Hostel fee", minimum=0)),
            maintenance_fee=money(require_number(data.get("maintenanceFee") or 0, "Maintenance fee", minimum=0)),
            security_deposit=money(require_number(data.get("securityDeposit") or 0, "Security deposit", minimum=0)),
            other_fees=money(require_number(data.get("otherFees") or 0, "Other fees", minimum=0)),
            created_at=existing.created_at if existing else to_iso(now),
            updated_at=to_iso(now),
        )
        self._configs.save(config)
        return config, existing is None

    def delete_configuration(self, year: Any) -> None:
        self._configs.delete(require_non_empty(year, "Year"))

    def current_configuration(self, *, now: Optional[datetime] = None) -> Optional[FeeConfiguration]:
        return self._configs.get(str((now or now_utc()).year))


class PaymentService:
    def __init__(self, payments: PaymentRepository, students: StudentRepository):
        self._payments = payments
        self._students = students

    def pay(
        self,
        student_id: str,
        *,
        amount: Any,
        payment_type: Any = None,
        now: Optional[datetime] = None,
    ) -> Payment:
        now = now or now_utc()
        value = require_number(amount, "Amount")
        if value <= 0:
            raise ValidationError("Amount must be greater than 0")
        kind = require_choice(payment_type or PaymentType.HOSTEL_FEE.value, PaymentType, "Invalid payment type")

        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")

        # No gateway: payments complete immediately.
        payment = Payment(
            payment_id=new_id("PAY", now=now),
            student_id=student_id,
            student_name=student.name,
            amount=money(value),
            payment_type=kind,
            status=PaymentStatus.COMPLETED,
            created_at=to_iso(now),
            completed_at=to_iso(now),
        )
        self._payments.create(payment)
        if kind == PaymentType.HOSTEL_FEE:
            self._students.update(student_id, {"feesPaid": True})

        logger.info("Payment %s of %s (%s) by %s", payment.payment_id, payment.amount, kind.value, student_id)
        return payment

    def list_payments(self, student_id: str) -> Sequence[Payment]:
        return self._payments.list_for_student(student_id)
