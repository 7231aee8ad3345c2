from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Session roles used for access control."""

    ADMIN = "admin"
    STUDENT = "student"


class EntityType(str, Enum):
    """Discriminator stored in ``entityType`` and used as key prefix."""

    STUDENT = "STUDENT"
    ROOM = "ROOM"
    BRANCH = "BRANCH"
    MAINTENANCE = "MAINTENANCE"
    FOOD_MENU = "FOOD_MENU"
    FOOD_ORDER = "FOOD_ORDER"
    EMERGENCY_CONTACT = "EMERGENCY_CONTACT"
    PAYMENT = "PAYMENT"
    ATTENDANCE = "ATTENDANCE"
    LATE_PASS = "LATE_PASS"
    FEE_CONFIG = "FEE_CONFIG"
    PENDING_STUDENT = "PENDING_STUDENT"
    OTP = "OTP"


class MaintenanceStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    REJECTED = "rejected"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class LatePassStatus(str, Enum):
    """Approval flow of a late-pass request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PaymentType(str, Enum):
    HOSTEL_FEE = "hostel-fee"
    FOOD = "food"
    MAINTENANCE = "maintenance"
    OTHER = "other"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class ContactCategory(str, Enum):
    MEDICAL = "medical"
    TRANSPORT = "transport"
    SECURITY = "security"
    OTHER = "other"
