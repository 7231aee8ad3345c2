from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PendingStudent:
    """Signup data parked until the email OTP is verified. Keyed by email."""

    student_id: str
    password_hash: str
    name: str
    email: str
    phone: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "password": self.password_hash,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "PendingStudent":
        return cls(
            student_id=str(item["studentId"]),
            password_hash=str(item.get("password", "")),
            name=item.get("name", ""),
            email=item.get("email", ""),
            phone=item.get("phone", ""),
            created_at=item.get("createdAt", ""),
        )


@dataclass(frozen=True)
class OTPVerification:
    email: str
    otp: str
    created_at: str
    verified: bool = False
    attempts: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "otp": self.otp,
            "createdAt": self.created_at,
            "verified": self.verified,
            "attempts": self.attempts,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "OTPVerification":
        return cls(
            email=item.get("email", ""),
            otp=str(item.get("otp", "")),
            created_at=item.get("createdAt", ""),
            verified=bool(item.get("verified", False)),
            attempts=int(item.get("attempts") or 0),
        )
