from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, entity_key, key_pair
from .model import FeeConfiguration, Payment
from .repository import FeeConfigRepository, PaymentRepository


class StoreFeeConfigRepository(FeeConfigRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, year: str) -> Optional[FeeConfiguration]:
        item = self._store.get(*key_pair(EntityType.FEE_CONFIG, year))
        return FeeConfiguration.from_item(item) if item else None

    def save(self, config: FeeConfiguration) -> None:
        pk, sk = key_pair(EntityType.FEE_CONFIG, config.year)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.FEE_CONFIG.value, **config.to_dict()})

    def delete(self, year: str) -> None:
        self._store.delete(*key_pair(EntityType.FEE_CONFIG, year))

    def list_all(self) -> Sequence[FeeConfiguration]:
        prefix = f"{EntityType.FEE_CONFIG.value}#"
        rows = [FeeConfiguration.from_item(i) for i in self._store.scan(lambda i: str(i.get("PK", "")).startswith(prefix))]
        rows.sort(key=lambda c: c.year, reverse=True)
        return rows


class StorePaymentRepository(PaymentRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def create(self, payment: Payment) -> None:
        self._store.put(
            {
                "PK": entity_key(EntityType.PAYMENT, payment.student_id),
                "SK": entity_key(EntityType.PAYMENT, payment.payment_id),
                "entityType": EntityType.PAYMENT.value,
                **payment.to_dict(),
            }
        )

    def list_for_student(self, student_id: str) -> Sequence[Payment]:
        items = self._store.query(entity_key(EntityType.PAYMENT, student_id), EntityType.PAYMENT.value)
        return [Payment.from_item(i) for i in items]

    def delete_for_student(self, student_id: str) -> list[str]:
        deleted: list[str] = []
        for item in self._store.query(entity_key(EntityType.PAYMENT, student_id)):
            self._store.delete(item["PK"], item["SK"])
            deleted.append(item["SK"])
        return deleted
