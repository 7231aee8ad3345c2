from __future__ import annotations

from decimal import Decimal

import pytest

from src.hostel_management.hostel_management.core.enums import EntityType
from src.hostel_management.hostel_management.core.exceptions import ConditionFailedError
from src.hostel_management.hostel_management.database.dynamodb_store import from_dynamo, to_dynamo
from src.hostel_management.hostel_management.database.memory_store import MemoryStore
from src.hostel_management.hostel_management.database.store import entity_key, key_pair


def _room(number, occupied=0):
    return {
        "PK": "ROOM#north-block",
        "SK": f"ROOM#{number}",
        "entityType": "ROOM",
        "roomNumber": number,
        "occupied": occupied,
    }


def test_key_helpers():
    assert entity_key(EntityType.STUDENT, "stu-1") == "STUDENT#stu-1"
    assert key_pair(EntityType.BRANCH, "north") == ("BRANCH#north", "BRANCH#north")


def test_query_orders_by_sort_key_and_filters_prefix():
    store = MemoryStore()
    store.put(_room("102"))
    store.put(_room("101"))
    store.put({"PK": "ROOM#north-block", "SK": "META", "entityType": "X"})

    rows = store.query("ROOM#north-block", "ROOM#")
    assert [r["roomNumber"] for r in rows] == ["101", "102"]
    assert len(store.query("ROOM#north-block")) == 3


def test_returned_items_are_copies():
    store = MemoryStore()
    store.put(_room("101"))
    item = store.get("ROOM#north-block", "ROOM#101")
    item["occupied"] = 99
    assert store.get("ROOM#north-block", "ROOM#101")["occupied"] == 0


def test_conditional_update_rejects_stale_value():
    store = MemoryStore()
    store.put(_room("101", occupied=1))

    updated = store.update("ROOM#north-block", "ROOM#101", {"occupied": 2}, expected={"occupied": 1})
    assert updated["occupied"] == 2

    with pytest.raises(ConditionFailedError):
        store.update("ROOM#north-block", "ROOM#101", {"occupied": 3}, expected={"occupied": 1})
    assert store.get("ROOM#north-block", "ROOM#101")["occupied"] == 2


def test_conditional_update_on_missing_item_fails():
    store = MemoryStore()
    with pytest.raises(ConditionFailedError):
        store.update("ROOM#x", "ROOM#1", {"occupied": 1}, expected={"occupied": 0})
    assert len(store) == 0


def test_scan_by_type_and_delete():
    store = MemoryStore()
    store.put(_room("101"))
    store.put({"PK": "STUDENT#a", "SK": "STUDENT#a", "entityType": "STUDENT"})

    assert len(store.scan_by_type(EntityType.ROOM)) == 1
    store.delete("ROOM#north-block", "ROOM#101")
    store.delete("ROOM#north-block", "ROOM#101")
    assert store.scan_by_type(EntityType.ROOM) == []


def test_dynamo_number_conversion():
    item = {"price": 12.5, "qty": 2, "ok": True, "items": [{"price": 0.1}]}
    stored = to_dynamo(item)
    assert stored["price"] == Decimal("12.5")
    assert stored["ok"] is True
    assert stored["items"][0]["price"] == Decimal("0.1")

    back = from_dynamo({"price": Decimal("12.5"), "qty": Decimal("2")})
    assert back == {"price": 12.5, "qty": 2}
    assert isinstance(back["qty"], int)
