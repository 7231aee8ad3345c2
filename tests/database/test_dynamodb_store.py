from __future__ import annotations

from decimal import Decimal

import pytest
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from src.hostel_management.hostel_management.core.enums import EntityType
from src.hostel_management.hostel_management.core.exceptions import ConditionFailedError
from src.hostel_management.hostel_management.database.dynamodb_store import DynamoDBStore


class FakeTable:
    """Stands in for a boto3 ``Table``; list calls answer in two pages."""

    name = "hostel-management-test"

    def __init__(self, pages=None, *, fail_condition=False, error_code="ConditionalCheckFailedException"):
        self.pages = pages or [[], []]
        self.fail_condition = fail_condition
        self.error_code = error_code
        self.calls: list[tuple[str, dict]] = []

    def _paged(self, op, kwargs):
        self.calls.append((op, dict(kwargs)))
        if "ExclusiveStartKey" not in kwargs:
            return {"Items": self.pages[0], "LastEvaluatedKey": {"PK": "page-1"}}
        return {"Items": self.pages[1]}

    def query(self, **kwargs):
        return self._paged("query", kwargs)

    def scan(self, **kwargs):
        return self._paged("scan", kwargs)

    def put_item(self, **kwargs):
        self.calls.append(("put_item", kwargs))

    def get_item(self, **kwargs):
        self.calls.append(("get_item", kwargs))
        return {"Item": {"PK": "ROOM#a", "SK": "ROOM#1", "capacity": Decimal("2")}}

    def delete_item(self, **kwargs):
        self.calls.append(("delete_item", kwargs))

    def update_item(self, **kwargs):
        self.calls.append(("update_item", kwargs))
        if self.fail_condition:
            raise ClientError({"Error": {"Code": self.error_code, "Message": "failed"}}, "UpdateItem")
        return {"Attributes": {"PK": "ROOM#a", "SK": "ROOM#1", "occupied": Decimal("2"), "price": Decimal("2.5")}}


def test_query_follows_last_evaluated_key():
    table = FakeTable([[{"SK": "ROOM#1", "occupied": Decimal("1")}], [{"SK": "ROOM#2", "occupied": Decimal("0")}]])

    rows = DynamoDBStore(table).query("ROOM#a", "ROOM#")

    assert rows == [{"SK": "ROOM#1", "occupied": 1}, {"SK": "ROOM#2", "occupied": 0}]
    assert [op for op, _ in table.calls] == ["query", "query"]
    assert "ExclusiveStartKey" not in table.calls[0][1]
    assert table.calls[1][1]["ExclusiveStartKey"] == {"PK": "page-1"}
    assert "KeyConditionExpression" in table.calls[1][1]


def test_scan_by_type_filters_on_entity_type_across_pages():
    table = FakeTable([[{"entityType": "ROOM", "SK": "ROOM#1"}], [{"entityType": "ROOM", "SK": "ROOM#2"}]])

    rows = DynamoDBStore(table).scan_by_type(EntityType.ROOM)

    assert [r["SK"] for r in rows] == ["ROOM#1", "ROOM#2"]
    assert table.calls[0][1]["FilterExpression"] == Attr("entityType").eq("ROOM")
    assert table.calls[1][1]["ExclusiveStartKey"] == {"PK": "page-1"}


def test_scan_applies_client_side_filter():
    table = FakeTable([[{"SK": "a", "n": Decimal("1")}], [{"SK": "b", "n": Decimal("5")}]])

    rows = DynamoDBStore(table).scan(lambda i: i["n"] > 2)

    assert rows == [{"SK": "b", "n": 5}]


def test_update_builds_set_and_condition_expressions():
    table = FakeTable()

    result = DynamoDBStore(table).update(
        "ROOM#a", "ROOM#1", {"occupied": 2, "price": 2.5}, expected={"occupied": 1}
    )

    assert result == {"PK": "ROOM#a", "SK": "ROOM#1", "occupied": 2, "price": 2.5}
    _, kwargs = table.calls[0]
    assert kwargs["Key"] == {"PK": "ROOM#a", "SK": "ROOM#1"}
    assert kwargs["UpdateExpression"] == "SET #u0 = :u0, #u1 = :u1"
    assert kwargs["ConditionExpression"] == "#c0 = :c0"
    assert kwargs["ExpressionAttributeNames"] == {"#u0": "occupied", "#u1": "price", "#c0": "occupied"}
    assert kwargs["ExpressionAttributeValues"] == {":u0": 2, ":u1": Decimal("2.5"), ":c0": 1}
    assert kwargs["ReturnValues"] == "ALL_NEW"


def test_update_without_expected_has_no_condition():
    table = FakeTable()
    DynamoDBStore(table).update("ROOM#a", "ROOM#1", {"occupied": 2})
    assert "ConditionExpression" not in table.calls[0][1]


def test_failed_condition_becomes_condition_failed_error():
    table = FakeTable(fail_condition=True)
    with pytest.raises(ConditionFailedError):
        DynamoDBStore(table).update("ROOM#a", "ROOM#1", {"occupied": 2}, expected={"occupied": 1})


def test_other_client_errors_propagate():
    table = FakeTable(fail_condition=True, error_code="ProvisionedThroughputExceededException")
    with pytest.raises(ClientError):
        DynamoDBStore(table).update("ROOM#a", "ROOM#1", {"occupied": 2})


def test_put_converts_floats_and_get_converts_back():
    table = FakeTable()
    store = DynamoDBStore(table)

    store.put({"PK": "FOOD_MENU#m", "SK": "FOOD_MENU#m", "price": 12.5})
    assert table.calls[0][1]["Item"]["price"] == Decimal("12.5")

    assert store.get("ROOM#a", "ROOM#1") == {"PK": "ROOM#a", "SK": "ROOM#1", "capacity": 2}

    store.delete("ROOM#a", "ROOM#1")
    assert table.calls[-1] == ("delete_item", {"Key": {"PK": "ROOM#a", "SK": "ROOM#1"}})
