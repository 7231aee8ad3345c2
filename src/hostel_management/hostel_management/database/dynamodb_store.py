from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Callable, Optional, Sequence

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from ..core.enums import EntityType
from ..core.exceptions import ConditionFailedError
from .store import Item, ItemFilter, KeyValueStore

logger = logging.getLogger(__name__)


def to_dynamo(value: Any) -> Any:
    """DynamoDB rejects ``float``; store numbers as ``Decimal``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_dynamo(v) for v in value]
    return value


def from_dynamo(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: from_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, set)):
        return [from_dynamo(v) for v in value]
    return value


class DynamoDBStore(KeyValueStore):
    """Single-table store on a boto3 ``Table`` resource."""

    def __init__(self, table):
        self._table = table

    def _collect(self, op: Callable[..., dict], **kwargs) -> list[Item]:
        items: list[Item] = []
        while True:
            resp = op(**kwargs)
            items.extend(from_dynamo(i) for i in resp.get("Items", []))
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def put(self, item: Item) -> None:
        self._table.put_item(Item=to_dynamo(item))

    def get(self, pk: str, sk: str) -> Optional[Item]:
        resp = self._table.get_item(Key={"PK": pk, "SK": sk})
        item = resp.get("Item")
        return from_dynamo(item) if item else None

    def query(self, pk: str, sk_prefix: Optional[str] = None) -> Sequence[Item]:
        condition = Key("PK").eq(pk)
        if sk_prefix:
            condition = condition & Key("SK").begins_with(sk_prefix)
        return self._collect(self._table.query, KeyConditionExpression=condition)

    def update(self, pk: str, sk: str, updates: Item, *, expected: Optional[Item] = None) -> Item:
        if not updates:
            current = self.get(pk, sk)
            return current or {"PK": pk, "SK": sk}

        names: dict[str, str] = {}
        values: dict[str, Any] = {}
        assignments: list[str] = []
        for i, (attr, value) in enumerate(updates.items()):
            names[f"#u{i}"] = attr
            values[f":u{i}"] = to_dynamo(value)
            assignments.append(f"#u{i} = :u{i}")

        kwargs: dict[str, Any] = {
            "Key": {"PK": pk, "SK": sk},
            "UpdateExpression": "SET " + ", ".join(assignments),
            "ReturnValues": "ALL_NEW",
        }

        if expected:
            conditions: list[str] = []
            for i, (attr, value) in enumerate(expected.items()):
                names[f"#c{i}"] = attr
                values[f":c{i}"] = to_dynamo(value)
                conditions.append(f"#c{i} = :c{i}")
            kwargs["ConditionExpression"] = " AND ".join(conditions)

        kwargs["ExpressionAttributeNames"] = names
        kwargs["ExpressionAttributeValues"] = values

        try:
            resp = self._table.update_item(**kwargs)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise ConditionFailedError(f"Condition failed for {pk}/{sk}") from e
            raise
        return from_dynamo(resp.get("Attributes", {}))

    def delete(self, pk: str, sk: str) -> None:
        self._table.delete_item(Key={"PK": pk, "SK": sk})

    def scan(self, item_filter: Optional[ItemFilter] = None) -> Sequence[Item]:
        logger.debug("Full table scan on %s", self._table.name)
        items = self._collect(self._table.scan)
        if item_filter is not None:
            items = [i for i in items if item_filter(i)]
        return items

    def scan_by_type(self, entity_type: EntityType) -> Sequence[Item]:
        return self._collect(self._table.scan, FilterExpression=Attr("entityType").eq(entity_type.value))
