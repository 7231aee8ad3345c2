from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntityType
from ..core.exceptions import ConditionFailedError
from .connection import MySQLConnector
from .mysql_base import db_cursor, dump_item, fetchall, fetchone, load_item
from .store import Item, ItemFilter, KeyValueStore, expected_matches, merge_updates

ITEMS_TABLE = "hostel_items"


class MySQLItemStore(KeyValueStore):
    """Single-table store on MySQL: one row per item, attributes in a JSON column."""

    def __init__(self, connector: MySQLConnector, *, table: str = ITEMS_TABLE):
        self._connector = connector
        self._table = table

    def put(self, item: Item) -> None:
        with db_cursor(self._connector) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table}(pk, sk, entity_type, data)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE entity_type=VALUES(entity_type), data=VALUES(data)
                """,
                (item["PK"], item["SK"], item.get("entityType"), dump_item(item)),
            )

    def get(self, pk: str, sk: str) -> Optional[Item]:
        with db_cursor(self._connector) as (_, cur):
            cur.execute(f"SELECT data FROM {self._table} WHERE pk=%s AND sk=%s", (pk, sk))
            row = fetchone(cur)
            return load_item(row["data"]) if row else None

    def query(self, pk: str, sk_prefix: Optional[str] = None) -> Sequence[Item]:
        with db_cursor(self._connector) as (_, cur):
            if sk_prefix:
                cur.execute(
                    f"""
                    SELECT data FROM {self._table}
                    WHERE pk=%s AND LEFT(sk, CHAR_LENGTH(%s))=%s
                    ORDER BY sk
                    """,
                    (pk, sk_prefix, sk_prefix),
                )
            else:
                cur.execute(f"SELECT data FROM {self._table} WHERE pk=%s ORDER BY sk", (pk,))
            return [load_item(r["data"]) for r in fetchall(cur)]

    def update(self, pk: str, sk: str, updates: Item, *, expected: Optional[Item] = None) -> Item:
        with db_cursor(self._connector) as (_, cur):
            cur.execute(f"SELECT data FROM {self._table} WHERE pk=%s AND sk=%s FOR UPDATE", (pk, sk))
            row = fetchone(cur)
            current = load_item(row["data"]) if row else None
            if not expected_matches(current, expected):
                raise ConditionFailedError(f"Condition failed for {pk}/{sk}")

            merged = merge_updates(current or {"PK": pk, "SK": sk}, updates)
            cur.execute(
                f"""
                INSERT INTO {self._table}(pk, sk, entity_type, data)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE entity_type=VALUES(entity_type), data=VALUES(data)
                """,
                (pk, sk, merged.get("entityType"), dump_item(merged)),
            )
            return merged

    def delete(self, pk: str, sk: str) -> None:
        with db_cursor(self._connector) as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE pk=%s AND sk=%s", (pk, sk))

    def scan(self, item_filter: Optional[ItemFilter] = None) -> Sequence[Item]:
        with db_cursor(self._connector) as (_, cur):
            cur.execute(f"SELECT data FROM {self._table}")
            items = [load_item(r["data"]) for r in fetchall(cur)]
        if item_filter is not None:
            items = [i for i in items if item_filter(i)]
        return items

    def scan_by_type(self, entity_type: EntityType) -> Sequence[Item]:
        with db_cursor(self._connector) as (_, cur):
            cur.execute(f"SELECT data FROM {self._table} WHERE entity_type=%s", (entity_type.value,))
            return [load_item(r["data"]) for r in fetchall(cur)]
