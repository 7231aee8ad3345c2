from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import ClientError

from ..core.constants import DEFAULT_TABLE_NAME
from .connection import DBConfig, DynamoDBConfig, MySQLConnector, connect_table, dynamodb_resource
from .dynamodb_store import DynamoDBStore
from .memory_store import MemoryStore
from .mysql_base import db_cursor
from .mysql_store import ITEMS_TABLE, MySQLItemStore
from .store import KeyValueStore

logger = logging.getLogger(__name__)

BACKENDS = ("dynamodb", "mysql", "memory")


def db_config_from(settings: Any) -> DBConfig:
    raw = getattr(settings, "DB_CONFIG", {}) or {}
    return DBConfig(
        host=str(raw.get("host", "localhost")),
        port=int(raw.get("port", 3306)),
        user=str(raw.get("user", "root")),
        password=str(raw.get("password", "")),
        database=str(raw.get("database", "hostel_db")),
    )


def ensure_database_exists(connector: MySQLConnector, database: str) -> None:
    with db_cursor(connector, dictionary=False, with_database=False) as (_, cur):
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;")


def ensure_items_table(config: DBConfig, *, table: str = ITEMS_TABLE) -> None:
    """Create the MySQL single table (idempotent)."""
    connector = MySQLConnector(config)
    ensure_database_exists(connector, config.database)

    with db_cursor(connector, dictionary=False) as (_, cur):
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS `{table}` (
                pk VARCHAR(255) NOT NULL,
                sk VARCHAR(255) NOT NULL,
                entity_type VARCHAR(64) NULL,
                data JSON NOT NULL,
                PRIMARY KEY (pk, sk),
                KEY idx_entity_type (entity_type)
            ) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
            """
        )


def ensure_dynamodb_table(config: DynamoDBConfig) -> None:
    """Create the PK/SK table on demand billing unless it already exists."""
    resource = dynamodb_resource(config)
    try:
        table = resource.create_table(
            TableName=config.table_name,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") == "ResourceInUseException":
            logger.debug("DynamoDB table %s already exists", config.table_name)
            return
        raise
    table.wait_until_exists()
    logger.info("Created DynamoDB table %s", config.table_name)


def dynamodb_config_from(settings: Any) -> DynamoDBConfig:
    return DynamoDBConfig(
        table_name=str(getattr(settings, "DYNAMODB_TABLE_NAME", DEFAULT_TABLE_NAME)),
        region=str(getattr(settings, "AWS_REGION", "us-east-1")),
        endpoint_url=getattr(settings, "DYNAMODB_ENDPOINT_URL", None) or None,
    )


def init_store(settings: Any) -> None:
    """Create the backing table of the configured backend."""
    backend = str(getattr(settings, "STORE_BACKEND", "dynamodb")).lower()
    if backend == "dynamodb":
        ensure_dynamodb_table(dynamodb_config_from(settings))
    elif backend == "mysql":
        ensure_items_table(db_config_from(settings))


def build_store(settings: Any) -> KeyValueStore:
    backend = str(getattr(settings, "STORE_BACKEND", "dynamodb")).lower()
    if backend not in BACKENDS:
        raise ValueError(f"Unsupported STORE_BACKEND {backend!r}; expected one of {', '.join(BACKENDS)}")

    if backend == "memory":
        return MemoryStore()
    if backend == "mysql":
        return MySQLItemStore(MySQLConnector(db_config_from(settings)))

    return DynamoDBStore(connect_table(dynamodb_config_from(settings)))
