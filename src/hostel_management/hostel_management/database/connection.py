from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import boto3
import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


@dataclass(frozen=True)
class DynamoDBConfig:
    table_name: str
    region: str
    endpoint_url: Optional[str] = None


class MySQLConnector:
    """Opens a short-lived connection per unit of work.

    ``with_database=False`` connects to the server only, for creating the schema.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self, *, with_database: bool = True):
        options = {
            "host": self._config.host,
            "port": int(self._config.port),
            "user": self._config.user,
            "password": self._config.password,
            "use_pure": True,
        }
        if with_database:
            options["database"] = self._config.database
        return mysql.connector.connect(**options)


def dynamodb_resource(config: DynamoDBConfig):
    # endpoint_url points at DynamoDB Local when set
    return boto3.resource("dynamodb", region_name=config.region, endpoint_url=config.endpoint_url or None)


def connect_table(config: DynamoDBConfig):
    return dynamodb_resource(config).Table(config.table_name)
