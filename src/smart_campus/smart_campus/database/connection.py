from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    connect_timeout: int = 10


class DatabaseConnection:
    """Singleton-like pooled connection factory.

    Every repository call borrows one connection and returns it on close().
    When all pooled connections are busy, a short-lived direct connection is
    opened instead, so request N+1 does not fail.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def _connect_args(self) -> dict:
        return dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            connection_timeout=int(self._config.connect_timeout),
        )

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._pool_lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="smart_campus",
                    pool_size=int(self._config.pool_size),
                    pool_reset_session=True,
                    **self._connect_args(),
                )
            return self._pool

    def connect(self):
        try:
            return self._get_pool().get_connection()
        except errors.PoolError:
            logger.warning("connection pool exhausted (size=%s); opening a direct connection", self._config.pool_size)
            return mysql.connector.connect(**self._connect_args())
