"""MySQL-backed environment store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Optional

from ucdpublisher.db import mysql_connection
from ucdpublisher.modules.ucdeploy.repositories.base import GlobalEnvRepository
from ucdpublisher.settings import Settings

log = logging.getLogger(__name__)


class MySQLGlobalEnvRepository(GlobalEnvRepository):
    """Stores variables in ``global_env_vars(env_key PRIMARY KEY, env_value)``."""

    TABLE_DDL = (
        "CREATE TABLE IF NOT EXISTS global_env_vars ("
        "    env_key VARCHAR(255) NOT NULL PRIMARY KEY,"
        "    env_value TEXT NOT NULL,"
        "    update_time TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP"
        ")"
    )

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._table_ready = False

    @contextmanager
    def _conn(self):
        conn = mysql_connection(self.settings)
        try:
            if not self._table_ready:
                with conn.cursor() as cur:
                    cur.execute(self.TABLE_DDL)
                self._table_ready = True
            yield conn
        finally:
            conn.close()

    def put(self, key: str, value: str) -> None:
        sql = (
            "INSERT INTO global_env_vars (env_key, env_value) VALUES (%s, %s) "
            "ON DUPLICATE KEY UPDATE env_value = VALUES(env_value)"
        )
        with self._conn() as conn, conn.cursor() as cur:
            cur.execute(sql, (key, value))
        log.info("Stored global env var %s", key)

    def get(self, key: str) -> Optional[str]:
        with self._conn() as conn, conn.cursor() as cur:
            cur.execute("SELECT env_value FROM global_env_vars WHERE env_key = %s", (key,))
            row = cur.fetchone()
        return row["env_value"] if row else None

    def get_all(self) -> Dict[str, str]:
        with self._conn() as conn, conn.cursor() as cur:
            cur.execute("SELECT env_key, env_value FROM global_env_vars")
            rows = cur.fetchall()
        return {row["env_key"]: row["env_value"] for row in rows}
