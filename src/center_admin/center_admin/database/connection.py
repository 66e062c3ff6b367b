from __future__ import annotations

from dataclasses import dataclass

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "center_admin")),
        )


class MySQLConnectionFactory:
    """Opens a fresh connection to the center records database on each call.

    Repositories hold one of these and never keep a connection between calls;
    ``db_cursor`` closes what ``connect`` hands out.
    """

    def __init__(self, config: DBConfig):
        self.config = config

    def connect(self):
        return mysql.connector.connect(
            host=self.config.host,
            port=self.config.port,
            user=self.config.user,
            password=self.config.password,
            database=self.config.database,
        )

    def describe(self) -> str:
        """``user@host:port/database`` for log lines; never includes the password."""

        c = self.config
        return f"{c.user}@{c.host}:{c.port}/{c.database}"
