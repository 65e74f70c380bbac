from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "hr_portal"

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        """Build from a settings `DB_CONFIG` dict; missing keys keep the defaults."""

        defaults = cls()
        return cls(
            host=str(db_config.get("host", defaults.host)),
            port=int(db_config.get("port", defaults.port)),
            user=str(db_config.get("user", defaults.user)),
            password=str(db_config.get("password", defaults.password)),
            database=str(db_config.get("database", defaults.database)),
        )

    def connect_kwargs(self, *, with_database: bool = True) -> dict:
        kwargs = dict(host=self.host, port=self.port, user=self.user, password=self.password)
        if with_database:
            kwargs["database"] = self.database
        return kwargs


class DatabaseConnection:
    """Connection factory shared by all repositories of one database.

    Each repository call opens a short-lived connection; there is no pool.
    """

    _instances: ClassVar[Dict[DBConfig, "DatabaseConnection"]] = {}

    def __init__(self, config: DBConfig):
        self.config = config

    @classmethod
    def for_config(cls, config: DBConfig) -> "DatabaseConnection":
        if config not in cls._instances:
            cls._instances[config] = cls(config)
        return cls._instances[config]

    def connect(self):
        return mysql.connector.connect(**self.config.connect_kwargs())
