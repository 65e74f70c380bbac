from __future__ import annotations

from src.hr_portal.hr_portal.database.connection import DBConfig, DatabaseConnection


def test_from_dict_fills_defaults():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307"})
    assert cfg == DBConfig(host="db", port=3307)
    assert cfg.database == "hr_portal"


def test_connect_kwargs_can_skip_database():
    cfg = DBConfig(database="hr_portal_test")
    assert cfg.connect_kwargs()["database"] == "hr_portal_test"
    assert "database" not in cfg.connect_kwargs(with_database=False)


def test_one_factory_per_config():
    a = DatabaseConnection.for_config(DBConfig(database="hr_a"))
    b = DatabaseConnection.for_config(DBConfig(database="hr_b"))

    assert a is DatabaseConnection.for_config(DBConfig(database="hr_a"))
    assert a is not b
    assert b.config.database == "hr_b"
