from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest

from src.hr_portal.hr_portal.core.exceptions import PersistenceError
from src.hr_portal.hr_portal.database.mysql_base import db_cursor, load_json_list, normalize_mysql_date


class StubCursor:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.closed = False

    def execute(self, sql, params=None):
        if self.fail:
            raise mysql.connector.Error(msg="Duplicate entry")

    def close(self):
        self.closed = True


class StubConnection:
    def __init__(self, fail: bool = False):
        self.cur = StubCursor(fail)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class StubFactory:
    def __init__(self, conn=None, connect_error=None):
        self.conn = conn
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


def test_commits_on_success():
    conn = StubConnection()
    with db_cursor(StubFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")
    assert conn.committed and conn.closed and conn.cur.closed
    assert not conn.rolled_back


def test_driver_error_becomes_persistence_error():
    conn = StubConnection(fail=True)
    with pytest.raises(PersistenceError) as exc:
        with db_cursor(StubFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert "Duplicate entry" in str(exc.value)
    assert isinstance(exc.value.cause, mysql.connector.Error)
    assert conn.rolled_back and not conn.committed and conn.closed


def test_connect_failure_becomes_persistence_error():
    factory = StubFactory(connect_error=mysql.connector.Error(msg="Can't connect to MySQL server"))
    with pytest.raises(PersistenceError, match="Can't connect"):
        with db_cursor(factory):
            pass


def test_other_errors_propagate_unchanged():
    conn = StubConnection()
    with pytest.raises(KeyError):
        with db_cursor(StubFactory(conn)):
            raise KeyError("x")
    assert conn.rolled_back


def test_normalize_mysql_date():
    assert normalize_mysql_date(datetime(2024, 1, 26, 0, 0)) == date(2024, 1, 26)
    assert normalize_mysql_date("2024-01-26") == date(2024, 1, 26)
    assert normalize_mysql_date(None) is None


def test_load_json_list():
    assert load_json_list('["u-hr", "u-hod"]') == ["u-hr", "u-hod"]
    assert load_json_list(b"[]") == []
    assert load_json_list(None) == []
