from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import mysql.connector
import pytest

from src.hr_console.hr_console.core.enums import TrainingStatus
from src.hr_console.hr_console.core.exceptions import StoreError
from src.hr_console.hr_console.performance.tables import KPI_SCORES
from src.hr_console.hr_console.store.mysql_table_repository import MySQLTableRepository
from src.hr_console.hr_console.training.tables import TRAINING_PROGRAMS


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = None
        self.rowcount = 0

    def execute(self, sql, params=()):
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))
        if self._conn.error is not None:
            raise self._conn.error
        self.lastrowid = self._conn.lastrowid
        self.rowcount = self._conn.rowcount

    def fetchall(self):
        return list(self._conn.rows)

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows=None, *, lastrowid=None, rowcount=0, error=None):
        self.rows = rows or []
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self.error = error
        self.executed = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    def connect(self):
        return self.conn


def _training_row(**overrides):
    row = {
        "id": 1,
        "created_at": datetime(2024, 1, 1),
        "updated_at": datetime(2024, 1, 1),
        "name": "Agile Methodology",
        "description": None,
        "start_date": date(2024, 6, 1),
        "end_date": date(2024, 7, 1),
        "status": "ongoing",
        "capacity": 30,
        "enrolled": 25,
    }
    row.update(overrides)
    return row


def test_list_all_orders_by_table_default_and_maps_rows():
    conn = FakeConnection(rows=[_training_row()])
    repo = MySQLTableRepository(FakeFactory(conn), TRAINING_PROGRAMS)

    programs = repo.list_all()

    sql, params = conn.executed[0]
    assert sql.startswith("SELECT `id`, `created_at`, `updated_at`, `name`")
    assert sql.endswith("FROM `training_programs` ORDER BY `start_date` DESC, `id` DESC")
    assert params == ()
    assert programs[0].status == TrainingStatus.ONGOING
    assert programs[0].fill_percent == pytest.approx(25 / 30 * 100)
    assert conn.closed


def test_decimal_columns_become_floats():
    row = {
        "id": 3,
        "created_at": None,
        "updated_at": None,
        "employee_id": 1,
        "cycle_id": 1,
        "kpi_name": "Code Quality",
        "target": Decimal("100.00"),
        "achieved": Decimal("88.00"),
        "weight": Decimal("25.00"),
    }
    repo = MySQLTableRepository(FakeFactory(FakeConnection(rows=[row])), KPI_SCORES)

    kpi = repo.get_by_id(3)

    assert kpi.target == 100.0 and isinstance(kpi.target, float)
    assert kpi.weight == 25.0


def test_filters_are_bound_as_parameters():
    conn = FakeConnection()
    repo = MySQLTableRepository(FakeFactory(conn), TRAINING_PROGRAMS)

    repo.list_all({"status": TrainingStatus.ONGOING, "description": None})

    sql, params = conn.executed[0]
    assert "WHERE `status`=%s AND `description` IS NULL" in sql
    assert params == ("ongoing",)


def test_unknown_filter_column_is_refused():
    repo = MySQLTableRepository(FakeFactory(FakeConnection()), TRAINING_PROGRAMS)

    with pytest.raises(ValueError):
        repo.list_all({"name; DROP TABLE x": "1"})


def test_insert_only_sends_given_columns():
    conn = FakeConnection(lastrowid=7)
    repo = MySQLTableRepository(FakeFactory(conn), TRAINING_PROGRAMS)

    new_id = repo.insert({"name": "Agile", "start_date": date(2024, 6, 1), "status": TrainingStatus.UPCOMING})

    sql, params = conn.executed[0]
    assert new_id == 7
    assert sql == "INSERT INTO `training_programs` (`name`, `start_date`, `status`) VALUES (%s, %s, %s)"
    assert params == ("Agile", date(2024, 6, 1), "upcoming")
    assert conn.committed


def test_update_and_delete_report_matched_rows():
    conn = FakeConnection(rowcount=0)
    repo = MySQLTableRepository(FakeFactory(conn), TRAINING_PROGRAMS)

    assert repo.update_by_id(5, {"enrolled": 10}) is False
    assert conn.executed[-1] == ("UPDATE `training_programs` SET `enrolled`=%s WHERE `id`=%s", (10, 5))

    conn.rowcount = 1
    assert repo.delete_by_id(5) is True
    assert conn.executed[-1] == ("DELETE FROM `training_programs` WHERE `id`=%s", (5,))


def test_driver_errors_become_store_errors_and_roll_back():
    error = mysql.connector.errors.IntegrityError(msg="Duplicate entry", errno=1062)
    conn = FakeConnection(error=error)
    repo = MySQLTableRepository(FakeFactory(conn), TRAINING_PROGRAMS)

    with pytest.raises(StoreError) as exc:
        repo.insert({"name": "Agile"})

    assert "already exists" in str(exc.value)
    assert conn.rolled_back
    assert not conn.committed
    assert conn.closed


def test_count_uses_tuple_cursor():
    conn = FakeConnection(rows=[(4,)])
    repo = MySQLTableRepository(FakeFactory(conn), TRAINING_PROGRAMS)

    assert repo.count() == 4
    assert conn.executed[0][0] == "SELECT COUNT(*) FROM `training_programs`"
