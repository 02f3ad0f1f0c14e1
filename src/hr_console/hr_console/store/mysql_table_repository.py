from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import TableRepository
from .table import M, TableSpec

logger = logging.getLogger(__name__)

_META_COLUMNS = ("id", "created_at", "updated_at")


class MySQLTableRepository(TableRepository[M]):
    """TableRepository backed by one MySQL table described by a TableSpec.

    Identifiers are taken from the TableSpec only; values are always bound
    as query parameters.
    """

    def __init__(self, conn_factory: DatabaseConnection, spec: TableSpec[M]):
        self._conn_factory = conn_factory
        self.spec = spec

    def _select_list(self) -> str:
        return ", ".join(f"`{c}`" for c in _META_COLUMNS + self.spec.column_names)

    def _where(self, filters: Optional[Mapping[str, Any]]) -> Tuple[str, list]:
        if not filters:
            return "", []
        clauses: list[str] = []
        params: list[Any] = []
        for name, value in filters.items():
            col = self.spec.column(name)
            if col is None and name != "id":
                raise ValueError(f"Unknown column for {self.spec.name}: {name}")
            if value is None:
                clauses.append(f"`{name}` IS NULL")
            else:
                clauses.append(f"`{name}`=%s")
                params.append(col.to_db(value) if col else int(value))
        return " WHERE " + " AND ".join(clauses), params

    def list_all(self, filters: Optional[Mapping[str, Any]] = None) -> Sequence[M]:
        where, params = self._where(filters)
        direction = "DESC" if self.spec.descending else "ASC"
        sql = (
            f"SELECT {self._select_list()} FROM `{self.spec.name}`{where} "
            f"ORDER BY `{self.spec.order_by}` {direction}, `id` {direction}"
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
        logger.debug("Loaded %d row(s) from %s", len(rows), self.spec.name)
        return [self.spec.to_model(r) for r in rows]

    def get_by_id(self, record_id: int) -> Optional[M]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {self._select_list()} FROM `{self.spec.name}` WHERE `id`=%s",
                (int(record_id),),
            )
            row = fetchone(cur)
        return self.spec.to_model(row) if row else None

    def insert(self, values: Mapping[str, Any]) -> int:
        data = self.spec.to_db(values)
        if not data:
            raise ValueError(f"Nothing to insert into {self.spec.name}")
        cols = ", ".join(f"`{k}`" for k in data)
        marks = ", ".join(["%s"] * len(data))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{self.spec.name}` ({cols}) VALUES ({marks})",
                tuple(data.values()),
            )
            return int(cur.lastrowid)

    def update_by_id(self, record_id: int, values: Mapping[str, Any]) -> bool:
        data = self.spec.to_db(values)
        if not data:
            return self.get_by_id(record_id) is not None
        assignments = ", ".join(f"`{k}`=%s" for k in data)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE `{self.spec.name}` SET {assignments} WHERE `id`=%s",
                tuple(data.values()) + (int(record_id),),
            )
            return cur.rowcount > 0

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{self.spec.name}` WHERE `id`=%s", (int(record_id),))
            return cur.rowcount > 0

    def count(self, filters: Optional[Mapping[str, Any]] = None) -> int:
        where, params = self._where(filters)
        with db_cursor(self._conn_factory, dictionary=False) as (_, cur):
            cur.execute(f"SELECT COUNT(*) FROM `{self.spec.name}`{where}", tuple(params))
            row = cur.fetchone()
        return int(row[0]) if row else 0
