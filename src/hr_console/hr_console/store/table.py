from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, Mapping, Optional, Tuple, Type, TypeVar

from ..common.datetime_utils import parse_iso_date
from ..common.validators import parse_date, parse_enum, parse_int, parse_number, require_email

M = TypeVar("M")


class ColumnKind(str, Enum):
    TEXT = "text"
    LONG_TEXT = "long_text"
    EMAIL = "email"
    INT = "int"
    NUMBER = "number"
    DATE = "date"
    ENUM = "enum"
    REF = "ref"


@dataclass(frozen=True)
class Column:
    """One column of a store table and how form/JSON input maps onto it."""

    name: str
    label: str
    kind: ColumnKind = ColumnKind.TEXT
    required: bool = False
    enum: Optional[Type[Enum]] = None
    ref: Optional[str] = None
    default: Any = None
    # decimals kept by a DECIMAL column; input is rounded to it before any rule runs
    places: Optional[int] = None

    def parse(self, raw: Any) -> Any:
        """Turn raw input into the Python value stored on the model (None when blank)."""
        if self.kind in (ColumnKind.TEXT, ColumnKind.LONG_TEXT):
            if raw is None or not str(raw).strip():
                return None
            return str(raw).strip()
        if self.kind == ColumnKind.EMAIL:
            if raw is None or not str(raw).strip():
                return None
            return require_email(str(raw), self.label)
        if self.kind in (ColumnKind.INT, ColumnKind.REF):
            return parse_int(raw, self.label)
        if self.kind == ColumnKind.NUMBER:
            return parse_number(raw, self.label, self.places)
        if self.kind == ColumnKind.DATE:
            return parse_date(raw, self.label)
        if self.kind == ColumnKind.ENUM:
            return parse_enum(self.enum, raw, self.label)
        raise TypeError(f"Unsupported column kind: {self.kind!r}")

    def default_value(self) -> Any:
        return self.default() if callable(self.default) else self.default

    def to_db(self, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    def from_db(self, value: Any) -> Any:
        if value is None:
            return None
        if self.kind == ColumnKind.ENUM:
            return self.enum(value)
        if self.kind in (ColumnKind.INT, ColumnKind.REF):
            return int(value)
        if self.kind == ColumnKind.NUMBER:
            return float(value) if isinstance(value, (Decimal, int, float)) else float(str(value))
        if self.kind == ColumnKind.DATE and not isinstance(value, date):
            return parse_iso_date(str(value)[:10])
        return value


@dataclass(frozen=True)
class TableSpec(Generic[M]):
    """Declares a store table: its model type, columns and default read order."""

    name: str
    label: str
    model: Type[M]
    columns: Tuple[Column, ...]
    order_by: str
    descending: bool = False
    search_key: Optional[str] = None
    _by_name: Mapping[str, Column] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_name", {c.name: c for c in self.columns})

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.columns)

    def column(self, name: str) -> Optional[Column]:
        return self._by_name.get(name)

    def refs(self) -> Tuple[Column, ...]:
        return tuple(c for c in self.columns if c.ref)

    def to_model(self, row: Mapping[str, Any]) -> M:
        values = {c.name: c.from_db(row.get(c.name)) for c in self.columns}
        return self.model(
            id=int(row["id"]),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
            **values,
        )

    def to_db(self, values: Mapping[str, Any]) -> dict:
        return {k: self._by_name[k].to_db(v) for k, v in values.items() if k in self._by_name}

    def values_of(self, record: M) -> dict:
        return {c.name: getattr(record, c.name) for c in self.columns}


def ref_label(records, record_id: Optional[int], *, default: str = "-") -> str:
    """Display label of the record with `record_id` in `records`."""
    if record_id is None:
        return default
    for r in records:
        if r.id == record_id:
            return r.label
    return default

