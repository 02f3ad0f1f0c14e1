from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Protocol, Sequence, TypeVar

from .table import TableSpec

M = TypeVar("M")


class TableRepository(Protocol, Generic[M]):
    """Generic read/insert/update/delete interface over one store table.

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    spec: TableSpec[M]

    def list_all(self, filters: Optional[Mapping[str, Any]] = None) -> Sequence[M]:
        """Rows matching all equality filters, in the table's default order."""

        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[M]:
        raise NotImplementedError

    def insert(self, values: Mapping[str, Any]) -> int:
        """Insert one row and return the store-assigned id."""

        raise NotImplementedError

    def update_by_id(self, record_id: int, values: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def count(self, filters: Optional[Mapping[str, Any]] = None) -> int:
        raise NotImplementedError
