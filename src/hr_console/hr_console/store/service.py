from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, List, Mapping, Optional

from ..common.validators import FieldErrors
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, StoreError
from .cache import QueryCache
from .repository import TableRepository
from .table import M, TableSpec

logger = logging.getLogger(__name__)

WRITE_ROLES = frozenset({Role.ADMIN, Role.HR_MANAGER})


def can_write(role: Optional[Role]) -> bool:
    return role in WRITE_ROLES


class EntityService(Generic[M]):
    """List/create/update/delete use cases for one table.

    Reads go through the shared QueryCache; every successful write
    invalidates the table's key (plus the keys of tables referencing it)
    so the next list is a fresh store read.
    """

    def __init__(self, repo: TableRepository[M], cache: QueryCache):
        self._repo = repo
        self._cache = cache
        self._spec: TableSpec[M] = repo.spec
        self._invalidates: tuple[str, ...] = (self._spec.name,)

    @property
    def spec(self) -> TableSpec[M]:
        return self._spec

    def also_invalidate(self, table_names: Iterable[str]) -> None:
        """Cached lists of these tables are dropped together with our own."""
        extra = tuple(n for n in table_names if n not in self._invalidates)
        self._invalidates = self._invalidates + extra

    # ---- reads ----
    def list(self, *, search: Optional[str] = None) -> List[M]:
        rows = self._cache.get_or_load(self._spec.name, lambda: list(self._repo.list_all()))
        term = (search or "").strip().lower()
        if not term or not self._spec.search_key:
            return rows
        key = self._spec.search_key
        return [r for r in rows if term in str(getattr(r, key) or "").lower()]

    def get(self, record_id: int) -> M:
        record = self._repo.get_by_id(int(record_id))
        if record is None:
            raise NotFoundError(f"{self._spec.label} not found")
        return record

    # ---- writes ----
    def create(self, *, current_role: Optional[Role], values: Mapping[str, Any]) -> M:
        self._require_writer(current_role)
        clean = self._clean(values, partial=False)
        new_id = self._repo.insert(clean)
        self._invalidate()
        logger.info("Created %s id=%s by role=%s", self._spec.name, new_id, _role_name(current_role))

        record = self._repo.get_by_id(new_id)
        if record is None:
            raise StoreError(f"{self._spec.label} was not saved")
        return record

    def update(self, *, current_role: Optional[Role], record_id: int, changes: Mapping[str, Any]) -> M:
        self._require_writer(current_role)
        existing = self.get(record_id)
        clean = self._clean(changes, partial=True, existing=existing)

        if not self._repo.update_by_id(int(record_id), clean):
            raise NotFoundError(f"{self._spec.label} not found")
        self._invalidate()
        logger.info("Updated %s id=%s fields=%s by role=%s", self._spec.name, record_id, sorted(clean), _role_name(current_role))
        return self.get(record_id)

    def delete(self, *, current_role: Optional[Role], record_id: int) -> None:
        self._require_writer(current_role)
        if not self._repo.delete_by_id(int(record_id)):
            raise NotFoundError(f"{self._spec.label} not found")
        self._invalidate()
        logger.info("Deleted %s id=%s by role=%s", self._spec.name, record_id, _role_name(current_role))

    # ---- validation ----
    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        """Cross-field rules; `values` holds the full record after the write."""

    def _clean(self, raw: Mapping[str, Any], *, partial: bool, existing: Optional[M] = None) -> dict:
        errors = FieldErrors()
        clean: dict[str, Any] = {}

        for col in self._spec.columns:
            if col.name not in raw:
                continue
            value = errors.check(col.name, col.parse, raw[col.name])
            if col.name in errors.errors:
                continue
            if value is None and col.required:
                errors.add(col.name, f"{col.label} is required")
                continue
            if value is None and col.default is not None:
                # clearing a defaulted column resets it (the store column is NOT NULL)
                value = col.default_value()
            if value is None and not partial:
                # omitted so the column default (or NULL) applies
                continue
            clean[col.name] = value

        if not partial:
            for col in self._spec.columns:
                if col.name in clean or col.name in errors.errors:
                    continue
                if col.required:
                    errors.add(col.name, f"{col.label} is required")
                elif col.default is not None:
                    clean[col.name] = col.default_value()

        merged = self._spec.values_of(existing) if existing is not None else {c.name: None for c in self._spec.columns}
        merged.update(clean)
        if not errors.errors:
            self.check_rules(merged, errors)
        errors.raise_if_any()
        return clean

    def _require_writer(self, role: Optional[Role]) -> None:
        if not can_write(role):
            raise AuthorizationError(f"You do not have permission to modify {self._spec.label.lower()} records")

    def _invalidate(self) -> None:
        self._cache.invalidate(*self._invalidates)


def _role_name(role: Optional[Role]) -> str:
    return role.value if role else "-"
