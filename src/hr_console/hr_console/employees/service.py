from __future__ import annotations

from ..common.validators import FieldErrors, require_date_order, require_range
from ..store.service import EntityService
from .model import Contract


class ContractService(EntityService[Contract]):
    """Use case: manage employment contracts."""

    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        errors.check("end_date", require_date_order, values.get("start_date"), values.get("end_date"))
        errors.check("salary", require_range, values.get("salary"), "Salary", low=0)
