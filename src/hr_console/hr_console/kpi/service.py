from __future__ import annotations

from typing import List, Optional

from ..common.validators import FieldErrors, require_range
from ..performance.model import KPIScore
from ..store.service import EntityService
from .calculator import EmployeeKPISummary, summarize


class KPIScoreService(EntityService[KPIScore]):
    """Use case: manage KPI rows and read per-employee weighted scores.

    A target of 0 or below has no defined achievement ratio, so such rows are
    rejected on write.
    """

    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        target = values.get("target")
        if target is not None and target <= 0:
            errors.add("target", "Target must be greater than 0")
        errors.check("achieved", require_range, values.get("achieved"), "Achieved", low=0)
        errors.check("weight", require_range, values.get("weight"), "Weight", low=0)

    def summaries(self, *, cycle_id: Optional[int] = None) -> List[EmployeeKPISummary]:
        rows = self.list()
        if cycle_id is not None:
            rows = [r for r in rows if r.cycle_id == int(cycle_id)]
        return summarize(rows)
