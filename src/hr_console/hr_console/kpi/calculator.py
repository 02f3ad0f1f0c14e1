"""KPI weighting: per-row scores on the 0..5 scale and per-employee weighted scores.

    percentage     = achieved / target * 100
    row score      = percentage / 100 * 5          (not clamped above 5)
    weighted score = sum(achieved_i / target_i * 5 * weight_i) / sum(weight_i)

A row whose target is not positive has no defined percentage. It is flagged
invalid, reports 0 for percentage and score, and takes no part in the
weighted score. An employee whose usable weights sum to 0 scores 0.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..common.formatting import format_fixed
from ..core.constants import MAX_PROGRESS_PERCENT, SCORE_SCALE
from ..performance.model import KPIScore


@dataclass(frozen=True)
class KPIRowScore:
    kpi_id: int
    kpi_name: str
    cycle_id: int
    target: float
    achieved: float
    weight: float
    percentage: float
    score: float
    valid: bool = True

    @property
    def progress(self) -> float:
        """Percentage clamped to 0..100 for progress bars only."""
        return max(0.0, min(self.percentage, float(MAX_PROGRESS_PERCENT)))

    @property
    def score_display(self) -> str:
        return f"{format_fixed(self.score, 2)}/{SCORE_SCALE}"


@dataclass(frozen=True)
class EmployeeKPISummary:
    employee_id: int
    cycle_id: Optional[int]
    rows: List[KPIRowScore]
    weighted_score: float

    @property
    def display(self) -> str:
        return f"{format_fixed(self.weighted_score, 2)}/{SCORE_SCALE}"

    @property
    def has_invalid_rows(self) -> bool:
        return any(not r.valid for r in self.rows)


def _usable(kpi: KPIScore) -> bool:
    return kpi.target is not None and kpi.target > 0


def score_row(kpi: KPIScore) -> KPIRowScore:
    achieved = float(kpi.achieved or 0)
    weight = float(kpi.weight or 0)
    if not _usable(kpi):
        return KPIRowScore(
            kpi_id=kpi.id,
            kpi_name=kpi.kpi_name,
            cycle_id=kpi.cycle_id,
            target=float(kpi.target or 0),
            achieved=achieved,
            weight=weight,
            percentage=0.0,
            score=0.0,
            valid=False,
        )

    target = float(kpi.target)
    percentage = achieved / target * 100
    return KPIRowScore(
        kpi_id=kpi.id,
        kpi_name=kpi.kpi_name,
        cycle_id=kpi.cycle_id,
        target=target,
        achieved=achieved,
        weight=weight,
        percentage=percentage,
        score=percentage / 100 * SCORE_SCALE,
    )


def group_by_employee(rows: Iterable[KPIScore]) -> Dict[int, List[KPIScore]]:
    """Group KPI rows by employee id, keeping every row.

    Groups are keyed in ascending employee id and rows within a group are
    ordered by row id, so the result does not depend on input order.
    """
    groups: Dict[int, List[KPIScore]] = {}
    for kpi in rows:
        groups.setdefault(kpi.employee_id, []).append(kpi)
    return {emp_id: sorted(groups[emp_id], key=lambda k: k.id) for emp_id in sorted(groups)}


def weighted_score(rows: Sequence[KPIScore]) -> float:
    usable = [k for k in rows if _usable(k)]
    total_weight = math.fsum(float(k.weight or 0) for k in usable)
    if total_weight == 0:
        return 0.0
    weighted = math.fsum(float(k.achieved or 0) / float(k.target) * SCORE_SCALE * float(k.weight or 0) for k in usable)
    return weighted / total_weight


def summarize(rows: Iterable[KPIScore]) -> List[EmployeeKPISummary]:
    """One summary per employee that has at least one KPI row."""
    out: List[EmployeeKPISummary] = []
    for emp_id, kpis in group_by_employee(rows).items():
        out.append(
            EmployeeKPISummary(
                employee_id=emp_id,
                cycle_id=kpis[0].cycle_id if kpis else None,
                rows=[score_row(k) for k in kpis],
                weighted_score=weighted_score(kpis),
            )
        )
    return out
