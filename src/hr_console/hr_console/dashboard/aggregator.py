from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Iterable, Sequence

from ..common.formatting import format_fixed
from ..core.enums import AppraisalStatus, CycleStatus, EmployeeStatus, JobStatus, TrainingStatus
from ..employees.model import Employee
from ..jobs.model import Job
from ..organization.model import Department
from ..performance.model import Appraisal, PerformanceCycle
from ..training.model import TrainingProgram


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    active_employees: int
    active_jobs: int
    training_programs: int
    ongoing_training: int
    completed_training: int
    pending_appraisals: int
    departments: int
    active_cycles: int
    avg_performance: str

    def to_dict(self) -> dict:
        return asdict(self)


def _count(items: Iterable, predicate) -> int:
    return sum(1 for item in items if predicate(item))


def average_score(appraisals: Sequence[Appraisal]) -> str:
    """Mean of the non-null appraisal scores to one decimal, "0" when there is none."""
    scores = [float(a.score) for a in appraisals if a.score is not None]
    if not scores:
        return "0"
    return format_fixed(math.fsum(scores) / len(scores), 1)


def compute_dashboard_stats(
    *,
    employees: Sequence[Employee],
    jobs: Sequence[Job],
    training_programs: Sequence[TrainingProgram],
    appraisals: Sequence[Appraisal],
    departments: Sequence[Department],
    performance_cycles: Sequence[PerformanceCycle],
) -> DashboardStats:
    """Summary counters for the dashboard, recomputed from the given snapshot."""
    return DashboardStats(
        total_employees=len(employees),
        active_employees=_count(employees, lambda e: e.status == EmployeeStatus.ACTIVE),
        active_jobs=_count(jobs, lambda j: j.status == JobStatus.OPEN),
        training_programs=len(training_programs),
        ongoing_training=_count(training_programs, lambda t: t.status == TrainingStatus.ONGOING),
        completed_training=_count(training_programs, lambda t: t.status == TrainingStatus.COMPLETED),
        pending_appraisals=_count(appraisals, lambda a: a.status == AppraisalStatus.PENDING),
        departments=len(departments),
        active_cycles=_count(performance_cycles, lambda c: c.status == CycleStatus.ACTIVE),
        avg_performance=average_score(appraisals),
    )
