from __future__ import annotations

import logging

from ..employees.model import Employee
from ..jobs.model import Job
from ..organization.model import Department
from ..performance.model import Appraisal, PerformanceCycle
from ..store.service import EntityService
from ..training.model import TrainingProgram
from .aggregator import DashboardStats, compute_dashboard_stats

logger = logging.getLogger(__name__)


class DashboardService:
    """Loads the current collections and hands them to the aggregator.

    A failed load raises StoreError before the aggregator runs; the view is
    responsible for showing the error state.
    """

    def __init__(
        self,
        *,
        employees: EntityService[Employee],
        jobs: EntityService[Job],
        training_programs: EntityService[TrainingProgram],
        appraisals: EntityService[Appraisal],
        departments: EntityService[Department],
        performance_cycles: EntityService[PerformanceCycle],
    ):
        self._employees = employees
        self._jobs = jobs
        self._training = training_programs
        self._appraisals = appraisals
        self._departments = departments
        self._cycles = performance_cycles

    def get_stats(self) -> DashboardStats:
        stats = compute_dashboard_stats(
            employees=self._employees.list(),
            jobs=self._jobs.list(),
            training_programs=self._training.list(),
            appraisals=self._appraisals.list(),
            departments=self._departments.list(),
            performance_cycles=self._cycles.list(),
        )
        logger.debug("Dashboard stats: %s", stats)
        return stats
