from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AppraisalStatus, CycleStatus


@dataclass(frozen=True)
class PerformanceCycle:
    """A named, time-boxed review period that appraisals and KPI rows belong to."""

    id: int
    name: str
    start_date: date
    end_date: date
    status: CycleStatus = CycleStatus.DRAFT
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Appraisal:
    id: int
    employee_id: int
    cycle_id: int
    reviewer_id: Optional[int] = None
    score: Optional[float] = None
    comments: Optional[str] = None
    status: AppraisalStatus = AppraisalStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"Appraisal #{self.id}"


@dataclass(frozen=True)
class KPIScore:
    """One KPI row: a target/achieved pair with a percentage weight."""

    id: int
    employee_id: int
    cycle_id: int
    kpi_name: str
    target: float
    achieved: float = 0.0
    weight: float = 0.0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.kpi_name
