from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EmployeeStatus, JobLevel, JobStatus


@dataclass(frozen=True)
class Job:
    id: int
    title: str
    description: Optional[str] = None
    level: JobLevel = JobLevel.ENTRY
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    status: JobStatus = JobStatus.OPEN
    category: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.title


@dataclass(frozen=True)
class JobAssignment:
    """An employee holding a job in a department over a date range."""

    id: int
    employee_id: int
    job_id: int
    department_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    salary: Optional[float] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"Assignment #{self.id}"
