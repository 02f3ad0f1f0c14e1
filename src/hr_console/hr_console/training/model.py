from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import MAX_PROGRESS_PERCENT
from ..core.enums import TrainingStatus


@dataclass(frozen=True)
class TrainingProgram:
    id: int
    name: str
    start_date: date
    end_date: date
    description: Optional[str] = None
    status: TrainingStatus = TrainingStatus.UPCOMING
    capacity: int = 0
    enrolled: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.name

    @property
    def fill_percent(self) -> float:
        """Enrolment as a 0..100 progress value (0 when capacity is not set)."""
        if not self.capacity or self.capacity <= 0:
            return 0.0
        return min(self.enrolled / self.capacity * 100, MAX_PROGRESS_PERCENT)
