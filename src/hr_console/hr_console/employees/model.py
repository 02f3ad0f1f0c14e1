from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ContractStatus, ContractType, EmployeeStatus, Gender


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, the store owns identity and referential integrity.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department_id: Optional[int] = None
    job_id: Optional[int] = None
    hire_date: Optional[date] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    gender: Optional[Gender] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def label(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Contract:
    id: int
    employee_id: int
    start_date: date
    salary: float
    type: ContractType = ContractType.PERMANENT
    end_date: Optional[date] = None
    status: ContractStatus = ContractStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"{self.type.value} contract #{self.id}"
