from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Application role used to gate views and write actions."""

    ADMIN = "admin"
    HR_MANAGER = "hr_manager"
    EMPLOYEE = "employee"


class EmployeeStatus(str, Enum):
    """Employment status, shared by employees and job assignments."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on-leave"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class JobLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    MANAGER = "manager"
    DIRECTOR = "director"


class JobStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    ON_HOLD = "on-hold"


class ContractType(str, Enum):
    PERMANENT = "permanent"
    TEMPORARY = "temporary"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class ContractStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"


class TrainingStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class CycleStatus(str, Enum):
    """Lifecycle of a performance review cycle."""

    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"


class AppraisalStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
