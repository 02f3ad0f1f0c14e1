from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class University:
    id: int
    name: str
    location: Optional[str] = None
    contact_email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Faculty:
    id: int
    name: str
    university_id: Optional[int] = None
    location: Optional[str] = None
    contact_email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Department:
    id: int
    name: str
    faculty_id: Optional[int] = None
    manager_id: Optional[int] = None
    location: Optional[str] = None
    contact_email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return self.name
