from __future__ import annotations

from ..common.datetime_utils import today_local
from ..core.enums import EmployeeStatus, JobLevel, JobStatus
from ..store.table import Column, ColumnKind, TableSpec
from .model import Job, JobAssignment

JOBS = TableSpec(
    name="jobs",
    label="Job",
    model=Job,
    columns=(
        Column("title", "Title", required=True),
        Column("description", "Description", ColumnKind.LONG_TEXT),
        Column("level", "Level", ColumnKind.ENUM, enum=JobLevel, default=JobLevel.ENTRY),
        Column("min_salary", "Min Salary", ColumnKind.NUMBER, places=2),
        Column("max_salary", "Max Salary", ColumnKind.NUMBER, places=2),
        Column("status", "Status", ColumnKind.ENUM, enum=JobStatus, default=JobStatus.OPEN),
        Column("category", "Category"),
    ),
    order_by="title",
    search_key="title",
)

JOB_ASSIGNMENTS = TableSpec(
    name="job_assignments",
    label="Job Assignment",
    model=JobAssignment,
    columns=(
        Column("employee_id", "Employee", ColumnKind.REF, required=True, ref="employees"),
        Column("job_id", "Job", ColumnKind.REF, required=True, ref="jobs"),
        Column("department_id", "Department", ColumnKind.REF, ref="departments"),
        Column("start_date", "Start Date", ColumnKind.DATE, default=today_local),
        Column("end_date", "End Date", ColumnKind.DATE),
        Column("salary", "Salary", ColumnKind.NUMBER, places=2),
        Column("status", "Status", ColumnKind.ENUM, enum=EmployeeStatus, default=EmployeeStatus.ACTIVE),
    ),
    order_by="start_date",
    descending=True,
)
