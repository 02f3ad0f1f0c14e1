from __future__ import annotations

from ..common.datetime_utils import today_local
from ..core.enums import ContractStatus, ContractType, EmployeeStatus, Gender
from ..store.table import Column, ColumnKind, TableSpec
from .model import Contract, Employee

EMPLOYEES = TableSpec(
    name="employees",
    label="Employee",
    model=Employee,
    columns=(
        Column("first_name", "First Name", required=True),
        Column("last_name", "Last Name", required=True),
        Column("email", "Email", ColumnKind.EMAIL, required=True),
        Column("phone", "Phone"),
        Column("department_id", "Department", ColumnKind.REF, ref="departments"),
        Column("job_id", "Job", ColumnKind.REF, ref="jobs"),
        Column("hire_date", "Hire Date", ColumnKind.DATE, default=today_local),
        Column("status", "Status", ColumnKind.ENUM, enum=EmployeeStatus, default=EmployeeStatus.ACTIVE),
        Column("gender", "Gender", ColumnKind.ENUM, enum=Gender),
    ),
    order_by="first_name",
    search_key="first_name",
)

CONTRACTS = TableSpec(
    name="contracts",
    label="Contract",
    model=Contract,
    columns=(
        Column("employee_id", "Employee", ColumnKind.REF, required=True, ref="employees"),
        Column("type", "Type", ColumnKind.ENUM, enum=ContractType, default=ContractType.PERMANENT),
        Column("start_date", "Start Date", ColumnKind.DATE, required=True),
        Column("end_date", "End Date", ColumnKind.DATE),
        Column("salary", "Salary", ColumnKind.NUMBER, required=True, places=2),
        Column("status", "Status", ColumnKind.ENUM, enum=ContractStatus, default=ContractStatus.ACTIVE),
    ),
    order_by="start_date",
    descending=True,
)
