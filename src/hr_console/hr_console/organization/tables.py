from __future__ import annotations

from ..store.table import Column, ColumnKind, TableSpec
from .model import Department, Faculty, University

UNIVERSITIES = TableSpec(
    name="universities",
    label="University",
    model=University,
    columns=(
        Column("name", "Name", required=True),
        Column("location", "Location"),
        Column("contact_email", "Contact Email", ColumnKind.EMAIL),
    ),
    order_by="name",
    search_key="name",
)

FACULTIES = TableSpec(
    name="faculties",
    label="Faculty",
    model=Faculty,
    columns=(
        Column("name", "Name", required=True),
        Column("university_id", "University", ColumnKind.REF, ref="universities"),
        Column("location", "Location"),
        Column("contact_email", "Contact Email", ColumnKind.EMAIL),
    ),
    order_by="name",
    search_key="name",
)

DEPARTMENTS = TableSpec(
    name="departments",
    label="Department",
    model=Department,
    columns=(
        Column("name", "Name", required=True),
        Column("faculty_id", "Faculty", ColumnKind.REF, ref="faculties"),
        Column("manager_id", "Manager", ColumnKind.REF, ref="employees"),
        Column("location", "Location"),
        Column("contact_email", "Contact Email", ColumnKind.EMAIL),
    ),
    order_by="name",
    search_key="name",
)
