from __future__ import annotations

from ..core.enums import TrainingStatus
from ..store.table import Column, ColumnKind, TableSpec
from .model import TrainingProgram

TRAINING_PROGRAMS = TableSpec(
    name="training_programs",
    label="Training Program",
    model=TrainingProgram,
    columns=(
        Column("name", "Name", required=True),
        Column("description", "Description", ColumnKind.LONG_TEXT),
        Column("start_date", "Start Date", ColumnKind.DATE, required=True),
        Column("end_date", "End Date", ColumnKind.DATE, required=True),
        Column("status", "Status", ColumnKind.ENUM, enum=TrainingStatus, default=TrainingStatus.UPCOMING),
        Column("capacity", "Capacity", ColumnKind.INT, default=0),
        Column("enrolled", "Enrolled", ColumnKind.INT, default=0),
    ),
    order_by="start_date",
    descending=True,
    search_key="name",
)
