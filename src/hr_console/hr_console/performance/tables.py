from __future__ import annotations

from ..core.enums import AppraisalStatus, CycleStatus
from ..store.table import Column, ColumnKind, TableSpec
from .model import Appraisal, KPIScore, PerformanceCycle

PERFORMANCE_CYCLES = TableSpec(
    name="performance_cycles",
    label="Performance Cycle",
    model=PerformanceCycle,
    columns=(
        Column("name", "Name", required=True),
        Column("start_date", "Start Date", ColumnKind.DATE, required=True),
        Column("end_date", "End Date", ColumnKind.DATE, required=True),
        Column("status", "Status", ColumnKind.ENUM, enum=CycleStatus, default=CycleStatus.DRAFT),
        Column("description", "Description", ColumnKind.LONG_TEXT),
    ),
    order_by="start_date",
    descending=True,
    search_key="name",
)

APPRAISALS = TableSpec(
    name="appraisals",
    label="Appraisal",
    model=Appraisal,
    columns=(
        Column("employee_id", "Employee", ColumnKind.REF, required=True, ref="employees"),
        Column("cycle_id", "Cycle", ColumnKind.REF, required=True, ref="performance_cycles"),
        Column("reviewer_id", "Reviewer", ColumnKind.REF, ref="employees"),
        Column("score", "Score", ColumnKind.NUMBER, places=2),
        Column("comments", "Comments", ColumnKind.LONG_TEXT),
        Column("status", "Status", ColumnKind.ENUM, enum=AppraisalStatus, default=AppraisalStatus.PENDING),
    ),
    order_by="created_at",
    descending=True,
)

KPI_SCORES = TableSpec(
    name="kpi_scores",
    label="KPI Score",
    model=KPIScore,
    columns=(
        Column("employee_id", "Employee", ColumnKind.REF, required=True, ref="employees"),
        Column("cycle_id", "Cycle", ColumnKind.REF, required=True, ref="performance_cycles"),
        Column("kpi_name", "KPI Name", required=True),
        Column("target", "Target", ColumnKind.NUMBER, required=True, places=2),
        Column("achieved", "Achieved", ColumnKind.NUMBER, default=0.0, places=2),
        Column("weight", "Weight (%)", ColumnKind.NUMBER, default=0.0, places=2),
    ),
    order_by="created_at",
    descending=True,
    search_key="kpi_name",
)
