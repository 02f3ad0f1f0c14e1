from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, render_template, request

from ..common.web import login_required
from ..container import Container
from ..core.exceptions import StoreError
from ..performance.tables import KPI_SCORES
from ..store.controller import register_crud
from ..store.table import ref_label
from .calculator import EmployeeKPISummary


def _cycle_filter() -> Optional[int]:
    raw = (request.args.get("cycle_id") or "").strip()
    return int(raw) if raw.isdecimal() and raw.isascii() else None


def _summary_dict(summary: EmployeeKPISummary, employees) -> dict:
    return {
        "employee_id": summary.employee_id,
        "employee_name": ref_label(employees, summary.employee_id, default="Unknown"),
        "cycle_id": summary.cycle_id,
        "weighted_score": summary.weighted_score,
        "display": summary.display,
        "has_invalid_rows": summary.has_invalid_rows,
        "rows": [
            {
                "id": r.kpi_id,
                "kpi_name": r.kpi_name,
                "target": r.target,
                "achieved": r.achieved,
                "weight": r.weight,
                "percentage": r.percentage,
                "score": r.score,
                "valid": r.valid,
            }
            for r in summary.rows
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/kpi-scores", methods=["GET"], endpoint="kpi_scores_list")
    @login_required
    def kpi_scores_list():
        cycle_id = _cycle_filter()
        try:
            summaries = container.kpi_scores.summaries(cycle_id=cycle_id)
            employees = container.employees.list()
            cycles = container.performance_cycles.list()
        except StoreError as e:
            return render_template("kpi_scores.html", summaries=[], error=str(e), active_page="kpi_scores_list")

        return render_template(
            "kpi_scores.html",
            summaries=summaries,
            employee_name=lambda emp_id: ref_label(employees, emp_id, default="Unknown"),
            cycle_name=lambda cid: ref_label(cycles, cid),
            cycles=cycles,
            cycle_id=cycle_id,
            error=None,
            active_page="kpi_scores_list",
        )

    @app.route("/api/kpi-scores/summary", methods=["GET"], endpoint="api_kpi_summary")
    @login_required
    def api_kpi_summary():
        try:
            summaries = container.kpi_scores.summaries(cycle_id=_cycle_filter())
            employees = container.employees.list()
        except StoreError as e:
            return jsonify({"error": str(e)}), 503
        return jsonify([_summary_dict(s, employees) for s in summaries])

    register_crud(app, container, spec=KPI_SCORES, url="/kpi-scores", list_view=False)
