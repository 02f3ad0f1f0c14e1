from __future__ import annotations

from datetime import date
from enum import Enum
from functools import wraps
from typing import Any, Mapping, Optional, Sequence

from flask import flash, jsonify, redirect, render_template, request, session, url_for

from ..core.enums import Role
from ..store.service import can_write
from ..store.table import Column, ColumnKind, ref_label

# Sidebar entries: (endpoint, label)
NAV_ITEMS = (
    ("dashboard", "Dashboard"),
    ("employees_list", "Employees"),
    ("departments_list", "Departments"),
    ("jobs_list", "Jobs"),
    ("job_assignments_list", "Job Assignments"),
    ("contracts_list", "Contracts"),
    ("training_programs_list", "Training Programs"),
    ("performance_cycles_list", "Performance Cycles"),
    ("appraisals_list", "Appraisals"),
    ("kpi_scores_list", "KPI Scores"),
    ("universities_list", "Universities"),
    ("faculties_list", "Faculties"),
)


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def current_user() -> dict:
    return {
        "user_id": session.get("user_id"),
        "full_name": session.get("name"),
        "email": session.get("email"),
        "role": session.get("role"),
    }


def forbidden():
    return render_template("403.html", current_user=current_user()), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            if request.path.startswith("/api/"):
                return jsonify({"error": "Authentication required"}), 401
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("auth"))
        return view(*args, **kwargs)

    return wrapper


def write_required(view):
    """Create/edit/delete views: admin and hr_manager only."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return redirect(url_for("auth"))
        if not can_write(current_role()):
            return forbidden()
        return view(*args, **kwargs)

    return wrapper


def _number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def display_value(column: Column, value: Any, refs: Optional[Mapping[str, Sequence]] = None) -> str:
    """Text shown in a list cell."""
    if value is None:
        return "-"
    if column.kind == ColumnKind.REF:
        return ref_label((refs or {}).get(column.name, ()), value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if column.kind == ColumnKind.NUMBER:
        return _number(value)
    return str(value)


def form_value(column: Column, value: Any) -> str:
    """Value put back into an <input> when a form is (re)rendered."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if column.kind == ColumnKind.NUMBER and isinstance(value, (int, float)):
        return _number(value)
    return str(value)
