from __future__ import annotations

import random
from datetime import date

from src.hr_console.hr_console.core.enums import (
    AppraisalStatus,
    CycleStatus,
    EmployeeStatus,
    JobStatus,
    TrainingStatus,
)
from src.hr_console.hr_console.dashboard.aggregator import average_score, compute_dashboard_stats
from src.hr_console.hr_console.employees.model import Employee
from src.hr_console.hr_console.jobs.model import Job
from src.hr_console.hr_console.organization.model import Department
from src.hr_console.hr_console.performance.model import Appraisal, PerformanceCycle
from src.hr_console.hr_console.training.model import TrainingProgram


def _employee(i: int, status: EmployeeStatus) -> Employee:
    return Employee(id=i, first_name=f"E{i}", last_name="X", email=f"e{i}@x.com", status=status)


def _appraisal(i: int, score, status=AppraisalStatus.COMPLETED) -> Appraisal:
    return Appraisal(id=i, employee_id=1, cycle_id=1, score=score, status=status)


def _training(i: int, status: TrainingStatus) -> TrainingProgram:
    return TrainingProgram(id=i, name=f"T{i}", start_date=date(2024, 1, 1), end_date=date(2024, 2, 1), status=status)


def _cycle(i: int, status: CycleStatus) -> PerformanceCycle:
    return PerformanceCycle(id=i, name=f"C{i}", start_date=date(2024, 1, 1), end_date=date(2024, 3, 31), status=status)


def _empty_stats(**overrides):
    kwargs = dict(employees=[], jobs=[], training_programs=[], appraisals=[], departments=[], performance_cycles=[])
    kwargs.update(overrides)
    return compute_dashboard_stats(**kwargs)


def test_empty_collections_give_zero_counts_and_zero_average():
    stats = _empty_stats()

    assert stats.total_employees == 0
    assert stats.active_employees == 0
    assert stats.pending_appraisals == 0
    assert stats.avg_performance == "0"


def test_counts_follow_status_values():
    stats = compute_dashboard_stats(
        employees=[
            _employee(1, EmployeeStatus.ACTIVE),
            _employee(2, EmployeeStatus.ACTIVE),
            _employee(3, EmployeeStatus.ON_LEAVE),
            _employee(4, EmployeeStatus.INACTIVE),
        ],
        jobs=[
            Job(id=1, title="Dev", status=JobStatus.OPEN),
            Job(id=2, title="Ops", status=JobStatus.CLOSED),
            Job(id=3, title="QA", status=JobStatus.ON_HOLD),
        ],
        training_programs=[
            _training(1, TrainingStatus.ONGOING),
            _training(2, TrainingStatus.COMPLETED),
            _training(3, TrainingStatus.COMPLETED),
            _training(4, TrainingStatus.UPCOMING),
        ],
        appraisals=[
            _appraisal(1, 4.0, AppraisalStatus.PENDING),
            _appraisal(2, 2.0, AppraisalStatus.IN_PROGRESS),
        ],
        departments=[Department(id=1, name="HR"), Department(id=2, name="Finance")],
        performance_cycles=[_cycle(1, CycleStatus.ACTIVE), _cycle(2, CycleStatus.DRAFT)],
    )

    assert stats.total_employees == 4
    assert stats.active_employees == 2
    assert stats.active_jobs == 1
    assert stats.training_programs == 4
    assert stats.ongoing_training == 1
    assert stats.completed_training == 2
    assert stats.pending_appraisals == 1
    assert stats.departments == 2
    assert stats.active_cycles == 1
    assert stats.avg_performance == "3.0"
    assert stats.active_employees <= stats.total_employees


def test_average_ignores_unscored_appraisals():
    assert average_score([_appraisal(1, None), _appraisal(2, 4.5)]) == "4.5"
    assert average_score([_appraisal(1, None)]) == "0"


def test_average_rounds_half_up_to_one_decimal():
    # 4.5, 4.2, 3.8, 4.0 -> 4.125
    scores = [4.5, 4.2, 3.8, 4.0]
    assert average_score([_appraisal(i, s) for i, s in enumerate(scores, start=1)]) == "4.1"
    assert average_score([_appraisal(1, 2.0), _appraisal(2, 2.5)]) == "2.3"


def test_stats_do_not_depend_on_input_order():
    appraisals = [_appraisal(i, s) for i, s in enumerate([0.1, 0.2, 0.3, 4.9, 3.3, 1.7], start=1)]
    employees = [_employee(i, EmployeeStatus.ACTIVE if i % 2 else EmployeeStatus.INACTIVE) for i in range(1, 9)]
    baseline = _empty_stats(appraisals=appraisals, employees=employees)

    rng = random.Random(7)
    for _ in range(20):
        rng.shuffle(appraisals)
        rng.shuffle(employees)
        assert _empty_stats(appraisals=appraisals, employees=employees) == baseline


def test_to_dict_exposes_every_counter():
    data = _empty_stats().to_dict()

    assert set(data) == {
        "total_employees",
        "active_employees",
        "active_jobs",
        "training_programs",
        "ongoing_training",
        "completed_training",
        "pending_appraisals",
        "departments",
        "active_cycles",
        "avg_performance",
    }
