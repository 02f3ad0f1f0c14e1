from __future__ import annotations

from ..common.validators import FieldErrors, require_date_order, require_range
from ..store.service import EntityService
from .model import Job, JobAssignment


class JobService(EntityService[Job]):
    """Use case: manage the job catalogue and its salary bands."""

    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        low = errors.check("min_salary", require_range, values.get("min_salary"), "Min Salary", low=0)
        high = errors.check("max_salary", require_range, values.get("max_salary"), "Max Salary", low=0)
        if low is not None and high is not None and low > high:
            errors.add("max_salary", "Max Salary must be greater than or equal to Min Salary")


class JobAssignmentService(EntityService[JobAssignment]):
    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        errors.check("end_date", require_date_order, values.get("start_date"), values.get("end_date"))
        errors.check("salary", require_range, values.get("salary"), "Salary", low=0)
