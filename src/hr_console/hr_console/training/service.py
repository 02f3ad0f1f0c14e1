from __future__ import annotations

from ..common.validators import FieldErrors, require_date_order, require_range
from ..store.service import EntityService
from .model import TrainingProgram


class TrainingProgramService(EntityService[TrainingProgram]):
    """Use case: manage training programs.

    Enrolment is validated on every write: 0 <= enrolled <= capacity.
    """

    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        errors.check("end_date", require_date_order, values.get("start_date"), values.get("end_date"))

        capacity = errors.check("capacity", require_range, values.get("capacity"), "Capacity", low=0)
        enrolled = errors.check("enrolled", require_range, values.get("enrolled"), "Enrolled", low=0)
        if capacity is not None and enrolled is not None and enrolled > capacity:
            errors.add("enrolled", f"Enrolled cannot exceed capacity ({capacity})")
