from __future__ import annotations

from ..common.validators import FieldErrors, require_date_order, require_range
from ..core.constants import SCORE_SCALE
from ..store.service import EntityService
from .model import Appraisal, PerformanceCycle


class PerformanceCycleService(EntityService[PerformanceCycle]):
    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        errors.check("end_date", require_date_order, values.get("start_date"), values.get("end_date"))


class AppraisalService(EntityService[Appraisal]):
    """Use case: record appraisals; scores live on the same 0..5 band as KPI scores."""

    def check_rules(self, values: dict, errors: FieldErrors) -> None:
        errors.check("score", require_range, values.get("score"), "Score", low=0, high=SCORE_SCALE)
