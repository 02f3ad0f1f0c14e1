from __future__ import annotations

from datetime import date

import pytest

from src.hr_console.hr_console.common.formatting import format_fixed
from src.hr_console.hr_console.common.validators import (
    FieldErrors,
    parse_date,
    parse_enum,
    parse_int,
    parse_number,
    require_email,
    require_range,
)
from src.hr_console.hr_console.core.enums import AppraisalStatus
from src.hr_console.hr_console.core.exceptions import ValidationError


def test_blank_values_parse_to_none():
    assert parse_number("  ", "Salary") is None
    assert parse_int("", "Capacity") is None
    assert parse_date(None, "Start Date") is None
    assert parse_enum(AppraisalStatus, "", "Status") is None


def test_parse_values():
    assert parse_number("12.5", "Salary") == 12.5
    assert parse_int(" 30 ", "Capacity") == 30
    assert parse_date("2024-06-01", "Start Date") == date(2024, 6, 1)
    assert parse_enum(AppraisalStatus, "in-progress", "Status") == AppraisalStatus.IN_PROGRESS


@pytest.mark.parametrize(
    "fn,value,message",
    [
        (parse_number, "abc", "Salary must be a number"),
        (parse_number, "nan", "Salary must be a number"),
        (parse_number, "inf", "Salary must be a number"),
        (parse_number, "1e400", "Salary must be a number"),
        (parse_int, "2.5", "Salary must be a whole number"),
        (parse_date, "01/06/2024", "Salary must be a date (YYYY-MM-DD)"),
    ],
)
def test_parse_errors(fn, value, message):
    with pytest.raises(ValidationError) as exc:
        fn(value, "Salary")

    assert str(exc.value) == message


def test_enum_error_lists_allowed_values():
    with pytest.raises(ValidationError) as exc:
        parse_enum(AppraisalStatus, "In Progress", "Status")

    assert str(exc.value) == "Status must be one of: pending, in-progress, completed"


def test_email_is_normalised():
    assert require_email("  Sara.Mohamed@Company.com ") == "sara.mohamed@company.com"
    with pytest.raises(ValidationError):
        require_email("sara@company")


def test_range_messages():
    with pytest.raises(ValidationError) as exc:
        require_range(-1, "Weight", low=0)
    assert str(exc.value) == "Weight must be at least 0"
    assert require_range(None, "Weight", low=0) is None
    with pytest.raises(ValidationError):
        require_range(float("nan"), "Weight", low=0)


def test_number_is_rounded_to_column_places():
    assert parse_number("0.004", "Target", places=2) == 0.0
    assert parse_number("0.005", "Target", places=2) == 0.01
    assert parse_number("1234.567", "Salary", places=2) == 1234.57
    assert parse_number("0.004", "Target") == 0.004


def test_field_errors_collect_first_message_per_field():
    errors = FieldErrors()
    errors.check("salary", parse_number, "x", "Salary")
    errors.add("salary", "ignored")
    errors.add("name", "Name is required")

    with pytest.raises(ValidationError) as exc:
        errors.raise_if_any()

    assert exc.value.errors == {"salary": "Salary must be a number", "name": "Name is required"}
    assert str(exc.value) == "Please correct the highlighted fields"


def test_format_fixed_rounds_half_up():
    assert format_fixed(2.25, 1) == "2.3"
    assert format_fixed(4.125, 1) == "4.1"
    assert format_fixed(4.5909090909, 2) == "4.59"
    assert format_fixed(3, 1) == "3.0"
