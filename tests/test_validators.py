from datetime import date

import pytest

from src.deployment_system.deployment_system.common.validators import (
    require_iso_date,
    require_non_empty,
    require_shift_type,
)
from src.deployment_system.deployment_system.core.enums import ShiftClassification
from src.deployment_system.deployment_system.core.exceptions import ValidationError


def test_require_iso_date():
    assert require_iso_date(" 2026-01-05 ") == date(2026, 1, 5)


@pytest.mark.parametrize("value", [20260105, None, "", "05/01/2026"])
def test_require_iso_date_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        require_iso_date(value)


def test_require_non_empty_accepts_numbers():
    assert require_non_empty(42, "line") == "42"


def test_require_shift_type():
    assert require_shift_type("Night Shift") == ShiftClassification.NIGHT_SHIFT
    with pytest.raises(ValidationError):
        require_shift_type(7)
