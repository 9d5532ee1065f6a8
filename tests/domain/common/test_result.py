"""Tests for Result and DomainError."""

import pytest

from gridstats_lister.domain.common.result import DomainError, ErrorType, Result


class TestResult:
    def test_success(self):
        result = Result.success([1, 2])

        assert result.is_success
        assert result.value == [1, 2]
        with pytest.raises(ValueError):
            result.error

    def test_success_may_hold_none(self):
        assert Result.success(None).value is None

    def test_failure(self):
        result = Result.failure(DomainError.validation_error("bad position"))

        assert result.is_failure
        assert result.error.error_type == ErrorType.VALIDATION_ERROR
        with pytest.raises(ValueError, match="bad position"):
            result.value

    def test_map_transforms_value(self):
        assert Result.success(3).map(lambda v: v * 2).value == 6

    def test_map_keeps_failure(self):
        error = DomainError.validation_error("missing columns")

        mapped = Result.failure(error).map(lambda v: v * 2)

        assert mapped.error == error

    def test_map_turns_exception_into_calculation_error(self):
        mapped = Result.success(0).map(lambda v: 1 / v)

        assert mapped.is_failure
        assert mapped.error.error_type == ErrorType.CALCULATION_ERROR
        assert mapped.error.message.startswith("Transformation failed")

    def test_value_and_error_together_rejected(self):
        with pytest.raises(ValueError):
            Result(value=1, error=DomainError.validation_error("x"))
