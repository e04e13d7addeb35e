"""Tests for numeric input and configuration validation."""

import math

import numpy as np
import pytest

from driftwatch.core.config import EngineConfig
from driftwatch.utils.error_codes import ErrorCode
from driftwatch.utils.exceptions import ValidationError
from driftwatch.utils.validation import NumericValidator


@pytest.mark.unit
class TestValidateValues:
    """Tests for NumericValidator.validate_values."""

    def test_list_is_converted_to_read_only_float_array(self):
        result = NumericValidator.validate_values([1, 2.5, 3])

        assert result.dtype == np.float64
        assert result.tolist() == [1.0, 2.5, 3.0]
        assert not result.flags.writeable

    def test_integer_numpy_array_is_accepted(self):
        result = NumericValidator.validate_values(np.arange(4))
        assert result.tolist() == [0.0, 1.0, 2.0, 3.0]

    def test_input_array_is_copied(self):
        source = np.array([1.0, 2.0])
        result = NumericValidator.validate_values(source)
        source[0] = 99.0
        assert result[0] == 1.0

    def test_empty_sequence_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_values([])
        assert exc_info.value.code == ErrorCode.EMPTY_VALUES.value

    @pytest.mark.parametrize("value", [None, "123", b"12", {"a": 1}, {1, 2}, 42])
    def test_non_sequences_are_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_values(value)
        assert exc_info.value.code == ErrorCode.INVALID_SEQUENCE.value

    @pytest.mark.parametrize("values", [[1, "a"], [True, 2.0], [1.0, None]])
    def test_non_numeric_elements_are_rejected(self, values):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_values(values)
        assert exc_info.value.code == ErrorCode.NON_NUMERIC_VALUE.value

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_report_their_index(self, bad):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_values([1.0, bad, 3.0])

        assert exc_info.value.code == ErrorCode.NON_FINITE_VALUE.value
        assert "index 1" in str(exc_info.value)
        assert exc_info.value.context["context"]["index"] == 1

    def test_multidimensional_array_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_values(np.ones((2, 2)))
        assert exc_info.value.code == ErrorCode.INVALID_SEQUENCE.value

    def test_string_array_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_values(np.array(["a", "b"]))
        assert exc_info.value.code == ErrorCode.NON_NUMERIC_VALUE.value

    def test_argument_name_appears_in_message(self):
        with pytest.raises(ValidationError, match="current cannot be empty"):
            NumericValidator.validate_values([], name="current")


@pytest.mark.unit
class TestValidateBounds:
    """Tests for threshold and limit validation."""

    @pytest.mark.parametrize("value", [0.01, 0.5, 1.0, 1])
    def test_valid_thresholds(self, value):
        assert NumericValidator.validate_threshold(value) == float(value)

    @pytest.mark.parametrize("value", [0, 0.0, -0.1, 1.01, math.nan, True, "0.1", None])
    def test_invalid_thresholds(self, value):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_threshold(value)
        assert exc_info.value.code == ErrorCode.INVALID_THRESHOLD.value

    @pytest.mark.parametrize("value", [0, -3, 1.5, True, None])
    def test_invalid_positive_ints(self, value):
        with pytest.raises(ValidationError) as exc_info:
            NumericValidator.validate_positive_int(value, "max_cache_size")
        assert exc_info.value.code == ErrorCode.NON_POSITIVE_LIMIT.value

    def test_valid_positive_int(self):
        assert NumericValidator.validate_positive_int(np.int64(5), "max_cache_size") == 5

    def test_engine_config_bounds_are_rechecked(self):
        config = EngineConfig.model_construct(drift_threshold=2.0)
        with pytest.raises(ValidationError):
            NumericValidator.validate_engine_config(config)

    def test_engine_config_non_positive_limit_is_rejected(self):
        config = EngineConfig.model_construct(max_history_size=0)
        with pytest.raises(ValidationError, match="max_history_size"):
            NumericValidator.validate_engine_config(config)

    def test_default_engine_config_passes(self):
        NumericValidator.validate_engine_config(EngineConfig())
