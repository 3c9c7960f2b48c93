"""
Tests for the Input Resolution Service
=======================================
Test matrix:
  1. Typed text wins over stored values
  2. Empty text falls back to a positive stored value
  3. Empty text with nothing stored → "required"
  4. Age parsing and range
  5. Strict vs lenient sex
  6. resolve_all aggregates every error
"""

import pytest

from skinfold.models import MeasurementSet, Sex, Site
from skinfold.services.resolver import (
    AGE_ERROR,
    SEX_ERROR,
    TOTAL_ERROR,
    CalculationError,
    ValidationError,
    resolve_age,
    resolve_all,
    resolve_measurement,
    resolve_sex,
)


def _all_sites(value: str = "10") -> dict[Site, str]:
    return {site: value for site in Site}


class TestResolveMeasurement:

    def test_typed_text_wins(self):
        assert resolve_measurement(Site.CHEST, "8.5", 12.5) == 8.5

    def test_stored_fallback(self):
        """Empty text with a stored 12.5 resolves to 12.5."""
        assert resolve_measurement(Site.CHEST, "", 12.5) == 12.5

    def test_whitespace_is_not_empty(self):
        """Only "" falls back to the stored value; blanks are malformed text."""
        with pytest.raises(
            ValidationError, match="^Chest measurement must be a valid number$"
        ):
            resolve_measurement(Site.CHEST, "   ", 12.5)

    def test_padded_number_rejected(self):
        with pytest.raises(ValidationError, match="must be a valid number"):
            resolve_measurement(Site.THIGH, " 7 ", 0.0)

    def test_required_when_nothing_stored(self):
        with pytest.raises(ValidationError, match="^Chest measurement is required$"):
            resolve_measurement(Site.CHEST, "", 0.0)

    def test_negative_stored_is_not_a_fallback(self):
        with pytest.raises(ValidationError, match="is required"):
            resolve_measurement(Site.TRICEPS, "", -3.0)

    def test_malformed_text(self):
        with pytest.raises(
            ValidationError, match="^Midaxillary measurement must be a valid number$"
        ):
            resolve_measurement(Site.MIDAXILLARY, "abc", 12.5)

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "1e999"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be a valid number"):
            resolve_measurement(Site.ABDOMINAL, raw, 0.0)

    @pytest.mark.parametrize("raw", ["1_0", "\u0665", "12,5"])
    def test_non_ascii_decimal_rejected(self, raw):
        """Underscores and non-ASCII digits are not plain decimal notation."""
        with pytest.raises(ValidationError, match="must be a valid number"):
            resolve_measurement(Site.ABDOMINAL, raw, 0.0)

    @pytest.mark.parametrize("raw, expected", [("+4", 4.0), (".5", 0.5), ("1e1", 10.0), ("-2.5", -2.5)])
    def test_plain_notations_accepted(self, raw, expected):
        assert resolve_measurement(Site.CHEST, raw, 0.0) == expected

    def test_typed_zero_is_accepted(self):
        """Only the fallback requires > 0; typed values are taken as-is."""
        assert resolve_measurement(Site.SUBSCAPULAR, "0", 0.0) == 0.0


class TestResolveAge:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("30", 30), ("+45", 45), ("119", 119)])
    def test_valid(self, raw, expected):
        assert resolve_age(raw) == expected

    @pytest.mark.parametrize("raw", ["", "0", "120", "200", "-5", "30.5", "thirty", " 45 ", "3_0", "\u0663\u0660"])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError) as exc:
            resolve_age(raw)
        assert str(exc.value) == AGE_ERROR


class TestResolveSex:

    def test_enum_passthrough(self):
        assert resolve_sex(Sex.MALE) == Sex.MALE

    @pytest.mark.parametrize("raw, expected", [("Male", Sex.MALE), ("female", Sex.FEMALE), ("MALE", Sex.MALE)])
    def test_strict_accepts_case_insensitive(self, raw, expected):
        assert resolve_sex(raw, strict=True) == expected

    @pytest.mark.parametrize("raw", ["", "Mal", "other"])
    def test_strict_rejects_others(self, raw):
        with pytest.raises(ValidationError, match=SEX_ERROR):
            resolve_sex(raw, strict=True)

    @pytest.mark.parametrize("raw", ["", "male", "Mal", "other", "Female"])
    def test_lenient_defaults_to_female(self, raw):
        assert resolve_sex(raw, strict=False) == Sex.FEMALE

    def test_lenient_male(self):
        assert resolve_sex("Male", strict=False) == Sex.MALE


class TestResolveAll:

    def test_success(self):
        measurements, age, sex = resolve_all(_all_sites("10"), "30", "Male", MeasurementSet())
        assert measurements.total() == 70.0
        assert age == 30
        assert sex == Sex.MALE

    def test_missing_keys_use_stored(self):
        stored = MeasurementSet(chest=5.0, thigh=6.0)
        raw = _all_sites("10")
        del raw[Site.CHEST]
        raw[Site.THIGH] = ""
        measurements, _, _ = resolve_all(raw, "30", "Female", stored)
        assert measurements.chest == 5.0
        assert measurements.thigh == 6.0

    def test_two_errors_reported_together(self):
        """chest='abc' and age='200' → exactly two messages, in order."""
        raw = _all_sites("10")
        raw[Site.CHEST] = "abc"
        with pytest.raises(CalculationError) as exc:
            resolve_all(raw, "200", "Male", MeasurementSet())
        assert exc.value.errors == [
            "Chest measurement must be a valid number",
            AGE_ERROR,
        ]

    def test_everything_missing(self):
        """Nothing typed and nothing stored → one message per site plus age."""
        with pytest.raises(CalculationError) as exc:
            resolve_all({}, "", "Male", MeasurementSet())
        assert len(exc.value.errors) == 8
        assert exc.value.errors[0] == "Chest measurement is required"
        assert exc.value.errors[6] == "Midaxillary measurement is required"
        assert exc.value.errors[7] == AGE_ERROR

    def test_overflowing_total_rejected(self):
        """Seven finite 1e308 readings sum to inf; that is a validation error."""
        with pytest.raises(CalculationError) as exc:
            resolve_all(_all_sites("1e308"), "30", "Male", MeasurementSet())
        assert exc.value.errors == [TOTAL_ERROR]

    def test_overflowing_total_reported_with_other_errors(self):
        with pytest.raises(CalculationError) as exc:
            resolve_all(_all_sites("1e308"), "200", "Male", MeasurementSet())
        assert exc.value.errors == [TOTAL_ERROR, AGE_ERROR]

    def test_error_message_joins_all(self):
        err = CalculationError(["a", "b"])
        assert str(err) == "a, b"
        assert isinstance(err, ValueError)
