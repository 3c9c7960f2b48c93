"""
Input Resolution Service
=========================
Reconciles freshly typed text against previously stored values.

POLICY (per measurement site):
  1. Text present   → parse it as a number; failure is an error.
  2. Text empty     → fall back to the stored value if it is > 0.
  3. Neither        → the site is required.

Age is parsed as an integer and must lie in 1–119. Sex is either strict
(Male/Female only) or lenient (anything but "Male" is Female), depending on
settings.STRICT_SEX.

Errors never short-circuit: `resolve_all` collects every message so the user
can fix all problems in one pass.
"""

import logging
import math
import re
from collections.abc import Mapping

from skinfold.core.config import settings
from skinfold.models import MeasurementSet, Sex, Site

logger = logging.getLogger(__name__)

AGE_MIN = 1
AGE_MAX = 119

AGE_ERROR = f"Age must be a valid number between {AGE_MIN} and {AGE_MAX}"
SEX_ERROR = "Sex must be either Male or Female"
TOTAL_ERROR = "Sum of measurements is too large to calculate"

# Plain ASCII decimal notation; rules out "1_0", " 5 " and non-ASCII digits
# that float()/int() would otherwise accept.
NUMBER_CHARS = frozenset("0123456789+-.eE")
AGE_PATTERN = re.compile(r"\+?[0-9]+")


class ValidationError(ValueError):
    """A single missing or malformed input field."""


class CalculationError(ValueError):
    """Raised when one or more inputs of a calculation failed to resolve."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


def parse_measurement(raw_text: str) -> float:
    """
    Parse caliper text as a finite float.

    Raises:
        ValueError: If the text is not a finite number.
    """
    if not raw_text or not set(raw_text) <= NUMBER_CHARS:
        raise ValueError(f"not a number: {raw_text!r}")
    value = float(raw_text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite measurement: {raw_text!r}")
    return value


def resolve_measurement(site: Site, raw_text: str, stored_value: float) -> float:
    """
    Resolve one site: typed text wins, then a positive stored value.

    Only the empty string counts as "not typed"; whitespace is malformed.

    Raises:
        ValidationError: If the text is malformed, or empty with nothing stored.
    """
    if raw_text:
        try:
            return parse_measurement(raw_text)
        except ValueError:
            raise ValidationError(f"{site.label} measurement must be a valid number")
    if stored_value > 0:
        return stored_value
    raise ValidationError(f"{site.label} measurement is required")


def resolve_age(raw_text: str) -> int:
    """
    Parse the age as an integer in [1, 119].

    Raises:
        ValidationError: On empty, non-integer or out-of-range input.
    """
    if not raw_text or not AGE_PATTERN.fullmatch(raw_text):
        raise ValidationError(AGE_ERROR)
    age = int(raw_text)
    if not AGE_MIN <= age <= AGE_MAX:
        raise ValidationError(AGE_ERROR)
    return age


def resolve_sex(raw: str | Sex, strict: bool | None = None) -> Sex:
    """
    Resolve the sex selector.

    strict=None defers to settings.STRICT_SEX.
    """
    if isinstance(raw, Sex):
        return raw
    if strict is None:
        strict = settings.STRICT_SEX

    text = (raw or "").strip()
    if not strict:
        # Lenient mode: only the literal "Male" selects the male equation
        return Sex.MALE if text == Sex.MALE.value else Sex.FEMALE

    for sex in Sex:
        if text.lower() == sex.value.lower():
            return sex
    raise ValidationError(SEX_ERROR)


def resolve_all(
    raw_sites: Mapping[Site, str],
    raw_age: str,
    raw_sex: str | Sex,
    stored: MeasurementSet,
) -> tuple[MeasurementSet, int, Sex]:
    """
    Resolve all seven sites, the age and the sex in one pass.

    Sites missing from `raw_sites` are treated as empty text.

    Returns:
        (resolved measurements, age, sex)

    Raises:
        CalculationError: With every message, sites first (canonical order),
        then an overflowing sum, then age, then sex.
    """
    resolved = MeasurementSet()
    errors: list[str] = []

    for site in Site:
        try:
            value = resolve_measurement(site, raw_sites.get(site, ""), stored.get(site))
            resolved.set(site, value)
        except ValidationError as e:
            errors.append(str(e))

    # Individually finite readings can still overflow when summed
    if not errors and not math.isfinite(resolved.total()):
        errors.append(TOTAL_ERROR)

    age = 0
    try:
        age = resolve_age(raw_age)
    except ValidationError as e:
        errors.append(str(e))

    sex = Sex.FEMALE
    try:
        sex = resolve_sex(raw_sex)
    except ValidationError as e:
        errors.append(str(e))

    if errors:
        logger.info(f"Input resolution failed with {len(errors)} error(s): {errors}")
        raise CalculationError(errors)

    return resolved, age, sex
