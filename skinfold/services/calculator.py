"""
Calculator Session Service
===========================
The two operations a presentation layer calls:

  update_measurement(state, site, raw_text)
      Best-effort: stores the value if it parses, ignores it otherwise.

  calculate(state, raw_sites, raw_age, raw_sex)
      Strict: resolves every input against the stored set, then runs
      density → Siri → classification. On success the resolved values
      replace the stored set; on failure nothing is written.
"""

import logging
from collections.abc import Mapping

from skinfold.core.session import SessionState
from skinfold.models import BodyFatResult, Sex, Site
from skinfold.services.body_fat import calculate_body_fat
from skinfold.services.classifier import classify_body_fat
from skinfold.services.resolver import parse_measurement, resolve_all

logger = logging.getLogger(__name__)


def update_measurement(state: SessionState, site: Site, raw_text: str) -> bool:
    """
    Store a freshly typed value for one site.

    Malformed text is silently ignored (stricter checks happen at calculate
    time). Returns True when the value was stored.
    """
    try:
        value = parse_measurement(raw_text)
    except ValueError:
        logger.debug(f"Ignoring unparseable {site.value} input: {raw_text!r}")
        return False

    with state.lock:
        state.measurements.set(site, value)

    logger.info(f"Updated {site.value} measurement: {value}")
    return True


def calculate(
    state: SessionState,
    raw_sites: Mapping[Site, str],
    raw_age: str,
    raw_sex: str | Sex,
) -> BodyFatResult:
    """
    Resolve all inputs and compute body fat percentage and category.

    Raises:
        CalculationError: With every validation message; the stored
        measurements are left untouched.
    """
    with state.lock:
        stored = state.measurements.clone()
        measurements, age, sex = resolve_all(raw_sites, raw_age, raw_sex, stored)

        total = measurements.total()
        body_fat = calculate_body_fat(total, age, sex)
        category = classify_body_fat(age, sex, body_fat["body_fat_percent"])

        # Only a fully successful calculation is merged back
        state.measurements = measurements

    result = BodyFatResult(
        percentage=body_fat["body_fat_percent"],
        category=category,
        body_density=body_fat["body_density"],
        sum_of_skinfolds=total,
        age=age,
        sex=sex,
    )

    logger.info(
        f"Body fat calculated: {result.percentage:.2f}% "
        f"(density: {result.body_density:.6f}, sum: {total}mm) -> {category.value}"
    )
    return result
