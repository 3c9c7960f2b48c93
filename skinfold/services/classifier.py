"""
Body Fat Classification Service
================================
Maps (age, sex, body fat %) to a normative category.

RULES:
  1. Essential-fat floor, checked before any table lookup:
       male   < 5.0%  → Extremely Lean (Below Essential Fat)
       female < 10.0% → Extremely Lean (Below Essential Fat)
  2. Find the decade band containing the age (20–29 … 60–69).
  3. Walk the band's five inclusive ranges in order; the first match wins.
  4. No band, or a value falling between two ranges → Unclassified.

The published cut points leave small gaps (e.g. male 20–29: 13.8 then 13.9).
They are kept exactly as published: a value of 13.85 is Unclassified.
"""

import logging

from skinfold.models import BodyFatCategory, Sex

logger = logging.getLogger(__name__)

EXCELLENT = BodyFatCategory.EXCELLENT
GOOD = BodyFatCategory.GOOD
AVERAGE = BodyFatCategory.AVERAGE
BELOW_AVERAGE = BodyFatCategory.BELOW_AVERAGE
POOR = BodyFatCategory.POOR

# Below these percentages the reading is under physiological essential fat
ESSENTIAL_FAT_FLOOR: dict[Sex, float] = {
    Sex.MALE: 5.0,
    Sex.FEMALE: 10.0,
}

# (age_low, age_high, [(bf_low, bf_high, category), ...]), all bounds inclusive
MALE_NORMS = [
    (20, 29, [(5.0, 13.8, EXCELLENT), (13.9, 17.4, GOOD), (17.5, 20.4, AVERAGE), (20.5, 24.1, BELOW_AVERAGE), (24.2, 100.0, POOR)]),
    (30, 39, [(5.0, 14.9, EXCELLENT), (15.0, 18.9, GOOD), (19.0, 21.4, AVERAGE), (21.5, 25.1, BELOW_AVERAGE), (25.2, 100.0, POOR)]),
    (40, 49, [(5.0, 16.9, EXCELLENT), (17.0, 19.9, GOOD), (20.0, 22.4, AVERAGE), (22.5, 26.1, BELOW_AVERAGE), (26.2, 100.0, POOR)]),
    (50, 59, [(5.0, 18.9, EXCELLENT), (19.0, 21.9, GOOD), (22.0, 24.4, AVERAGE), (24.5, 28.1, BELOW_AVERAGE), (28.2, 100.0, POOR)]),
    (60, 69, [(5.0, 20.9, EXCELLENT), (21.0, 23.9, GOOD), (24.0, 26.4, AVERAGE), (26.5, 30.1, BELOW_AVERAGE), (30.2, 100.0, POOR)]),
]

FEMALE_NORMS = [
    (20, 29, [(10.0, 18.0, EXCELLENT), (19.0, 23.0, GOOD), (24.0, 29.0, AVERAGE), (30.0, 35.0, BELOW_AVERAGE), (36.0, 100.0, POOR)]),
    (30, 39, [(11.0, 19.0, EXCELLENT), (20.0, 24.0, GOOD), (25.0, 30.0, AVERAGE), (31.0, 36.0, BELOW_AVERAGE), (37.0, 100.0, POOR)]),
    (40, 49, [(12.0, 20.0, EXCELLENT), (21.0, 25.0, GOOD), (26.0, 31.0, AVERAGE), (32.0, 37.0, BELOW_AVERAGE), (38.0, 100.0, POOR)]),
    (50, 59, [(13.0, 21.0, EXCELLENT), (22.0, 26.0, GOOD), (27.0, 32.0, AVERAGE), (33.0, 38.0, BELOW_AVERAGE), (39.0, 100.0, POOR)]),
    (60, 69, [(14.0, 22.0, EXCELLENT), (23.0, 27.0, GOOD), (28.0, 33.0, AVERAGE), (34.0, 39.0, BELOW_AVERAGE), (40.0, 100.0, POOR)]),
]

NORMS = {
    Sex.MALE: MALE_NORMS,
    Sex.FEMALE: FEMALE_NORMS,
}


def classify_body_fat(age: int, sex: Sex, body_fat_percent: float) -> BodyFatCategory:
    """
    Classify a body fat percentage for the given age and sex.

    Never raises: inputs outside the tables yield UNCLASSIFIED.
    """
    if body_fat_percent < ESSENTIAL_FAT_FLOOR[sex]:
        return BodyFatCategory.EXTREMELY_LEAN

    for age_low, age_high, ranges in NORMS[sex]:
        if age_low <= age <= age_high:
            for bf_low, bf_high, category in ranges:
                if bf_low <= body_fat_percent <= bf_high:
                    return category

    logger.debug(
        f"No normative range for age={age}, sex={sex.value}, "
        f"body_fat={body_fat_percent:.2f}%"
    )
    return BodyFatCategory.UNCLASSIFIED


def norms_table(sex: Sex) -> list[dict]:
    """Flatten one sex's table for presentation (e.g. a legend)."""
    return [
        {
            "age_min": age_low,
            "age_max": age_high,
            "ranges": [
                {"min_percent": bf_low, "max_percent": bf_high, "category": category}
                for bf_low, bf_high, category in ranges
            ],
        }
        for age_low, age_high, ranges in NORMS[sex]
    ]
