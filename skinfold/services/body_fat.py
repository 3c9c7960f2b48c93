"""
Body Fat Calculation Service
==============================
Implements the Jackson & Pollock 7-skinfold method for estimating body fat.

The seven caliper sites (chest, abdominal, thigh, triceps, subscapular,
suprailiac, midaxillary) are summed, the sum is fed into a sex-specific
regression to obtain body density, and density is converted to body fat
percentage with the Siri equation.

FORMULAS (S = sum of 7 skinfolds in mm):
  Male   (Jackson & Pollock, 1978):
    Body Density = 1.112 - (0.00043499 × S) + (0.00000055 × S²) - (0.00028826 × Age)
  Female (Jackson, Pollock & Ward, 1980):
    Body Density = 1.097 - (0.00046971 × S) + (0.00000056 × S²) - (0.00012828 × Age)

SIRI EQUATION (1961):
  Body Fat % = (495 / Body Density) - 450

Results are neither rounded nor clamped. A sum of 0 mm still yields a
number (a negative percentage); deciding what that means is left to the
classifier.
"""

import logging

from skinfold.models import Sex

logger = logging.getLogger(__name__)

# (intercept, linear S, quadratic S², age) coefficients per sex
DENSITY_COEFFICIENTS: dict[Sex, tuple[float, float, float, float]] = {
    Sex.MALE: (1.112, 0.00043499, 0.00000055, 0.00028826),
    Sex.FEMALE: (1.097, 0.00046971, 0.00000056, 0.00012828),
}


def calculate_body_density_jp7(
    sum_of_skinfolds_mm: float,
    age_years: int,
    sex: Sex,
) -> float:
    """
    Calculate body density using the Jackson & Pollock 7-skinfold formula.

    Args:
        sum_of_skinfolds_mm: Sum of all 7 skinfold measurements in millimeters
        age_years: Age of the subject in years
        sex: Selects the male or female regression

    Returns:
        Body density in g/cm³ (typically between 1.0 and 1.1)

    Reference:
        Jackson, A.S. & Pollock, M.L. (1978). Generalized equations for predicting
        body density of men. British Journal of Nutrition, 40, 497-504.
        Jackson, A.S., Pollock, M.L. & Ward, A. (1980). Generalized equations for
        predicting body density of women. Medicine and Science in Sports and
        Exercise, 12, 175-181.
    """
    intercept, linear, quadratic, age_coef = DENSITY_COEFFICIENTS[sex]
    s = sum_of_skinfolds_mm
    body_density = (
        intercept
        - (linear * s)
        + (quadratic * (s * s))
        - (age_coef * age_years)
    )

    logger.debug(
        f"Jackson-Pollock 7-fold calculation ({sex.value}): "
        f"sum_skinfolds={s}mm, age={age_years}, "
        f"body_density={body_density:.6f} g/cm³"
    )

    return body_density


def body_density_to_fat_percent(body_density: float) -> float:
    """
    Convert body density to body fat percentage using the Siri equation.

    Formula:
        Body Fat % = (495 / Body Density) - 450

    Reference:
        Siri, W.E. (1961). Body composition from fluid spaces and density:
        Analysis of methods. In J. Brozek & A. Henschel (Eds.), Techniques for
        Measuring Body Composition (pp. 223-224). Washington, DC: National
        Academy of Sciences.
    """
    fat_percent = (495.0 / body_density) - 450.0

    logger.debug(
        f"Siri equation: density={body_density:.6f} -> fat={fat_percent:.2f}%"
    )

    return fat_percent


def calculate_body_fat(
    sum_of_skinfolds_mm: float,
    age_years: int,
    sex: Sex,
) -> dict:
    """
    Complete body fat calculation from the skinfold sum.

    Returns:
        dict with keys:
            - sum_of_skinfolds: float (total mm)
            - body_density: float (g/cm³)
            - body_fat_percent: float (%)
    """
    body_density = calculate_body_density_jp7(sum_of_skinfolds_mm, age_years, sex)
    body_fat_percent = body_density_to_fat_percent(body_density)

    return {
        "sum_of_skinfolds": sum_of_skinfolds_mm,
        "body_density": body_density,
        "body_fat_percent": body_fat_percent,
    }
