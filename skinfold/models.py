"""
Domain Models
==============
Defines the in-memory types shared by the calculation services.

  - Site            : the seven Jackson & Pollock skinfold sites (closed set)
  - Sex             : Male / Female
  - BodyFatCategory : every label the classifier can return
  - MeasurementSet  : one millimeter value per site, 0.0 meaning "unset"
  - BodyFatResult   : the outcome of a successful calculation

There is no database: the only stored state is the session's MeasurementSet.
"""

from enum import Enum

from pydantic import BaseModel


# ============================================================
# ENUMS
# ============================================================
class Site(str, Enum):
    """Skinfold sites, in the order they are measured and validated."""

    CHEST = "chest"
    ABDOMINAL = "abdominal"
    THIGH = "thigh"
    TRICEPS = "triceps"
    SUBSCAPULAR = "subscapular"
    SUPRAILIAC = "suprailiac"
    MIDAXILLARY = "midaxillary"

    @property
    def label(self) -> str:
        """Capitalised name used in validation messages (e.g. 'Chest')."""
        return self.value.capitalize()


class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class BodyFatCategory(str, Enum):
    """Normative categories, plus the two out-of-table outcomes."""

    EXTREMELY_LEAN = "Extremely Lean (Below Essential Fat)"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    BELOW_AVERAGE = "Below Average"
    POOR = "Poor"
    UNCLASSIFIED = "Unclassified"


# ============================================================
# MEASUREMENT SET — seven skinfolds, mutated field by field
# ============================================================
class MeasurementSet(BaseModel):
    """
    Holds one caliper reading (mm) per site.

    A value of 0.0 means the site has not been measured yet. No validation
    happens here: values arrive already parsed by the caller.
    """

    chest: float = 0.0
    abdominal: float = 0.0
    thigh: float = 0.0
    triceps: float = 0.0
    subscapular: float = 0.0
    suprailiac: float = 0.0
    midaxillary: float = 0.0

    def set(self, site: Site, value: float) -> None:
        """Overwrite exactly the named field."""
        setattr(self, site.value, value)

    def get(self, site: Site) -> float:
        return getattr(self, site.value)

    def total(self) -> float:
        """Sum of all seven skinfolds, recomputed on every call."""
        return sum(self.get(site) for site in Site)

    def clone(self) -> "MeasurementSet":
        """Independent copy, used as the stored baseline during resolution."""
        return self.model_copy()

    def reset(self) -> None:
        for site in Site:
            self.set(site, 0.0)

    def as_dict(self) -> dict[str, float]:
        return {site.value: self.get(site) for site in Site}


# ============================================================
# BODY FAT RESULT — returned by a successful calculation
# ============================================================
class BodyFatResult(BaseModel):
    """
    Ephemeral result of one calculation.

    `percentage` is deliberately unbounded: extreme inputs may produce values
    below 0 or above 100.
    """

    percentage: float
    category: BodyFatCategory
    body_density: float
    sum_of_skinfolds: float
    age: int
    sex: Sex

    @property
    def result_text(self) -> str:
        return f"Body Fat Percentage: {self.percentage:.2f}%"

    @property
    def category_text(self) -> str:
        return (
            f"Category for age {self.age} ({self.sex.value}): "
            f"{self.category.value}"
        )
