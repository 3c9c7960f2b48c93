"""
Pydantic V2 Schemas (Request/Response Models)
================================================
These schemas define the shape of data that flows in and out of the API.

Measurement and age fields arrive as RAW TEXT, exactly as typed by the user.
Parsing and validation belong to the resolver service, not to these models,
so that every problem can be reported together instead of failing on the
first malformed field. Numbers sent as JSON numbers are coerced to text.

Naming Convention:
  - *Request  : Used for request bodies
  - *Response : Used for API responses (what the client receives back)
"""

from pydantic import BaseModel, Field

from skinfold.models import BodyFatCategory, BodyFatResult, MeasurementSet, Sex, Site


# ============================================================
# MEASUREMENT SCHEMAS
# ============================================================

class MeasurementSetResponse(BaseModel):
    """The session's stored skinfolds (mm) and their sum. 0.0 = not set."""
    chest: float
    abdominal: float
    thigh: float
    triceps: float
    subscapular: float
    suprailiac: float
    midaxillary: float
    total: float = Field(..., description="Sum of all seven skinfolds (mm)")

    @classmethod
    def from_measurements(cls, measurements: MeasurementSet) -> "MeasurementSetResponse":
        return cls(**measurements.as_dict(), total=measurements.total())


class MeasurementUpdateRequest(BaseModel):
    """Raw text typed into one site's input field."""
    value: str = Field(..., description="Caliper reading in mm, as typed")

    model_config = {"coerce_numbers_to_str": True}


class MeasurementUpdateResponse(BaseModel):
    """
    Result of a best-effort update.
    `accepted` is False when the text did not parse; the set is then unchanged.
    """
    site: Site
    accepted: bool
    measurements: MeasurementSetResponse


# ============================================================
# CALCULATION SCHEMAS
# ============================================================

class BodyFatCalculateRequest(BaseModel):
    """
    Everything the calculate button submits.

    Empty site fields fall back to the stored measurement for that site.
    """
    chest: str = Field(default="", description="Chest skinfold (mm)")
    abdominal: str = Field(default="", description="Abdominal skinfold (mm)")
    thigh: str = Field(default="", description="Thigh skinfold (mm)")
    triceps: str = Field(default="", description="Triceps skinfold (mm)")
    subscapular: str = Field(default="", description="Subscapular skinfold (mm)")
    suprailiac: str = Field(default="", description="Suprailiac skinfold (mm)")
    midaxillary: str = Field(default="", description="Midaxillary skinfold (mm)")
    age: str = Field(default="", description="Age in whole years (1–119)")
    sex: str = Field(default="", description="'Male' or 'Female'")

    model_config = {"coerce_numbers_to_str": True}

    def raw_sites(self) -> dict[Site, str]:
        return {site: getattr(self, site.value) for site in Site}


class BodyFatCalculateResponse(BaseModel):
    """Successful calculation, plus the display lines a UI can show as-is."""
    percentage: float
    category: BodyFatCategory
    body_density: float
    sum_of_skinfolds: float
    age: int
    sex: Sex
    result_text: str
    category_text: str
    measurements: MeasurementSetResponse

    @classmethod
    def from_result(
        cls, result: BodyFatResult, measurements: MeasurementSet
    ) -> "BodyFatCalculateResponse":
        return cls(
            **result.model_dump(),
            result_text=result.result_text,
            category_text=result.category_text,
            measurements=MeasurementSetResponse.from_measurements(measurements),
        )


class CalculationErrorDetail(BaseModel):
    """
    Body of the 422 `detail` when a calculation is rejected.
    `errors` lists every validation message, in input order.
    """
    message: str = "Please fix the errors above"
    errors: list[str]


# ============================================================
# NORMS SCHEMAS
# ============================================================

class NormRange(BaseModel):
    min_percent: float
    max_percent: float
    category: BodyFatCategory


class NormBand(BaseModel):
    age_min: int
    age_max: int
    ranges: list[NormRange]


class NormsResponse(BaseModel):
    """Classification tables, plus the essential-fat floors checked before them."""
    essential_fat_floor: dict[Sex, float]
    male: list[NormBand]
    female: list[NormBand]


# ============================================================
# GENERIC RESPONSE
# ============================================================

class MessageResponse(BaseModel):
    """Generic response for operations that return a simple message."""
    message: str
    success: bool = True
