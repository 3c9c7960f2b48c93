"""
Body Fat Router
================
Endpoints for the Jackson & Pollock 7-site calculation.

Endpoints:
  POST /body-fat/calculate  - Validate inputs, compute body fat % and category
  GET  /body-fat/norms      - Normative classification tables
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from skinfold.core.session import SessionState, get_session
from skinfold.models import Sex
from skinfold.schemas import (
    BodyFatCalculateRequest,
    BodyFatCalculateResponse,
    CalculationErrorDetail,
    NormsResponse,
)
from skinfold.services.calculator import calculate
from skinfold.services.classifier import ESSENTIAL_FAT_FLOOR, norms_table
from skinfold.services.resolver import CalculationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/body-fat", tags=["Body Fat"])


@router.post(
    "/calculate",
    response_model=BodyFatCalculateResponse,
    responses={422: {"description": "One or more inputs failed validation"}},
)
async def calculate_body_fat_endpoint(
    request: BodyFatCalculateRequest,
    session: SessionState = Depends(get_session),
):
    """
    Calculate body fat percentage from seven skinfolds, age and sex.

    HOW IT WORKS:
      1. Each site uses the typed text if present, else the stored value
      2. Age must be a whole number between 1 and 119
      3. Sex must be Male or Female
      4. Density (Jackson & Pollock) → body fat % (Siri) → category

    On any validation failure, responds 422 with ALL messages at once and
    leaves the stored measurements unchanged. On success the values used
    become the new stored measurements.
    """
    try:
        result = calculate(
            session,
            request.raw_sites(),
            request.age,
            request.sex,
        )
    except CalculationError as e:
        raise HTTPException(
            status_code=422,
            detail=CalculationErrorDetail(errors=e.errors).model_dump(),
        )

    return BodyFatCalculateResponse.from_result(result, session.measurements)


@router.get("/norms", response_model=NormsResponse)
async def get_norms():
    """
    Return the classification tables used by /body-fat/calculate.

    Bounds are inclusive. Values between two ranges are Unclassified.
    """
    return NormsResponse(
        essential_fat_floor=ESSENTIAL_FAT_FLOOR,
        male=norms_table(Sex.MALE),
        female=norms_table(Sex.FEMALE),
    )
