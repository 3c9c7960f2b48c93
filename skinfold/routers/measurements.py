"""
Measurements Router
====================
Endpoints for the session's stored skinfold measurements.

Endpoints:
  GET    /measurements/        - Current stored values and their sum
  PUT    /measurements/{site}  - Store one freshly typed value (best effort)
  DELETE /measurements/        - Reset every site to 0.0 (not set)
"""

import logging

from fastapi import APIRouter, Depends

from skinfold.core.session import SessionState, get_session
from skinfold.models import Site
from skinfold.schemas import (
    MeasurementSetResponse,
    MeasurementUpdateRequest,
    MeasurementUpdateResponse,
    MessageResponse,
)
from skinfold.services.calculator import update_measurement

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/measurements", tags=["Measurements"])


@router.get("/", response_model=MeasurementSetResponse)
async def get_measurements(session: SessionState = Depends(get_session)):
    """Return the stored measurements. A value of 0.0 means 'not set'."""
    return MeasurementSetResponse.from_measurements(session.measurements)


@router.put("/{site}", response_model=MeasurementUpdateResponse)
async def update_site_measurement(
    site: Site,
    update: MeasurementUpdateRequest,
    session: SessionState = Depends(get_session),
):
    """
    Store the value typed for one site.

    This mirrors typing into an input field: text that does not parse is
    ignored (accepted=false) rather than rejected. Strict validation happens
    at POST /body-fat/calculate. Unknown site names are rejected with 422.
    """
    accepted = update_measurement(session, site, update.value)
    return MeasurementUpdateResponse(
        site=site,
        accepted=accepted,
        measurements=MeasurementSetResponse.from_measurements(session.measurements),
    )


@router.delete("/", response_model=MessageResponse)
async def reset_measurements(session: SessionState = Depends(get_session)):
    """Clear every stored measurement."""
    with session.lock:
        session.measurements.reset()
    logger.info("Stored measurements reset")
    return MessageResponse(message="All measurements cleared")
