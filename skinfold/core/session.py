"""
Session State & Dependency
===========================
This module replaces a database layer: the calculator keeps a single
in-memory MeasurementSet for the lifetime of the process. It provides:
  - `SessionState`: owns the MeasurementSet and the lock guarding it
  - `get_session()`: a FastAPI dependency that returns the app's SessionState

The state is created by the application factory and stored on `app.state`,
so nothing here is a module-level global.
"""

import threading

from fastapi import Request

from skinfold.models import MeasurementSet


class SessionState:
    """
    Owner of the session's stored measurements.

    `lock` must be held for the whole resolve-then-merge sequence of a
    calculation so that no partial merge is ever observable.
    """

    def __init__(self, measurements: MeasurementSet | None = None):
        self.measurements = measurements if measurements is not None else MeasurementSet()
        self.lock = threading.Lock()


def get_session(request: Request) -> SessionState:
    """
    FastAPI dependency that provides the session state.

    Usage in a route:
        @router.get("/example")
        async def example(session: SessionState = Depends(get_session)):
            ...
    """
    return request.app.state.session
