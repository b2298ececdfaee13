"""
Trip Value Calculator — FastAPI Backend
========================================
Serves the PWA frontend and provides API endpoints for:
  - Trip value calculation (validate + calculate)
  - Form options (positions, aircraft, labels, defaults)
  - Health check

All calculation logic lives in the app/ modules and is shared with
streamlit_app.py. Nothing is stored between requests.
"""

import os
import sys
import math
import logging
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Any

# Add app directory to path so we can import the shared modules
APP_DIR = Path(__file__).parent / "app"
sys.path.insert(0, str(APP_DIR))

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from trip_calculator import calculate_trip_value
from trip_display import breakdown_rows, format_money
from trip_pay_data import (
    AIRCRAFT_OPTIONS,
    APP_TITLE,
    APP_VERSION,
    FIELD_LABELS,
    FORM_DEFAULTS,
    INPUT_MESSAGE,
    POSITION_INPUT_GROUPS,
    POSITIONS,
    REGIONAL_DESTINATIONS,
)
from trip_validation import validate_trip


# ============================================================
# CONFIGURATION — environment, read once at import
# ============================================================
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger("api")


# ============================================================
# LIFESPAN — startup/shutdown
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("Trip value API %s ready (CORS origins: %s)", APP_VERSION, ", ".join(CORS_ORIGINS))
    yield


# ============================================================
# FASTAPI APP
# ============================================================
app = FastAPI(title="Trip Value API", version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# CALCULATE ENDPOINT
# ============================================================
def _invalid_detail(errors):
    return {
        "message": "Invalid trip details",
        "errors": errors,
    }


@app.exception_handler(RequestValidationError)
async def body_error_handler(request: Request, exc: RequestValidationError):
    # Unreadable JSON gets the same 400 shape as a failed form
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        log.info("Rejected unreadable request body on %s", request.url.path)
        return JSONResponse(
            status_code=400,
            content={"detail": _invalid_detail([{"field": "input", "message": INPUT_MESSAGE}])},
        )
    return await request_validation_exception_handler(request, exc)


@app.post("/api/calculate")
def calculate(payload: Any = Body(None)):
    # Raw body; validate_trip reports every field error at once
    outcome = validate_trip(payload)
    if not outcome.ok:
        raise HTTPException(
            status_code=400,
            detail=_invalid_detail([e.model_dump() for e in outcome.errors]),
        )

    trip = outcome.trip
    result = calculate_trip_value(trip)

    response = result.model_dump(by_alias=True)
    # JSON has no inf/nan: overflowed components go out as null
    overflow = [k for k, v in response.items() if isinstance(v, float) and not math.isfinite(v)]
    for key in overflow:
        response[key] = None
    if overflow:
        log.warning("Trip value overflowed for %s: %s", trip.position, ", ".join(overflow))

    response["overflow"] = bool(overflow)
    response["position"] = trip.position
    response["totalTripValueFormatted"] = format_money(result.total_trip_value)
    response["breakdown"] = [
        {"label": label, "value": value}
        for label, value in breakdown_rows(result, trip.international_trip)
    ]
    return response


# ============================================================
# OPTIONS ENDPOINT — everything a front end needs to build the form
# ============================================================
@app.get("/api/options")
def get_options():
    return {
        "title": APP_TITLE,
        "positions": POSITIONS,
        "aircraft": AIRCRAFT_OPTIONS,
        "regionalDestinations": REGIONAL_DESTINATIONS,
        "labels": FIELD_LABELS,
        "defaults": FORM_DEFAULTS,
        "positionInputs": {k: list(v) for k, v in POSITION_INPUT_GROUPS.items()},
    }


# ============================================================
# STATIC FILE SERVING (PWA)
# ============================================================
PWA_DIR = APP_DIR / "pwa"

@app.get("/")
async def serve_index():
    index_path = PWA_DIR / "index.html"
    if index_path.exists():
        return FileResponse(index_path, media_type="text/html")
    return {"message": "Trip Value API is running. PWA files not found in /pwa directory."}


# ============================================================
# HEALTH CHECK
# ============================================================
@app.get("/api/health")
async def health():
    return {
        "status": "ok",
        "version": APP_VERSION,
    }


# ============================================================
# RUN
# ============================================================
if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    host = os.environ.get("HOST", "0.0.0.0")
    reload = os.environ.get("RELOAD", "false").lower() == "true"
    uvicorn.run("api:app", host=host, port=port, reload=reload)
