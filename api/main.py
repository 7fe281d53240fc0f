from typing import Any, Dict, List, Optional
import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import settings
from engine.mortgage_engine import MortgageEngine
from services.loan_validation import describe_errors
from storage.calculation_history import CalculationHistory
from storage.database import build_engine, build_session_factory, init_db
from api.schemas import (
    CalculationRecord,
    MortgageCalculationRequest,
    MortgageCalculationResult,
    ValidationFailure,
)

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("mortgage.api")


app = FastAPI(
    title="Mortgage Calculator API",
    description="HTTP API wrapper around the MortgageEngine for fixed-rate loan payment figures.",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def loan_input_error_handler(request: Request, exc: RequestValidationError):
    """
    Report loan input violations as 400 with one message per constraint.
    Other endpoints keep FastAPI's default 422.
    """
    if request.url.path != "/calculate-mortgage":
        return await request_validation_exception_handler(request, exc)

    errors = describe_errors(exc.errors())
    logger.info("Rejected loan input: %s", "; ".join(errors))
    return JSONResponse(
        status_code=400,
        content={"detail": {"error": "Invalid loan input", "errors": errors}},
    )


def build_mortgage_engine() -> MortgageEngine:
    if not settings.history_enabled:
        return MortgageEngine()

    db_engine = build_engine(settings.database_url)
    init_db(db_engine)
    return MortgageEngine(history=CalculationHistory(build_session_factory(db_engine)))


# Single engine instance for all requests
engine = build_mortgage_engine()


@app.get("/health", tags=["system"])
def health_check() -> Dict[str, Any]:
    """
    Simple health check endpoint.
    """
    return {"status": "ok", "message": "Mortgage Calculator API is running."}


@app.post(
    "/calculate-mortgage",
    response_model=MortgageCalculationResult,
    responses={400: {"model": ValidationFailure}},
    tags=["mortgage"],
)
def calculate_mortgage(payload: MortgageCalculationRequest) -> MortgageCalculationResult:
    """
    Compute monthly payment, total interest and total payment for a fixed-rate loan.
    """
    try:
        outcome = engine.run_calculation(payload.model_dump())

        # Validation failures come back as data, translate to HTTP 400
        if not outcome.get("success", False):
            raise HTTPException(
                status_code=400,
                detail={
                    "error": outcome.get("error", "Calculation failed"),
                    "errors": outcome.get("errors", []),
                },
            )

        return MortgageCalculationResult(**outcome["result"])

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unexpected error in /calculate-mortgage: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/calculations", response_model=List[CalculationRecord], tags=["history"])
def list_calculations(limit: Optional[int] = Query(default=None, ge=1)) -> List[CalculationRecord]:
    """
    Most recent recorded calculations, newest first.
    """
    size = min(limit or settings.history_page_size, settings.history_max_page_size)
    try:
        return [CalculationRecord(**row) for row in engine.recent_calculations(size)]
    except Exception as e:
        logger.exception("Unexpected error in /calculations: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
