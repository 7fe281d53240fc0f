"""
mortgage_engine.py

Top-level engine that orchestrates:
- Input validation (services/loan_validation)
- Amortization math (services/loan_calculator)
- Optional calculation history (storage/calculation_history)

Validation failures are reported in the returned dict ({"success": False});
arithmetic failures are logged and propagate to the caller unchanged.
"""

from typing import Any, Dict, List, Optional
import logging

from services.loan_calculator import LoanRequest, LoanResult, compute
from services.loan_validation import LoanValidationError, validate_loan_request
from storage.calculation_history import CalculationHistory

logger = logging.getLogger("mortgage.engine")


class MortgageEngine:
    """
    Main orchestration class.
    """

    def __init__(self, history: Optional[CalculationHistory] = None):
        self.history = history

    # ---------------------------------------------------------
    # Public entry points
    # ---------------------------------------------------------

    def run_calculation(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate raw input, compute, and record the result.

        Returns {"success": True, "result": {...}, "history_id": ...} or
        {"success": False, "error": ..., "errors": [...]}.
        """
        try:
            request = validate_loan_request(config)
        except LoanValidationError as e:
            logger.info("Rejected loan input: %s", e)
            return {"success": False, "error": "Invalid loan input", "errors": e.errors}

        result = self.calculate(request)

        history_id = None
        if self.history is not None:
            history_id = self.history.record(result)

        return {"success": True, "result": result.to_dict(), "history_id": history_id}

    def calculate(self, request: LoanRequest) -> LoanResult:
        """
        Compute a validated request. Never records history.
        """
        try:
            result = compute(request)
        except ArithmeticError:
            logger.exception("Mortgage calculation failed for %s", request)
            raise

        logger.debug(
            "Computed monthly_payment=%s total_payment=%s for %s",
            result.monthly_payment,
            result.total_payment,
            request,
        )
        return result

    def recent_calculations(self, limit: int) -> List[Dict[str, Any]]:
        if self.history is None:
            return []
        return self.history.recent(limit)
