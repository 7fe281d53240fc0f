from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from services.loan_validation import LoanInput


class MortgageCalculationRequest(LoanInput):
    """
    Request body; constraints come from LoanInput.
    """


class MortgageCalculationResult(BaseModel):
    monthly_payment: float
    total_interest: float
    total_payment: float
    loan_amount: float
    interest_rate: float
    loan_term_years: int


class ValidationFailure(BaseModel):
    error: str
    errors: List[str]


class CalculationRecord(BaseModel):
    id: int
    loan_amount: float
    interest_rate: float
    loan_term_years: int
    monthly_payment: float
    total_interest: float
    total_payment: float
    created_at: Optional[datetime] = None
