"""
loan_validation.py

Input contract for the loan calculator.

LoanInput carries the constraints; pydantic's error entries are translated
into one human-readable message per violated constraint and raised together
in a LoanValidationError.
"""

from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from services.loan_calculator import LoanRequest


MIN_INTEREST_RATE = 0.01
MAX_INTEREST_RATE = 100.0
MIN_TERM_YEARS = 1
MAX_TERM_YEARS = 50

_LABELS = {
    "loan_amount": "Loan amount",
    "interest_rate": "Interest rate",
    "loan_term_years": "Loan term",
}

# pydantic error type -> message, per field. Anything else is "must be a number".
_MESSAGES = {
    "loan_amount": {
        "greater_than": "Loan amount must be greater than 0",
    },
    "interest_rate": {
        "greater_than_equal": "Interest rate must be greater than 0",
        "less_than_equal": "Interest rate cannot exceed 100%",
    },
    "loan_term_years": {
        "int_from_float": "Loan term must be a whole number of years",
        "greater_than_equal": "Loan term must be at least 1 year",
        "less_than_equal": "Loan term cannot exceed 50 years",
    },
}


class LoanValidationError(ValueError):
    """
    Raised when loan input violates one or more constraints.
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class LoanInput(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    loan_amount: float = Field(gt=0, description="Principal, currency units")
    interest_rate: float = Field(
        ge=MIN_INTEREST_RATE, le=MAX_INTEREST_RATE, description="Annual rate in percent"
    )
    loan_term_years: int = Field(ge=MIN_TERM_YEARS, le=MAX_TERM_YEARS)

    @field_validator("loan_amount", "interest_rate", "loan_term_years", mode="before")
    @classmethod
    def _no_text_or_bool(cls, value: Any) -> Any:
        # Lax mode would coerce "300000" and True
        if isinstance(value, (str, bool)):
            raise ValueError("expected a number")
        return value

    @field_validator("loan_amount", "interest_rate", mode="before")
    @classmethod
    def _fits_in_float(cls, value: Any) -> Any:
        if isinstance(value, int):
            try:
                float(value)
            except OverflowError:
                raise ValueError("number too large")
        return value

    def to_request(self) -> LoanRequest:
        return LoanRequest(
            loan_amount=self.loan_amount,
            interest_rate=self.interest_rate,
            loan_term_years=self.loan_term_years,
        )


def describe_errors(errors: Sequence[Dict[str, Any]]) -> List[str]:
    """
    Turn pydantic error entries into loan input messages.

    Works for both ValidationError.errors() and FastAPI's
    RequestValidationError.errors(), whose locations are prefixed with "body".
    """
    messages = []
    for error in errors:
        loc = error.get("loc") or ()
        field = loc[-1] if loc else None
        if field not in _LABELS:
            messages.append(error.get("msg", "Invalid input"))
            continue
        messages.append(
            _MESSAGES[field].get(error.get("type"), f"{_LABELS[field]} must be a number")
        )
    return messages


def validate_loan_request(data: Dict[str, Any]) -> LoanRequest:
    """
    Validate a raw input mapping and build a LoanRequest.

    Expected keys: loan_amount, interest_rate, loan_term_years.
    """
    try:
        loan_input = LoanInput.model_validate(data)
    except ValidationError as e:
        raise LoanValidationError(describe_errors(e.errors()))
    return loan_input.to_request()
