"""
loan_calculator.py

Fixed-rate mortgage amortization math.

Given:
- Principal (loan_amount)
- Annual interest rate in percent (e.g., 6.5 for 6.5%)
- Term in years

produces:
- Monthly payment (rounded to cents)
- Total payment over the life of the loan
- Total interest paid

Totals are derived from the *rounded* monthly payment so they agree with
what the borrower actually pays each month.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict
import math


@dataclass(frozen=True)
class LoanRequest:
    loan_amount: float
    interest_rate: float
    loan_term_years: int


@dataclass(frozen=True)
class LoanResult:
    monthly_payment: float
    total_interest: float
    total_payment: float
    loan_amount: float
    interest_rate: float
    loan_term_years: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_currency(value: float) -> float:
    """
    Round to 2 decimal places, ties away from zero.

    Values too large to scale by 100 are already beyond cent precision
    and are returned unchanged.
    """
    if not math.isfinite(value * 100):
        return value
    scaled = math.floor(abs(value) * 100 + 0.5)
    return math.copysign(scaled / 100, value)


class LoanCalculator:
    """
    Standard mortgage amortization model.

    Inputs are not validated here; see services/loan_validation.py.
    """

    def __init__(self, loan_amount: float, interest_rate: float, years: int):
        self.principal = loan_amount
        self.interest_rate = interest_rate
        self.years = years

    @classmethod
    def from_request(cls, request: LoanRequest) -> "LoanCalculator":
        return cls(request.loan_amount, request.interest_rate, request.loan_term_years)

    def monthly_rate(self) -> float:
        return (self.interest_rate / 100) / 12

    def num_payments(self) -> int:
        return self.years * 12

    def monthly_payment(self) -> float:
        """
        Unrounded monthly payment (P&I).
        """
        r = self.monthly_rate()
        n = self.num_payments()
        p = self.principal

        if r == 0:
            # Straight-line, no interest component
            return p / n

        # M = P * [r (1+r)^n] / [(1+r)^n - 1]
        factor = (1 + r) ** n
        return p * (r * factor) / (factor - 1)

    def result(self) -> LoanResult:
        n = self.num_payments()
        monthly_payment = round_currency(self.monthly_payment())

        total_payment = monthly_payment * n
        total_interest = total_payment - self.principal

        return LoanResult(
            monthly_payment=monthly_payment,
            total_interest=round_currency(total_interest),
            total_payment=round_currency(total_payment),
            loan_amount=self.principal,
            interest_rate=self.interest_rate,
            loan_term_years=self.years,
        )


def compute(request: LoanRequest) -> LoanResult:
    return LoanCalculator.from_request(request).result()
