"""
calculation_history.py

Append-only log of past mortgage calculations.

Writes are best-effort: a failed insert is logged and reported as None,
never raised into the calculation path.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import DateTime, Integer, Numeric, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Mapped, mapped_column, sessionmaker

from services.loan_calculator import LoanResult
from storage.database import Base

logger = logging.getLogger("mortgage.history")


class MortgageCalculation(Base):
    """One recorded calculation."""
    __tablename__ = "mortgage_calculations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Inputs
    loan_amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    interest_rate: Mapped[float] = mapped_column(Numeric(7, 4, asdecimal=False), nullable=False)
    loan_term_years: Mapped[int] = mapped_column(Integer, nullable=False)

    # Outputs
    monthly_payment: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    total_interest: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    total_payment: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "loan_amount": self.loan_amount,
            "interest_rate": self.interest_rate,
            "loan_term_years": self.loan_term_years,
            "monthly_payment": self.monthly_payment,
            "total_interest": self.total_interest,
            "total_payment": self.total_payment,
            "created_at": self.created_at,
        }


class CalculationHistory:
    """
    Thin repository over the mortgage_calculations table.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def record(self, result: LoanResult) -> Optional[int]:
        row = MortgageCalculation(
            loan_amount=result.loan_amount,
            interest_rate=result.interest_rate,
            loan_term_years=result.loan_term_years,
            monthly_payment=result.monthly_payment,
            total_interest=result.total_interest,
            total_payment=result.total_payment,
        )
        try:
            with self.session_factory() as session:
                session.add(row)
                session.commit()
                return row.id
        except SQLAlchemyError:
            logger.warning("Failed to record mortgage calculation", exc_info=True)
            return None

    def recent(self, limit: int = 20) -> List[Dict[str, Any]]:
        """
        Most recent calculations, newest first.
        """
        stmt = (
            select(MortgageCalculation)
            .order_by(MortgageCalculation.id.desc())
            .limit(limit)
        )
        with self.session_factory() as session:
            return [row.to_dict() for row in session.scalars(stmt)]
