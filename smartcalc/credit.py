"""Loan repayment calculations for annuity and differentiated schedules."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

__all__ = ["PaymentType", "CreditResult", "round_payment", "calculate_credit"]

MONTHS_IN_YEAR = 12


class PaymentType(enum.IntEnum):
    """How the loan is repaid."""

    DIFFERENTIAL = 1
    ANNUITY = 2


@dataclass(frozen=True)
class CreditResult:
    """Outcome of a loan calculation.

    For an annuity every monthly payment equals ``monthly_payment_max`` and
    ``monthly_payment_min`` is zero; for a differentiated schedule they are
    the first and the last payment.
    """

    monthly_payment_max: float
    monthly_payment_min: float
    overpayment: float
    total_payment: float


def round_payment(value: float) -> float:
    """Round ``value`` to two decimal places as printed money amounts are."""
    return float(f"{value:.2f}")


def _annuity(loan_body: float, term: float, interest_rate: float) -> CreditResult:
    monthly_rate = interest_rate / MONTHS_IN_YEAR / 100
    growth = math.pow(1 + monthly_rate, term)
    denominator = growth - 1
    if denominator == 0:
        monthly = math.nan
    else:
        monthly = round_payment(loan_body * monthly_rate * growth / denominator)
    total = monthly * term
    return CreditResult(
        monthly_payment_max=monthly,
        monthly_payment_min=0.0,
        overpayment=total - loan_body,
        total_payment=total,
    )


def _differential(
    loan_body: float, term: float, interest_rate: float
) -> CreditResult:
    months = int(term)
    principal_part = loan_body / term
    remaining = loan_body
    overpayment = 0.0
    first = 0.0
    last = 0.0
    for month in range(months):
        interest = remaining * (interest_rate / 100.0) / MONTHS_IN_YEAR
        overpayment += interest
        remaining -= principal_part
        payment = principal_part + interest
        if month == 0:
            first = round_payment(payment)
        if month == months - 1:
            last = round_payment(payment)
    return CreditResult(
        monthly_payment_max=first,
        monthly_payment_min=last,
        overpayment=round_payment(overpayment),
        total_payment=round_payment(loan_body + overpayment),
    )


def calculate_credit(
    loan_body: float,
    term: float,
    interest_rate: float,
    payment_type: PaymentType = PaymentType.ANNUITY,
    term_in_years: bool = False,
) -> CreditResult:
    """Compute payments for a loan.

    ``term`` is in months unless ``term_in_years`` is set; ``interest_rate``
    is the yearly rate in percent. Raises ValueError for a non-positive term.
    """
    if term_in_years:
        term = term * MONTHS_IN_YEAR
    if term <= 0:
        raise ValueError("term must be positive")
    payment_type = PaymentType(payment_type)
    if payment_type is PaymentType.ANNUITY:
        return _annuity(loan_body, term, interest_rate)
    return _differential(loan_body, term, interest_rate)