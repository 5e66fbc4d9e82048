from __future__ import annotations

import logging

from foir.models import EligibilityResult, LoanInput
from foir.presets import (
    FOIR_IDEAL_PCT,
    FOIR_MAX_PCT,
    TIER_ELIGIBLE,
    TIER_MARGINAL,
    TIER_NOT_ELIGIBLE,
)
from foir.utils import nz

logger = logging.getLogger(__name__)


def monthly_rate(annual_rate_pct):
    """Convert a nominal yearly rate in percent (``8.5``) to a monthly rate."""

    return nz(annual_rate_pct) / 1200


def compute_installment(principal, annual_rate_pct, term_months):
    """Calculate the fully amortizing monthly installment (EMI) for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``8.5`` for 8.5%), and ``term_months``
    is the tenure in months.  A zero rate falls back to straight-line
    repayment; a non-positive principal costs nothing.
    """

    L = nz(principal)
    r = monthly_rate(annual_rate_pct)
    n = int(nz(term_months))
    if n <= 0 or L <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return L / n
    return (r * L) / (1 - (1 + r) ** (-n))


def principal_from_installment(installment, annual_rate_pct, term_months):
    """Reverse amortization to find the loan amount for a given installment.

    Given a monthly payment budget, rate and tenure, this returns the largest
    principal that payment retires.
    """

    P = nz(installment)
    r = monthly_rate(annual_rate_pct)
    n = int(nz(term_months))
    if n <= 0 or P <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return P * n
    return P * (1 - (1 + r) ** (-n)) / r


def total_interest(installment, principal, term_months):
    """Interest paid over the life of the loan."""

    return nz(installment) * int(nz(term_months)) - nz(principal)


def foir(total_obligations, total_income):
    """Return the obligation to income ratio in percent.

    Zero income reports a ratio of ``0`` rather than dividing by zero.
    """

    inc = nz(total_income)
    if inc <= 0:
        return 0.0
    return 100.0 * nz(total_obligations) / inc


def classify_tier(foir_pct):
    if foir_pct <= FOIR_IDEAL_PCT:
        return TIER_ELIGIBLE
    if foir_pct <= FOIR_MAX_PCT:
        return TIER_MARGINAL
    return TIER_NOT_ELIGIBLE


def max_allowed_installment(total_income, existing_obligations, ceiling_pct=FOIR_IDEAL_PCT):
    """Installment headroom left under ``ceiling_pct`` after existing EMIs."""

    return nz(total_income) * nz(ceiling_pct) / 100 - nz(existing_obligations)


def max_eligible_principal(total_income, existing_obligations, annual_rate_pct, term_months):
    """Largest principal that keeps FOIR at or below the ideal ceiling.

    The ceiling is always :data:`FOIR_IDEAL_PCT`, never the marginal tier's
    upper bound, and rate and tenure are held at the proposed loan's values.
    """

    allowed = max_allowed_installment(total_income, existing_obligations)
    if allowed <= 0:
        return 0.0
    return max(0.0, principal_from_installment(allowed, annual_rate_pct, term_months))


def evaluate(loan: LoanInput) -> EligibilityResult:
    """Run the full FOIR assessment for one input snapshot."""

    total_income = loan.monthly_income + loan.other_income
    existing = sum(o.amount for o in loan.existing_obligations)
    emi = compute_installment(
        loan.proposed_principal, loan.annual_interest_rate_pct, loan.term_months
    )
    obligations = existing + emi
    ratio = foir(obligations, total_income)
    result = EligibilityResult(
        total_income=total_income,
        total_existing_obligations=existing,
        proposed_installment=emi,
        total_obligations=obligations,
        foir_pct=ratio,
        eligibility_tier=classify_tier(ratio),
        max_eligible_principal=max_eligible_principal(
            total_income, existing, loan.annual_interest_rate_pct, loan.term_months
        ),
        disposable_income=total_income - obligations - loan.monthly_expenses,
    )
    logger.debug(
        "FOIR %.2f%% (%s) on income %.2f, obligations %.2f",
        result.foir_pct,
        result.eligibility_tier,
        result.total_income,
        result.total_obligations,
    )
    return result
