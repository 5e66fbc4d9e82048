DISCLAIMER = (
    "This tool applies the Fixed Obligation to Income Ratio (FOIR) method used by most lenders "
    "to size car loans against monthly income. "
    "Results are estimates only; lender policy, credit history and underwriter discretion prevail. "
    "Figures assume a fixed rate over the full tenure with no fees or prepayments."
)

# FOIR ceilings in percent. The ideal ceiling also sizes the max eligible
# principal, whichever tier the current proposal lands in.
FOIR_IDEAL_PCT = 40.0
FOIR_MAX_PCT = 50.0

TIER_ELIGIBLE = "eligible"
TIER_MARGINAL = "marginal"
TIER_NOT_ELIGIBLE = "not-eligible"

TIER_MESSAGES = {
    TIER_ELIGIBLE: "Congratulations! You are eligible for the loan.",
    TIER_MARGINAL: "You may be eligible with additional documentation.",
    TIER_NOT_ELIGIBLE: "You may need to reduce loan amount or increase income.",
}

LOAN_DEFAULTS = {
    "monthly_income": 0.0,
    "other_income": 0.0,
    "proposed_principal": 500000.0,
    "annual_interest_rate_pct": 8.5,
    "term_months": 60,
    "monthly_expenses": 0.0,
}

APPLICANT_DEFAULTS = {"name": "", "age": 25}

CURRENCY_SYMBOL = "₹"

# Longest tenure the form offers.
MAX_TERM_MONTHS = 480
