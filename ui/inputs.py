import streamlit as st

from foir.models import Applicant, LoanInput
from foir.presets import APPLICANT_DEFAULTS, LOAN_DEFAULTS, MAX_TERM_MONTHS
from foir.utils import format_money


def render_applicant():
    st.subheader("Personal Details")
    c1, c2 = st.columns(2)
    name = c1.text_input("Full Name", value=APPLICANT_DEFAULTS["name"], key="applicant_name")
    age = c2.number_input("Age", min_value=0, value=APPLICANT_DEFAULTS["age"], step=1, key="applicant_age")
    return Applicant(name=name, age=int(age))


def render_income():
    """Income widgets; returns the raw values keyed like :class:`LoanInput`."""
    st.subheader("Income Details")
    c1, c2 = st.columns(2)
    raw = {
        "monthly_income": c1.number_input(
            "Monthly Salary", min_value=0.0, value=LOAN_DEFAULTS["monthly_income"], step=1000.0, key="monthly_income"
        ),
        "other_income": c2.number_input(
            "Other Income",
            min_value=0.0,
            value=LOAN_DEFAULTS["other_income"],
            step=1000.0,
            help="Rental, business income etc.",
            key="other_income",
        ),
    }
    st.markdown(f"**Total Monthly Income:** {format_money(raw['monthly_income'] + raw['other_income'])}")
    return raw


def render_loan_parameters():
    st.subheader("Car Loan Parameters")
    c1, c2, c3 = st.columns(3)
    raw = {
        "proposed_principal": c1.number_input(
            "Loan Amount",
            min_value=0.0,
            value=LOAN_DEFAULTS["proposed_principal"],
            step=10000.0,
            key="proposed_principal",
        ),
        "annual_interest_rate_pct": c2.number_input(
            "Interest Rate (%)",
            min_value=0.0,
            value=LOAN_DEFAULTS["annual_interest_rate_pct"],
            step=0.1,
            key="annual_interest_rate_pct",
        ),
        "term_months": c3.number_input(
            "Tenure (Months)",
            min_value=1,
            max_value=MAX_TERM_MONTHS,
            value=LOAN_DEFAULTS["term_months"],
            step=1,
            key="term_months",
        ),
    }
    raw["monthly_expenses"] = st.number_input(
        "Other Monthly Expenses",
        min_value=0.0,
        value=LOAN_DEFAULTS["monthly_expenses"],
        step=1000.0,
        help="Household expenses, utilities etc.",
        key="monthly_expenses",
    )
    return raw


def build_loan_input(income: dict, loan: dict, obligations) -> LoanInput:
    return LoanInput.from_raw({**income, **loan, "existing_obligations": obligations})
