import logging
import os

import streamlit as st

from foir import __version__
from foir.calculators import evaluate
from foir.presets import DISCLAIMER
from ui.inputs import build_loan_input, render_applicant, render_income, render_loan_parameters
from ui.obligations import render_obligation_cards
from ui.results import render_results

logging.basicConfig(
    level=os.getenv("FOIR_LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    st.set_page_config(page_title="Car Loan Eligibility Calculator", layout="wide")
    st.title("Car Loan Eligibility Calculator")
    st.caption(f"Calculate your car loan eligibility based on FOIR (Fixed Obligation to Income Ratio) • v{__version__}")

    applicant = render_applicant()
    income = render_income()
    obligations = render_obligation_cards()
    loan_raw = render_loan_parameters()

    # Every rerun is a fresh snapshot; nothing derived is kept in session state.
    loan = build_loan_input(income, loan_raw, obligations)
    result = evaluate(loan)
    logger.debug("Rerun: %d existing EMIs, tier %s", len(loan.existing_obligations), result.eligibility_tier)
    st.divider()
    render_results(loan, result, applicant)

    st.divider()
    st.caption(DISCLAIMER)


main()
