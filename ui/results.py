import streamlit as st

from export.pdf_export import build_eligibility_pdf
from foir.calculators import total_interest
from foir.obligations import obligations_frame
from foir.presets import FOIR_IDEAL_PCT, FOIR_MAX_PCT, TIER_MESSAGES
from foir.rules import evaluate_rules, has_blocking
from foir.utils import format_money

TIER_ALERTS = {
    "eligible": st.success,
    "marginal": st.warning,
    "not-eligible": st.error,
}


def render_status(result):
    st.subheader("Eligibility Status")
    tier = result.eligibility_tier
    TIER_ALERTS[tier](f"**{tier.replace('-', ' ').title()}**: {TIER_MESSAGES[tier]}")


def render_foir_analysis(result):
    st.subheader("FOIR Analysis")
    cols = st.columns(2)
    cols[0].metric("Total Income", format_money(result.total_income))
    cols[1].metric("FOIR", f"{result.foir_pct:.1f}%")
    st.caption(f"Existing EMIs: {format_money(result.total_existing_obligations)}")
    st.caption(f"Proposed EMI: {format_money(result.proposed_installment)}")
    st.caption(f"Total Obligations: {format_money(result.total_obligations)}")
    st.progress(min(result.foir_pct, 100.0) / 100, text=f"FOIR Limit {FOIR_IDEAL_PCT:.0f}% (Ideal) | {FOIR_MAX_PCT:.0f}% (Max)")


def render_financial_summary(loan, result):
    st.subheader("Financial Summary")
    interest = total_interest(result.proposed_installment, loan.proposed_principal, loan.term_months)
    st.caption(f"Max Eligible Amount: {format_money(result.max_eligible_principal)}")
    st.caption(f"Disposable Income: {format_money(result.disposable_income)}")
    st.caption(f"Loan Tenure: {loan.term_months} months ({loan.term_months / 12:.1f} years)")
    st.caption(f"Total Interest: {format_money(interest)}")
    if loan.existing_obligations:
        st.dataframe(obligations_frame(loan.existing_obligations).drop(columns=["id"]), hide_index=True)


def render_findings(loan, result):
    findings = evaluate_rules(loan, result)
    for r in findings:
        if r.severity == "critical":
            st.error(f"[{r.code}] {r.message}")
        elif r.severity == "warn":
            st.warning(f"[{r.code}] {r.message}")
        else:
            st.info(f"[{r.code}] {r.message}")
    return findings


def render_export(loan, result, applicant, findings):
    st.subheader("Export")
    override = None
    if has_blocking(findings):
        override = st.text_input("Override reason (required for critical findings)", key="override_reason")
        if not override:
            st.caption("Enter an override reason to enable the PDF export.")
            return
    pdf = build_eligibility_pdf(loan, result, applicant, findings, override_reason=override)
    st.download_button("Download PDF Summary", data=pdf, file_name="foir_summary.pdf", mime="application/pdf")


def render_results(loan, result, applicant=None):
    render_status(result)
    render_foir_analysis(result)
    render_financial_summary(loan, result)
    findings = render_findings(loan, result)
    render_export(loan, result, applicant, findings)
    return findings
