"""PDF summary of a FOIR evaluation."""
from __future__ import annotations

import io
import logging
from typing import Iterable, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from foir.calculators import total_interest
from foir.models import Applicant, EligibilityResult, LoanInput
from foir.presets import CURRENCY_SYMBOL, DISCLAIMER, TIER_MESSAGES
from foir.rules import RuleResult

logger = logging.getLogger(__name__)

GRID_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
)


def _money(v: float) -> str:
    sign = "-" if v < 0 else ""
    # Helvetica has no rupee glyph.
    symbol = "Rs. " if CURRENCY_SYMBOL == "₹" else CURRENCY_SYMBOL
    return f"{sign}{symbol}{abs(v):,.2f}"


def _table(title: str, rows: list[list[str]]) -> Table:
    t = Table([[title, ""]] + rows, hAlign="LEFT", colWidths=[200, 300])
    t.setStyle(GRID_STYLE)
    return t


def build_eligibility_pdf(
    loan: LoanInput,
    result: EligibilityResult,
    applicant: Optional[Applicant] = None,
    findings: Iterable[RuleResult] = (),
    override_reason: Optional[str] = None,
) -> bytes:
    """Render an eligibility summary and return the PDF bytes.

    If any finding is critical an ``override_reason`` is required and printed
    on the summary.
    """

    findings = list(findings)
    if any(f.severity == "critical" for f in findings) and not override_reason:
        raise ValueError("override_reason required when critical findings exist")

    styles = getSampleStyleSheet()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = [Paragraph("<b>Car Loan Eligibility Summary</b>", styles["Title"]), Spacer(1, 6)]
    if applicant is not None and applicant.name:
        story.append(Paragraph(f"Applicant: {escape(applicant.name)}  |  Age: {applicant.age}", styles["Normal"]))
    tier = result.eligibility_tier
    story += [
        Paragraph(f"<b>Status: {tier.replace('-', ' ').title()}</b>", styles["Heading3"]),
        Paragraph(TIER_MESSAGES[tier], styles["Normal"]),
        Spacer(1, 12),
    ]

    snapshot = [
        ["Loan Amount", _money(loan.proposed_principal)],
        ["Interest Rate", f"{loan.annual_interest_rate_pct:.2f}%"],
        ["Tenure", f"{loan.term_months} months ({loan.term_months / 12:.1f} years)"],
    ]
    story += [_table("Loan Parameters", snapshot), Spacer(1, 12)]

    analysis = [
        ["Total Income", _money(result.total_income)],
        ["Existing EMIs", _money(result.total_existing_obligations)],
        ["Proposed EMI", _money(result.proposed_installment)],
        ["Total Obligations", _money(result.total_obligations)],
        ["FOIR", f"{result.foir_pct:.1f}%"],
    ]
    story += [_table("FOIR Analysis", analysis), Spacer(1, 12)]

    interest = total_interest(result.proposed_installment, loan.proposed_principal, loan.term_months)
    summary = [
        ["Max Eligible Amount", _money(result.max_eligible_principal)],
        ["Disposable Income", _money(result.disposable_income)],
        ["Total Interest", _money(interest)],
    ]
    story += [_table("Financial Summary", summary), Spacer(1, 12)]

    if loan.existing_obligations:
        rows = [["Existing EMI", "Monthly Amount"]] + [
            [o.description or "(unnamed)", _money(o.amount)] for o in loan.existing_obligations
        ]
        t = Table(rows, hAlign="LEFT", colWidths=[300, 200])
        t.setStyle(GRID_STYLE)
        story += [t, Spacer(1, 12)]

    if findings:
        rows = [["Code", "Severity", "Message"]] + [[f.code, f.severity, f.message] for f in findings]
        t = Table(rows, hAlign="LEFT")
        t.setStyle(GRID_STYLE)
        story += [Paragraph("<b>Findings</b>", styles["Heading3"]), Spacer(1, 6), t, Spacer(1, 12)]
    if override_reason:
        story.append(Paragraph(f"Override Reason: {escape(override_reason)}", styles["Normal"]))

    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    doc.build(story)
    logger.info("Built eligibility PDF (%s, %d findings)", tier, len(findings))
    return buf.getvalue()
