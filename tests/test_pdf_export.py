import pytest

from export.pdf_export import build_eligibility_pdf
from foir.calculators import evaluate
from foir.models import Applicant, ExistingObligation, LoanInput
from foir.rules import evaluate_rules


def test_builds_pdf_bytes():
    loan = LoanInput(
        monthly_income=80000,
        existing_obligations=(ExistingObligation(id="h", description="Home Loan", amount=10000),),
        proposed_principal=400000,
    )
    res = evaluate(loan)
    out = build_eligibility_pdf(loan, res, Applicant(name="Asha Rao", age=31), evaluate_rules(loan, res))
    assert out.startswith(b"%PDF")


def test_requires_override_with_critical():
    loan = LoanInput(monthly_income=0)
    res = evaluate(loan)
    with pytest.raises(ValueError):
        build_eligibility_pdf(loan, res, findings=evaluate_rules(loan, res))


def test_override_allows_export():
    loan = LoanInput(monthly_income=0)
    res = evaluate(loan)
    out = build_eligibility_pdf(
        loan, res, findings=evaluate_rules(loan, res), override_reason="Income proof pending upload"
    )
    assert out.startswith(b"%PDF")
