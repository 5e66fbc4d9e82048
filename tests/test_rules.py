from foir.calculators import evaluate
from foir.models import ExistingObligation, LoanInput
from foir.rules import evaluate_rules, has_blocking


def _codes(loan):
    return {r.code for r in evaluate_rules(loan, evaluate(loan))}


def test_zero_income_flagged_without_changing_tier():
    loan = LoanInput(monthly_income=0, proposed_principal=200000)
    res = evaluate(loan)
    findings = evaluate_rules(loan, res)
    assert res.eligibility_tier == "eligible"
    assert "NO_INCOME" in {r.code for r in findings}
    assert has_blocking(findings)


def test_marginal_ratio_warns():
    loan = LoanInput(
        monthly_income=10000,
        existing_obligations=(ExistingObligation(id="a", amount=4500),),
        proposed_principal=0,
    )
    codes = _codes(loan)
    assert "FOIR_OVER_IDEAL" in codes
    assert "FOIR_OVER_MAX" not in codes


def test_ratio_over_max_is_critical():
    loan = LoanInput(monthly_income=30000, proposed_principal=800000, annual_interest_rate_pct=9, term_months=48)
    findings = evaluate_rules(loan, evaluate(loan))
    assert "FOIR_OVER_MAX" in {r.code for r in findings}
    assert "EXCEEDS_MAX_ELIGIBLE" in {r.code for r in findings}
    assert has_blocking(findings)


def test_negative_disposable_income():
    loan = LoanInput(monthly_income=50000, proposed_principal=100000, monthly_expenses=60000)
    assert "NEGATIVE_DISPOSABLE" in _codes(loan)


def test_comfortable_applicant_has_no_findings():
    loan = LoanInput(monthly_income=100000, proposed_principal=300000)
    assert evaluate_rules(loan, evaluate(loan)) == []
    assert not has_blocking([])
