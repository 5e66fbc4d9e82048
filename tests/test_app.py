from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


def test_app_renders_defaults():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    captions = [c.value for c in at.caption]
    assert any(c.startswith("Proposed EMI:") for c in captions)
    # No income yet: ratio reads 0% and the zero-income finding is raised.
    assert any("[NO_INCOME]" in e.value for e in at.error)


def test_app_eligible_with_income():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    at.number_input(key="monthly_income").set_value(50000.0).run()
    assert not at.exception
    assert any(s.value.startswith("**Eligible**: ") for s in at.success)
    assert not any("override reason" in c.value for c in at.caption)


def test_app_not_eligible_for_large_loan():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    at.number_input(key="monthly_income").set_value(30000.0).run()
    at.number_input(key="proposed_principal").set_value(800000.0).run()
    at.number_input(key="annual_interest_rate_pct").set_value(9.0).run()
    at.number_input(key="term_months").set_value(48).run()
    assert not at.exception
    assert any("Not Eligible" in e.value for e in at.error)
