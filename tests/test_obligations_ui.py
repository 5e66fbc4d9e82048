from streamlit.testing.v1 import AppTest

from foir.models import ExistingObligation


def obligations_app():
    from ui.obligations import render_obligation_cards

    render_obligation_cards()


def _seeded():
    at = AppTest.from_function(obligations_app, default_timeout=30)
    at.session_state["obligations"] = (
        ExistingObligation(id="home", description="Home Loan", amount=1500.0),
        ExistingObligation(id="card", description="Credit Card", amount=500.0),
    )
    return at


def test_total_shows_sum_of_emis():
    at = _seeded()
    at.run()
    md = next(m.value for m in at.markdown if "Total Existing EMIs" in m.value)
    assert "₹2,000.00" in md


def test_remove_drops_only_that_entry():
    at = _seeded()
    at.run()
    at.button(key="emi_remove_home").click().run()
    remaining = at.session_state["obligations"]
    assert [o.id for o in remaining] == ["card"]
    md = next(m.value for m in at.markdown if "Total Existing EMIs" in m.value)
    assert "₹500.00" in md


def test_add_appends_blank_entry():
    at = AppTest.from_function(obligations_app, default_timeout=30)
    at.run()
    at.button(key="add_obligation").click().run()
    obs = at.session_state["obligations"]
    assert len(obs) == 1
    assert obs[0].amount == 0.0


def test_editing_amount_updates_collection():
    at = _seeded()
    at.run()
    at.number_input(key="emi_amt_card").set_value(750.0).run()
    obs = at.session_state["obligations"]
    assert [o.amount for o in obs] == [1500.0, 750.0]


def test_card_label_names_the_emi():
    at = _seeded()
    at.run()
    assert [e.label for e in at.expander] == ["EMI #1: Home Loan", "EMI #2: Credit Card"]
