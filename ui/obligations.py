import streamlit as st

from foir.obligations import add_obligation, remove_obligation, total_obligations, update_obligation
from foir.utils import format_money


def render_obligation_cards():
    """Render one editable card per existing EMI and return the collection."""
    st.session_state.setdefault("obligations", ())
    st.subheader("Existing EMIs & Obligations")
    st.caption("Add all your existing loan EMIs and credit card payments")
    for idx, ob in enumerate(list(st.session_state.obligations)):
        with st.expander(f"EMI #{idx+1}: {ob.description or 'Unnamed'}", expanded=True):
            c1, c2, c3 = st.columns([3, 2, 1])
            desc = c1.text_input(
                "EMI Description",
                value=ob.description,
                placeholder="e.g., Home Loan, Personal Loan",
                key=f"emi_desc_{ob.id}",
            )
            amount = c2.number_input(
                "Monthly EMI", min_value=0.0, value=float(ob.amount), step=500.0, key=f"emi_amt_{ob.id}"
            )
            if desc != ob.description or amount != ob.amount:
                st.session_state.obligations = update_obligation(
                    st.session_state.obligations, ob.id, description=desc, amount=amount
                )
            if c3.button("Remove", key=f"emi_remove_{ob.id}"):
                st.session_state.obligations = remove_obligation(st.session_state.obligations, ob.id)
                st.rerun()
    if st.button("+ Add Existing EMI", key="add_obligation"):
        st.session_state.obligations = add_obligation(st.session_state.obligations)
        st.rerun()
    total = total_obligations(st.session_state.obligations)
    st.markdown(f"**Total Existing EMIs:** {format_money(total)}")
    return st.session_state.obligations
