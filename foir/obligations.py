"""Operations on the ordered list of existing EMIs.

Every function takes a tuple of :class:`ExistingObligation` and returns a new
tuple; nothing is modified in place.  Identifiers only address entries, the
order of the tuple is the order the applicant added them.
"""
from __future__ import annotations

import uuid
from typing import Iterable, Optional, Tuple

import pandas as pd

from foir.models import ExistingObligation
from foir.utils import nz

Obligations = Tuple[ExistingObligation, ...]

EDITABLE_FIELDS = {"description", "amount"}
FRAME_COLUMNS = ["id", "description", "amount"]


def new_obligation_id() -> str:
    return uuid.uuid4().hex


def add_obligation(
    obligations: Iterable[ExistingObligation],
    description: str = "",
    amount: float = 0.0,
    obligation_id: Optional[str] = None,
) -> Obligations:
    """Append a new obligation and return the new collection."""
    current = tuple(obligations)
    oid = obligation_id if obligation_id is not None else new_obligation_id()
    if any(o.id == oid for o in current):
        raise ValueError(f"obligation id {oid!r} already exists")
    entry = ExistingObligation(id=oid, description=description, amount=max(0.0, nz(amount)))
    return current + (entry,)


def update_obligation(obligations: Iterable[ExistingObligation], obligation_id: str, **changes) -> Obligations:
    """Replace the fields in ``changes`` on the entry with ``obligation_id``.

    Unknown ids leave the collection as it is.
    """
    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"cannot update obligation fields: {', '.join(sorted(unknown))}")
    if "amount" in changes:
        changes["amount"] = max(0.0, nz(changes["amount"]))
    if "description" in changes:
        changes["description"] = str(changes["description"] or "")
    return tuple(
        o.model_copy(update=changes) if o.id == obligation_id else o for o in obligations
    )


def remove_obligation(obligations: Iterable[ExistingObligation], obligation_id: str) -> Obligations:
    return tuple(o for o in obligations if o.id != obligation_id)


def total_obligations(obligations: Iterable[ExistingObligation]) -> float:
    return sum(o.amount for o in obligations)


def obligations_frame(obligations: Iterable[ExistingObligation]) -> pd.DataFrame:
    """Tabulate obligations for display, one row per entry in list order."""
    rows = [o.model_dump() for o in obligations]
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
    return df
