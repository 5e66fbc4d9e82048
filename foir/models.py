from __future__ import annotations

import uuid
from typing import Any, Literal, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from foir.presets import APPLICANT_DEFAULTS, LOAN_DEFAULTS
from foir.utils import nz

EligibilityTier = Literal["eligible", "marginal", "not-eligible"]


class ExistingObligation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str = ""
    amount: float = Field(default=0.0, ge=0, allow_inf_nan=False)


class Applicant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = APPLICANT_DEFAULTS["name"]
    age: int = Field(default=APPLICANT_DEFAULTS["age"], ge=0)


class LoanInput(BaseModel):
    """Snapshot of everything the affordability engine reads.

    Instances are frozen; callers build a new one whenever a field changes.
    """

    model_config = ConfigDict(frozen=True)

    monthly_income: float = Field(default=LOAN_DEFAULTS["monthly_income"], ge=0, allow_inf_nan=False)
    other_income: float = Field(default=LOAN_DEFAULTS["other_income"], ge=0, allow_inf_nan=False)
    existing_obligations: Tuple[ExistingObligation, ...] = ()
    proposed_principal: float = Field(default=LOAN_DEFAULTS["proposed_principal"], ge=0, allow_inf_nan=False)
    annual_interest_rate_pct: float = Field(default=LOAN_DEFAULTS["annual_interest_rate_pct"], ge=0, allow_inf_nan=False)
    term_months: int = Field(default=LOAN_DEFAULTS["term_months"], ge=1)
    monthly_expenses: float = Field(default=LOAN_DEFAULTS["monthly_expenses"], ge=0, allow_inf_nan=False)

    @field_validator("existing_obligations")
    @classmethod
    def unique_ids(cls, v: Tuple[ExistingObligation, ...]) -> Tuple[ExistingObligation, ...]:
        ids = [o.id for o in v]
        if len(ids) != len(set(ids)):
            raise ValueError("existing obligation ids must be unique")
        return v

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "LoanInput":
        """Build an input from loosely typed form values.

        Blank or malformed numbers become ``0``, negatives are clamped to
        ``0`` and the term is kept at one month or more, so any widget state
        maps to a valid snapshot.
        """

        def money(key):
            return max(0.0, nz(raw.get(key, LOAN_DEFAULTS.get(key, 0.0))))

        obligations = []
        for item in raw.get("existing_obligations") or ():
            if isinstance(item, ExistingObligation):
                obligations.append(item)
                continue
            obligations.append(
                ExistingObligation(
                    id=str(item["id"] if item.get("id") is not None else uuid.uuid4().hex),
                    description=str(item.get("description") or ""),
                    amount=max(0.0, nz(item.get("amount"))),
                )
            )
        term = int(nz(raw.get("term_months", LOAN_DEFAULTS["term_months"])))
        return cls(
            monthly_income=money("monthly_income"),
            other_income=money("other_income"),
            existing_obligations=tuple(obligations),
            proposed_principal=money("proposed_principal"),
            annual_interest_rate_pct=money("annual_interest_rate_pct"),
            term_months=max(1, term),
            monthly_expenses=money("monthly_expenses"),
        )


class EligibilityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_income: float
    total_existing_obligations: float
    proposed_installment: float
    total_obligations: float
    foir_pct: float
    eligibility_tier: EligibilityTier
    max_eligible_principal: float
    disposable_income: float
