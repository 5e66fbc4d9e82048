from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from foir.models import EligibilityResult, LoanInput
from foir.presets import FOIR_IDEAL_PCT, FOIR_MAX_PCT


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_rules(loan: LoanInput, result: EligibilityResult) -> List[RuleResult]:
    """Advisory findings for an evaluation. They never alter the tier."""
    res: List[RuleResult] = []

    if result.total_income <= 0:
        # FOIR reads 0% and the tier reads eligible; flag it instead of reclassifying.
        res.append(
            RuleResult(
                code="NO_INCOME",
                severity="critical",
                message="No income entered; FOIR is not meaningful.",
                context={"tier": result.eligibility_tier},
            )
        )

    if result.foir_pct > FOIR_MAX_PCT:
        res.append(
            RuleResult(
                code="FOIR_OVER_MAX",
                severity="critical",
                message="FOIR exceeds the maximum lenders allow.",
                context={"actual": result.foir_pct, "limit": FOIR_MAX_PCT},
            )
        )
    elif result.foir_pct > FOIR_IDEAL_PCT:
        res.append(
            RuleResult(
                code="FOIR_OVER_IDEAL",
                severity="warn",
                message="FOIR is above the ideal limit; expect extra documentation.",
                context={"actual": result.foir_pct, "limit": FOIR_IDEAL_PCT},
            )
        )

    if result.disposable_income < 0:
        res.append(
            RuleResult(
                code="NEGATIVE_DISPOSABLE",
                severity="warn",
                message="Obligations and expenses exceed monthly income.",
                context={"disposable_income": result.disposable_income},
            )
        )

    if loan.proposed_principal > result.max_eligible_principal:
        res.append(
            RuleResult(
                code="EXCEEDS_MAX_ELIGIBLE",
                severity="info",
                message="Requested amount is above the maximum eligible amount.",
                context={
                    "requested": loan.proposed_principal,
                    "max_eligible": result.max_eligible_principal,
                },
            )
        )

    return res


def has_blocking(res: List[RuleResult]) -> bool:
    return any(r.severity == "critical" for r in res)
