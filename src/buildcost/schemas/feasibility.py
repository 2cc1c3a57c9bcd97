"""Models for the feasibility pre-check."""

from enum import Enum

from pydantic import field_validator

from buildcost.schemas.base import CamelModel

FALLBACK_ISSUE = "Service unavailable or parse error"


class BudgetVerdict(str, Enum):
    REALISTIC = "Realistic"
    INSUFFICIENT = "Insufficient"
    EXCESSIVE = "Excessive"


class FeasibilityResult(CamelModel):
    """Verdict returned by the feasibility agent.

    Absent or null fields fall back to a negative verdict.
    """

    is_valid: bool = False
    budget_verdict: BudgetVerdict = BudgetVerdict.INSUFFICIENT
    issues: list[str] = []
    suggestions: list[str] = []

    @field_validator("is_valid", mode="before")
    @classmethod
    def _coerce_is_valid(cls, v: object) -> object:
        return False if v is None else v

    @field_validator("budget_verdict", mode="before")
    @classmethod
    def _default_verdict(cls, v: object) -> object:
        """The model sometimes sends null or an empty string."""
        return BudgetVerdict.INSUFFICIENT if v in (None, "") else v

    @field_validator("issues", "suggestions", mode="before")
    @classmethod
    def _default_list(cls, v: object) -> object:
        return [] if v is None else v

    @classmethod
    def fallback(cls) -> "FeasibilityResult":
        """The fixed result reported when the check itself fails."""
        return cls(
            is_valid=False,
            budget_verdict=BudgetVerdict.INSUFFICIENT,
            issues=[FALLBACK_ISSUE],
            suggestions=[],
        )
