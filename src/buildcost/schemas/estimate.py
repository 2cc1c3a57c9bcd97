"""Models for the detailed cost and schedule estimate.

Every field is required: a reply missing any of them is a failed estimate.
"""

from enum import Enum

from buildcost.schemas.base import CamelModel


class RiskImpact(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class CostItem(CamelModel):
    """One line of the cost breakdown."""

    category: str
    cost: float
    description: str


class CashflowEntry(CamelModel):
    """Planned spend for a single month of the build."""

    month: int
    amount: float
    phase: str


class RiskItem(CamelModel):
    risk: str
    impact: RiskImpact
    mitigation: str


class EstimationResult(CamelModel):
    """Full estimate as produced by the model."""

    currency_symbol: str
    total_estimated_cost: float
    breakdown: list[CostItem]
    cashflow: list[CashflowEntry]
    risks: list[RiskItem]
    confidence_score: float
    confidence_reason: str
    efficiency_tips: list[str]
    summary: str
