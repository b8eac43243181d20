"""
Core type definitions for farmapp.

Indicators, causal relations and the records hanging off them
(recommendations, action plans, sellers) are pydantic models so they can be
validated on load and dumped straight to JSON by the CLI.
"""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class FlowType(StrEnum):
    """Independent diagnostic flows. Each one forms its own rooted tree."""
    FATURAMENTO = "faturamento"
    CUPOM = "cupom"


class IndicatorStatus(StrEnum):
    """Position of an indicator relative to its target."""
    ABOVE = "above"
    BELOW = "below"
    NEUTRAL = "neutral"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActionPlanStatus(StrEnum):
    """Lifecycle of an action plan."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    VALIDATED = "validated"
    REJECTED = "rejected"


class ValidationStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SellerStatus(StrEnum):
    ABOVE_TARGET = "above_target"
    ON_TARGET = "on_target"
    BELOW_TARGET = "below_target"
    CRITICAL = "critical"


class Trend(StrEnum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class Indicator(BaseModel):
    """
    A named business metric.

    ``parent_id`` is the display-tree edge. Causal influence lives in
    ``Relation`` records and is never inferred from it.
    """
    id: str
    name: str
    value: float | str | None = None
    target: float | str | None = None
    formatted_value: str = ""
    formatted_target: str = ""
    variation: str = ""
    status: IndicatorStatus = IndicatorStatus.NEUTRAL
    icon: str = ""
    parent_id: str | None = None
    is_primary: bool = False
    flow_type: FlowType

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


class Relation(BaseModel):
    """
    Directed, weighted causal edge. Source influences target.
    """
    source_id: str
    target_id: str
    impact: float = Field(ge=0.0, le=1.0)
    flow_type: FlowType

    model_config = ConfigDict(frozen=True)

    def touches(self, indicator_id: str) -> bool:
        return self.source_id == indicator_id or self.target_id == indicator_id

    def other_end(self, indicator_id: str) -> str:
        """Return the endpoint opposite to ``indicator_id``."""
        return self.target_id if self.source_id == indicator_id else self.source_id


class IndicatorTree(BaseModel):
    """Result of a single load: every indicator and relation of both flows."""
    indicators: List[Indicator] = Field(default_factory=list)
    relations: List[Relation] = Field(default_factory=list)


class RelationSet(BaseModel):
    """Incoming and outgoing causal edges of one indicator."""
    incoming: List[Relation] = Field(default_factory=list)
    outgoing: List[Relation] = Field(default_factory=list)


class Recommendation(BaseModel):
    id: str
    title: str
    description: str
    impact: str
    icon: str = ""
    action: str = ""
    priority: Priority = Priority.MEDIUM
    action_plan_id: str | None = None


class HistoryPoint(BaseModel):
    date: str
    value: float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActionPlan(BaseModel):
    """
    Remediation plan attached to an actionable indicator.

    Status changes go through an ``ActionPlanRepository``; the model itself
    is only a record.
    """
    id: str
    indicator_id: str
    title: str
    description: str
    steps: List[str] = Field(default_factory=list)
    products: List[str] = Field(default_factory=list)
    deadline: str = ""
    priority: Priority = Priority.MEDIUM
    status: ActionPlanStatus = ActionPlanStatus.PENDING
    validation_status: ValidationStatus | None = None
    validation_feedback: str | None = None
    execution_photo: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class SellerMetrics(BaseModel):
    revenue: float
    uvc: float
    avg_ticket: float
    avg_price: float
    ticket_count: int


class SellerHistoryEntry(SellerMetrics):
    date: str


class Seller(BaseModel):
    id: str
    name: str
    metrics: SellerMetrics
    status: SellerStatus
    trend: Trend = Trend.NEUTRAL
    days_on_target: int = 0
    days_off_target: int = 0
    history: List[SellerHistoryEntry] = Field(default_factory=list)
    action_plan_id: str | None = None


class SellerActionPlan(BaseModel):
    id: str
    seller_id: str
    title: str
    description: str
    steps: List[str] = Field(default_factory=list)
    status: ActionPlanStatus = ActionPlanStatus.PENDING


class SellerSummary(BaseModel):
    top_performer: Seller | None = None
    needs_attention: Seller | None = None
    critical: Seller | None = None
    average_revenue: float = 0.0
    average_uvc: float = 0.0
    average_ticket: float = 0.0
    sellers: Dict[str, Seller] = Field(default_factory=dict)


class MetricData(BaseModel):
    value: str
    trend: Trend
    trend_value: str
    comparison_period: str | None = None


class ChartData(BaseModel):
    labels: List[str]
    data: List[float]
