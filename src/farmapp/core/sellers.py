"""
Seller leaderboard.

Seller records, per-seller development plans and the summary shown on the
team screen (top performer, needs-attention, critical, averages). History
is synthetic; pass a seeded ``random.Random`` for reproducible series.
"""

import logging
import random
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from ..config import CRITICAL_UVC_THRESHOLD, NEEDS_ATTENTION_UVC_THRESHOLD
from ..utils.formatters import format_currency, format_number
from .types import (
    Seller,
    SellerActionPlan,
    SellerHistoryEntry,
    SellerMetrics,
    SellerSummary,
)

logger = logging.getLogger(__name__)

HISTORY_DAYS = 7

_SELLERS = [
    {
        "id": "1",
        "name": "CARLA TAMIRES FARIAS DE LIMA",
        "metrics": {"revenue": 12450.75, "uvc": 1.93, "avg_ticket": 92.30, "avg_price": 47.82, "ticket_count": 135},
        "status": "below_target",
        "trend": "down",
        "days_on_target": 3,
        "days_off_target": 5,
        "action_plan_id": "seller-training-001",
    },
    {
        "id": "2",
        "name": "FRANCISCA ELIVANE DA SILVA",
        "metrics": {"revenue": 13250.80, "uvc": 2.09, "avg_ticket": 97.80, "avg_price": 46.79, "ticket_count": 128},
        "status": "below_target",
        "trend": "down",
        "days_on_target": 2,
        "days_off_target": 2,
        "action_plan_id": "seller-training-002",
    },
    {
        "id": "3",
        "name": "LEIDIANE GOMES RODRIGUES",
        "metrics": {"revenue": 15780.50, "uvc": 2.28, "avg_ticket": 105.20, "avg_price": 46.14, "ticket_count": 150},
        "status": "above_target",
        "trend": "up",
        "days_on_target": 15,
        "days_off_target": 0,
    },
    {
        "id": "4",
        "name": "LUANA ARAUJO MELO",
        "metrics": {"revenue": 14320.40, "uvc": 2.18, "avg_ticket": 99.10, "avg_price": 45.46, "ticket_count": 142},
        "status": "above_target",
        "trend": "up",
        "days_on_target": 10,
        "days_off_target": 0,
    },
    {
        "id": "5",
        "name": "MARIA JAIRLA DE SOUSA PAULA",
        "metrics": {"revenue": 14150.80, "uvc": 2.18, "avg_ticket": 98.80, "avg_price": 45.32, "ticket_count": 143},
        "status": "above_target",
        "trend": "up",
        "days_on_target": 12,
        "days_off_target": 0,
    },
]

_SELLER_PLANS = [
    {
        "id": "seller-training-001",
        "seller_id": "1",
        "title": "Treinamento em UVC e Cross-selling",
        "description": "Treinamento focado em aumentar o número de itens por venda através de técnicas de venda cruzada",
        "steps": [
            "Realizar treinamento de 2 horas sobre produtos complementares",
            "Acompanhar atendimentos por 3 dias",
            "Estabelecer metas diárias de UVC",
            "Revisar progresso após 7 dias",
        ],
    },
    {
        "id": "seller-training-002",
        "seller_id": "2",
        "title": "Desenvolvimento de Técnicas de Abordagem",
        "description": "Plano para melhorar a abordagem ao cliente e aumentar conversão de vendas",
        "steps": [
            "Treinamento sobre técnicas de abordagem",
            "Revisão de script de atendimento",
            "Acompanhamento de atendimentos por 2 dias",
            "Feedback sobre pontos de melhoria",
            "Revisão após 5 dias",
        ],
    },
]


def _jitter(rng: random.Random) -> float:
    return 0.9 + rng.random() * 0.2


def generate_history(
    metrics: SellerMetrics,
    days: int = HISTORY_DAYS,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[SellerHistoryEntry]:
    """Daily entries within +/-10% of the current metrics, oldest first."""
    rng = rng or random.Random()
    end = today or date.today()
    return [
        SellerHistoryEntry(
            date=(end - timedelta(days=days - 1 - i)).isoformat(),
            revenue=metrics.revenue * _jitter(rng),
            uvc=metrics.uvc * _jitter(rng),
            avg_ticket=metrics.avg_ticket * _jitter(rng),
            avg_price=metrics.avg_price * _jitter(rng),
            ticket_count=int(metrics.ticket_count * _jitter(rng)),
        )
        for i in range(days)
    ]


def default_sellers(rng: Optional[random.Random] = None, today: Optional[date] = None) -> List[Seller]:
    sellers = []
    for raw in _SELLERS:
        metrics = SellerMetrics(**raw["metrics"])
        sellers.append(
            Seller(
                **{k: v for k, v in raw.items() if k != "metrics"},
                metrics=metrics,
                history=generate_history(metrics, rng=rng, today=today),
            )
        )
    return sellers


def summarize(sellers: Iterable[Seller]) -> SellerSummary:
    """
    Build the leaderboard summary.

    The top performer has the highest UVC; needs-attention and critical are
    the first sellers under the respective UVC thresholds.
    """
    sellers = list(sellers)
    if not sellers:
        return SellerSummary()

    by_uvc = sorted(sellers, key=lambda s: s.metrics.uvc, reverse=True)
    count = len(sellers)

    return SellerSummary(
        top_performer=by_uvc[0],
        needs_attention=next(
            (s for s in sellers if s.metrics.uvc < NEEDS_ATTENTION_UVC_THRESHOLD), None
        ),
        critical=next(
            (s for s in sellers if s.metrics.uvc <= CRITICAL_UVC_THRESHOLD), None
        ),
        average_revenue=sum(s.metrics.revenue for s in sellers) / count,
        average_uvc=sum(s.metrics.uvc for s in sellers) / count,
        average_ticket=sum(s.metrics.avg_ticket for s in sellers) / count,
        sellers={s.id: s for s in sellers},
    )


def format_seller_metrics(seller: Seller) -> Dict[str, str]:
    """Display strings for a seller's current metrics."""
    m = seller.metrics
    return {
        "revenue": format_currency(m.revenue),
        "uvc": format_number(m.uvc, 2),
        "avg_ticket": format_currency(m.avg_ticket),
        "avg_price": format_currency(m.avg_price),
        "ticket_count": str(m.ticket_count),
    }


class SellerRepository:
    """In-memory seller store with the default team."""

    def __init__(
        self,
        sellers: Optional[Iterable[Seller]] = None,
        plans: Optional[Iterable[SellerActionPlan]] = None,
        rng: Optional[random.Random] = None,
    ):
        if sellers is None:
            sellers = default_sellers(rng=rng)
        if plans is None:
            plans = [SellerActionPlan(**raw) for raw in _SELLER_PLANS]
        self._sellers: Dict[str, Seller] = {s.id: s for s in sellers}
        self._plans: List[SellerActionPlan] = list(plans)
        self._rng = rng or random.Random()

    def list(self) -> List[Seller]:
        return list(self._sellers.values())

    def get(self, seller_id: str) -> Optional[Seller]:
        return self._sellers.get(seller_id)

    def summary(self) -> SellerSummary:
        return summarize(self.list())

    def action_plan(self, seller_id: str) -> Optional[SellerActionPlan]:
        return next((p for p in self._plans if p.seller_id == seller_id), None)

    def history(self, seller_id: str, days: int = HISTORY_DAYS) -> Dict[str, List]:
        """
        Column-oriented history for charting: ``dates`` plus one series
        per metric. Unknown sellers yield empty columns.

        The stored week is reused when it covers ``days``; longer windows
        are generated from the current metrics.
        """
        seller = self.get(seller_id)
        if seller is None or days <= 0:
            logger.debug("No history for seller %s", seller_id)
            return {"dates": [], "metrics": {}}

        if days <= len(seller.history):
            entries = seller.history[-days:]
        else:
            entries = generate_history(seller.metrics, days=days, rng=self._rng)
        return {
            "dates": [e.date for e in entries],
            "metrics": {
                "revenue": [e.revenue for e in entries],
                "uvc": [e.uvc for e in entries],
                "avg_ticket": [e.avg_ticket for e in entries],
                "avg_price": [e.avg_price for e in entries],
                "ticket_count": [e.ticket_count for e in entries],
            },
        }
