"""
Indicator Hierarchy - the fixed two-flow indicator tree.

Stands in for the backend call that will eventually deliver the tree. Every
call to ``build_tree`` yields fresh model instances with statuses recomputed
from the value/target pairs, so callers may hold on to a tree for a session
and replace it wholesale on refresh.

Revenue flow (faturamento):

    faturamento
    ├── ticketMedio
    │   └── uvc *
    │       └── aderenciaEstoque
    └── precoMedio *
        ├── participacaoGenericos
        └── competitividade

Coupon flow (cupom):

    qtdCupons
    ├── fluxoLoja
    │   ├── clientesCronicos
    │   │   └── adesaoPrograma *
    │   └── clientesIdosos
    │       └── cuponsPrograma
    └── taxaConversao
        ├── sortimento *
        └── ruptura *

(* = primary / actionable)

Causal relations are a separate edge set and include edges that skip a
tree level or cross branches.
"""

import logging
from typing import Any, Dict, List, Protocol, Tuple

from .status import classify
from .types import FlowType, Indicator, IndicatorTree, Relation

logger = logging.getLogger(__name__)


_FATURAMENTO_INDICATORS: List[Dict[str, Any]] = [
    {
        "id": "faturamento",
        "name": "Faturamento",
        "value": 56789.50,
        "formatted_value": "R$ 56.789,50",
        "target": 60000,
        "formatted_target": "R$ 60.000,00",
        "variation": "-5.35%",
        "icon": "dollar-sign",
    },
    {
        "id": "ticketMedio",
        "name": "Ticket Médio",
        "value": 91.15,
        "formatted_value": "R$ 91,15",
        "target": 100,
        "formatted_target": "R$ 100,00",
        "variation": "-8.85%",
        "icon": "shopping-cart",
        "parent_id": "faturamento",
    },
    {
        "id": "precoMedio",
        "name": "Preço Médio",
        "value": 28.48,
        "formatted_value": "R$ 28,48",
        "target": 28.57,
        "formatted_target": "R$ 28,57",
        "variation": "-0.31%",
        "icon": "tag",
        "parent_id": "faturamento",
        "is_primary": True,
    },
    {
        "id": "uvc",
        "name": "UVC",
        "value": 3.2,
        "formatted_value": "3,2",
        "target": 3.5,
        "formatted_target": "3,5",
        "variation": "-8.57%",
        "icon": "package",
        "parent_id": "ticketMedio",
        "is_primary": True,
    },
    {
        "id": "aderenciaEstoque",
        "name": "Aderência de Estoque",
        "value": 94.8,
        "formatted_value": "94,8%",
        "target": 97,
        "formatted_target": "97%",
        "variation": "-2.27%",
        "icon": "check-square",
        "parent_id": "uvc",
    },
    {
        "id": "participacaoGenericos",
        "name": "Participação de Genéricos",
        "value": 32,
        "formatted_value": "32%",
        "target": 35,
        "formatted_target": "35%",
        "variation": "-8.57%",
        "icon": "pie-chart",
        "parent_id": "precoMedio",
    },
    {
        "id": "competitividade",
        "name": "Competitividade de Preço",
        "value": 102.5,
        "formatted_value": "102,5",
        "target": 100,
        "formatted_target": "100",
        "variation": "+2.50%",
        "icon": "bar-chart-2",
        "parent_id": "precoMedio",
    },
]

_CUPOM_INDICATORS: List[Dict[str, Any]] = [
    {
        "id": "qtdCupons",
        "name": "Qtd. Cupons",
        "value": 623,
        "formatted_value": "623",
        "target": 600,
        "formatted_target": "600",
        "variation": "+3.83%",
        "icon": "file-text",
    },
    {
        "id": "fluxoLoja",
        "name": "Fluxo de Loja",
        "value": 1480,
        "formatted_value": "1.480",
        "target": 1500,
        "formatted_target": "1.500",
        "variation": "-1.33%",
        "icon": "users",
        "parent_id": "qtdCupons",
    },
    {
        "id": "taxaConversao",
        "name": "Taxa de Conversão",
        "value": 42.1,
        "formatted_value": "42,1%",
        "target": 40,
        "formatted_target": "40%",
        "variation": "+5.25%",
        "icon": "percent",
        "parent_id": "qtdCupons",
    },
    {
        "id": "clientesCronicos",
        "name": "Clientes Crônicos",
        "value": 212,
        "formatted_value": "212",
        "target": 250,
        "formatted_target": "250",
        "variation": "-15.20%",
        "icon": "heart",
        "parent_id": "fluxoLoja",
    },
    {
        "id": "clientesIdosos",
        "name": "Clientes 60+",
        "value": 318,
        "formatted_value": "318",
        "target": 300,
        "formatted_target": "300",
        "variation": "+6.00%",
        "icon": "user",
        "parent_id": "fluxoLoja",
    },
    {
        "id": "sortimento",
        "name": "Sortimento",
        "value": 88,
        "formatted_value": "88%",
        "target": 92,
        "formatted_target": "92%",
        "variation": "-4.35%",
        "icon": "grid",
        "parent_id": "taxaConversao",
        "is_primary": True,
    },
    {
        "id": "ruptura",
        "name": "Ruptura",
        "value": 5.2,
        "formatted_value": "5,2%",
        "target": 3,
        "formatted_target": "3%",
        "variation": "+73.33%",
        "icon": "alert-triangle",
        "parent_id": "taxaConversao",
        "is_primary": True,
    },
    {
        "id": "adesaoPrograma",
        "name": "Adesão ao Programa de Benefícios",
        "value": 18,
        "formatted_value": "18%",
        "target": 25,
        "formatted_target": "25%",
        "variation": "-28.00%",
        "icon": "award",
        "parent_id": "clientesCronicos",
        "is_primary": True,
    },
    {
        "id": "cuponsPrograma",
        "name": "Cupons do Programa de Benefícios",
        "value": 96,
        "formatted_value": "96",
        "target": 120,
        "formatted_target": "120",
        "variation": "-20.00%",
        "icon": "gift",
        "parent_id": "clientesIdosos",
    },
]

# (source, target, impact)
_FATURAMENTO_RELATIONS: List[Tuple[str, str, float]] = [
    ("ticketMedio", "faturamento", 0.6),
    ("precoMedio", "faturamento", 0.4),
    ("uvc", "ticketMedio", 0.5),
    ("precoMedio", "ticketMedio", 0.3),
    ("aderenciaEstoque", "ticketMedio", 0.2),
    ("aderenciaEstoque", "uvc", 1.0),
    ("participacaoGenericos", "precoMedio", 0.55),
    ("competitividade", "precoMedio", 0.45),
]

_CUPOM_RELATIONS: List[Tuple[str, str, float]] = [
    ("fluxoLoja", "qtdCupons", 0.5),
    ("taxaConversao", "qtdCupons", 0.5),
    ("clientesCronicos", "fluxoLoja", 0.55),
    ("clientesIdosos", "fluxoLoja", 0.45),
    ("sortimento", "taxaConversao", 0.6),
    ("ruptura", "taxaConversao", 0.4),
    ("adesaoPrograma", "clientesCronicos", 0.6),
    ("sortimento", "clientesCronicos", 0.4),
    ("cuponsPrograma", "clientesIdosos", 1.0),
]

FLOW_DATA = {
    FlowType.FATURAMENTO: (_FATURAMENTO_INDICATORS, _FATURAMENTO_RELATIONS),
    FlowType.CUPOM: (_CUPOM_INDICATORS, _CUPOM_RELATIONS),
}


def _make_indicator(raw: Dict[str, Any], flow_type: FlowType) -> Indicator:
    status = classify(raw.get("value"), raw.get("target"))
    return Indicator(**raw, status=status, flow_type=flow_type)


def build_tree() -> IndicatorTree:
    """
    Build both flows of the indicator tree.

    Returns a new ``IndicatorTree`` on every call; statuses are derived from
    the current value/target pairs.
    """
    indicators: List[Indicator] = []
    relations: List[Relation] = []

    for flow_type, (raw_indicators, raw_relations) in FLOW_DATA.items():
        indicators.extend(_make_indicator(raw, flow_type) for raw in raw_indicators)
        relations.extend(
            Relation(source_id=src, target_id=tgt, impact=impact, flow_type=flow_type)
            for src, tgt, impact in raw_relations
        )

    logger.debug(
        "Built indicator tree: %d indicators, %d relations",
        len(indicators), len(relations),
    )
    return IndicatorTree(indicators=indicators, relations=relations)


class HierarchyProvider(Protocol):
    """Anything that can deliver a complete indicator tree."""

    def load(self) -> IndicatorTree:
        ...


class StaticHierarchyProvider:
    """Provider backed by the built-in indicator data."""

    def load(self) -> IndicatorTree:
        return build_tree()
