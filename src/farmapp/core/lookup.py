"""
Recommendation, history and root-cause lookups.

Three independent tables keyed by indicator id. Unknown ids always yield an
empty list. History generation takes an injected ``random.Random`` so tests
can pin the series.
"""

import logging
import random
from datetime import date, timedelta
from typing import Dict, List, NamedTuple, Optional

from .types import HistoryPoint, Priority, Recommendation

logger = logging.getLogger(__name__)


def _rec(
    rec_id: str,
    title: str,
    description: str,
    impact: str,
    icon: str,
    action: str,
    priority: Priority,
    plan_id: str,
) -> Dict:
    return {
        "id": rec_id,
        "title": title,
        "description": description,
        "impact": impact,
        "icon": icon,
        "action": action,
        "priority": priority,
        "action_plan_id": plan_id,
    }


RECOMMENDATIONS: Dict[str, List[Dict]] = {
    "uvc": [
        _rec(
            "1", "Reduzir ruptura de estoque",
            "Ajuste automatizado de parâmetros de compra para produtos com alta demanda",
            "Potencial aumento de 12% em UVC", "trending-up",
            "Ajustar parâmetros de compra", Priority.HIGH, "ajuste-estoque-001",
        ),
        _rec(
            "2", "Implementar sugestão de produtos complementares",
            "Configure cross-selling para os 20 produtos mais vendidos",
            "Potencial aumento de 8% em UVC", "shuffle",
            "Configurar cross-selling", Priority.MEDIUM, "cross-selling-002",
        ),
        _rec(
            "3", "Ativar pacotes promocionais",
            "Criar combos para categorias com baixa conversão",
            "Potencial aumento de 15% em UVC", "package",
            "Criar combos", Priority.HIGH, "pacotes-promo-003",
        ),
    ],
    "precoMedio": [
        _rec(
            "1", "Ampliar mix de produtos premium",
            "Aumentar visibilidade de produtos com maior margem nas gôndolas principais",
            "Potencial aumento de 7% no preço médio", "arrow-up-right",
            "Ajustar exposição", Priority.HIGH, "mix-premium-001",
        ),
        _rec(
            "2", "Rever política de descontos",
            "Ajustar descontos em produtos com alta elasticidade de preço",
            "Potencial aumento de 5% no preço médio", "percent",
            "Ajustar descontos", Priority.MEDIUM, "ajuste-desconto-002",
        ),
        _rec(
            "3", "Expandir categorias de dermocosméticos",
            "Aumentar capilaridade em categorias de maior valor agregado",
            "Potencial aumento de 9% no preço médio", "plus-circle",
            "Expandir categorias", Priority.HIGH, "expansao-categorias-003",
        ),
    ],
    "sortimento": [
        _rec(
            "1", "Completar mix de medicamentos contínuos",
            "Incluir no sortimento os itens de uso contínuo mais procurados na região",
            "Potencial aumento de 6% na conversão", "grid",
            "Revisar mix", Priority.HIGH, "mix-continuo-001",
        ),
        _rec(
            "2", "Trocar itens de baixo giro",
            "Substituir SKUs sem venda há 60 dias por similares de maior demanda",
            "Potencial aumento de 3% na conversão", "refresh-cw",
            "Substituir SKUs", Priority.LOW, "baixo-giro-002",
        ),
    ],
    "ruptura": [
        _rec(
            "1", "Pedido emergencial de itens em falta",
            "Repor imediatamente os 20 itens com maior perda de venda por falta",
            "Potencial redução de 40% na ruptura", "alert-triangle",
            "Gerar pedido", Priority.HIGH, "pedido-emergencial-001",
        ),
        _rec(
            "2", "Ajustar estoque mínimo",
            "Recalcular ponto de pedido com base na demanda dos últimos 30 dias",
            "Potencial redução de 25% na ruptura", "sliders",
            "Recalcular parâmetros", Priority.MEDIUM, "estoque-minimo-002",
        ),
    ],
    "adesaoPrograma": [
        _rec(
            "1", "Cadastrar clientes crônicos no programa",
            "Oferecer adesão ao programa de benefícios no balcão para clientes de uso contínuo",
            "Potencial aumento de 10 p.p. na adesão", "award",
            "Abordar clientes", Priority.HIGH, "cadastro-programa-001",
        ),
        _rec(
            "2", "Lembrete de recompra",
            "Enviar lembrete de recompra para clientes do programa com tratamento contínuo",
            "Potencial aumento de 4 p.p. na adesão", "bell",
            "Ativar lembretes", Priority.MEDIUM, "lembrete-recompra-002",
        ),
    ],
}


class HistoryProfile(NamedTuple):
    """Shape of the synthetic series for one indicator."""
    base: float
    variation: float
    trend: float


HISTORY_PROFILES: Dict[str, HistoryProfile] = {
    "faturamento": HistoryProfile(56000, 0.1, 0.05),
    "ticketMedio": HistoryProfile(90, 0.08, 0.03),
    "precoMedio": HistoryProfile(28.5, 0.05, 0.01),
    "uvc": HistoryProfile(3.2, 0.1, -0.02),
    "aderenciaEstoque": HistoryProfile(95, 0.03, -0.01),
    "participacaoGenericos": HistoryProfile(32, 0.06, 0.02),
    "competitividade": HistoryProfile(101, 0.04, 0.01),
    "qtdCupons": HistoryProfile(610, 0.12, 0.04),
    "fluxoLoja": HistoryProfile(1490, 0.1, -0.01),
    "taxaConversao": HistoryProfile(41, 0.07, 0.02),
    "clientesCronicos": HistoryProfile(220, 0.08, -0.04),
    "clientesIdosos": HistoryProfile(310, 0.06, 0.02),
    "sortimento": HistoryProfile(89, 0.03, -0.01),
    "ruptura": HistoryProfile(4.8, 0.2, 0.08),
    "adesaoPrograma": HistoryProfile(19, 0.1, -0.05),
    "cuponsPrograma": HistoryProfile(100, 0.12, -0.03),
}


CAUSES: Dict[str, List[str]] = {
    "faturamento": [
        "Ticket médio abaixo da meta",
        "Queda no preço médio por excesso de descontos",
        "Menor volume de cupons em dias de semana",
    ],
    "ticketMedio": [
        "Poucos itens por cupom (UVC baixa)",
        "Baixa oferta de produtos complementares no balcão",
        "Ruptura em itens de alto giro",
    ],
    "precoMedio": [
        "Mix concentrado em genéricos de baixo valor",
        "Descontos acima da política em produtos inelásticos",
        "Baixa exposição de dermocosméticos",
    ],
    "uvc": [
        "Ruptura de estoque em produtos de alta demanda",
        "Equipe sem rotina de venda cruzada",
        "Ausência de combos promocionais",
    ],
    "aderenciaEstoque": [
        "Parâmetros de compra desatualizados",
        "Atraso de entrega do distribuidor",
    ],
    "participacaoGenericos": [
        "Intercambialidade não oferecida no atendimento",
        "Falta de genéricos das moléculas mais receitadas",
    ],
    "competitividade": [
        "Concorrentes com preço menor em itens de referência",
        "Tabela de preços sem revisão recente",
    ],
    "qtdCupons": [
        "Redução do fluxo de clientes na loja",
        "Conversão abaixo do esperado em horários de pico",
    ],
    "fluxoLoja": [
        "Menos visitas de clientes crônicos",
        "Concorrência nova no entorno da loja",
    ],
    "taxaConversao": [
        "Produtos procurados indisponíveis",
        "Fila longa no atendimento",
    ],
    "clientesCronicos": [
        "Baixa adesão ao programa de benefícios",
        "Falta de lembrete de recompra",
    ],
    "clientesIdosos": [
        "Poucos cupons do programa de benefícios utilizados",
        "Desconto do convênio pouco divulgado",
    ],
    "sortimento": [
        "Mix sem itens de uso contínuo da região",
        "SKUs de baixo giro ocupando espaço de gôndola",
    ],
    "ruptura": [
        "Ponto de pedido calculado com demanda antiga",
        "Falta no distribuidor",
        "Pedido emergencial não realizado",
    ],
    "adesaoPrograma": [
        "Equipe não oferece o programa no balcão",
        "Cadastro demorado",
    ],
    "cuponsPrograma": [
        "Benefícios pouco atrativos para o público 60+",
        "Clientes não sabem que possuem cupons disponíveis",
    ],
}


def recommendations_for(indicator_id: str) -> List[Recommendation]:
    """Ordered remediation suggestions for an indicator."""
    return [Recommendation(**raw) for raw in RECOMMENDATIONS.get(indicator_id, [])]


def history_for(
    indicator_id: str,
    days: int,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[HistoryPoint]:
    """
    Synthetic daily series of ``days`` points ending today.

    value[i] = base * (1 + trend * i / days) * (1 + (r - 0.5) * variation)
    """
    profile = HISTORY_PROFILES.get(indicator_id)
    if profile is None:
        logger.debug("No history profile for indicator %s", indicator_id)
        return []
    if days <= 0:
        return []

    rng = rng or random.Random()
    end = today or date.today()
    start = end - timedelta(days=days - 1)

    points: List[HistoryPoint] = []
    for i in range(days):
        growth = 1 + profile.trend * i / days
        noise = 1 + (rng.random() - 0.5) * profile.variation
        points.append(
            HistoryPoint(
                date=(start + timedelta(days=i)).isoformat(),
                value=profile.base * growth * noise,
            )
        )
    return points


def causes_for(indicator_id: str) -> List[str]:
    """Candidate root causes for an indicator."""
    return list(CAUSES.get(indicator_id, []))


class LookupService:
    """
    Bundles the three lookups behind one object.

    A fixed ``seed`` makes every ``history`` call reproducible; without it
    the series are random.
    """

    def __init__(self, seed: Optional[int] = None, today: Optional[date] = None):
        self.seed = seed
        self.today = today

    def recommendations(self, indicator_id: str) -> List[Recommendation]:
        return recommendations_for(indicator_id)

    def history(self, indicator_id: str, days: int = 7) -> List[HistoryPoint]:
        rng = random.Random(self.seed) if self.seed is not None else None
        return history_for(indicator_id, days, rng=rng, today=self.today)

    def causes(self, indicator_id: str) -> List[str]:
        return causes_for(indicator_id)
