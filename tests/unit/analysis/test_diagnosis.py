"""
Unit tests for flow diagnosis.
"""

import pytest

from farmapp.analysis.diagnosis import DiagnosisAnalyzer
from farmapp.core.graph import IndicatorGraph
from farmapp.core.hierarchy import build_tree
from farmapp.core.storage import MemoryActionPlanRepository
from farmapp.core.types import FlowType


@pytest.fixture
def analyzer():
    return DiagnosisAnalyzer(
        IndicatorGraph.from_tree(build_tree()),
        plans=MemoryActionPlanRepository(),
    )


class TestDiagnosisAnalyzer:

    def test_revenue_flow(self, analyzer):
        result = analyzer.diagnose(FlowType.FATURAMENTO)

        assert result["root"]["id"] == "faturamento"
        assert result["root"]["status"] == "below"
        assert "competitividade" not in result["below_target"]
        assert result["below_target_count"] == 6
        assert [a["id"] for a in result["actionable"]] == ["precoMedio", "uvc"]

    def test_actionable_details(self, analyzer):
        result = analyzer.diagnose("faturamento")
        uvc = next(a for a in result["actionable"] if a["id"] == "uvc")

        assert uvc["chain_to_root"] == ["uvc", "ticketMedio", "faturamento"]
        assert len(uvc["recommendations"]) == 3
        assert {p["id"] for p in uvc["action_plans"]} == {
            "ajuste-estoque-001", "cross-selling-002", "pacotes-promo-003",
        }
        assert uvc["causes"]

    def test_shortest_chain(self, analyzer):
        result = analyzer.diagnose(FlowType.FATURAMENTO)
        preco = next(a for a in result["actionable"] if a["id"] == "precoMedio")
        assert preco["chain_to_root"] == ["precoMedio", "faturamento"]

    def test_coupon_flow(self, analyzer):
        result = analyzer.diagnose(FlowType.CUPOM)

        assert result["root"]["id"] == "qtdCupons"
        assert result["root"]["status"] == "above"
        assert [a["id"] for a in result["actionable"]] == ["sortimento", "adesaoPrograma"]
        adesao = result["actionable"][1]
        assert adesao["chain_to_root"] == ["adesaoPrograma", "clientesCronicos", "fluxoLoja", "qtdCupons"]

    def test_without_plan_repository(self):
        analyzer = DiagnosisAnalyzer(IndicatorGraph.from_tree(build_tree()))
        result = analyzer.diagnose(FlowType.FATURAMENTO)
        assert all(a["action_plans"] == [] for a in result["actionable"])

    def test_empty_graph(self):
        result = DiagnosisAnalyzer(IndicatorGraph()).diagnose(FlowType.CUPOM)
        assert result["root"] is None
        assert result["below_target"] == []
        assert result["actionable"] == []
