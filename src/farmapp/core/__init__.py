"""
Core indicator model for farmapp.

Types, status classification, the fixed hierarchy and the rustworkx-backed
indicator graph.
"""

from .graph import IndicatorGraph
from .status import classify
from .types import FlowType, Indicator, IndicatorStatus, IndicatorTree, Relation

__all__ = [
    "IndicatorGraph",
    "classify",
    "FlowType",
    "Indicator",
    "IndicatorStatus",
    "IndicatorTree",
    "Relation",
]
