"""
farmapp: pharmacy indicator diagnostics.

Models two flows of store indicators (revenue and coupons) as causal graphs,
classifies each indicator against its target and links the actionable ones
to recommendations and action plans.
"""

__version__ = "0.1.0"
