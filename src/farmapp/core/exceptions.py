"""
Domain exceptions.

Lookups in the indicator model never raise; these are for the repository
layer and for CLI commands that need a hard "not found".
"""


class FarmAppError(Exception):
    """Base class for all farmapp errors."""


class IndicatorNotFoundError(FarmAppError):
    def __init__(self, indicator_id: str):
        self.indicator_id = indicator_id
        super().__init__(f"Indicator not found: {indicator_id}")


class ActionPlanNotFoundError(FarmAppError):
    def __init__(self, plan_id: str):
        self.plan_id = plan_id
        super().__init__(f"Action plan not found: {plan_id}")


class SellerNotFoundError(FarmAppError):
    def __init__(self, seller_id: str):
        self.seller_id = seller_id
        super().__init__(f"Seller not found: {seller_id}")


class InvalidTransitionError(FarmAppError):
    def __init__(self, plan_id: str, current: str, requested: str):
        self.plan_id = plan_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Action plan {plan_id} cannot move from '{current}' to '{requested}'"
        )
