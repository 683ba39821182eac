"""Serviços de aplicação.

Unidades reutilizáveis de regra de negócio (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.split_calculator import (
    SplitCalculator,
    calculate_split,
    validate_seller_for_split,
)
from app.services.subscription_validator import SubscriptionValidator

__all__ = [
    "SplitCalculator",
    "SubscriptionValidator",
    "calculate_split",
    "validate_seller_for_split",
]
