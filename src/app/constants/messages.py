"""Mensagens de erro devolvidas aos clientes da API.

Textos ecoados verbatim no corpo das respostas HTTP.
"""

from __future__ import annotations

MISSING_WALLET = "seller has no configured wallet; split is mandatory to create subscriptions"
INVALID_AMOUNT = "subscription value must be greater than zero"
INVALID_PERCENT_CONFIG = "system percent must be less than 100%"
SELLER_NOT_FOUND = "seller not found"

MISSING_SELLER_ID = "seller id is required"
NO_ACTIVE_SUBSCRIPTION = (
    "seller has no active subscription; an active subscription is required to use this service"
)
SUBSCRIPTION_OVERDUE = "subscription is overdue; renew to continue using the service"
SUBSCRIPTION_PENDING_DOCUMENTS = (
    "to use this service you must complete registration with a tax ID; "
    "visit settings to finish your data"
)
SUBSCRIPTION_INACTIVE = "subscription is inactive; activate your subscription to use this service"

INTERNAL_SERVER_ERROR = "internal server error"
GATEWAY_REQUEST_FAILED = "payment gateway request failed"


def amount_below_fee(total_value: float, system_fee: float) -> str:
    """Mensagem para valor menor ou igual à taxa fixa da plataforma."""
    return (
        f"subscription value (R$ {total_value:.2f}) must be greater than "
        f"the system fee (R$ {system_fee:.2f})"
    )
