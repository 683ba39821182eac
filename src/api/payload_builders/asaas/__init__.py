"""Payload builders do gateway Asaas."""

from .subscription import (
    VALID_CYCLES,
    build_subscription_payload,
    format_gateway_date,
    normalize_cycle,
)

__all__ = [
    "VALID_CYCLES",
    "build_subscription_payload",
    "format_gateway_date",
    "normalize_cycle",
]
