"""Use cases do gateway de pagamentos (webhook)."""

from app.use_cases.asaas.process_gateway_webhook import (
    ProcessGatewayWebhookUseCase,
    WebhookOutcome,
    WebhookProcessingResult,
)

__all__ = [
    "ProcessGatewayWebhookUseCase",
    "WebhookOutcome",
    "WebhookProcessingResult",
]
