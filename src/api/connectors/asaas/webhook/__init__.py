"""Webhook Asaas: autenticação por token e parsing seguro."""

from .receive import (
    AsaasWebhookEvent,
    InvalidEventError,
    InvalidJsonError,
    WebhookRequestError,
    parse_webhook_request,
)
from .verify import WebhookAuthError, verify_access_token

__all__ = [
    "AsaasWebhookEvent",
    "InvalidEventError",
    "InvalidJsonError",
    "WebhookAuthError",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_access_token",
]
