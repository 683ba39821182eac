"""Router do webhook Asaas."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.asaas.webhook import receive_webhook

router = APIRouter()

router.add_api_route("", receive_webhook, methods=["POST"])
