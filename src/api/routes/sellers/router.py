"""Endpoints por vendedor.

- GET  /sellers/{seller_id}/subscription   assinatura vigente
- POST /sellers/{seller_id}/split/preview  prévia do split para um valor
- POST /sellers/{seller_id}/subscriptions  cria assinatura de comprador
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.routes.sellers.dependencies import (
    error_response,
    internal_error_response,
    require_active_subscription,
)
from app.bootstrap import (
    get_create_shopper_subscription,
    get_seller_store,
    get_split_calculator,
    get_subscription_validator,
)
from app.domain.results import ErrorKind, OperationError
from app.domain.subscription_request import SubscriptionRequest
from app.observability import CORRELATION_ID_HEADER, reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_BODY_MESSAGE = "request body must be a JSON object"


async def _read_json_object(request: Request) -> dict[str, Any] | None:
    raw_body = await request.body()
    try:
        payload = json.loads(raw_body or b"{}")
    except json.JSONDecodeError:
        return None
    return payload if isinstance(payload, dict) else None


def _invalid_request(message: str) -> JSONResponse:
    return error_response(OperationError.of(ErrorKind.INVALID_REQUEST, message))


@router.get("/{seller_id}/subscription")
async def get_seller_subscription(seller_id: str, request: Request) -> JSONResponse:
    """Retorna a assinatura que libera o vendedor, ou o motivo da negação."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        result = await get_subscription_validator().validate_seller_subscription(seller_id)
        if not result.success or result.subscription is None:
            return error_response(result.error)
        return JSONResponse(
            status_code=200,
            content={"success": True, "subscription": result.subscription.to_public_dict()},
        )
    finally:
        reset_correlation_id(token)


@router.post("/{seller_id}/split/preview")
async def preview_split(seller_id: str, request: Request) -> JSONResponse:
    """Calcula o split de um valor para o vendedor, sem efeitos colaterais."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        denial = await require_active_subscription(seller_id)
        if denial is not None:
            return denial

        payload = await _read_json_object(request)
        if payload is None:
            return _invalid_request(INVALID_BODY_MESSAGE)

        try:
            seller = await get_seller_store().get(seller_id)
        except Exception as exc:
            logger.exception("seller_lookup_failed", extra={"error_type": type(exc).__name__})
            return internal_error_response()

        calculator = get_split_calculator()
        seller_check = calculator.validate_seller_for_split(seller)
        if not seller_check.success or seller is None:
            return error_response(seller_check.error)

        split = calculator.calculate_split(payload.get("value"), seller.wallet_id)
        if not split.success:
            return error_response(split.error)

        return JSONResponse(status_code=200, content={"success": True, "split": split.to_payload()})
    finally:
        reset_correlation_id(token)


@router.post("/{seller_id}/subscriptions")
async def create_shopper_subscription(seller_id: str, request: Request) -> JSONResponse:
    """Cria no gateway a assinatura de um comprador com split para o vendedor."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        payload = await _read_json_object(request)
        if payload is None:
            return _invalid_request(INVALID_BODY_MESSAGE)

        try:
            subscription_request = SubscriptionRequest.model_validate(payload)
        except ValidationError as exc:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
            return _invalid_request(f"invalid fields: {', '.join(fields)}")

        try:
            seller = await get_seller_store().get(seller_id)
        except Exception as exc:
            logger.exception("seller_lookup_failed", extra={"error_type": type(exc).__name__})
            return internal_error_response()

        result = await get_create_shopper_subscription().execute(
            seller=seller,
            request=subscription_request,
        )
        if not result.success:
            return error_response(result.error)

        return JSONResponse(
            status_code=201,
            content={"success": True, "subscription": result.gateway_subscription},
        )
    finally:
        reset_correlation_id(token)
