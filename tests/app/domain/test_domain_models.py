"""Testes dos modelos de domínio (resultados, assinatura, evento)."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from api.connectors.asaas import AsaasApiError
from app.domain.gateway_event import GatewayWebhookEvent, parse_gateway_date
from app.domain.results import ErrorKind, OperationError, OperationResult, format_error
from app.domain.seller_subscription import SellerSubscription, ensure_utc
from app.domain.split import SplitAllocation
from fsm import SubscriptionStatus


class TestOperationResults:
    def test_error_response_body(self) -> None:
        error = OperationError.of(ErrorKind.SELLER_NOT_FOUND, "seller not found")

        assert error.to_response() == {
            "success": False,
            "message": "seller not found",
            "status": 404,
        }

    def test_result_invariants(self) -> None:
        with pytest.raises(ValueError):
            OperationResult(success=False)
        with pytest.raises(ValueError):
            OperationResult(success=True, error=OperationError.of(ErrorKind.UNEXPECTED, "x"))

    def test_format_error_uses_status_code_attribute(self) -> None:
        error = format_error(AsaasApiError("Valor inválido", status_code=400, errors=["Valor inválido"]))

        assert error.status_code == 400
        assert error.message == "Valor inválido"
        assert error.details == {"exception": "AsaasApiError", "errors": ["Valor inválido"]}

    def test_format_error_defaults(self) -> None:
        exc = RuntimeError()
        exc.status_code = True  # type: ignore[attr-defined]

        error = format_error(exc)

        assert error.status_code == 500
        assert error.message == "internal server error"
        assert error.kind == ErrorKind.UNEXPECTED


class TestSplitAllocation:
    def test_requires_exactly_one_value(self) -> None:
        with pytest.raises(ValueError):
            SplitAllocation(wallet_id="wal_1")
        with pytest.raises(ValueError):
            SplitAllocation(wallet_id="wal_1", fixed_value=1.0, percentual_value=10.0)
        with pytest.raises(ValueError):
            SplitAllocation(wallet_id="", fixed_value=1.0)


class TestSellerSubscription:
    def test_normalizes_status_and_seller_id(self) -> None:
        subscription = SellerSubscription(
            seller_id=42,  # type: ignore[arg-type]
            status="ACTIVE",
            next_due_date=date(2026, 4, 10),
        )

        assert subscription.seller_id == "42"
        assert subscription.status == SubscriptionStatus.ACTIVE

    def test_dates_are_utc(self) -> None:
        subscription = SellerSubscription(
            seller_id="s-1",
            next_due_date=date(2026, 4, 10),
            start_date=datetime(2026, 3, 10, 9, 0),
            end_date=datetime(2027, 3, 10, 9, 0, tzinfo=timezone(timedelta(hours=-3))),
        )

        assert subscription.next_due_date == datetime(2026, 4, 10, tzinfo=UTC)
        assert subscription.start_date == datetime(2026, 3, 10, 9, 0, tzinfo=UTC)
        assert subscription.end_date == datetime(2027, 3, 10, 12, 0, tzinfo=UTC)

    def test_unknown_status_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SellerSubscription(seller_id="s-1", status="expired", next_due_date=date(2026, 4, 10))

    def test_next_due_date_is_required(self) -> None:
        with pytest.raises(ValidationError, match="next_due_date"):
            SellerSubscription(seller_id="s-1", status="pending")

    def test_firestore_round_trip(self) -> None:
        original = SellerSubscription(
            id="doc-1",
            seller_id="s-1",
            status="overdue",
            next_due_date=datetime(2026, 4, 10, tzinfo=UTC),
        )

        data = original.to_firestore_dict()
        restored = SellerSubscription.from_firestore_dict("doc-1", data)

        assert "id" not in data
        assert data["status"] == "overdue"
        assert restored == original

    def test_public_dict_is_json_friendly(self) -> None:
        subscription = SellerSubscription(
            seller_id="s-1", next_due_date=datetime(2026, 4, 10, tzinfo=UTC)
        )

        public = subscription.to_public_dict()

        assert public["status"] == "pending"
        assert public["next_due_date"].startswith("2026-04-10T00:00:00")

    def test_ensure_utc_none(self) -> None:
        assert ensure_utc(None) is None


class TestGatewayEvent:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2026-04-10", datetime(2026, 4, 10, tzinfo=UTC)),
            ("10/04/2026", datetime(2026, 4, 10, tzinfo=UTC)),
            ("2026-04-10T03:00:00Z", datetime(2026, 4, 10, 3, tzinfo=UTC)),
            ("2026-04-10T00:00:00-03:00", datetime(2026, 4, 10, 3, tzinfo=UTC)),
            ("", None),
            ("soon", None),
            (None, None),
        ],
    )
    def test_parse_gateway_date(self, raw: object, expected: datetime | None) -> None:
        assert parse_gateway_date(raw) == expected

    def test_dedupe_key_falls_back_to_resource(self) -> None:
        event = GatewayWebhookEvent.model_validate({
            "event": "PAYMENT_OVERDUE",
            "payment": {"id": "pay_7"},
        })

        assert event.dedupe_key == "PAYMENT_OVERDUE:pay_7"
        assert event.gateway_subscription_id is None
        assert event.gateway_status is None
