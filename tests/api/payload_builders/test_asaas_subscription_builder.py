"""Testes do builder de payload de assinatura Asaas."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from api.payload_builders.asaas import (
    build_subscription_payload,
    format_gateway_date,
    normalize_cycle,
)
from app.domain.results import ErrorKind, OperationError
from app.domain.split import SplitAllocation, SplitResult
from app.domain.subscription_request import SubscriptionRequest

SPLIT = SplitResult.ok(SplitAllocation(wallet_id="wal_1", fixed_value=25.53))


def _request(**overrides: object) -> SubscriptionRequest:
    data: dict[str, object] = {
        "customer_id": "cus_1",
        "value": 27.53,
        "next_due_date": "2026-04-10",
    }
    data.update(overrides)
    return SubscriptionRequest.model_validate(data)


class TestNormalizeCycle:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("monthly", "MONTHLY"), (" YEARLY ", "YEARLY"), ("daily", None), (None, None)],
    )
    def test_normalize(self, raw: str | None, expected: str | None) -> None:
        assert normalize_cycle(raw) == expected


class TestFormatGatewayDate:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (date(2026, 4, 10), "2026-04-10"),
            (datetime(2026, 4, 10, 23, 0), "2026-04-10"),
            (datetime(2026, 4, 10, 23, 0, tzinfo=timezone(timedelta(hours=-3))), "2026-04-11"),
            ("2026-04-10", "2026-04-10"),
            ("2026-04-10T12:00:00Z", "2026-04-10"),
            ("10/04/2026", "2026-04-10"),
        ],
    )
    def test_accepted_formats(self, value: object, expected: str) -> None:
        assert format_gateway_date(value) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["", "31/02/2026", "amanhã"])
    def test_invalid_dates(self, value: str) -> None:
        with pytest.raises(ValueError):
            format_gateway_date(value)


class TestBuildSubscriptionPayload:
    def test_minimal_payload(self) -> None:
        payload = build_subscription_payload(_request(), SPLIT, seller_id="seller-1")

        assert payload == {
            "customer": "cus_1",
            "billingType": "BOLETO",
            "value": 27.53,
            "cycle": "MONTHLY",
            "description": "Assinatura monthly",
            "nextDueDate": "2026-04-10",
            "split": [{"walletId": "wal_1", "fixedValue": 25.53}],
            "metadata": {"source": "ponte-marketplace", "seller_id": "seller-1"},
        }

    def test_optional_fields(self) -> None:
        request = _request(
            cycle="yearly",
            billing_type="PIX",
            plan_name="Plano Ouro",
            end_date=datetime(2027, 4, 10, tzinfo=UTC),
            max_payments=12,
            external_reference="order-77",
            discount={"value": 5.0, "dueDateLimitDays": 0},
            fine={"value": 2.0},
        )

        payload = build_subscription_payload(request, SPLIT)

        assert payload["cycle"] == "YEARLY"
        assert payload["billingType"] == "PIX"
        assert payload["description"] == "Plano Ouro"
        assert payload["endDate"] == "2027-04-10"
        assert payload["maxPayments"] == 12
        assert payload["externalReference"] == "order-77"
        assert payload["discount"] == {"value": 5.0, "dueDateLimitDays": 0}
        assert payload["fine"] == {"value": 2.0}
        assert "interest" not in payload
        assert payload["metadata"] == {"source": "ponte-marketplace"}

    def test_percent_split(self) -> None:
        split = SplitResult.ok(SplitAllocation(wallet_id="wal_1", percentual_value=85))

        payload = build_subscription_payload(_request(), split)

        assert payload["split"] == [{"walletId": "wal_1", "percentualValue": 85}]

    def test_failed_split_is_rejected(self) -> None:
        failed = SplitResult.fail(OperationError.of(ErrorKind.MISSING_WALLET, "no wallet"))

        with pytest.raises(ValueError, match="Split"):
            build_subscription_payload(_request(), failed)

    def test_invalid_cycle_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Ciclo inválido"):
            build_subscription_payload(_request(cycle="DAILY"), SPLIT)
