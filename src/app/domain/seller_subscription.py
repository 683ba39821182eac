"""Assinatura do vendedor junto à plataforma.

O status é governado por fsm.SubscriptionStatus. Datas são sempre
timezone-aware em UTC: `date` vira meia-noite UTC e datetimes sem
fuso são interpretados como UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.results import OperationError
from fsm.states import SubscriptionStatus

_DATE_FIELDS = ("next_due_date", "start_date", "end_date", "created_at", "updated_at")


def _utcnow() -> datetime:
    return datetime.now(UTC)


def ensure_utc(value: date | datetime | None) -> datetime | None:
    """Normaliza date/datetime para datetime aware em UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime(value.year, value.month, value.day, tzinfo=UTC)


class SellerSubscription(BaseModel):
    """Registro de assinatura de um vendedor."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: str | None = None
    seller_id: str = Field(..., min_length=1)
    external_id: str | None = Field(None, description="ID da assinatura no gateway.")
    plan_name: str = ""
    value: float = Field(default=0.0, ge=0.0)
    status: SubscriptionStatus = SubscriptionStatus.PENDING
    cycle: str | None = None
    next_due_date: datetime = Field(..., description="Próximo vencimento; obrigatório.")
    start_date: datetime | None = None
    end_date: datetime | None = None
    billing_type: str | None = None
    features: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("seller_id", mode="before")
    @classmethod
    def coerce_seller_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator(*_DATE_FIELDS, mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        if isinstance(value, date) and not isinstance(value, datetime):
            return ensure_utc(value)
        return value

    @field_validator(*_DATE_FIELDS, mode="after")
    @classmethod
    def attach_utc(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)

    def to_firestore_dict(self) -> dict[str, Any]:
        """Documento Firestore (status como string, sem id)."""
        data = self.model_dump(exclude={"id"})
        data["status"] = self.status.value
        return data

    @classmethod
    def from_firestore_dict(cls, doc_id: str, data: dict[str, Any]) -> SellerSubscription:
        """Cria instância a partir de documento Firestore."""
        payload = dict(data)
        for key in _DATE_FIELDS:
            value = payload.get(key)
            if isinstance(value, str):
                payload[key] = datetime.fromisoformat(value)
        payload["id"] = doc_id
        return cls(**payload)

    def to_public_dict(self) -> dict[str, Any]:
        """Representação JSON para respostas da API."""
        return self.model_dump(mode="json")


@dataclass(frozen=True, slots=True)
class SubscriptionValidationResult:
    """Resultado da validação de assinatura de um vendedor."""

    success: bool
    subscription: SellerSubscription | None = None
    error: OperationError | None = None

    def __post_init__(self) -> None:
        if self.success and self.subscription is None:
            raise ValueError("Validação bem-sucedida deve conter subscription")
        if not self.success and self.error is None:
            raise ValueError("Validação com falha deve conter error")

    @classmethod
    def ok(cls, subscription: SellerSubscription) -> SubscriptionValidationResult:
        return cls(success=True, subscription=subscription)

    @classmethod
    def fail(cls, error: OperationError) -> SubscriptionValidationResult:
        return cls(success=False, error=error)


__all__ = [
    "SellerSubscription",
    "SubscriptionValidationResult",
    "ensure_utc",
]
