"""Modelos do split de pagamento entre plataforma e vendedor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.results import OperationError


@dataclass(frozen=True, slots=True)
class SplitAllocation:
    """Parcela destinada a uma carteira no gateway.

    Exatamente um entre fixed_value e percentual_value é definido.
    """

    wallet_id: str
    fixed_value: float | None = None
    percentual_value: float | None = None

    def __post_init__(self) -> None:
        if not self.wallet_id:
            raise ValueError("wallet_id não pode ser vazio")
        if (self.fixed_value is None) == (self.percentual_value is None):
            raise ValueError("Informe exatamente um entre fixed_value e percentual_value")

    @property
    def is_percentual(self) -> bool:
        return self.percentual_value is not None

    def to_payload(self) -> dict[str, Any]:
        """Formato do gateway; a chave ausente é omitida."""
        payload: dict[str, Any] = {"walletId": self.wallet_id}
        if self.percentual_value is not None:
            payload["percentualValue"] = self.percentual_value
        else:
            payload["fixedValue"] = self.fixed_value
        return payload


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Resultado do cálculo de split.

    Attributes:
        success: Se houve alocação
        allocations: Alocações em ordem (hoje sempre uma)
        error: Motivo da rejeição (se success=False)
    """

    success: bool
    allocations: tuple[SplitAllocation, ...] = ()
    error: OperationError | None = None

    def __post_init__(self) -> None:
        if self.success and not self.allocations:
            raise ValueError("Split bem-sucedido deve conter allocations")
        if not self.success and self.error is None:
            raise ValueError("Split com falha deve conter error")

    @classmethod
    def ok(cls, *allocations: SplitAllocation) -> SplitResult:
        return cls(success=True, allocations=tuple(allocations))

    @classmethod
    def fail(cls, error: OperationError) -> SplitResult:
        return cls(success=False, error=error)

    def to_payload(self) -> list[dict[str, Any]]:
        """Lista pronta para o campo `split` do gateway."""
        return [allocation.to_payload() for allocation in self.allocations]
