"""
Registros imutáveis de transição de status de assinatura.

Usados para auditoria em logs (sem PII).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.subscription import SubscriptionStatus


@dataclass(frozen=True, slots=True)
class StatusTransition:
    """
    Mudança de status de uma assinatura.

    Attributes:
        from_status: Status de origem
        to_status: Status de destino
        trigger: Gatilho (ex: nome do evento do gateway)
        metadata: Dados de auditoria (nunca PII)
        timestamp: Momento da transição (UTC)
    """

    from_status: SubscriptionStatus
    to_status: SubscriptionStatus
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    @property
    def is_reflexive(self) -> bool:
        return self.from_status == self.to_status

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs estruturados."""
        return {
            "from_status": self.from_status.value,
            "to_status": self.to_status.value,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi aplicada
        transition: Registro da transição (se success=True)
        error_reason: Motivo da recusa (se success=False)
    """

    success: bool
    transition: StatusTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
