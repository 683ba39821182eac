"""
Máquina de estados do ciclo de vida de uma assinatura.

Valida transições contra VALID_TRANSITIONS e mantém histórico
rastreável das mudanças aplicadas.
"""

from typing import Any

from fsm.states.subscription import (
    DEFAULT_INITIAL_STATUS,
    SubscriptionStatus,
    is_terminal,
)
from fsm.transitions.events import GatewayEvent, resolve_target_status
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StatusTransition, TransitionResult


class SubscriptionLifecycle:
    """
    Máquina de estados de uma assinatura de vendedor.

    Attributes:
        current_status: Status atual
        history: Transições aplicadas nesta instância
    """

    __slots__ = ("_current_status", "_history", "_subscription_id")

    def __init__(
        self,
        initial_status: SubscriptionStatus | None = None,
        subscription_id: str = "",
    ) -> None:
        self._current_status = initial_status or DEFAULT_INITIAL_STATUS
        self._history: list[StatusTransition] = []
        self._subscription_id = subscription_id

    @property
    def current_status(self) -> SubscriptionStatus:
        return self._current_status

    @property
    def history(self) -> list[StatusTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def subscription_id(self) -> str:
        return self._subscription_id

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_status)

    def can_transition_to(self, target: SubscriptionStatus) -> bool:
        return is_transition_valid(self._current_status, target)

    def get_valid_targets(self) -> frozenset[SubscriptionStatus]:
        return get_valid_targets(self._current_status)

    def transition(
        self,
        target: SubscriptionStatus,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta transitar para o status alvo.

        Args:
            target: Status de destino
            trigger: Gatilho (ex: "PAYMENT_CONFIRMED")
            metadata: Dados de auditoria (nunca PII)

        Returns:
            TransitionResult com o registro ou o motivo da recusa
        """
        if not is_transition_valid(self._current_status, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_status.name} → {target.name}"
                ),
            )

        transition = StatusTransition(
            from_status=self._current_status,
            to_status=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_status = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def apply_event(
        self,
        event: GatewayEvent,
        gateway_status: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult | None:
        """
        Aplica um evento do gateway.

        Returns:
            None quando o evento não altera status; caso contrário o
            resultado da transição para o status mapeado.
        """
        target = resolve_target_status(event, gateway_status)
        if target is None:
            return None
        return self.transition(target, trigger=event.value, metadata=metadata)

    def get_status_summary(self) -> dict[str, Any]:
        """Resumo do estado atual (seguro para logs)."""
        return {
            "subscription_id": self._subscription_id,
            "current_status": self._current_status.value,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.value for s in self.get_valid_targets()),
        }


def create_lifecycle(
    subscription_id: str,
    initial_status: SubscriptionStatus | None = None,
) -> SubscriptionLifecycle:
    """Factory de SubscriptionLifecycle."""
    return SubscriptionLifecycle(
        initial_status=initial_status,
        subscription_id=subscription_id,
    )
