"""
Estados do ciclo de vida de uma assinatura de vendedor.

Os valores são persistidos como string (lowercase) no store e
comparados diretamente pelo validador de assinatura.
"""

from enum import StrEnum


class SubscriptionStatus(StrEnum):
    """
    Status possíveis de uma assinatura de vendedor.

    Estados não-terminais:
        - PENDING: Criada, aguardando cadastro completo/primeiro pagamento
        - ACTIVE: Em dia, libera o uso do serviço
        - OVERDUE: Cobrança vencida sem pagamento

    Estados terminais:
        - INACTIVE: Assinatura desativada no gateway
        - CANCELED: Cobrança estornada ou removida
    """

    PENDING = "pending"
    ACTIVE = "active"
    OVERDUE = "overdue"

    INACTIVE = "inactive"
    CANCELED = "canceled"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATUSES: frozenset[SubscriptionStatus] = frozenset({
    SubscriptionStatus.INACTIVE,
    SubscriptionStatus.CANCELED,
})

# Status considerados na busca pela assinatura vigente de um vendedor
QUALIFYING_STATUSES: tuple[SubscriptionStatus, ...] = (
    SubscriptionStatus.ACTIVE,
    SubscriptionStatus.OVERDUE,
    SubscriptionStatus.PENDING,
)

DEFAULT_INITIAL_STATUS: SubscriptionStatus = SubscriptionStatus.PENDING


def is_terminal(status: SubscriptionStatus) -> bool:
    """Verifica se o status encerra o ciclo de vida."""
    return status in TERMINAL_STATUSES


def parse_status(value: object) -> SubscriptionStatus | None:
    """
    Converte valor persistido em SubscriptionStatus.

    Aceita o enum, ou string em qualquer caixa ("ACTIVE", "active").

    Returns:
        SubscriptionStatus correspondente ou None se desconhecido
    """
    if isinstance(value, SubscriptionStatus):
        return value
    if not isinstance(value, str):
        return None
    try:
        return SubscriptionStatus(value.strip().lower())
    except ValueError:
        return None
