"""
Regras de transição entre status de assinatura.

Chave: status de origem. Valor: status de destino permitidos.
Reflexivas em ACTIVE/OVERDUE permitem reprocessar cobranças recorrentes.
"""

from fsm.states.subscription import TERMINAL_STATUSES, SubscriptionStatus

TransitionMap = dict[SubscriptionStatus, frozenset[SubscriptionStatus]]

VALID_TRANSITIONS: TransitionMap = {
    SubscriptionStatus.PENDING: frozenset({
        SubscriptionStatus.ACTIVE,
        SubscriptionStatus.OVERDUE,
        SubscriptionStatus.INACTIVE,
        SubscriptionStatus.CANCELED,
    }),
    SubscriptionStatus.ACTIVE: frozenset({
        SubscriptionStatus.ACTIVE,
        SubscriptionStatus.OVERDUE,
        SubscriptionStatus.INACTIVE,
        SubscriptionStatus.CANCELED,
    }),
    SubscriptionStatus.OVERDUE: frozenset({
        SubscriptionStatus.OVERDUE,
        SubscriptionStatus.ACTIVE,
        SubscriptionStatus.INACTIVE,
        SubscriptionStatus.CANCELED,
    }),
    SubscriptionStatus.INACTIVE: frozenset(),
    SubscriptionStatus.CANCELED: frozenset(),
}


def get_valid_targets(status: SubscriptionStatus) -> frozenset[SubscriptionStatus]:
    """Retorna destinos permitidos (vazio se terminal)."""
    return VALID_TRANSITIONS.get(status, frozenset())


def is_transition_valid(
    from_status: SubscriptionStatus,
    to_status: SubscriptionStatus,
) -> bool:
    """
    Verifica se a transição é permitida.

    Args:
        from_status: Status de origem
        to_status: Status de destino

    Returns:
        True se permitida, False caso contrário
    """
    if from_status in TERMINAL_STATUSES:
        return False
    return to_status in get_valid_targets(from_status)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for status in SubscriptionStatus:
        if status not in VALID_TRANSITIONS:
            errors.append(f"Status {status.name} ausente em VALID_TRANSITIONS")

    for status in TERMINAL_STATUSES:
        targets = VALID_TRANSITIONS.get(status, frozenset())
        if targets:
            errors.append(
                f"Status terminal {status.name} não deveria ter transições: {targets}"
            )

    return errors
