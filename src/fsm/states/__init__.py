"""
Exports públicos do módulo fsm/states.

Status do ciclo de vida de assinaturas de vendedores.
"""

from fsm.states.subscription import (
    DEFAULT_INITIAL_STATUS,
    QUALIFYING_STATUSES,
    TERMINAL_STATUSES,
    SubscriptionStatus,
    is_terminal,
    parse_status,
)

__all__ = [
    "DEFAULT_INITIAL_STATUS",
    "QUALIFYING_STATUSES",
    "TERMINAL_STATUSES",
    "SubscriptionStatus",
    "is_terminal",
    "parse_status",
]
