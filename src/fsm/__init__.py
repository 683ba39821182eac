"""
Módulo FSM — ciclo de vida das assinaturas de vendedores.

Estrutura:
    - states/: Status da assinatura (SubscriptionStatus)
    - transitions/: Regras de transição e mapa de eventos do gateway
    - manager/: Máquina de estados (SubscriptionLifecycle)
    - types/: Registros de transição (StatusTransition, TransitionResult)
"""

from fsm.manager import SubscriptionLifecycle, create_lifecycle
from fsm.states import (
    DEFAULT_INITIAL_STATUS,
    QUALIFYING_STATUSES,
    TERMINAL_STATUSES,
    SubscriptionStatus,
    is_terminal,
    parse_status,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    GatewayEvent,
    get_valid_targets,
    is_transition_valid,
    parse_event,
    resolve_target_status,
    validate_transition_map,
)
from fsm.types import StatusTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATUS",
    "QUALIFYING_STATUSES",
    "TERMINAL_STATUSES",
    "VALID_TRANSITIONS",
    "GatewayEvent",
    "StatusTransition",
    "SubscriptionLifecycle",
    "SubscriptionStatus",
    "TransitionResult",
    "create_lifecycle",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "parse_event",
    "parse_status",
    "resolve_target_status",
    "validate_transition_map",
]
