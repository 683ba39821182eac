"""
Exports públicos do módulo fsm/transitions.

Regras de transição e mapeamento de eventos do gateway.
"""

from fsm.transitions.events import (
    EVENT_TARGET_STATUS,
    STATUS_NEUTRAL_EVENTS,
    GatewayEvent,
    parse_event,
    resolve_target_status,
)
from fsm.transitions.rules import (
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

__all__ = [
    "EVENT_TARGET_STATUS",
    "STATUS_NEUTRAL_EVENTS",
    "VALID_TRANSITIONS",
    "GatewayEvent",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
    "parse_event",
    "resolve_target_status",
    "validate_transition_map",
]
