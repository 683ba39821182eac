"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import SubscriptionLifecycle, create_lifecycle

__all__ = [
    "SubscriptionLifecycle",
    "create_lifecycle",
]
