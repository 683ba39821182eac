"""Protocolo de política de split."""

from __future__ import annotations

from typing import Protocol


class SplitPolicyProviderProtocol(Protocol):
    """Fornece a política vigente de split.

    Implementações devem refletir mudanças de configuração sem restart:
    cada chamada retorna o valor corrente.
    """

    def system_percent(self) -> float:
        """Percentual retido pela plataforma (0 desativa o modo percentual)."""
        ...

    def system_fixed_fee(self) -> float:
        """Taxa fixa (R$) retida pela plataforma."""
        ...
