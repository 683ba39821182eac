"""Provedores de política de split."""

from __future__ import annotations

from config.settings.split import load_split_settings


class EnvSplitPolicyProvider:
    """Política lida do ambiente a cada chamada (sem cache).

    Permite ajustar AS_SPLIT_SYSTEM_PERCENT / AS_SPLIT_SYSTEM_FIXED
    sem reiniciar o serviço.
    """

    def system_percent(self) -> float:
        return load_split_settings().system_percent

    def system_fixed_fee(self) -> float:
        return load_split_settings().system_fixed_fee


class StaticSplitPolicyProvider:
    """Política fixa (testes e ferramentas)."""

    def __init__(self, system_percent: float = 0.0, system_fixed_fee: float = 2.0) -> None:
        self._system_percent = system_percent
        self._system_fixed_fee = system_fixed_fee

    def system_percent(self) -> float:
        return self._system_percent

    def system_fixed_fee(self) -> float:
        return self._system_fixed_fee
