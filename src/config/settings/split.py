"""Settings da política de split entre plataforma e vendedor.

Diferente das demais settings, NÃO é cacheada: a política é relida do
ambiente a cada cálculo para permitir ajuste em runtime sem restart.

Variáveis:
    AS_SPLIT_SYSTEM_PERCENT: percentual retido pela plataforma (default 0).
        Quando > 0, o modo percentual é usado.
    AS_SPLIT_SYSTEM_FIXED: taxa fixa retida pela plataforma (default 2.00).
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PERCENT = 0.0
DEFAULT_SYSTEM_FIXED_FEE = 2.0

SYSTEM_PERCENT_ENV = "AS_SPLIT_SYSTEM_PERCENT"
SYSTEM_FIXED_FEE_ENV = "AS_SPLIT_SYSTEM_FIXED"


@dataclass(frozen=True)
class SplitSettings:
    """Política de split vigente.

    Attributes:
        system_percent: Percentual (0-100) retido pela plataforma
        system_fixed_fee: Valor fixo (R$) retido pela plataforma
    """

    system_percent: float = DEFAULT_SYSTEM_PERCENT
    system_fixed_fee: float = DEFAULT_SYSTEM_FIXED_FEE

    @property
    def percent_mode(self) -> bool:
        """Modo percentual vence sempre que system_percent > 0."""
        return self.system_percent > 0

    def validate(self) -> list[str]:
        """Valida a política configurada.

        Returns:
            Lista de erros de validação (vazia = OK).
        """
        errors: list[str] = []

        if self.system_percent < 0:
            errors.append(f"{SYSTEM_PERCENT_ENV} deve ser >= 0")

        if self.system_percent >= 100:
            errors.append(f"{SYSTEM_PERCENT_ENV} deve ser < 100")

        if self.system_fixed_fee < 0:
            errors.append(f"{SYSTEM_FIXED_FEE_ENV} deve ser >= 0")

        return errors


def _parse_amount(env_name: str, default: float) -> float:
    """Lê número decimal do ambiente; valores inválidos caem no default."""
    raw = os.getenv(env_name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip().replace(",", "."))
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.warning(
            "split_setting_invalid",
            extra={"setting": env_name, "fallback": default},
        )
        return default
    return value


def load_split_settings() -> SplitSettings:
    """Carrega a política de split do ambiente (sem cache)."""
    return SplitSettings(
        system_percent=_parse_amount(SYSTEM_PERCENT_ENV, DEFAULT_SYSTEM_PERCENT),
        system_fixed_fee=_parse_amount(SYSTEM_FIXED_FEE_ENV, DEFAULT_SYSTEM_FIXED_FEE),
    )
