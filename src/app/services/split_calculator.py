"""Cálculo do split de pagamento entre plataforma e vendedor.

Regras (avaliadas nesta ordem):
1. Vendedor sem carteira: rejeita (split é obrigatório).
2. Valor ausente, não numérico ou <= 0: rejeita.
3. system_percent > 0: modo percentual; o vendedor recebe
   (100 - system_percent)% do valor. Percentual >= 100 é rejeitado.
4. Senão, modo taxa fixa: o vendedor recebe valor - taxa, e o valor
   precisa ser estritamente maior que a taxa.

A política é consultada a cada cálculo. Sem IO além dela.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from app.constants import messages
from app.domain.results import ErrorKind, OperationError, OperationResult
from app.domain.split import SplitAllocation, SplitResult
from app.infra.split_policy import EnvSplitPolicyProvider
from app.observability.metrics import record_split_calculated
from config.logging import mask_identifier

if TYPE_CHECKING:
    from app.protocols.split_policy import SplitPolicyProviderProtocol

logger = logging.getLogger(__name__)


def _coerce_amount(value: Any) -> float | None:
    """Converte valor recebido em float finito; None se inválido."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def _read_wallet_id(seller: Any) -> Any:
    """Lê wallet_id de modelo (atributo) ou mapping."""
    if isinstance(seller, dict):
        return seller.get("wallet_id")
    return getattr(seller, "wallet_id", None)


class SplitCalculator:
    """Calcula o split de assinaturas criadas para vendedores."""

    def __init__(self, policy: SplitPolicyProviderProtocol | None = None) -> None:
        self._policy = policy or EnvSplitPolicyProvider()

    def calculate_split(self, total_value: Any, seller_wallet_id: str | None) -> SplitResult:
        """Calcula a alocação do vendedor para um valor de assinatura.

        Args:
            total_value: Valor total da cobrança (R$)
            seller_wallet_id: Carteira da subconta do vendedor

        Returns:
            SplitResult com uma alocação ou o erro de negócio
        """
        if not seller_wallet_id:
            return self._reject("none", ErrorKind.MISSING_WALLET, messages.MISSING_WALLET)

        amount = _coerce_amount(total_value)
        if amount is None or amount <= 0:
            return self._reject("none", ErrorKind.INVALID_AMOUNT, messages.INVALID_AMOUNT)

        system_percent = self._policy.system_percent()
        system_fixed_fee = self._policy.system_fixed_fee()

        if system_percent > 0:
            if system_percent >= 100:
                logger.warning(
                    "split_percent_config_invalid",
                    extra={"system_percent": system_percent},
                )
                return self._reject(
                    "percent",
                    ErrorKind.INVALID_PERCENT_CONFIG,
                    messages.INVALID_PERCENT_CONFIG,
                )

            allocation = SplitAllocation(
                wallet_id=seller_wallet_id,
                percentual_value=100 - system_percent,
            )
            self._log_mode("percent", seller_wallet_id, system_percent=system_percent)
            record_split_calculated("percent", success=True)
            return SplitResult.ok(allocation)

        if amount <= system_fixed_fee:
            return self._reject(
                "fixed",
                ErrorKind.AMOUNT_BELOW_FEE,
                messages.amount_below_fee(amount, system_fixed_fee),
            )

        allocation = SplitAllocation(
            wallet_id=seller_wallet_id,
            fixed_value=amount - system_fixed_fee,
        )
        self._log_mode("fixed", seller_wallet_id, system_fixed_fee=system_fixed_fee)
        record_split_calculated("fixed", success=True)
        return SplitResult.ok(allocation)

    def validate_seller_for_split(self, seller: Any) -> OperationResult:
        """Verifica se o vendedor pode receber split (existe e tem carteira)."""
        if seller is None:
            return OperationResult.fail(
                OperationError.of(ErrorKind.SELLER_NOT_FOUND, messages.SELLER_NOT_FOUND)
            )
        if not _read_wallet_id(seller):
            return OperationResult.fail(
                OperationError.of(ErrorKind.MISSING_WALLET, messages.MISSING_WALLET)
            )
        return OperationResult.ok()

    @staticmethod
    def _reject(mode: str, kind: ErrorKind, message: str) -> SplitResult:
        record_split_calculated(mode, success=False, error_kind=kind.value)
        return SplitResult.fail(OperationError.of(kind, message))

    @staticmethod
    def _log_mode(mode: str, wallet_id: str, **policy: float) -> None:
        logger.debug(
            "split_mode_selected",
            extra={"mode": mode, "wallet": mask_identifier(wallet_id), **policy},
        )


def calculate_split(
    total_value: Any,
    seller_wallet_id: str | None,
    policy: SplitPolicyProviderProtocol | None = None,
) -> SplitResult:
    """Atalho funcional para SplitCalculator(policy).calculate_split."""
    return SplitCalculator(policy).calculate_split(total_value, seller_wallet_id)


def validate_seller_for_split(seller: Any) -> OperationResult:
    """Atalho funcional para SplitCalculator().validate_seller_for_split."""
    return SplitCalculator().validate_seller_for_split(seller)
