"""Connectors — adapters de borda para APIs externas.

Estrutura:
- asaas/: gateway de pagamentos (assinaturas, webhook)
"""

__all__: list[str] = []
