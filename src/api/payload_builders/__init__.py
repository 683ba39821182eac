"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- asaas/: gateway de pagamentos (assinaturas com split)
"""

__all__: list[str] = []
