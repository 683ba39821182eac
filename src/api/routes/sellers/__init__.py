"""Rotas por vendedor (assinatura vigente, split, criação de assinaturas)."""
