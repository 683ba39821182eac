"""Constantes de domínio (mensagens de erro)."""
