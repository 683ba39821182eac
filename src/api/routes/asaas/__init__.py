"""Rotas do gateway Asaas."""
