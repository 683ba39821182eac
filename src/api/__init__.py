"""API — camada de borda.

Responsabilidades:
- Receber requests HTTP (vendedores, webhook do gateway)
- Autenticar e parsear webhooks
- Construir payloads para a API do gateway
- Cliente HTTP do gateway

Subpastas:
- connectors/: adapters HTTP do gateway (Asaas)
- payload_builders/: construção de payloads para o gateway
- routes/: endpoints HTTP (health, sellers, webhook)

NÃO PODE conter: FSM, regras de split/assinatura, orquestração de use cases.
"""
