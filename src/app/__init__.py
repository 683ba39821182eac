"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (criação de assinatura, webhook do gateway)
- services/: split e validação de assinatura de vendedores
- domain/: modelos e resultados de operação
- infra/: implementações concretas de IO (stores, política de split)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas
- constants/: mensagens ao cliente

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
