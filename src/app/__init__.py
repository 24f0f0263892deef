"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: relay dependabot_alert → repository_dispatch
- infra/: implementações concretas de IO (crypto, http)
- protocols/: contratos/interfaces e modelos do pipeline
- observability/: contexto de entrega e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
