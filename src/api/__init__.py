"""API: camada de borda do bridge.

Responsabilidades:
- Receber o webhook do GitHub App
- Validar headers, tamanho, assinatura e formato do payload
- Normalizar o alerta para o payload de dispatch
- Construir o corpo do repository_dispatch

Subpastas:
- connectors/: webhook de entrada e cliente da REST API do GitHub
- normalizers/: payload dependabot_alert → AlertDispatch
- payload_builders/: corpo do repository_dispatch
- routes/: endpoints HTTP (webhook, health) e handlers de erro

NÃO PODE conter: orquestração do relay (fica em app/use_cases).
"""
