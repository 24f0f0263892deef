"""Formatters de logging estruturado.

Define o formatter JSON com os campos obrigatórios de cada linha:
- asctime
- level
- logger (name)
- message
- delivery_id
- service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa dos campos no output
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "delivery_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "INFO",
            "logger": "app.use_cases.github.relay_dependabot_alert",
            "message": "dispatch_sent",
            "delivery_id": "72d3162e-cc78-11e3-81ab-4c9367dc0958",
            "service": "dependabot-alert-bridge"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
