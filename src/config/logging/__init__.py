"""Configuração de logging estruturado (JSON).

Uso:
    from config.logging import configure_logging, get_logger

Campos obrigatórios em todo log:
- delivery_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import DeliveryContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "DeliveryContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
