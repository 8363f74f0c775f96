"""
Logging del proceso con structlog.

Se configura una sola vez al arrancar (configure_logging) y los loggers se
inyectan a los middlewares desde la raíz de composición. Cada evento se
imprime en una línea:

    2026/10/19 12:00:00 [info] access_log: {method: GET, ip: 127.0.0.1:51234, url: /hello, time: 1.2ms}
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def render_line(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    """Renderiza `evento: {clave: valor, ...}` con timestamp y nivel delante."""
    event = event_dict.pop("event", "")
    timestamp = event_dict.pop("timestamp", None)
    level = event_dict.pop("level", None)
    exception = event_dict.pop("exception", None)

    fields = ", ".join(f"{key}: {value}" for key, value in event_dict.items())
    line = f"{event}: {{{fields}}}"
    if level:
        line = f"[{level}] {line}"
    if timestamp:
        line = f"{timestamp} {line}"
    if exception:
        line = f"{line}\n{exception}"
    return line


def configure_logging(level: str = "INFO") -> None:
    """
    Configura structlog para todo el proceso.
    PrintLogger serializa las escrituras por fichero, así que las líneas de
    peticiones concurrentes no se mezclan.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False),
            structlog.processors.format_exc_info,
            render_line,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
