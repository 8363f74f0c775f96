"""
Middleware de access log: registra método, origen, ruta y duración de cada
petición, haya terminado bien o no.
"""

import time
from typing import Any

from starlette.types import ASGIApp, Receive, Scope, Send

from middleware.context import RequestContext


def format_duration(seconds: float) -> str:
    """Duración legible: 850.000µs, 1.234ms, 2.500s."""
    seconds = max(seconds, 0.0)
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


class AccessLogMiddleware:
    def __init__(self, app: ASGIApp, logger: Any) -> None:
        self.app = app
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send)
        finally:
            # Un fallo aquí no lo captura RecoveryMiddleware: va por dentro de este
            self.logger.info(
                "access_log",
                **RequestContext.from_scope(scope).as_log_fields(),
                time=format_duration(time.perf_counter() - start),
            )
