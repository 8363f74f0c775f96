"""
Middleware de recuperación: evita que un fallo inesperado del handler interno
salga de la pila de la petición.

Cualquier excepción del handler se convierte en una respuesta 500 con el
formato { error } y se registra una línea `panic`. El proceso sigue
atendiendo peticiones.
"""

from typing import Any

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from core.responses import encode, err
from middleware.context import RequestContext


def describe_fault(exc: BaseException) -> str:
    """Texto del fallo; si la excepción no trae mensaje se usa el nombre de la clase."""
    return str(exc) or type(exc).__name__


class RecoveryMiddleware:
    def __init__(self, app: ASGIApp, logger: Any) -> None:
        self.app = app
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            # Si el handler ya empezó a responder no se puede escribir otra respuesta
            if not response_started:
                await self._send_fault(send, describe_fault(exc))
            self.logger.error("panic", **RequestContext.from_scope(scope).as_log_fields())

    async def _send_fault(self, send: Send, message: str) -> None:
        body = encode(err(message))
        # Primero la cabecera con el status, después el cuerpo
        await send(
            {
                "type": "http.response.start",
                "status": 500,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode("latin-1")),
                ],
            }
        )
        await send({"type": "http.response.body", "body": body})
