"""
Hello Service — punto de entrada y raíz de composición.

Cadena de handlers: access_log(recovery(rutas)). La recuperación queda lo más
cerca posible del handler; el access log la envuelve y registra también las
peticiones que fallaron y fueron recuperadas.

Arrancar con: python -m main
"""

import socket
import sys
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI
from starlette.middleware import Middleware

from core.config import get_settings
from core.logging import configure_logging, get_logger
from middleware import AccessLogMiddleware, RecoveryMiddleware
from routers import hello

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("api.startup", env=settings.APP_ENV, log_level=settings.LOG_LEVEL)
    yield
    logger.info("api.shutdown")


def create_app(request_logger: Any = None) -> FastAPI:
    """
    Construye la aplicación con una única ruta (/hello).
    El logger se inyecta a ambos middlewares; por defecto es el del proceso.
    """
    request_logger = request_logger or get_logger("hello_service.http")

    # ---------------------------------------------------------------------------
    # Middlewares: el primero de la lista es el más externo
    # ---------------------------------------------------------------------------
    middleware = [
        Middleware(AccessLogMiddleware, logger=request_logger),
        Middleware(RecoveryMiddleware, logger=request_logger),
    ]

    app = FastAPI(
        title="Hello Service",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        middleware=middleware,
        lifespan=lifespan,
    )
    # Sin lista de métodos: cualquier verbo llega al handler
    app.add_route("/hello", hello.hello)
    return app


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Abre el socket TCP de escucha.
    Un fallo aquí es fatal: no hay nada por encima del listener que lo recupere.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        logger.critical("server.bind_failed", host=host, port=port, error=str(exc))
        sys.exit(1)
    sock.set_inheritable(True)
    return sock


app = create_app()


def run() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    sock = bind_listener(settings.HOST, settings.PORT)
    config = uvicorn.Config(app, log_level=settings.LOG_LEVEL.lower(), access_log=False)
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    run()
