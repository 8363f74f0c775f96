"""
Router: /hello
GET          → saludo con la fecha actual (RFC 1123 con zona numérica).
Otro método  → 501 con { error }.

El handler se registra sin lista de métodos (ver main.create_app) para que
cualquier verbo llegue aquí y no al 405 por defecto del router.
"""

from datetime import datetime
from email.utils import format_datetime

from fastapi import Request, Response, status

from core.logging import get_logger
from core.responses import Envelope, encode, err, ok

logger = get_logger(__name__)

HELLO_MSG_TMPL = "Hello, from service. Today is {}"


def current_timestamp() -> str:
    """Hora local en formato RFC 1123 con zona numérica: Mon, 02 Jan 2006 15:04:05 -0700."""
    return format_datetime(datetime.now().astimezone())


def render(envelope: Envelope, status_code: int) -> Response:
    """
    Serializa el sobre y fija el status antes del cuerpo.
    Si la serialización falla se responde 500; si también falla el sobre de
    error, el cuerpo va vacío.
    """
    try:
        body = encode(envelope)
    except ValueError as exc:
        logger.warning("hello.encode_failed", error=str(exc))
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            body = encode(err(str(exc)))
        except ValueError:
            body = b""
    return Response(content=body, status_code=status_code, media_type="application/json")


async def hello(request: Request) -> Response:
    logger.debug("hello_handler", method=request.method)

    if request.method != "GET":
        return render(
            err(f'method "{request.method}" not supported'),
            status.HTTP_501_NOT_IMPLEMENTED,
        )

    return render(ok(HELLO_MSG_TMPL.format(current_timestamp())), status.HTTP_200_OK)
