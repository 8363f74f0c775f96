"""
Estructura de respuesta estándar { data, error }.
Todas las respuestas del servicio se serializan con este sobre para
garantizar coherencia en el formato: `data` en éxito, `error` en fallo.
"""

from pydantic import BaseModel, field_validator


class Envelope(BaseModel):
    data: str | None = None
    error: str | None = None

    # Una cadena vacía equivale a campo ausente
    @field_validator("data", "error", mode="before")
    @classmethod
    def empty_as_none(cls, v: object) -> object:
        return v or None


def ok(data: str) -> Envelope:
    """Respuesta exitosa."""
    return Envelope(data=data)


def err(message: str) -> Envelope:
    """Respuesta de error."""
    return Envelope(error=message)


def encode(envelope: Envelope) -> bytes:
    """
    Serializa el sobre a JSON (UTF-8).
    Los campos ausentes se omiten: nunca se envía "data": null.
    """
    return envelope.model_dump_json(exclude_none=True).encode("utf-8")


def decode(raw: bytes | str) -> Envelope:
    """Parsea un cuerpo JSON de vuelta a Envelope."""
    return Envelope.model_validate_json(raw)
