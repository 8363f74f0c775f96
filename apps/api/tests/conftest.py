"""
Fixtures compartidas.
La app se construye por test con create_app(); las rutas de fallo se añaden
sobre esa instancia para no tocar la app del proceso.
"""

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from main import create_app


async def _boom_division() -> None:
    1 / 0


async def _boom_index() -> None:
    [][3]


async def _boom_attribute() -> None:
    None.missing  # type: ignore[attr-defined]


async def _boom_explicit() -> None:
    raise RuntimeError("fallo explícito")


async def _boom_silent() -> None:
    raise KeyError()


FAULT_ROUTES = {
    "/boom/division": _boom_division,
    "/boom/index": _boom_index,
    "/boom/attribute": _boom_attribute,
    "/boom/explicit": _boom_explicit,
    "/boom/silent": _boom_silent,
}


def add_fault_routes(app: FastAPI) -> FastAPI:
    for path, endpoint in FAULT_ROUTES.items():
        app.add_api_route(path, endpoint, methods=["GET"])
    return app


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def app() -> FastAPI:
    return add_fault_routes(create_app())


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
