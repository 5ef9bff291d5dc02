import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from infrastructure.config import Settings
from infrastructure.container import Container, build_identidad

from fakes import InMemoryTareaRepository, InMemoryUsuarioRepository


@pytest.fixture()
def settings() -> Settings:
    # bcrypt con coste mínimo para que los tests sean rápidos
    return Settings(jwt_secret="secreto-de-pruebas", bcrypt_rounds=4)


@pytest.fixture()
def container(settings: Settings) -> Container:
    usuarios = InMemoryUsuarioRepository()
    return Container(
        settings=settings,
        tareas=InMemoryTareaRepository(),
        usuarios=usuarios,
        identidad=build_identidad(settings, usuarios),
    )


@pytest.fixture()
def client(container: Container):
    with TestClient(create_app(container)) as c:
        yield c
