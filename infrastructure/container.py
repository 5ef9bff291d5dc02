import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable

from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.identidad import ServicioIdentidad
from core.application.listar_tareas import ListarMisTareasUseCase, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.config import Settings
from infrastructure.security.bcrypt_hasher import BcryptPasswordHasher
from infrastructure.security.jwt_tokens import JwtTokenService

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """
    Dependencias del proceso, construidas una sola vez al arrancar.

    `al_iniciar` y `al_cerrar` los ejecuta el lifespan de la app.
    """

    settings: Settings
    tareas: TareaRepository
    usuarios: UsuarioRepository
    identidad: ServicioIdentidad
    al_iniciar: Callable[[], None] = lambda: None
    al_cerrar: Callable[[], None] = lambda: None

    def crear_tarea_use_case(self) -> CrearTareaUseCase:
        return CrearTareaUseCase(repository=self.tareas)

    def editar_tarea_use_case(self) -> EditarTareaUseCase:
        return EditarTareaUseCase(repository=self.tareas)

    def eliminar_tarea_use_case(self) -> EliminarTareaUseCase:
        return EliminarTareaUseCase(repository=self.tareas)

    def listar_tareas_use_case(self) -> ListarTareasUseCase:
        return ListarTareasUseCase(repository=self.tareas)

    def listar_mis_tareas_use_case(self) -> ListarMisTareasUseCase:
        return ListarMisTareasUseCase(repository=self.tareas)

    def obtener_tarea_use_case(self) -> ObtenerTareaUseCase:
        return ObtenerTareaUseCase(repository=self.tareas)


def build_identidad(settings: Settings, usuarios: UsuarioRepository) -> ServicioIdentidad:
    return ServicioIdentidad(
        usuarios=usuarios,
        tokens=JwtTokenService(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(days=settings.token_ttl_days),
        ),
        hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
    )


def _build_mongo(settings: Settings) -> Container:
    from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository
    from infrastructure.mongo.repository.usuario_repository import (
        MongoUsuarioRepository,
    )
    from infrastructure.mongo.session.client import crear_cliente, get_db

    client = crear_cliente(settings.mongo_uri)
    db = get_db(client, settings.mongo_db_name)
    tareas = MongoTareaRepository(db)
    usuarios = MongoUsuarioRepository(db)

    def al_iniciar() -> None:
        usuarios.asegurar_indices()
        tareas.asegurar_indices()
        logger.info(f"MongoDB listo ({settings.mongo_db_name})")

    return Container(
        settings=settings,
        tareas=tareas,
        usuarios=usuarios,
        identidad=build_identidad(settings, usuarios),
        al_iniciar=al_iniciar,
        al_cerrar=client.close,
    )


def _build_peewee(settings: Settings) -> Container:
    from infrastructure.peewee.repository.tarea_repository import (
        PeeweeTareaRepository,
    )
    from infrastructure.peewee.repository.usuario_repository import (
        PeeweeUsuarioRepository,
    )
    from infrastructure.peewee.session.db import init_db

    database = init_db(settings.database_url)
    usuarios = PeeweeUsuarioRepository(database)
    logger.info(f"Peewee listo ({settings.database_url.split('://')[0]})")

    return Container(
        settings=settings,
        tareas=PeeweeTareaRepository(database),
        usuarios=usuarios,
        identidad=build_identidad(settings, usuarios),
        al_cerrar=database.close,
    )


def build_container(settings: Settings) -> Container:
    if settings.orm == "peewee":
        return _build_peewee(settings)
    return _build_mongo(settings)
