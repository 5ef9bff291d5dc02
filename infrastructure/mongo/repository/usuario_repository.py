import logging
from typing import Any

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from core.domain.errors import EmailDuplicado
from core.domain.models.tiempo import ahora
from core.domain.models.usuario import NuevoUsuario, Rol, Usuario
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.mongo.models.usuario import UsuarioMongo

logger = logging.getLogger(__name__)


class MongoUsuarioRepository(UsuarioRepository):
    """
    Usuarios en MongoDB. La unicidad del email la garantiza un índice único;
    `asegurar_indices` debe ejecutarse al arrancar.
    """

    def __init__(self, db: Database[Any]) -> None:
        self.db = db
        self.collection: Collection[Any] = self.db.usuarios

    def asegurar_indices(self) -> None:
        self.collection.create_index([("email", ASCENDING)], unique=True)
        self.collection.create_index([("nombre", ASCENDING)])

    def crear(self, datos: NuevoUsuario) -> Usuario:
        usuario = Usuario.desde_nuevo(datos)
        try:
            self.collection.insert_one(
                UsuarioMongo.from_domain(usuario).model_dump(by_alias=True)
            )
        except DuplicateKeyError as e:
            logger.info("Alta concurrente con email repetido rechazada por el índice")
            raise EmailDuplicado("User already exists") from e
        return usuario

    def get(self, usuario_id: str) -> Usuario | None:
        doc = self.collection.find_one({"_id": usuario_id})
        return UsuarioMongo(**doc).to_domain() if doc else None

    def get_por_email(self, email: str) -> Usuario | None:
        doc = self.collection.find_one({"email": email})
        return UsuarioMongo(**doc).to_domain() if doc else None

    def actualizar_rol(self, usuario_id: str, rol: Rol) -> Usuario | None:
        doc = self.collection.find_one_and_update(
            {"_id": usuario_id},
            {"$set": {"rol": rol.value, "actualizado_en": ahora()}},
            return_document=ReturnDocument.AFTER,
        )
        return UsuarioMongo(**doc).to_domain() if doc else None

    def list(self) -> list[Usuario]:
        docs = self.collection.find().sort("nombre", ASCENDING)
        return [UsuarioMongo(**doc).to_domain() for doc in docs]
