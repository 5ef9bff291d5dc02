import logging
from enum import Enum
from typing import Any, List, Mapping

from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from core.domain.models.tarea import NuevaTarea, Tarea
from core.domain.models.tiempo import ahora
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.models.tarea import TareaMongo

logger = logging.getLogger(__name__)

CAMPOS_EDITABLES = frozenset({"titulo", "descripcion", "asignada_a", "estado"})


class MongoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository usando MongoDB (Synchronous).

    Cada operación toca un solo documento; las ediciones son escrituras
    condicionales sobre el campo `version`.
    """

    def __init__(self, db: Database[Any]) -> None:
        self.db = db
        self.collection: Collection[Any] = self.db.tareas

    def asegurar_indices(self) -> None:
        self.collection.create_index([("asignada_a", 1), ("creada_en", DESCENDING)])
        self.collection.create_index([("creada_en", DESCENDING)])

    def crear(self, datos: NuevaTarea) -> Tarea:
        """
        Inserta una tarea nueva.

        Argumentos:
            datos (NuevaTarea): Título, descripción, asignado y autor.

        Retorna:
            Tarea: La tarea con id, estado y marcas de tiempo asignados.
        """
        tarea = Tarea.desde_nueva(datos)
        self.collection.insert_one(TareaMongo.from_domain(tarea).model_dump(by_alias=True))
        return tarea

    def get(self, tarea_id: str) -> Tarea | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Tarea | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": tarea_id})
        if not doc:
            return None

        return TareaMongo(**doc).to_domain()

    def list(self) -> List[Tarea]:
        docs = self.collection.find().sort("creada_en", DESCENDING)
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def list_por_asignado(self, usuario_id: str) -> List[Tarea]:
        docs = self.collection.find({"asignada_a": usuario_id}).sort(
            "creada_en", DESCENDING
        )
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def actualizar(
        self,
        tarea_id: str,
        campos: Mapping[str, Any],
        version_esperada: int | None = None,
    ) -> Tarea | None:
        desconocidos = set(campos) - CAMPOS_EDITABLES
        if desconocidos:
            raise ValueError(f"Campos no editables: {sorted(desconocidos)}")

        cambios = {
            k: v.value if isinstance(v, Enum) else v for k, v in campos.items()
        }
        cambios["actualizada_en"] = ahora()

        filtro: dict[str, Any] = {"_id": tarea_id}
        if version_esperada is not None:
            filtro["version"] = version_esperada

        doc = self.collection.find_one_and_update(
            filtro,
            {"$set": cambios, "$inc": {"version": 1}},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            logger.debug(f"Sin escritura para tarea {tarea_id} (filtro {filtro})")
            return None
        return TareaMongo(**doc).to_domain()

    def eliminar(self, tarea_id: str) -> bool:
        """
        Elimina una tarea por su ID.

        Retorna:
            bool: True si había un documento que borrar.
        """
        resultado = self.collection.delete_one({"_id": tarea_id})
        return resultado.deleted_count > 0
