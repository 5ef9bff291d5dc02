from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Mapping

from peewee import Database

from core.domain.models.tarea import EstadoTarea, NuevaTarea, Tarea
from core.domain.models.tiempo import ahora
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.peewee.model.models import TareaModel

CAMPOS_EDITABLES = frozenset({"titulo", "descripcion", "asignada_a", "estado"})


def a_columna(momento: datetime) -> datetime:
    # Las columnas guardan UTC sin zona (SQLite no conserva el offset).
    return momento.astimezone(timezone.utc).replace(tzinfo=None)


def de_columna(momento: datetime) -> datetime:
    return momento.replace(tzinfo=timezone.utc)


def _to_domain(t: TareaModel) -> Tarea:
    return Tarea(
        id=t.id,
        titulo=t.titulo,
        descripcion=t.descripcion,
        asignada_a=t.asignada_a,
        creada_por=t.creada_por,
        estado=EstadoTarea(t.estado),
        creada_en=de_columna(t.creada_en),
        actualizada_en=de_columna(t.actualizada_en),
        version=t.version,
    )


class PeeweeTareaRepository(TareaRepository):
    def __init__(self, db: Database) -> None:
        self.db = db

    def crear(self, datos: NuevaTarea) -> Tarea:
        tarea = Tarea.desde_nueva(datos)
        with self.db.atomic():
            TareaModel.create(
                id=tarea.id,
                titulo=tarea.titulo,
                descripcion=tarea.descripcion,
                asignada_a=tarea.asignada_a,
                creada_por=tarea.creada_por,
                estado=tarea.estado.value,
                creada_en=a_columna(tarea.creada_en),
                actualizada_en=a_columna(tarea.actualizada_en),
                version=tarea.version,
            )
        return tarea

    def get(self, tarea_id: str) -> Tarea | None:
        try:
            return _to_domain(TareaModel.get(TareaModel.id == tarea_id))
        except TareaModel.DoesNotExist:
            return None

    def list(self) -> List[Tarea]:
        query = TareaModel.select().order_by(TareaModel.creada_en.desc())
        return [_to_domain(t) for t in query]

    def list_por_asignado(self, usuario_id: str) -> List[Tarea]:
        query = (
            TareaModel.select()
            .where(TareaModel.asignada_a == usuario_id)
            .order_by(TareaModel.creada_en.desc())
        )
        return [_to_domain(t) for t in query]

    def actualizar(
        self,
        tarea_id: str,
        campos: Mapping[str, Any],
        version_esperada: int | None = None,
    ) -> Tarea | None:
        desconocidos = set(campos) - CAMPOS_EDITABLES
        if desconocidos:
            raise ValueError(f"Campos no editables: {sorted(desconocidos)}")

        cambios: dict[str, Any] = {
            k: v.value if isinstance(v, Enum) else v for k, v in campos.items()
        }
        cambios["actualizada_en"] = a_columna(ahora())
        cambios["version"] = TareaModel.version + 1

        condicion = TareaModel.id == tarea_id
        if version_esperada is not None:
            condicion &= TareaModel.version == version_esperada

        with self.db.atomic():
            filas = TareaModel.update(**cambios).where(condicion).execute()
            if not filas:
                return None
            return self.get(tarea_id)

    def eliminar(self, tarea_id: str) -> bool:
        query = TareaModel.delete().where(TareaModel.id == tarea_id)
        return query.execute() > 0
