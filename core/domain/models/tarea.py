from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import uuid4

from core.domain.models.tiempo import ahora


class EstadoTarea(str, Enum):
    PENDIENTE = "pending"
    EN_PROGRESO = "inProgress"
    COMPLETADA = "completed"


@dataclass(slots=True)
class NuevaTarea:
    titulo: str
    asignada_a: str
    creada_por: str
    descripcion: str = ""


@dataclass(slots=True)
class Tarea:
    id: str
    titulo: str
    asignada_a: str
    creada_por: str
    descripcion: str = ""
    estado: EstadoTarea = EstadoTarea.PENDIENTE
    creada_en: datetime | None = None
    actualizada_en: datetime | None = None
    version: int = 1

    @classmethod
    def desde_nueva(cls, datos: NuevaTarea) -> "Tarea":
        """
        Construye la tarea que se va a persistir a partir de los datos de entrada.

        Asigna un id nuevo, estado PENDIENTE y ambas marcas de tiempo.
        """
        momento = ahora()
        return cls(
            id=str(uuid4()),
            titulo=datos.titulo,
            asignada_a=datos.asignada_a,
            creada_por=datos.creada_por,
            descripcion=datos.descripcion,
            estado=EstadoTarea.PENDIENTE,
            creada_en=momento,
            actualizada_en=momento,
            version=1,
        )
