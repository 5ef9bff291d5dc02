import logging
from dataclasses import dataclass

from core.domain.errors import AccesoDenegado, ErrorValidacion
from core.domain.models.tarea import NuevaTarea, Tarea
from core.domain.models.usuario import Identidad
from core.domain.politica import Accion, puede
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearTareaCommand:
    titulo: str
    asignada_a: str
    descripcion: str | None = None


class CrearTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, identidad: Identidad, cmd: CrearTareaCommand) -> Tarea:
        if not puede(identidad, Accion.CREAR_TAREA):
            raise AccesoDenegado("Forbidden: Insufficient role")

        titulo = (cmd.titulo or "").strip()
        if not titulo:
            raise ErrorValidacion("Title is required")
        asignada_a = (cmd.asignada_a or "").strip()
        if not asignada_a:
            raise ErrorValidacion("assignedTo is required")

        tarea = self._repository.crear(
            NuevaTarea(
                titulo=titulo,
                asignada_a=asignada_a,
                creada_por=identidad.id,
                descripcion=cmd.descripcion or "",
            )
        )
        logger.info(f"Tarea {tarea.id} creada por {identidad.id} para {asignada_a}")
        return tarea
