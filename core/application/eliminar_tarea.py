import logging
from dataclasses import dataclass

from core.domain.errors import AccesoDenegado, NoEncontrado
from core.domain.models.usuario import Identidad
from core.domain.politica import Accion, puede
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EliminarTareaCommand:
    id: str


class EliminarTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, identidad: Identidad, cmd: EliminarTareaCommand) -> None:
        if not puede(identidad, Accion.ELIMINAR_TAREA):
            raise AccesoDenegado("Forbidden: Insufficient role")

        tarea = self._repository.get(cmd.id)
        if tarea is None:
            raise NoEncontrado("Task not found")
        if not self._repository.eliminar(cmd.id):
            # Borrada por otra petición entre la lectura y el delete.
            raise NoEncontrado("Task not found")
        logger.info(f"Tarea {cmd.id} eliminada por {identidad.id}")
