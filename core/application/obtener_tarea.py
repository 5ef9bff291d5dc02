from core.domain.errors import AccesoDenegado, NoEncontrado
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Identidad
from core.domain.politica import Accion, puede
from core.domain.ports.tarea_repository import TareaRepository


class ObtenerTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, identidad: Identidad, tarea_id: str) -> Tarea:
        tarea = self._repository.get(tarea_id)
        if tarea is None:
            raise NoEncontrado("Task not found")
        if not puede(identidad, Accion.VER_TAREA, tarea):
            raise AccesoDenegado("Forbidden: Not allowed to view this task")
        return tarea
