from core.domain.errors import AccesoDenegado
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Identidad
from core.domain.politica import Accion, puede
from core.domain.ports.tarea_repository import TareaRepository


class ListarTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, identidad: Identidad) -> list[Tarea]:
        if not puede(identidad, Accion.LISTAR_TAREAS):
            raise AccesoDenegado("Forbidden: Insufficient role")
        return self._repository.list()


class ListarMisTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, identidad: Identidad) -> list[Tarea]:
        if not puede(identidad, Accion.LISTAR_MIS_TAREAS):
            raise AccesoDenegado("Forbidden: Missing role")
        return self._repository.list_por_asignado(identidad.id)
