from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    crear_tarea_use_case,
    editar_tarea_use_case,
    eliminar_tarea_use_case,
    identidad_actual,
    listar_mis_tareas_use_case,
    listar_tareas_use_case,
    obtener_tarea_use_case,
)
from backend_fastapi.api.schemas import (
    CrearTareaRequest,
    EditarTareaRequest,
    TareaResponse,
    TareasResponse,
)
from core.application.crear_tarea import CrearTareaCommand, CrearTareaUseCase
from core.application.editar_tarea import EditarTareaCommand, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaCommand, EliminarTareaUseCase
from core.application.listar_tareas import ListarMisTareasUseCase, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.models.usuario import Identidad

router = APIRouter(prefix="/tasks", tags=["tareas"])


@router.post(
    "",
    response_model=TareaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def crear_tarea(
    body: CrearTareaRequest,
    identidad: Identidad = Depends(identidad_actual),
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
) -> TareaResponse:
    """
    Crea una nueva tarea (solo admin). El estado inicial es `pending`.

    - **title**: Título de la tarea.
    - **description**: Descripción opcional.
    - **assignedTo**: Id del usuario responsable.
    """
    tarea = use_case.execute(
        identidad,
        CrearTareaCommand(
            titulo=body.titulo,
            asignada_a=body.asignada_a,
            descripcion=body.descripcion,
        ),
    )
    return TareaResponse.from_domain(tarea)


@router.get(
    "",
    response_model=TareasResponse,
    summary="Listar todas las tareas",
)
def listar_tareas(
    identidad: Identidad = Depends(identidad_actual),
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> TareasResponse:
    """
    Obtiene todas las tareas, las más recientes primero (solo admin).
    """
    tareas = use_case.execute(identidad)
    return TareasResponse(tasks=[TareaResponse.from_domain(t) for t in tareas])


@router.get(
    "/my-tasks",
    response_model=TareasResponse,
    summary="Listar las tareas asignadas al usuario actual",
)
def listar_mis_tareas(
    identidad: Identidad = Depends(identidad_actual),
    use_case: ListarMisTareasUseCase = Depends(listar_mis_tareas_use_case),
) -> TareasResponse:
    tareas = use_case.execute(identidad)
    return TareasResponse(tasks=[TareaResponse.from_domain(t) for t in tareas])


@router.get(
    "/{tarea_id}",
    response_model=TareaResponse,
    summary="Obtener una tarea",
)
def obtener_tarea(
    tarea_id: str,
    identidad: Identidad = Depends(identidad_actual),
    use_case: ObtenerTareaUseCase = Depends(obtener_tarea_use_case),
) -> TareaResponse:
    """
    Devuelve la tarea si el usuario es admin o su asignado.
    """
    return TareaResponse.from_domain(use_case.execute(identidad, tarea_id))


@router.put(
    "/{tarea_id}",
    response_model=TareaResponse,
    summary="Editar una tarea existente",
)
def editar_tarea(
    tarea_id: str,
    body: EditarTareaRequest,
    identidad: Identidad = Depends(identidad_actual),
    use_case: EditarTareaUseCase = Depends(editar_tarea_use_case),
) -> TareaResponse:
    """
    Modifica los datos de una tarea existente.

    Un admin puede cambiar cualquier campo. El asignado solo puede enviar
    **status**; cualquier otro campo hace fallar la petición completa.
    """
    # Solo lo que venía en el JSON; un null explícito cuenta como enviado.
    cmd = EditarTareaCommand(**body.model_dump(exclude_unset=True))
    return TareaResponse.from_domain(use_case.execute(identidad, tarea_id, cmd))


@router.delete(
    "/{tarea_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar una tarea",
)
def eliminar_tarea(
    tarea_id: str,
    identidad: Identidad = Depends(identidad_actual),
    use_case: EliminarTareaUseCase = Depends(eliminar_tarea_use_case),
) -> None:
    """
    Elimina una tarea del sistema (solo admin).

    - **tarea_id**: id de la tarea a eliminar.
    """
    use_case.execute(identidad, EliminarTareaCommand(id=tarea_id))
