from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.identidad import ServicioIdentidad
from core.application.listar_tareas import ListarMisTareasUseCase, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.errors import NoAutenticado
from core.domain.models.usuario import Identidad
from infrastructure.container import Container

bearer = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


def servicio_identidad(
    container: Container = Depends(get_container),
) -> ServicioIdentidad:
    return container.identidad


def identidad_actual(
    credenciales: HTTPAuthorizationCredentials | None = Depends(bearer),
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> Identidad:
    if credenciales is None:
        raise NoAutenticado("Unauthorized: Missing token")
    return servicio.verificar(credenciales.credentials)


def crear_tarea_use_case(
    container: Container = Depends(get_container),
) -> CrearTareaUseCase:
    return container.crear_tarea_use_case()


def editar_tarea_use_case(
    container: Container = Depends(get_container),
) -> EditarTareaUseCase:
    return container.editar_tarea_use_case()


def eliminar_tarea_use_case(
    container: Container = Depends(get_container),
) -> EliminarTareaUseCase:
    return container.eliminar_tarea_use_case()


def listar_tareas_use_case(
    container: Container = Depends(get_container),
) -> ListarTareasUseCase:
    return container.listar_tareas_use_case()


def listar_mis_tareas_use_case(
    container: Container = Depends(get_container),
) -> ListarMisTareasUseCase:
    return container.listar_mis_tareas_use_case()


def obtener_tarea_use_case(
    container: Container = Depends(get_container),
) -> ObtenerTareaUseCase:
    return container.obtener_tarea_use_case()
