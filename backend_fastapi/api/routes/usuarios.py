from fastapi import APIRouter, Depends

from backend_fastapi.api.deps import identidad_actual, servicio_identidad
from backend_fastapi.api.schemas import UsuarioResponse, UsuariosResponse
from core.application.identidad import ServicioIdentidad
from core.domain.models.usuario import Identidad

router = APIRouter(prefix="/users", tags=["usuarios"])


@router.get("", response_model=UsuariosResponse, summary="Listar usuarios (admin)")
def listar_usuarios(
    identidad: Identidad = Depends(identidad_actual),
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> UsuariosResponse:
    """
    Usuarios ordenados por nombre, para elegir a quién asignar una tarea.
    """
    usuarios = servicio.listar_usuarios(identidad)
    return UsuariosResponse(users=[UsuarioResponse.from_domain(u) for u in usuarios])
