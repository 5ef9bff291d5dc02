from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import identidad_actual, servicio_identidad
from backend_fastapi.api.schemas import (
    AuthResponse,
    LoginRequest,
    RolRequest,
    SignupRequest,
    UsuarioEnvelope,
    UsuarioResponse,
    UsuariosResponse,
)
from core.application.identidad import ResultadoAutenticacion, ServicioIdentidad
from core.domain.models.usuario import Identidad

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(resultado: ResultadoAutenticacion) -> AuthResponse:
    return AuthResponse(
        token=resultado.token,
        user=UsuarioResponse.from_domain(resultado.usuario),
    )


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar un usuario",
)
def signup(
    body: SignupRequest,
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> AuthResponse:
    """
    Crea un usuario con rol `user` y devuelve su token.
    """
    return _auth_response(servicio.registrar(body.email, body.password, body.nombre))


@router.post("/login", response_model=AuthResponse, summary="Iniciar sesión")
def login(
    body: LoginRequest,
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> AuthResponse:
    return _auth_response(servicio.autenticar(body.email, body.password))


@router.get("/me", response_model=UsuarioEnvelope, summary="Usuario actual")
def me(
    identidad: Identidad = Depends(identidad_actual),
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> UsuarioEnvelope:
    usuario = servicio.obtener_usuario(identidad)
    return UsuarioEnvelope(user=UsuarioResponse.from_domain(usuario))


@router.put("/role", response_model=AuthResponse, summary="Cambiar de rol")
def cambiar_rol(
    body: RolRequest,
    identidad: Identidad = Depends(identidad_actual),
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> AuthResponse:
    """
    Cambia el rol del usuario actual y devuelve un token nuevo con ese rol.
    Los tokens anteriores mantienen el rol viejo hasta que expiren.
    """
    return _auth_response(servicio.reemitir_con_rol(identidad, body.rol))


@router.get("/users", response_model=UsuariosResponse, summary="Listar usuarios")
def listar_usuarios(
    identidad: Identidad = Depends(identidad_actual),
    servicio: ServicioIdentidad = Depends(servicio_identidad),
) -> UsuariosResponse:
    usuarios = servicio.listar_usuarios(identidad)
    return UsuariosResponse(users=[UsuarioResponse.from_domain(u) for u in usuarios])
