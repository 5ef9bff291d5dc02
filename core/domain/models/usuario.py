from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import uuid4

from core.domain.models.tiempo import ahora


class Rol(str, Enum):
    ADMIN = "admin"
    USUARIO = "user"


@dataclass(slots=True)
class NuevoUsuario:
    email: str
    password_hash: str
    nombre: str = ""
    rol: Rol = Rol.USUARIO


@dataclass(slots=True)
class Usuario:
    id: str
    email: str
    password_hash: str
    nombre: str = ""
    rol: Rol = Rol.USUARIO
    creado_en: datetime | None = None
    actualizado_en: datetime | None = None

    @classmethod
    def desde_nuevo(cls, datos: NuevoUsuario) -> "Usuario":
        momento = ahora()
        return cls(
            id=str(uuid4()),
            email=datos.email,
            password_hash=datos.password_hash,
            nombre=datos.nombre,
            rol=datos.rol,
            creado_en=momento,
            actualizado_en=momento,
        )


@dataclass(frozen=True, slots=True)
class Identidad:
    """
    Quién hace la llamada, tal como lo describe un token verificado.

    `rol` se guarda como texto: un token puede traer un rol desconocido y
    la política debe poder denegarlo.
    """

    id: str
    email: str
    rol: str

    @property
    def es_admin(self) -> bool:
        return self.rol == Rol.ADMIN.value

    @classmethod
    def de_usuario(cls, usuario: Usuario) -> "Identidad":
        return cls(id=usuario.id, email=usuario.email, rol=usuario.rol.value)
