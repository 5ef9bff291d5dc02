"""
Esquemas HTTP. Los atributos usan los nombres del dominio y los alias
mantienen el formato JSON que consume el frontend (`title`, `assignedTo`...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.models.usuario import Usuario


class _Esquema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ── Peticiones ────────────────────────────────────────────────────────────────


class SignupRequest(_Esquema):
    email: str
    password: str
    nombre: str | None = Field(default=None, alias="name")


class LoginRequest(_Esquema):
    email: str
    password: str


class RolRequest(_Esquema):
    rol: str = Field(alias="role")


class CrearTareaRequest(_Esquema):
    titulo: str = Field(alias="title")
    descripcion: str | None = Field(default=None, alias="description")
    asignada_a: str = Field(alias="assignedTo")


class EditarTareaRequest(_Esquema):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    titulo: str | None = Field(default=None, alias="title")
    descripcion: str | None = Field(default=None, alias="description")
    asignada_a: str | None = Field(default=None, alias="assignedTo")
    estado: EstadoTarea | None = Field(default=None, alias="status")


# ── Respuestas ────────────────────────────────────────────────────────────────


class UsuarioResponse(_Esquema):
    id: str
    email: str
    nombre: str = Field(default="", alias="name")
    rol: str = Field(alias="role")

    @classmethod
    def from_domain(cls, usuario: Usuario) -> "UsuarioResponse":
        return cls(
            id=usuario.id,
            email=usuario.email,
            nombre=usuario.nombre,
            rol=usuario.rol.value,
        )


class AuthResponse(_Esquema):
    token: str
    user: UsuarioResponse


class UsuarioEnvelope(_Esquema):
    user: UsuarioResponse


class UsuariosResponse(_Esquema):
    users: list[UsuarioResponse]


class TareaResponse(_Esquema):
    id: str
    titulo: str = Field(alias="title")
    descripcion: str = Field(alias="description")
    asignada_a: str = Field(alias="assignedTo")
    estado: EstadoTarea = Field(alias="status")
    creada_por: str = Field(alias="createdBy")
    creada_en: datetime = Field(alias="createdAt")
    actualizada_en: datetime = Field(alias="updatedAt")

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaResponse":
        return cls(
            id=tarea.id,
            titulo=tarea.titulo,
            descripcion=tarea.descripcion,
            asignada_a=tarea.asignada_a,
            estado=tarea.estado,
            creada_por=tarea.creada_por,
            creada_en=tarea.creada_en,
            actualizada_en=tarea.actualizada_en,
        )


class TareasResponse(_Esquema):
    tasks: list[TareaResponse]
