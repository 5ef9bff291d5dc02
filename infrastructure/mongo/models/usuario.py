from datetime import datetime

from pydantic import BaseModel, Field

from core.domain.models.usuario import Rol, Usuario


class UsuarioMongo(BaseModel):
    """Documento de la colección `usuarios`. El email se guarda ya normalizado."""

    id: str = Field(alias="_id")
    email: str
    password_hash: str
    nombre: str = ""
    rol: str = Rol.USUARIO.value
    creado_en: datetime
    actualizado_en: datetime

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_domain(self) -> Usuario:
        return Usuario(
            id=self.id,
            email=self.email,
            password_hash=self.password_hash,
            nombre=self.nombre,
            rol=Rol(self.rol),
            creado_en=self.creado_en,
            actualizado_en=self.actualizado_en,
        )

    @classmethod
    def from_domain(cls, usuario: Usuario) -> "UsuarioMongo":
        return cls(
            id=usuario.id,
            email=usuario.email,
            password_hash=usuario.password_hash,
            nombre=usuario.nombre,
            rol=usuario.rol.value,
            creado_en=usuario.creado_en,
            actualizado_en=usuario.actualizado_en,
        )
