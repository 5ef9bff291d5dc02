from typing import List

from peewee import Database, IntegrityError

from core.domain.errors import EmailDuplicado
from core.domain.models.tiempo import ahora
from core.domain.models.usuario import NuevoUsuario, Rol, Usuario
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.peewee.model.models import UsuarioModel
from infrastructure.peewee.repository.tarea_repository import a_columna, de_columna


def _to_domain(u: UsuarioModel) -> Usuario:
    return Usuario(
        id=u.id,
        email=u.email,
        password_hash=u.password_hash,
        nombre=u.nombre,
        rol=Rol(u.rol),
        creado_en=de_columna(u.creado_en),
        actualizado_en=de_columna(u.actualizado_en),
    )


class PeeweeUsuarioRepository(UsuarioRepository):
    def __init__(self, db: Database) -> None:
        self.db = db

    def crear(self, datos: NuevoUsuario) -> Usuario:
        usuario = Usuario.desde_nuevo(datos)
        try:
            with self.db.atomic():
                UsuarioModel.create(
                    id=usuario.id,
                    email=usuario.email,
                    password_hash=usuario.password_hash,
                    nombre=usuario.nombre,
                    rol=usuario.rol.value,
                    creado_en=a_columna(usuario.creado_en),
                    actualizado_en=a_columna(usuario.actualizado_en),
                )
        except IntegrityError as e:
            raise EmailDuplicado("User already exists") from e
        return usuario

    def get(self, usuario_id: str) -> Usuario | None:
        try:
            return _to_domain(UsuarioModel.get(UsuarioModel.id == usuario_id))
        except UsuarioModel.DoesNotExist:
            return None

    def get_por_email(self, email: str) -> Usuario | None:
        try:
            return _to_domain(UsuarioModel.get(UsuarioModel.email == email))
        except UsuarioModel.DoesNotExist:
            return None

    def actualizar_rol(self, usuario_id: str, rol: Rol) -> Usuario | None:
        with self.db.atomic():
            filas = (
                UsuarioModel.update(rol=rol.value, actualizado_en=a_columna(ahora()))
                .where(UsuarioModel.id == usuario_id)
                .execute()
            )
            if not filas:
                return None
            return self.get(usuario_id)

    def list(self) -> List[Usuario]:
        return [_to_domain(u) for u in UsuarioModel.select().order_by(UsuarioModel.nombre)]
