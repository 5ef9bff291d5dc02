from abc import ABC, abstractmethod

from core.domain.models.usuario import NuevoUsuario, Rol, Usuario


class UsuarioRepository(ABC):
    @abstractmethod
    def crear(self, datos: NuevoUsuario) -> Usuario:
        """
        Inserta el usuario.

        Raises:
            EmailDuplicado: si el almacén ya tiene ese email (índice único).
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, usuario_id: str) -> Usuario | None:
        raise NotImplementedError

    @abstractmethod
    def get_por_email(self, email: str) -> Usuario | None:
        raise NotImplementedError

    @abstractmethod
    def actualizar_rol(self, usuario_id: str, rol: Rol) -> Usuario | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Usuario]:
        raise NotImplementedError
