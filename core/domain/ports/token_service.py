from abc import ABC, abstractmethod

from core.domain.models.usuario import Identidad, Usuario


class TokenService(ABC):
    @abstractmethod
    def emitir(self, usuario: Usuario) -> str:
        raise NotImplementedError

    @abstractmethod
    def verificar(self, token: str) -> Identidad:
        """
        Raises:
            NoAutenticado: firma inválida, token expirado o mal formado.
        """
        raise NotImplementedError
