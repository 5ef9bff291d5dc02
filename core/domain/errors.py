"""
Errores de dominio.

Cada error es terminal para la petición en curso; la capa HTTP los traduce
1:1 a un código de estado (ver backend_fastapi/api/errors.py).
"""


class DominioError(Exception):
    """Base de todos los errores que el núcleo lanza de forma controlada."""

    def __init__(self, mensaje: str) -> None:
        super().__init__(mensaje)
        self.mensaje = mensaje


class ErrorValidacion(DominioError):
    """Entrada mal formada o incompleta."""


class RolInvalido(ErrorValidacion):
    """El rol pedido no es `admin` ni `user`."""


class EmailDuplicado(DominioError):
    """Ya existe un usuario con ese email (normalizado)."""


class CredencialesInvalidas(DominioError):
    """Email desconocido o password incorrecto; mismo error para ambos casos."""


class NoAutenticado(DominioError):
    """Token ausente, mal formado, con firma inválida o expirado."""


class AccesoDenegado(DominioError):
    """Identidad autenticada pero la política no permite la acción."""


class NoEncontrado(DominioError):
    pass


class ConflictoConcurrencia(DominioError):
    """La entidad cambió (o desapareció) entre la lectura y la escritura."""


class FalloInterno(DominioError):
    pass
