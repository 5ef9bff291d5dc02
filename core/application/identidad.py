"""
Servicio de identidad: alta, login, verificación de tokens y cambio de rol.

La sesión es un token firmado sin estado en servidor: no hay tabla de
sesiones y un token emitido vale hasta su expiración, incluso si el rol del
usuario cambia después.
"""

import logging
import re
from dataclasses import dataclass

from core.domain.errors import (
    AccesoDenegado,
    CredencialesInvalidas,
    EmailDuplicado,
    ErrorValidacion,
    NoAutenticado,
    NoEncontrado,
    RolInvalido,
)
from core.domain.models.usuario import Identidad, NuevoUsuario, Rol, Usuario
from core.domain.politica import Accion, puede
from core.domain.ports.password_hasher import PasswordHasher
from core.domain.ports.token_service import TokenService
from core.domain.ports.usuario_repository import UsuarioRepository

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PASSWORD_MIN = 6
PASSWORD_MAX_BYTES = 72  # límite de entrada de bcrypt
NOMBRE_MAX = 100


@dataclass(slots=True)
class ResultadoAutenticacion:
    token: str
    usuario: Usuario


def normalizar_email(email: str) -> str:
    return (email or "").strip().lower()


class ServicioIdentidad:
    def __init__(
        self,
        usuarios: UsuarioRepository,
        tokens: TokenService,
        hasher: PasswordHasher,
    ) -> None:
        self._usuarios = usuarios
        self._tokens = tokens
        self._hasher = hasher
        self._hash_ficticio: str | None = None

    def registrar(
        self, email: str, password: str, nombre: str | None = None
    ) -> ResultadoAutenticacion:
        """
        Da de alta un usuario con rol `user` y devuelve su primer token.

        Raises:
            ErrorValidacion: email, password o nombre no válidos.
            EmailDuplicado: ya existe un usuario con ese email.
        """
        email = normalizar_email(email)
        nombre = (nombre or "").strip()
        self._validar_email(email)
        self._validar_password(password)
        if len(nombre) > NOMBRE_MAX:
            raise ErrorValidacion(f"Name must be at most {NOMBRE_MAX} characters")

        if self._usuarios.get_por_email(email) is not None:
            raise EmailDuplicado("User already exists")

        # El índice único del almacén cubre la carrera entre dos altas
        # simultáneas que pasan el chequeo anterior.
        usuario = self._usuarios.crear(
            NuevoUsuario(
                email=email,
                password_hash=self._hasher.hash(password),
                nombre=nombre,
                rol=Rol.USUARIO,
            )
        )
        logger.info(f"Usuario {usuario.id} registrado")
        return ResultadoAutenticacion(token=self._tokens.emitir(usuario), usuario=usuario)

    def autenticar(self, email: str, password: str) -> ResultadoAutenticacion:
        email = normalizar_email(email)
        self._validar_email(email)
        if not password:
            raise ErrorValidacion("Password is required")

        usuario = self._usuarios.get_por_email(email)
        if usuario is None:
            # Mismo coste que un password incorrecto.
            self._hasher.verificar(password, self._obtener_hash_ficticio())
            logger.info("Login fallido: email desconocido")
            raise CredencialesInvalidas("Invalid credentials")

        if not self._hasher.verificar(password, usuario.password_hash or ""):
            logger.info(f"Login fallido para {usuario.id}: password incorrecto")
            raise CredencialesInvalidas("Invalid credentials")

        return ResultadoAutenticacion(token=self._tokens.emitir(usuario), usuario=usuario)

    def verificar(self, token: str | None) -> Identidad:
        if not token:
            raise NoAutenticado("Unauthorized: Missing token")
        return self._tokens.verificar(token)

    def reemitir_con_rol(self, identidad: Identidad, nuevo_rol: str) -> ResultadoAutenticacion:
        """
        Cambia el rol del usuario y devuelve un token que ya lo incluye.

        Los tokens emitidos antes conservan el rol anterior hasta expirar.
        """
        try:
            rol = Rol(nuevo_rol)
        except ValueError:
            raise RolInvalido("Invalid role")

        usuario = self._usuarios.actualizar_rol(identidad.id, rol)
        if usuario is None:
            raise NoEncontrado("User not found")

        logger.info(f"Usuario {usuario.id} pasa a rol {rol.value}")
        return ResultadoAutenticacion(token=self._tokens.emitir(usuario), usuario=usuario)

    def obtener_usuario(self, identidad: Identidad) -> Usuario:
        usuario = self._usuarios.get(identidad.id)
        if usuario is None:
            raise NoEncontrado("User not found")
        return usuario

    def listar_usuarios(self, identidad: Identidad) -> list[Usuario]:
        if not puede(identidad, Accion.LISTAR_USUARIOS):
            raise AccesoDenegado("Forbidden: Insufficient role")
        return self._usuarios.list()

    @staticmethod
    def _validar_email(email: str) -> None:
        if not _EMAIL_RE.match(email):
            raise ErrorValidacion("Valid email is required")

    @staticmethod
    def _validar_password(password: str | None) -> None:
        if not password or len(password) < PASSWORD_MIN:
            raise ErrorValidacion(
                f"Password must be at least {PASSWORD_MIN} characters"
            )
        if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ErrorValidacion(
                f"Password must be at most {PASSWORD_MAX_BYTES} bytes"
            )

    def _obtener_hash_ficticio(self) -> str:
        if self._hash_ficticio is None:
            self._hash_ficticio = self._hasher.hash("password-ficticio")
        return self._hash_ficticio
