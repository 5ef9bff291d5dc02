import logging
from datetime import datetime, timedelta
from typing import Callable

from jose import JWTError, jwt

from core.domain.errors import FalloInterno, NoAutenticado
from core.domain.models.tiempo import ahora
from core.domain.models.usuario import Identidad, Usuario
from core.domain.ports.token_service import TokenService

logger = logging.getLogger(__name__)


class JwtTokenService(TokenService):
    """
    Tokens de sesión firmados con clave simétrica (HS256 por defecto).

    Claims: `sub` (id de usuario), `email`, `role`, `iat`, `exp`.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=7),
        reloj: Callable[[], datetime] = ahora,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret vacío")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._reloj = reloj

    def emitir(self, usuario: Usuario) -> str:
        emitido = self._reloj()
        claims = {
            "sub": usuario.id,
            "email": usuario.email,
            "role": usuario.rol.value,
            "iat": int(emitido.timestamp()),
            "exp": int((emitido + self._ttl).timestamp()),
        }
        try:
            return jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except JWTError as e:
            logger.exception("No se pudo firmar el token")
            raise FalloInterno("Could not sign token") from e

    def verificar(self, token: str) -> Identidad:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.info(f"JWT verification failed: {e}")
            raise NoAutenticado("Unauthorized: Invalid token") from e

        email = claims.get("email")
        rol = claims.get("role")
        if not isinstance(email, str) or not isinstance(rol, str):
            raise NoAutenticado("Unauthorized: Invalid token")
        return Identidad(id=claims["sub"], email=email, rol=rol)
