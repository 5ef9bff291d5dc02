import bcrypt

from core.domain.ports.password_hasher import PasswordHasher

_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Hash bcrypt con sal por password; `rounds` es el factor de coste (log2)."""

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds)
        ).decode("ascii")

    def verificar(self, password: str, password_hash: str) -> bool:
        secreto = password.encode("utf-8")
        if not password_hash or len(secreto) > _MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(secreto, password_hash.encode("ascii"))
        except ValueError:
            # Hash almacenado con formato inválido.
            return False
