import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Configuración del proceso. Se construye una vez al arrancar y se
    inyecta en el contenedor; nada más lee variables de entorno.
    """

    jwt_secret: str
    orm: str = "mongo"
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "gestion_tareas"
    database_url: str = "sqlite:///tareas.db"
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = 7
    bcrypt_rounds: int = 10
    api_prefix: str = "/api"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables from .env file
        load_dotenv()

        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            raise RuntimeError("JWT_SECRET is not set")

        orm = os.getenv("ORM", "mongo").lower()
        if orm not in {"mongo", "peewee"}:
            raise RuntimeError(f"ORM no soportado: {orm!r} (usar 'mongo' o 'peewee')")

        return cls(
            jwt_secret=jwt_secret,
            orm=orm,
            mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
            mongo_db_name=os.getenv("MONGO_DB_NAME", "gestion_tareas"),
            database_url=os.getenv("DATABASE_URL", "sqlite:///tareas.db"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            token_ttl_days=int(os.getenv("TOKEN_TTL_DAYS", "7")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
            api_prefix=os.getenv("API_PREFIX", "/api").rstrip("/"),
            cors_origins=_as_list(os.getenv("CORS_ORIGINS", "*")),
            cors_allow_credentials=_as_bool(os.getenv("CORS_ALLOW_CREDENTIALS", "true")),
            cors_allow_methods=_as_list(os.getenv("CORS_ALLOW_METHODS", "*")),
            cors_allow_headers=_as_list(os.getenv("CORS_ALLOW_HEADERS", "*")),
            log_level=os.getenv("LOG_LEVEL", "info"),
        )
