import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import registrar_handlers
from backend_fastapi.api.routes.auth import router as auth_router
from backend_fastapi.api.routes.tareas import router as tareas_router
from backend_fastapi.api.routes.usuarios import router as usuarios_router
from infrastructure.config import Settings
from infrastructure.container import Container, build_container

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """
    Construye la app. Sin `container`, la configuración se lee del entorno
    (y del .env) una sola vez, al arrancar el lifespan.
    """
    settings = container.settings if container is not None else Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not hasattr(app.state, "container"):
            app.state.container = build_container(settings)
        app.state.container.al_iniciar()
        yield
        app.state.container.al_cerrar()

    app = FastAPI(title="Gestión de Tareas API", lifespan=lifespan)
    if container is not None:
        app.state.container = container

    # Configure CORS for frontend from environment variables
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    registrar_handlers(app)

    api = APIRouter(prefix=settings.api_prefix)

    @api.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    api.include_router(auth_router)
    api.include_router(tareas_router)
    api.include_router(usuarios_router)
    app.include_router(api)
    return app
