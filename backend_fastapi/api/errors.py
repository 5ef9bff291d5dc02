import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.domain.errors import (
    AccesoDenegado,
    ConflictoConcurrencia,
    CredencialesInvalidas,
    DominioError,
    EmailDuplicado,
    ErrorValidacion,
    FalloInterno,
    NoAutenticado,
    NoEncontrado,
)

logger = logging.getLogger(__name__)

# Orden relevante: RolInvalido hereda de ErrorValidacion.
STATUS_POR_ERROR: list[tuple[type[DominioError], int]] = [
    (ErrorValidacion, status.HTTP_400_BAD_REQUEST),
    (EmailDuplicado, status.HTTP_400_BAD_REQUEST),
    (CredencialesInvalidas, status.HTTP_400_BAD_REQUEST),
    (NoAutenticado, status.HTTP_401_UNAUTHORIZED),
    (AccesoDenegado, status.HTTP_403_FORBIDDEN),
    (NoEncontrado, status.HTTP_404_NOT_FOUND),
    (ConflictoConcurrencia, status.HTTP_409_CONFLICT),
    (FalloInterno, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

MENSAJE_INTERNO = "Internal server error"


def status_para(error: DominioError) -> int:
    for tipo, codigo in STATUS_POR_ERROR:
        if isinstance(error, tipo):
            return codigo
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def dominio_error_handler(request: Request, exc: DominioError) -> JSONResponse:
    codigo = status_para(exc)
    if codigo >= 500:
        logger.error(f"{request.method} {request.url.path} → {codigo}: {exc.mensaje}")
        return JSONResponse(status_code=codigo, content={"message": MENSAJE_INTERNO})

    if codigo in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        logger.info(f"{request.method} {request.url.path} → {codigo}: {exc.mensaje}")
    return JSONResponse(status_code=codigo, content={"message": exc.mensaje})


async def validacion_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(exc.errors())},
    )


async def error_inesperado_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Error no controlado en {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": MENSAJE_INTERNO},
    )


def registrar_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DominioError, dominio_error_handler)
    app.add_exception_handler(RequestValidationError, validacion_handler)
    app.add_exception_handler(Exception, error_inesperado_handler)
