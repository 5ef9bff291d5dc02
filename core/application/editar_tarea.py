import logging
from dataclasses import dataclass
from typing import Any

from core.domain.errors import (
    AccesoDenegado,
    ConflictoConcurrencia,
    ErrorValidacion,
    NoEncontrado,
)
from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.models.usuario import Identidad
from core.domain.politica import Accion, puede, validar_campos_edicion
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class _NoEnviado:
    def __repr__(self) -> str:
        return "NO_ENVIADO"


# Campo que no venía en la petición. None es un valor enviado (JSON null).
NO_ENVIADO: Any = _NoEnviado()


@dataclass(slots=True)
class EditarTareaCommand:
    """Edición parcial: un campo en NO_ENVIADO no forma parte de la petición."""

    titulo: str | None = NO_ENVIADO
    descripcion: str | None = NO_ENVIADO
    asignada_a: str | None = NO_ENVIADO
    estado: EstadoTarea | None = NO_ENVIADO

    def campos(self) -> dict[str, Any]:
        presentes = {
            "titulo": self.titulo,
            "descripcion": self.descripcion,
            "asignada_a": self.asignada_a,
            "estado": self.estado,
        }
        return {k: v for k, v in presentes.items() if v is not NO_ENVIADO}


class EditarTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(
        self, identidad: Identidad, tarea_id: str, cmd: EditarTareaCommand
    ) -> Tarea:
        campos = cmd.campos()
        self._validar_valores(campos)

        tarea = self._repository.get(tarea_id)
        if tarea is None:
            raise NoEncontrado("Task not found")

        if not puede(identidad, Accion.EDITAR_TAREA, tarea):
            raise AccesoDenegado("Forbidden: Not allowed to update this task")

        validar_campos_edicion(identidad, campos)

        actualizada = self._repository.actualizar(
            tarea_id, campos, version_esperada=tarea.version
        )
        if actualizada is None:
            logger.warning(
                f"Conflicto editando tarea {tarea_id} (versión leída {tarea.version})"
            )
            raise ConflictoConcurrencia(
                "Task was modified or deleted concurrently, reload and retry"
            )
        return actualizada

    @staticmethod
    def _validar_valores(campos: dict[str, Any]) -> None:
        if "titulo" in campos:
            campos["titulo"] = (campos["titulo"] or "").strip()
            if not campos["titulo"]:
                raise ErrorValidacion("Title cannot be empty")
        if "asignada_a" in campos:
            campos["asignada_a"] = (campos["asignada_a"] or "").strip()
            if not campos["asignada_a"]:
                raise ErrorValidacion("assignedTo cannot be empty")
        if "descripcion" in campos and campos["descripcion"] is None:
            campos["descripcion"] = ""
        if "estado" in campos and not isinstance(campos["estado"], EstadoTarea):
            if campos["estado"] is None:
                raise ErrorValidacion("status cannot be null")
            try:
                campos["estado"] = EstadoTarea(campos["estado"])
            except ValueError:
                raise ErrorValidacion("Invalid status")
