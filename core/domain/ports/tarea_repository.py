from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from core.domain.models.tarea import NuevaTarea, Tarea


class TareaRepository(ABC):
    """
    Acceso a la entidad tarea sobre el almacén de documentos.

    Toda escritura estampa `actualizada_en`; `crear` además asigna id,
    `creada_en` y estado PENDIENTE. Los listados van ordenados por
    `creada_en` descendente.
    """

    @abstractmethod
    def crear(self, datos: NuevaTarea) -> Tarea:
        raise NotImplementedError

    @abstractmethod
    def get(self, tarea_id: str) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> List[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def list_por_asignado(self, usuario_id: str) -> List[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def actualizar(
        self,
        tarea_id: str,
        campos: Mapping[str, Any],
        version_esperada: int | None = None,
    ) -> Tarea | None:
        """
        Aplica `campos` sobre la tarea y devuelve la versión resultante.

        Si se pasa `version_esperada`, la escritura solo ocurre cuando la
        versión almacenada coincide. Devuelve None cuando no se escribió nada.
        """
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, tarea_id: str) -> bool:
        raise NotImplementedError
