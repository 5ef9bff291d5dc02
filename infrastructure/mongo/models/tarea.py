from datetime import datetime

from pydantic import BaseModel, Field

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la base de datos.
    """

    id: str = Field(alias="_id")
    titulo: str
    descripcion: str = ""
    asignada_a: str
    creada_por: str
    estado: str
    creada_en: datetime
    actualizada_en: datetime
    version: int = 1

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_domain(self) -> Tarea:
        """
        Convierte el modelo de MongoDB al modelo de dominio.

        Retorna:
            Tarea: La entidad de dominio.
        """
        return Tarea(
            id=self.id,
            titulo=self.titulo,
            descripcion=self.descripcion,
            asignada_a=self.asignada_a,
            creada_por=self.creada_por,
            estado=EstadoTarea(self.estado),
            creada_en=self.creada_en,
            actualizada_en=self.actualizada_en,
            version=self.version,
        )

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaMongo":
        """
        Crea una instancia de TareaMongo a partir de una entidad de dominio.

        Argumentos:
            tarea (Tarea): La entidad de dominio.

        Retorna:
            TareaMongo: El modelo de MongoDB.
        """
        return cls(
            id=tarea.id,
            titulo=tarea.titulo,
            descripcion=tarea.descripcion,
            asignada_a=tarea.asignada_a,
            creada_por=tarea.creada_por,
            estado=tarea.estado.value,
            creada_en=tarea.creada_en,
            actualizada_en=tarea.actualizada_en,
            version=tarea.version,
        )
