"""
Política de autorización.

`puede` es una función pura: misma identidad, acción y tarea producen siempre
la misma respuesta, sin I/O. Los chequeos de rol se evalúan antes que los de
propiedad y un admin no necesita ser el asignado.
"""

from enum import Enum
from typing import Any, Mapping

from core.domain.errors import ErrorValidacion
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Identidad, Rol


class Accion(str, Enum):
    CREAR_TAREA = "crear_tarea"
    LISTAR_TAREAS = "listar_tareas"
    LISTAR_MIS_TAREAS = "listar_mis_tareas"
    VER_TAREA = "ver_tarea"
    EDITAR_TAREA = "editar_tarea"
    ELIMINAR_TAREA = "eliminar_tarea"
    LISTAR_USUARIOS = "listar_usuarios"


_SOLO_ADMIN = frozenset(
    {
        Accion.CREAR_TAREA,
        Accion.LISTAR_TAREAS,
        Accion.ELIMINAR_TAREA,
        Accion.LISTAR_USUARIOS,
    }
)
_ADMIN_O_ASIGNADO = frozenset({Accion.VER_TAREA, Accion.EDITAR_TAREA})

_ROLES_VALIDOS = frozenset(rol.value for rol in Rol)

# Lo único que un usuario no admin puede cambiar de su propia tarea.
CAMPOS_EDITABLES_POR_ASIGNADO = frozenset({"estado"})


def puede(
    identidad: Identidad | None, accion: Accion, tarea: Tarea | None = None
) -> bool:
    if identidad is None or identidad.rol not in _ROLES_VALIDOS:
        return False

    if identidad.es_admin:
        return True

    if accion in _SOLO_ADMIN:
        return False
    if accion == Accion.LISTAR_MIS_TAREAS:
        return True
    if accion in _ADMIN_O_ASIGNADO:
        return tarea is not None and tarea.asignada_a == identidad.id
    return False


def validar_campos_edicion(identidad: Identidad, campos: Mapping[str, Any]) -> None:
    """
    Rechaza entera una edición que un no admin no puede aplicar.

    Se llama después de `puede(..., EDITAR_TAREA, ...)`. Un no admin debe
    enviar `estado` y nada más; no se descartan campos en silencio.

    Raises:
        ErrorValidacion: si sobra algún campo o falta el estado.
    """
    if identidad.es_admin:
        return

    if set(campos) - CAMPOS_EDITABLES_POR_ASIGNADO:
        raise ErrorValidacion("Only status can be updated by non-admin users")
    if "estado" not in campos:
        raise ErrorValidacion("status is required")
