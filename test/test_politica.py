"""
Tests de la política de autorización (función pura, sin repositorios).
"""

from dataclasses import replace

import pytest

from core.domain.errors import ErrorValidacion
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Identidad
from core.domain.politica import Accion, puede, validar_campos_edicion

ADMIN = Identidad(id="A1", email="admin@example.com", rol="admin")
U1 = Identidad(id="U1", email="u1@example.com", rol="user")
U2 = Identidad(id="U2", email="u2@example.com", rol="user")
DESCONOCIDO = Identidad(id="U1", email="u1@example.com", rol="superuser")


@pytest.fixture
def tarea_de_u1():
    return Tarea(id="T1", titulo="Ship report", asignada_a="U1", creada_por="A1")


# ── Acciones solo admin ───────────────────────────────────────────────────────


@pytest.mark.parametrize("accion", list(Accion))
def test_admin_puede_todo(accion, tarea_de_u1):
    assert puede(ADMIN, accion, tarea_de_u1) is True


@pytest.mark.parametrize(
    "accion",
    [
        Accion.CREAR_TAREA,
        Accion.LISTAR_TAREAS,
        Accion.ELIMINAR_TAREA,
        Accion.LISTAR_USUARIOS,
    ],
)
def test_usuario_no_puede_acciones_de_admin(accion, tarea_de_u1):
    assert puede(U1, accion, tarea_de_u1) is False


def test_listar_mis_tareas_siempre_permitido():
    assert puede(U1, Accion.LISTAR_MIS_TAREAS) is True
    assert puede(U2, Accion.LISTAR_MIS_TAREAS) is True


# ── Propiedad ─────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("accion", [Accion.VER_TAREA, Accion.EDITAR_TAREA])
@pytest.mark.parametrize(
    "identidad, esperado",
    [(U1, True), (U2, False), (ADMIN, True)],
    ids=["asignado", "otro-usuario", "admin"],
)
def test_ver_y_editar_segun_asignado(accion, identidad, esperado, tarea_de_u1):
    assert puede(identidad, accion, tarea_de_u1) is esperado


def test_sin_tarea_un_usuario_no_puede_verla():
    assert puede(U1, Accion.VER_TAREA, None) is False


# ── Denegación por defecto ────────────────────────────────────────────────────


@pytest.mark.parametrize("accion", list(Accion))
def test_sin_identidad_todo_denegado(accion, tarea_de_u1):
    assert puede(None, accion, tarea_de_u1) is False


@pytest.mark.parametrize("accion", list(Accion))
def test_rol_desconocido_todo_denegado(accion, tarea_de_u1):
    assert puede(DESCONOCIDO, accion, tarea_de_u1) is False


def test_es_determinista_y_no_modifica_la_tarea(tarea_de_u1):
    copia = replace(tarea_de_u1)

    resultados = {puede(U1, Accion.EDITAR_TAREA, tarea_de_u1) for _ in range(5)}

    assert resultados == {True}
    assert tarea_de_u1 == copia


# ── Campos editables ──────────────────────────────────────────────────────────


def test_asignado_puede_enviar_solo_estado():
    validar_campos_edicion(U1, {"estado": "completed"})


@pytest.mark.parametrize(
    "campos",
    [
        {"estado": "completed", "titulo": "x"},
        {"titulo": "Hack"},
        {"descripcion": "otra"},
        {"asignada_a": "U2"},
    ],
)
def test_asignado_con_otros_campos_rechazado(campos):
    with pytest.raises(ErrorValidacion, match="Only status"):
        validar_campos_edicion(U1, campos)


def test_asignado_sin_estado_rechazado():
    with pytest.raises(ErrorValidacion, match="status is required"):
        validar_campos_edicion(U1, {})


@pytest.mark.parametrize(
    "campos",
    [{}, {"titulo": "Nuevo"}, {"estado": "pending", "asignada_a": "U2"}],
)
def test_admin_puede_enviar_cualquier_campo(campos):
    validar_campos_edicion(ADMIN, campos)
