"""
Tests del servicio de identidad con bcrypt y JWT reales y usuarios en memoria.
"""

from unittest.mock import Mock

import pytest

from core.application.identidad import ServicioIdentidad
from core.domain.errors import (
    AccesoDenegado,
    CredencialesInvalidas,
    EmailDuplicado,
    ErrorValidacion,
    NoAutenticado,
    NoEncontrado,
    RolInvalido,
)
from core.domain.models.usuario import Identidad, Rol
from infrastructure.security.bcrypt_hasher import BcryptPasswordHasher
from infrastructure.security.jwt_tokens import JwtTokenService

from fakes import InMemoryUsuarioRepository


@pytest.fixture
def usuarios():
    return InMemoryUsuarioRepository()


@pytest.fixture
def servicio(usuarios):
    return ServicioIdentidad(
        usuarios=usuarios,
        tokens=JwtTokenService(secret="secreto-de-pruebas"),
        hasher=BcryptPasswordHasher(rounds=4),
    )


# ── Registro y login ──────────────────────────────────────────────────────────


def test_registro_y_login_devuelven_la_misma_identidad(servicio, usuarios):
    alta = servicio.registrar("Ana@Example.com", "secreto123", "Ana")
    login = servicio.autenticar("ana@example.com", "secreto123")

    guardado = usuarios.get(alta.usuario.id)
    identidad = servicio.verificar(login.token)

    assert login.usuario.id == alta.usuario.id
    assert identidad == Identidad(id=guardado.id, email=guardado.email, rol="user")


def test_registro_normaliza_email_y_asigna_rol_user(servicio):
    alta = servicio.registrar("  Ana@Example.COM ", "secreto123")

    assert alta.usuario.email == "ana@example.com"
    assert alta.usuario.rol == Rol.USUARIO
    assert alta.usuario.nombre == ""


def test_password_se_guarda_hasheado(servicio, usuarios):
    alta = servicio.registrar("ana@example.com", "secreto123")

    guardado = usuarios.get(alta.usuario.id)

    assert guardado.password_hash != "secreto123"
    assert guardado.password_hash.startswith("$2")


@pytest.mark.parametrize("email", ["ana@example.com", "ANA@EXAMPLE.COM", " Ana@example.com"])
@pytest.mark.parametrize("password", ["secreto123", "otro-password"])
def test_registro_duplicado_falla_sin_importar_mayusculas_ni_password(
    servicio, email, password
):
    servicio.registrar("ana@example.com", "secreto123")

    with pytest.raises(EmailDuplicado):
        servicio.registrar(email, password)


def test_alta_concurrente_rechazada_por_el_almacen():
    """El chequeo previo no ve al otro alta; el índice único sí."""
    usuarios = Mock()
    usuarios.get_por_email.return_value = None
    usuarios.crear.side_effect = EmailDuplicado("User already exists")
    servicio = ServicioIdentidad(
        usuarios=usuarios,
        tokens=JwtTokenService(secret="s"),
        hasher=BcryptPasswordHasher(rounds=4),
    )

    with pytest.raises(EmailDuplicado):
        servicio.registrar("ana@example.com", "secreto123")


@pytest.mark.parametrize(
    "email, password, nombre",
    [
        ("no-es-email", "secreto123", None),
        ("", "secreto123", None),
        ("ana@example.com", "123", None),
        ("ana@example.com", "", None),
        ("ana@example.com", "ñ" * 40, None),  # 80 bytes en UTF-8
        ("ana@example.com", "secreto123", "x" * 101),
    ],
)
def test_registro_con_datos_invalidos(servicio, email, password, nombre):
    with pytest.raises(ErrorValidacion):
        servicio.registrar(email, password, nombre)


def test_login_mismo_error_para_email_desconocido_y_password_incorrecto(servicio):
    servicio.registrar("ana@example.com", "secreto123")

    with pytest.raises(CredencialesInvalidas) as desconocido:
        servicio.autenticar("nadie@example.com", "secreto123")
    with pytest.raises(CredencialesInvalidas) as incorrecto:
        servicio.autenticar("ana@example.com", "incorrecto")

    assert str(desconocido.value) == str(incorrecto.value) == "Invalid credentials"


def test_login_sin_password_es_error_de_validacion(servicio):
    with pytest.raises(ErrorValidacion):
        servicio.autenticar("ana@example.com", "")


# ── Verificación ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("token", [None, "", "no-es-un-jwt"])
def test_verificar_token_ausente_o_mal_formado(servicio, token):
    with pytest.raises(NoAutenticado):
        servicio.verificar(token)


# ── Cambio de rol ─────────────────────────────────────────────────────────────


def test_reemitir_con_rol_persiste_y_firma_token_nuevo(servicio, usuarios):
    alta = servicio.registrar("ana@example.com", "secreto123")
    identidad = servicio.verificar(alta.token)

    resultado = servicio.reemitir_con_rol(identidad, "admin")

    assert resultado.usuario.rol == Rol.ADMIN
    assert usuarios.get(identidad.id).rol == Rol.ADMIN
    assert servicio.verificar(resultado.token).rol == "admin"
    # El token viejo sigue llevando el rol anterior hasta expirar.
    assert servicio.verificar(alta.token).rol == "user"


@pytest.mark.parametrize("rol", ["superuser", "", "Admin"])
def test_reemitir_con_rol_invalido(servicio, rol):
    alta = servicio.registrar("ana@example.com", "secreto123")

    with pytest.raises(RolInvalido) as exc_info:
        servicio.reemitir_con_rol(servicio.verificar(alta.token), rol)

    assert isinstance(exc_info.value, ErrorValidacion)


def test_reemitir_con_rol_de_usuario_inexistente(servicio):
    fantasma = Identidad(id="no-existe", email="x@example.com", rol="user")
    with pytest.raises(NoEncontrado):
        servicio.reemitir_con_rol(fantasma, "admin")


# ── Consultas ─────────────────────────────────────────────────────────────────


def test_obtener_usuario_actual(servicio):
    alta = servicio.registrar("ana@example.com", "secreto123", "Ana")

    usuario = servicio.obtener_usuario(servicio.verificar(alta.token))

    assert usuario.nombre == "Ana"


def test_listar_usuarios_solo_admin_y_por_nombre(servicio):
    servicio.registrar("zoe@example.com", "secreto123", "Zoe")
    ana = servicio.registrar("ana@example.com", "secreto123", "Ana")
    identidad = servicio.verificar(ana.token)

    with pytest.raises(AccesoDenegado):
        servicio.listar_usuarios(identidad)

    admin = servicio.verificar(servicio.reemitir_con_rol(identidad, "admin").token)
    assert [u.nombre for u in servicio.listar_usuarios(admin)] == ["Ana", "Zoe"]
