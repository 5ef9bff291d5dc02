import unittest
from datetime import datetime, timezone

from core.domain.errors import EmailDuplicado
from core.domain.models.tarea import EstadoTarea, NuevaTarea
from core.domain.models.usuario import NuevoUsuario, Rol
from infrastructure.peewee.model.models import MODELOS, TareaModel
from infrastructure.peewee.repository.tarea_repository import (
    PeeweeTareaRepository,
    a_columna,
)
from infrastructure.peewee.repository.usuario_repository import PeeweeUsuarioRepository
from infrastructure.peewee.session.db import init_db


class PeeweeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        # Base en memoria nueva para cada test
        self.database = init_db("sqlite:///:memory:")

    def tearDown(self) -> None:
        self.database.drop_tables(MODELOS)
        self.database.close()


class InitDbTests(PeeweeTestCase):
    def test_modelos_enlazados_a_la_conexion_devuelta(self) -> None:
        for modelo in MODELOS:
            self.assertIs(modelo._meta.database, self.database)

    def test_repositorio_usa_la_conexion_inyectada(self) -> None:
        repo = PeeweeTareaRepository(self.database)

        tarea = repo.crear(NuevaTarea(titulo="x", asignada_a="U1", creada_por="A1"))

        self.assertIs(repo.db, self.database)
        self.assertEqual(TareaModel.select().count(), 1)
        self.assertEqual(repo.get(tarea.id).titulo, "x")


class PeeweeTareaRepositoryTests(PeeweeTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = PeeweeTareaRepository(self.database)

    def _crear(self, titulo: str = "Ship report", asignada_a: str = "U1"):
        return self.repo.crear(
            NuevaTarea(titulo=titulo, asignada_a=asignada_a, creada_por="A1")
        )

    def test_crear_y_get(self) -> None:
        tarea = self.repo.crear(
            NuevaTarea(
                titulo="Tarea Peewee",
                asignada_a="U1",
                creada_por="A1",
                descripcion="desc",
            )
        )

        loaded = self.repo.get(tarea.id)

        self.assertEqual(loaded, tarea)
        self.assertEqual(loaded.creada_en.tzinfo, timezone.utc)

    def test_get_inexistente(self) -> None:
        self.assertIsNone(self.repo.get("no-existe"))

    def test_list_ordena_por_creacion_descendente(self) -> None:
        ids = [self._crear(titulo=f"T{i}", asignada_a=a).id for i, a in enumerate("ABA")]
        for i, tarea_id in enumerate(ids):
            momento = a_columna(datetime(2026, 1, 1, i, tzinfo=timezone.utc))
            TareaModel.update(creada_en=momento).where(TareaModel.id == tarea_id).execute()

        self.assertEqual([t.id for t in self.repo.list()], list(reversed(ids)))
        self.assertEqual(
            [t.id for t in self.repo.list_por_asignado("A")], [ids[2], ids[0]]
        )

    def test_actualizar_incrementa_version(self) -> None:
        tarea = self._crear()

        actualizada = self.repo.actualizar(
            tarea.id, {"estado": EstadoTarea.COMPLETADA}, version_esperada=1
        )

        self.assertEqual(actualizada.estado, EstadoTarea.COMPLETADA)
        self.assertEqual(actualizada.version, 2)
        self.assertEqual(actualizada.titulo, "Ship report")
        self.assertGreaterEqual(actualizada.actualizada_en, tarea.actualizada_en)

    def test_actualizar_con_version_obsoleta_no_escribe(self) -> None:
        tarea = self._crear()
        self.repo.actualizar(tarea.id, {"titulo": "Primera"}, version_esperada=1)

        resultado = self.repo.actualizar(tarea.id, {"titulo": "Segunda"}, version_esperada=1)

        self.assertIsNone(resultado)
        self.assertEqual(self.repo.get(tarea.id).titulo, "Primera")

    def test_actualizar_inexistente(self) -> None:
        self.assertIsNone(self.repo.actualizar("no-existe", {"titulo": "x"}))

    def test_actualizar_campo_no_editable(self) -> None:
        tarea = self._crear()
        with self.assertRaises(ValueError):
            self.repo.actualizar(tarea.id, {"creada_por": "U9"})

    def test_eliminar(self) -> None:
        tarea = self._crear()

        self.assertTrue(self.repo.eliminar(tarea.id))
        self.assertIsNone(self.repo.get(tarea.id))
        self.assertFalse(self.repo.eliminar(tarea.id))


class PeeweeUsuarioRepositoryTests(PeeweeTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = PeeweeUsuarioRepository(self.database)

    def test_crear_y_buscar_por_email(self) -> None:
        usuario = self.repo.crear(
            NuevoUsuario(email="ana@example.com", password_hash="h", nombre="Ana")
        )

        self.assertEqual(self.repo.get_por_email("ana@example.com"), usuario)
        self.assertEqual(self.repo.get(usuario.id).rol, Rol.USUARIO)

    def test_email_repetido_lo_rechaza_la_restriccion_unica(self) -> None:
        self.repo.crear(NuevoUsuario(email="ana@example.com", password_hash="h"))

        with self.assertRaises(EmailDuplicado):
            self.repo.crear(NuevoUsuario(email="ana@example.com", password_hash="h2"))

    def test_actualizar_rol(self) -> None:
        usuario = self.repo.crear(NuevoUsuario(email="ana@example.com", password_hash="h"))

        actualizado = self.repo.actualizar_rol(usuario.id, Rol.ADMIN)

        self.assertEqual(actualizado.rol, Rol.ADMIN)
        self.assertIsNone(self.repo.actualizar_rol("nadie", Rol.ADMIN))

    def test_list_ordena_por_nombre(self) -> None:
        for nombre in ["Zoe", "Ana", "Luis"]:
            self.repo.crear(
                NuevoUsuario(
                    email=f"{nombre.lower()}@example.com", password_hash="h", nombre=nombre
                )
            )

        self.assertEqual([u.nombre for u in self.repo.list()], ["Ana", "Luis", "Zoe"])


if __name__ == "__main__":
    unittest.main()
