from peewee import Database
from playhouse.db_url import connect

from infrastructure.peewee.model.models import MODELOS


def init_db(database_url: str) -> Database:
    """
    Conecta a `database_url` (cualquier URL de playhouse.db_url), enlaza los
    modelos a esa base y crea las tablas si no existen.

    Retorna:
        Database: La conexión, que el contenedor inyecta en los repositorios.
    """
    database = connect(database_url)
    database.bind(MODELOS)
    database.connect(reuse_if_open=True)
    database.create_tables(MODELOS, safe=True)
    return database
