from typing import Any

from pymongo import MongoClient
from pymongo.database import Database


def crear_cliente(mongo_uri: str) -> MongoClient[Any]:
    """
    Crea el cliente de MongoDB. Se llama una vez desde el contenedor.

    `tz_aware` hace que las fechas vuelvan como datetime UTC con zona.
    """
    return MongoClient(mongo_uri, tz_aware=True)


def get_db(client: MongoClient[Any], db_name: str) -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    return client[db_name]
