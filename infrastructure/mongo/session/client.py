import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Obtiene el cliente de MongoDB (Singleton).

    La conexión es perezosa: no se contacta al servidor hasta la primera operación.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri, tz_aware=False)
    return _client


def get_db() -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos configurada en MONGO_DB_NAME.
    """
    client = get_client()
    db_name = os.getenv("MONGO_DB_NAME", "task_management")
    return client[db_name]


def close_client() -> None:
    """Cierra el cliente si llegó a crearse (apagado de la aplicación)."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
