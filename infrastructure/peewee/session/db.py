import os
from peewee import SqliteDatabase
from playhouse.db_url import connect

# Por defecto SQLite en fichero local
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# Conexión compartida por el modelo y el repositorio de tareas
db = connect(DATABASE_URL)

IS_SQLITE = isinstance(db, SqliteDatabase)

if IS_SQLITE:
    # LIKE y lower() de SQLite solo pliegan mayúsculas ASCII
    @db.func("casefold", 1)
    def _casefold(value):
        return value.casefold() if value is not None else None
