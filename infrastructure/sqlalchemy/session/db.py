import os

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# SQLite necesita compartir la conexión entre los hilos del threadpool de FastAPI
_connect_args = (
    {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
)

engine = create_engine(DATABASE_URL, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)
Base = declarative_base()

IS_SQLITE = engine.dialect.name == "sqlite"


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


if IS_SQLITE:
    # LIKE y lower() de SQLite solo pliegan mayúsculas ASCII
    @event.listens_for(engine, "connect")
    def _register_casefold(dbapi_connection, connection_record) -> None:
        dbapi_connection.create_function("casefold", 1, _casefold)


def get_session() -> Session:
    return SessionLocal()


def init_db() -> None:
    # Registra los modelos en Base.metadata antes de crear las tablas.
    from infrastructure.sqlalchemy.model import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
