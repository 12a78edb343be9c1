import os

# Antes de importar cualquier módulo del proyecto: las sesiones de Peewee y
# SQLAlchemy leen DATABASE_URL al importarse.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ORM"] = "memory"
os.environ["SEED_SAMPLE_DATA"] = "false"
