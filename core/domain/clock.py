"""
Helpers de tiempo del dominio.

Todas las fechas se guardan como `datetime` naive en UTC, truncadas a
milisegundos: es la precisión que todos los adaptadores (incluido BSON)
conservan sin pérdidas.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]

TICK = timedelta(milliseconds=1)


def normalize(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utcnow() -> datetime:
    return normalize(datetime.now(timezone.utc))
