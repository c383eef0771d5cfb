# --------------------------------------------------------------
# File: random_source.py
# Description: Fuente de bytes aleatorios respaldada por el CSPRNG del sistema.
# --------------------------------------------------------------
"""Envoltorio explícito sobre el generador aleatorio del sistema operativo."""

from __future__ import annotations

import logging
import os
from typing import Callable

from cryptocore.errors import RandomSourceError

__all__ = ["RandomSource"]

logger = logging.getLogger(__name__)

Reader = Callable[[int], bytes]


class RandomSource:
    """Produce secuencias de bytes criptográficamente seguras.

    No guarda estado mutable, por lo que una misma instancia puede usarse
    desde varios hilos siempre que el lector subyacente lo permita
    (`os.urandom` lo permite).

    Args:
        reader (Callable[[int], bytes]): Función que devuelve `n` bytes del
            CSPRNG. Por defecto `os.urandom`.

    """

    __slots__ = ("_reader",)

    def __init__(self, reader: Reader = os.urandom) -> None:
        self._reader = reader

    def fill(self, n: int) -> bytes:
        """Devuelve exactamente `n` bytes aleatorios.

        Args:
            n (int): Número de bytes solicitados.

        Returns:
            bytes: Bytes aleatorios de longitud `n`.

        Raises:
            ValueError: Si `n` es negativo.
            RandomSourceError: Si el generador falla o devuelve menos bytes.

        """

        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        try:
            data = self._reader(n)
        except (OSError, NotImplementedError) as exc:
            logger.debug("random source unavailable: %s", type(exc).__name__)
            raise RandomSourceError("random source unavailable") from exc

        # Una lectura corta nunca se completa con relleno predecible.
        if not isinstance(data, (bytes, bytearray)) or len(data) != n:
            raise RandomSourceError(f"short read from random source: wanted {n} bytes")
        return bytes(data)
