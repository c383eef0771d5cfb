# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: claves y fuentes aleatorias controladas.
# --------------------------------------------------------------

from typing import Callable

import pytest

from cryptocore import RandomSource, generate_key


@pytest.fixture
def key() -> bytes:
    """Genera una clave AES-256 nueva para cada prueba.

    Returns:
        bytes: Clave aleatoria de 32 bytes.
    """
    return generate_key()


@pytest.fixture
def zero_rng() -> RandomSource:
    """Fuente aleatoria determinista que sólo devuelve ceros.

    Sirve para comprobar vectores conocidos con un nonce fijo.

    Returns:
        RandomSource: Fuente cuyo lector devuelve `n` bytes nulos.
    """
    return RandomSource(reader=lambda n: bytes(n))


@pytest.fixture
def failing_rng() -> Callable[[BaseException], RandomSource]:
    """Construye fuentes aleatorias cuyo lector lanza la excepción indicada.

    Returns:
        Callable[[BaseException], RandomSource]: Fábrica de fuentes que fallan.
    """

    def _build(exc: BaseException) -> RandomSource:
        def _reader(n: int) -> bytes:
            raise exc

        return RandomSource(reader=_reader)

    return _build
