# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas del hash de contraseñas con scrypt.
# --------------------------------------------------------------

import hashlib
import string

import pytest

from cryptocore import ConfigurationError, hash_password, verify_password
from cryptocore import crypto_kdf


def test_hash_is_deterministic():
    """Comprueba que el mismo par contraseña/salt produzca el mismo hash.

    Returns:
        None: Las aserciones comparan dos ejecuciones.
    """
    h = hash_password("hola mundo", "test")
    assert h != ""
    assert hash_password("hola mundo", "test") == h


def test_hash_format():
    """Verifica que el hash tenga 64 caracteres hexadecimales en minúsculas.

    Returns:
        None: Las aserciones revisan longitud y alfabeto.
    """
    h = hash_password("hola mundo", "test")
    assert len(h) == 64
    assert set(h) <= set(string.hexdigits.lower())


def test_rfc7914_vector():
    """Vector de RFC 7914 con N=16384, r=8, p=1 truncado a 32 bytes.

    Returns:
        None: La aserción fija el formato durable de los hashes.
    """
    assert hash_password("pleaseletmein", "SodiumChloride") == (
        "7023bdcb3afd7348461c06cd81fd38ebfda8fbba904f8e3ea9b543f6545da1f2"
    )


def test_matches_hashlib_scrypt():
    """Contrasta el resultado con la implementación de la biblioteca estándar.

    Returns:
        None: La aserción compara ambos hashes.
    """
    expected = hashlib.scrypt(
        "contraseña".encode("utf-8"),
        salt="sal-app".encode("utf-8"),
        n=16384,
        r=8,
        p=1,
        maxmem=64 * 1024 * 1024,
        dklen=32,
    ).hex()
    assert hash_password("contraseña", "sal-app") == expected


def test_hash_sensitivity():
    """Garantiza que cambiar la salt o la contraseña cambie el hash.

    Returns:
        None: Las aserciones comparan hashes distintos.
    """
    assert hash_password("pw", "salt1") != hash_password("pw", "salt2")
    assert hash_password("pw1", "salt") != hash_password("pw2", "salt")


def test_empty_salt_raises_without_derivation(monkeypatch):
    """Comprueba que una salt vacía falle antes de derivar nada.

    Returns:
        None: Se espera ConfigurationError y ninguna llamada a scrypt.
    """

    def _fail(*args, **kwargs):
        raise AssertionError("scrypt should not run")

    monkeypatch.setattr(crypto_kdf, "Scrypt", _fail)
    with pytest.raises(ConfigurationError):
        hash_password("hola mundo", "")


def test_configuration_error_is_recoverable():
    """Valida que el error sea capturable como ValueError.

    Returns:
        None: El proceso continúa tras capturar la excepción.
    """
    with pytest.raises(ValueError):
        hash_password("pw", "")
    assert len(hash_password("pw", "s")) == 64


def test_verify_password():
    """Verifica aceptación, rechazo y hashes guardados mal formados.

    Returns:
        None: Las aserciones cubren cada caso.
    """
    stored = hash_password("Str0ng_P@ssword123!", "app")
    assert verify_password("Str0ng_P@ssword123!", "app", stored)
    assert verify_password("Str0ng_P@ssword123!", "app", stored.upper())
    assert not verify_password("wrong-pass", "app", stored)
    assert not verify_password("Str0ng_P@ssword123!", "other", stored)
    assert not verify_password("Str0ng_P@ssword123!", "app", "not-a-hash")
    assert not verify_password("Str0ng_P@ssword123!", "app", "ñ" * 64)
    with pytest.raises(ConfigurationError):
        verify_password("Str0ng_P@ssword123!", "", stored)


def test_lone_surrogate_is_hashed():
    """Comprueba que textos con sustitutos sueltos produzcan un hash estable.

    Returns:
        None: Las aserciones revisan formato, determinismo y verificación.
    """
    h = hash_password("\ud800", "salt")
    assert len(h) == 64
    assert hash_password("\ud800", "salt") == h
    assert h != hash_password("\ud801", "salt")
    assert verify_password("\ud800", "salt", h)
    assert len(hash_password("pw", "\udfff")) == 64
