# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Hash de contraseñas mediante scrypt con parámetros fijos.
# --------------------------------------------------------------
"""Funciones de derivación para almacenar y comprobar credenciales."""

from __future__ import annotations

import hmac
import logging

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from cryptocore.config import SCRYPT_LENGTH, SCRYPT_N, SCRYPT_P, SCRYPT_R
from cryptocore.errors import ConfigurationError
from cryptocore.models import ScryptParams

__all__ = ["SCRYPT_PARAMS", "derive_key", "hash_password", "verify_password"]

logger = logging.getLogger(__name__)

SCRYPT_PARAMS = ScryptParams.build(n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P, length=SCRYPT_LENGTH)


def derive_key(password: str, salt: str, params: ScryptParams = SCRYPT_PARAMS) -> bytes:
    """Deriva una clave con scrypt.

    Args:
        password (str): Contraseña en claro.
        salt (str): Salt no vacía, fija por aplicación.
        params (ScryptParams): Parámetros de coste.

    Returns:
        bytes: Clave derivada de `params.length` bytes.

    Raises:
        ConfigurationError: Si la salt está vacía.

    """

    if not salt:
        raise ConfigurationError("password salt can't be empty")

    # surrogatepass: textos con sustitutos sueltos también producen hash.
    kdf = Scrypt(
        salt=salt.encode("utf-8", "surrogatepass"),
        length=params.length,
        n=params.n,
        r=params.r,
        p=params.p,
    )
    return kdf.derive(password.encode("utf-8", "surrogatepass"))


def hash_password(password: str, salt: str) -> str:
    """Devuelve el hash scrypt de una contraseña en hexadecimal.

    Los parámetros (N=16384, r=8, p=1, 32 bytes) no se incluyen en el
    resultado: son una constante global del despliegue.

    Args:
        password (str): Contraseña en claro.
        salt (str): Salt no vacía que el llamante guarda junto al hash.

    Returns:
        str: 64 caracteres hexadecimales en minúsculas.

    Raises:
        ConfigurationError: Si la salt está vacía.

    """

    return derive_key(password, salt).hex()


def verify_password(password: str, salt: str, expected_hash: str) -> bool:
    """Recalcula el hash y lo compara en tiempo constante.

    Args:
        password (str): Contraseña introducida por el usuario.
        salt (str): Salt usada al guardar el hash.
        expected_hash (str): Hash hexadecimal almacenado.

    Returns:
        bool: True si coincide; False si no coincide o el hash guardado no
        es hexadecimal válido.

    Raises:
        ConfigurationError: Si la salt está vacía.

    """

    computed = hash_password(password, salt)
    if not isinstance(expected_hash, str) or not expected_hash.isascii():
        logger.debug("stored password hash is not an ASCII string")
        return False
    return hmac.compare_digest(computed, expected_hash.lower())
