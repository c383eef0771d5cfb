# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptocore.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM y hash de contraseñas con scrypt."""

import logging

from cryptocore.config import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from cryptocore.crypto_kdf import SCRYPT_PARAMS, hash_password, verify_password
from cryptocore.crypto_sym import decrypt, encrypt, generate_key
from cryptocore.errors import (
    AuthenticationError,
    ConfigurationError,
    ConstructionError,
    CryptoError,
    EncodingError,
    RandomSourceError,
)
from cryptocore.models import ScryptParams, SealedMessage
from cryptocore.random_source import RandomSource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "ConstructionError",
    "CryptoError",
    "EncodingError",
    "KEY_SIZE",
    "NONCE_SIZE",
    "RandomSource",
    "RandomSourceError",
    "SCRYPT_PARAMS",
    "ScryptParams",
    "SealedMessage",
    "TAG_SIZE",
    "decrypt",
    "encrypt",
    "generate_key",
    "hash_password",
    "verify_password",
]
