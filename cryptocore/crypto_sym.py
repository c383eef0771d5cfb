# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger datos sensibles.

Todas las causas de fallo de `encrypt` y `decrypt` se reducen a `ok=False`
para no ofrecer un oráculo de descifrado; el detalle sólo queda en el log.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cryptocore.config import KEY_SIZE, NONCE_SIZE
from cryptocore.errors import (
    AuthenticationError,
    ConstructionError,
    CryptoError,
    EncodingError,
    RandomSourceError,
)
from cryptocore.models import SealedMessage
from cryptocore.random_source import RandomSource

__all__ = ["decrypt", "encrypt", "generate_key", "open_sealed", "seal"]

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def generate_key(rng: Optional[RandomSource] = None) -> bytes:
    """Genera una clave AES-256 aleatoria.

    Args:
        rng (Optional[RandomSource]): Fuente aleatoria; una nueva si es None.

    Returns:
        bytes: Clave de 32 bytes.

    Raises:
        RandomSourceError: Si el generador del sistema falla.

    """

    return (rng or RandomSource()).fill(KEY_SIZE)


def _cipher(key: BytesLike) -> AESGCM:
    """Construye AES-256-GCM validando la longitud exacta de la clave."""

    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise ConstructionError("key must be bytes-like")
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise ConstructionError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    return AESGCM(key)


def _nonce(rng: RandomSource) -> bytes:
    nonce = rng.fill(NONCE_SIZE)
    if len(nonce) != NONCE_SIZE:
        raise RandomSourceError("nonce has the wrong size")
    return nonce


def seal(key: BytesLike, plaintext: BytesLike, rng: RandomSource) -> SealedMessage:
    """Cifra `plaintext` sin datos asociados y devuelve el mensaje sellado.

    El búfer del llamante se copia antes de cifrar y nunca se modifica.

    Raises:
        ConstructionError: Si la clave no mide 32 bytes.
        RandomSourceError: Si no se pudo obtener el nonce.
        TypeError: Si `plaintext` no es un objeto de bytes.

    """

    if not isinstance(plaintext, (bytes, bytearray, memoryview)):
        raise TypeError("plaintext must be bytes-like")
    aes = _cipher(key)
    nonce = _nonce(rng)
    ct_full = aes.encrypt(nonce, bytes(plaintext), None)
    return SealedMessage.from_sealed(nonce, ct_full)


def open_sealed(key: BytesLike, message: SealedMessage) -> bytes:
    """Verifica la etiqueta y descifra un mensaje sellado.

    Raises:
        ConstructionError: Si la clave no mide 32 bytes.
        AuthenticationError: Si la etiqueta no coincide.
        EncodingError: Si el nonce no es aceptado por AES-GCM.

    """

    aes = _cipher(key)
    try:
        return aes.decrypt(message.nonce, message.sealed, None)
    except InvalidTag as exc:
        raise AuthenticationError("message authentication failed") from exc
    except ValueError as exc:
        raise EncodingError("sealed message has an invalid nonce") from exc


def encrypt(
    key: BytesLike, plaintext: BytesLike, rng: Optional[RandomSource] = None
) -> Tuple[str, bool]:
    """Cifra datos con AES-256-GCM y los codifica en hexadecimal.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar; puede estar vacío.
        rng (Optional[RandomSource]): Fuente de nonces; una nueva si es None.

    Returns:
        Tuple[str, bool]: Hexadecimal de `nonce ‖ ciphertext ‖ tag` y un
        indicador de éxito. Si falla, `("", False)`.

    """

    try:
        message = seal(key, plaintext, rng or RandomSource())
    except (CryptoError, TypeError) as exc:
        logger.debug("encrypt failed: %s", type(exc).__name__)
        return "", False
    return message.to_hex(), True


def decrypt(key: BytesLike, ciphertext: Union[str, bytes]) -> Tuple[bytes, bool]:
    """Descifra un mensaje hexadecimal producido por `encrypt`.

    Args:
        key (bytes): Clave simétrica usada al cifrar.
        ciphertext (str | bytes): Hexadecimal de `nonce ‖ ciphertext ‖ tag`.

    Returns:
        Tuple[bytes, bool]: Mensaje original e indicador de éxito. Si falla,
        `(b"", False)` y ningún byte derivado del descifrado.

    """

    try:
        message = SealedMessage.from_hex(ciphertext)
        plaintext = open_sealed(key, message)
    except CryptoError as exc:
        logger.debug("decrypt failed: %s", type(exc).__name__)
        return b"", False
    return plaintext, True
