# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from __future__ import annotations

import binascii
import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from cryptocore.config import NONCE_SIZE, TAG_SIZE
from cryptocore.errors import ConfigurationError, EncodingError

__all__ = ["ScryptParams", "SealedMessage"]

# Sólo alfabeto hexadecimal; `bytes.fromhex` toleraría espacios.
_HEX = re.compile(r"[0-9a-fA-F]*")


class ScryptParams(BaseModel):
    """Parámetros de coste de scrypt.

    Attributes:
        n (int): Factor de coste CPU/memoria, potencia de dos mayor que 1.
        r (int): Tamaño de bloque.
        p (int): Paralelismo.
        length (int): Longitud en bytes de la clave derivada.

    """

    model_config = ConfigDict(frozen=True)

    n: int
    r: int
    p: int
    length: int

    @field_validator("n")
    @classmethod
    def _n_power_of_two(cls, value: int) -> int:
        if value < 2 or value & (value - 1):
            raise ValueError("n must be a power of two greater than 1")
        return value

    @field_validator("r", "p", "length")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be a positive integer")
        return value

    @classmethod
    def build(cls, **values: int) -> "ScryptParams":
        """Construye los parámetros traduciendo errores de validación.

        Raises:
            ConfigurationError: Si algún parámetro es inválido.

        """

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid scrypt parameters: {exc}") from exc


class SealedMessage(BaseModel):
    """Representa un mensaje sellado con AES-GCM en su forma de transporte.

    El formato de cable es el hexadecimal en minúsculas de
    `nonce ‖ ciphertext ‖ tag`, y debe poder leerse en versiones futuras.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    @field_validator("nonce")
    @classmethod
    def _nonce_size(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def _tag_size(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"tag must be {TAG_SIZE} bytes")
        return value

    @classmethod
    def build(cls, nonce: bytes, ciphertext: bytes, tag: bytes) -> "SealedMessage":
        """Construye el mensaje traduciendo errores de validación.

        Raises:
            EncodingError: Si el nonce o la etiqueta no tienen el tamaño fijo.

        """

        try:
            return cls(nonce=nonce, ciphertext=ciphertext, tag=tag)
        except ValidationError as exc:
            raise EncodingError(f"invalid sealed message: {exc}") from exc

    @classmethod
    def from_sealed(cls, nonce: bytes, sealed: bytes) -> "SealedMessage":
        """Separa la salida de AESGCM (`ciphertext ‖ tag`) en sus partes."""

        if len(sealed) < TAG_SIZE:
            raise EncodingError("sealed data shorter than the tag")
        return cls.build(nonce, sealed[:-TAG_SIZE], sealed[-TAG_SIZE:])

    @property
    def sealed(self) -> bytes:
        """Datos en el formato que espera AESGCM para abrir: `ciphertext ‖ tag`."""

        return self.ciphertext + self.tag

    def to_hex(self) -> str:
        """Codifica el mensaje en hexadecimal en minúsculas."""

        return (self.nonce + self.ciphertext + self.tag).hex()

    @classmethod
    def from_hex(cls, value: str | bytes) -> "SealedMessage":
        """Decodifica la forma hexadecimal de transporte.

        Args:
            value (str | bytes): Texto hexadecimal, admite mayúsculas.

        Returns:
            SealedMessage: Mensaje con nonce, ciphertext y tag separados.

        Raises:
            EncodingError: Si el texto no es hexadecimal o está truncado.

        """

        if isinstance(value, (bytes, bytearray)):
            try:
                value = bytes(value).decode("ascii")
            except UnicodeDecodeError as exc:
                raise EncodingError("ciphertext is not ASCII") from exc
        if not isinstance(value, str):
            raise EncodingError("ciphertext must be str or bytes")
        if len(value) % 2 or not _HEX.fullmatch(value):
            raise EncodingError("ciphertext is not valid hexadecimal")

        try:
            raw = binascii.unhexlify(value)
        except (binascii.Error, ValueError) as exc:
            raise EncodingError("ciphertext is not valid hexadecimal") from exc

        if len(raw) < NONCE_SIZE + TAG_SIZE:
            raise EncodingError(f"ciphertext truncated: {len(raw)} bytes")
        return cls.build(raw[:NONCE_SIZE], raw[NONCE_SIZE:-TAG_SIZE], raw[-TAG_SIZE:])
