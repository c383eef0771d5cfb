# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones tipadas que distinguen las causas de fallo internas."""

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "ConstructionError",
    "CryptoError",
    "EncodingError",
    "RandomSourceError",
]


class CryptoError(Exception):
    """Error base de todas las operaciones de `cryptocore`."""


class ConstructionError(CryptoError):
    """La clave no permite construir el cifrador AES-256-GCM."""


class RandomSourceError(CryptoError):
    """El generador aleatorio del sistema no está disponible o devolvió pocos bytes."""


class EncodingError(CryptoError):
    """El mensaje cifrado no es hexadecimal válido o está truncado."""


class AuthenticationError(CryptoError):
    """La etiqueta GCM no coincide: datos alterados, clave o nonce incorrectos."""


class ConfigurationError(CryptoError, ValueError):
    """Error de programación del llamante, como una salt vacía.

    Se propaga siempre hasta el llamante; nunca termina el proceso.
    """
