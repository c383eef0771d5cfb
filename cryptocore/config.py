# --------------------------------------------------------------
# File: config.py
# Description: Constantes de despliegue de la capa criptográfica.
# --------------------------------------------------------------
"""Tamaños de AES-256-GCM y parámetros fijos de scrypt.

Los parámetros de scrypt no se guardan junto al hash. Si alguna vez cambian,
los hashes existentes dejan de verificarse: habrá que mantener la derivación
anterior y forzar a los usuarios a cambiar su contraseña.
"""

from typing import Final

KEY_SIZE: Final[int] = 32  # AES-256
NONCE_SIZE: Final[int] = 12  # 96 bits, tamaño estándar de GCM
TAG_SIZE: Final[int] = 16  # 128 bits

# Valores recomendados para logins interactivos (2009).
SCRYPT_N: Final[int] = 16384
SCRYPT_R: Final[int] = 8
SCRYPT_P: Final[int] = 1
SCRYPT_LENGTH: Final[int] = 32
