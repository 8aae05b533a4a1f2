# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cifrado autenticado del paquete sealbox.
# --------------------------------------------------------------
"""Inicializa el paquete `sealbox` y reexporta su API principal."""

from sealbox.errors import (
    AuthenticationFailed,
    InvalidCiphertext,
    InvalidEncoding,
    InvalidKeyLength,
    RandomSourceError,
    SecretBoxError,
)
from sealbox.secretbox import SecretBox, decrypt, encrypt, generate_hex_key, generate_key

__all__ = [
    "AuthenticationFailed",
    "InvalidCiphertext",
    "InvalidEncoding",
    "InvalidKeyLength",
    "RandomSourceError",
    "SecretBox",
    "SecretBoxError",
    "decrypt",
    "encrypt",
    "generate_hex_key",
    "generate_key",
]
