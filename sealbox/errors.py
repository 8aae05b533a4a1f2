# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores del cifrado autenticado SecretBox.
# --------------------------------------------------------------
"""Excepciones que señalan cada modo de fallo de `sealbox.secretbox`."""


class SecretBoxError(Exception):
    """Raíz común de todos los errores de sealbox."""


class InvalidEncoding(SecretBoxError, ValueError):
    """La clave en hexadecimal no es una cadena hexadecimal válida."""


class InvalidKeyLength(SecretBoxError, ValueError):
    """La clave no tiene exactamente 32 bytes."""


class RandomSourceError(SecretBoxError):
    """La fuente aleatoria del sistema no pudo entregar el nonce completo."""


class InvalidCiphertext(SecretBoxError, ValueError):
    """El texto cifrado es demasiado corto para contener el nonce."""


class AuthenticationFailed(SecretBoxError):
    """La etiqueta Poly1305 no coincide o el contenido está corrupto.

    El mensaje es siempre el mismo para no revelar el motivo del fallo.
    """
