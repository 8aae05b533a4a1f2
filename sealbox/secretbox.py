# --------------------------------------------------------------
# File: secretbox.py
# Description: Cifrado autenticado XSalsa20-Poly1305 con nonce aleatorio.
# --------------------------------------------------------------
"""Sellado y apertura de mensajes con la construcción `secretbox` de NaCl.

Formato del texto cifrado: nonce(24) || tag(16) || ciphertext, idéntico al
de `crypto_secretbox` en libsodium, Go y PyNaCl.
"""

import binascii
import logging
import os

from nacl.exceptions import CryptoError
from nacl.secret import SecretBox as _NaclSecretBox

from sealbox.errors import (
    AuthenticationFailed,
    InvalidCiphertext,
    InvalidEncoding,
    InvalidKeyLength,
    RandomSourceError,
)

__all__ = ["SecretBox", "decrypt", "encrypt", "generate_hex_key", "generate_key"]

logger = logging.getLogger(__name__)

KEY_SIZE = 32
NONCE_SIZE = 24
TAG_SIZE = 16


def generate_key() -> bytes:
    """Genera una clave aleatoria de 256 bits.

    Returns:
        bytes: Clave de 32 bytes obtenida de `os.urandom`.

    """

    return os.urandom(KEY_SIZE)


def generate_hex_key() -> str:
    """Genera una clave aleatoria codificada en 64 caracteres hexadecimales."""

    return generate_key().hex()


def _generate_nonce() -> bytes:
    """Lee un nonce de 24 bytes de la fuente aleatoria del sistema."""

    try:
        nonce = os.urandom(NONCE_SIZE)
    except OSError as exc:
        logger.error("No se pudo generar el nonce: fuente aleatoria no disponible")
        raise RandomSourceError("No se pudo generar el nonce") from exc
    if len(nonce) != NONCE_SIZE:
        logger.error("No se pudo generar el nonce: lectura aleatoria incompleta")
        raise RandomSourceError("No se pudo generar el nonce")
    return nonce


def _as_bytes(data, what: str) -> bytes:
    # bytes(int) crearía ceros en silencio
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} debe ser bytes")
    return bytes(data)


def _coerce_key(key) -> bytes:
    key = _as_bytes(key, "La clave")
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(f"La clave debe tener {KEY_SIZE} bytes")
    return key


class SecretBox:
    """Caja secreta simétrica ligada a una clave fija de 32 bytes.

    La instancia no guarda estado mutable: puede compartirse entre hilos.
    """

    KEY_SIZE = KEY_SIZE
    NONCE_SIZE = NONCE_SIZE
    TAG_SIZE = TAG_SIZE

    def __init__(self, key: bytes):
        """Crea la caja con una clave en bruto.

        Args:
            key (bytes): Clave simétrica de exactamente 32 bytes.

        Raises:
            TypeError: Si la clave no es un objeto de tipo bytes.
            InvalidKeyLength: Si la clave no mide 32 bytes.

        """

        self._box = _NaclSecretBox(_coerce_key(key))

    @classmethod
    def from_hex_key(cls, hex_key: str) -> "SecretBox":
        """Crea la caja a partir de una clave en hexadecimal.

        Args:
            hex_key (str): Clave de 64 caracteres hexadecimales.

        Returns:
            SecretBox: Caja lista para cifrar y descifrar.

        Raises:
            InvalidEncoding: Si la cadena no es hexadecimal válido.
            InvalidKeyLength: Si la clave decodificada no mide 32 bytes.

        """

        try:
            key = binascii.unhexlify(hex_key)
        except (binascii.Error, ValueError, TypeError) as exc:
            raise InvalidEncoding("La clave no es hexadecimal válido") from exc
        return cls(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key=<oculta>)"

    def encrypt(self, plaintext: bytes) -> bytes:
        """Cifra y autentica un mensaje con un nonce nuevo.

        Args:
            plaintext (bytes): Datos en claro de cualquier longitud.

        Returns:
            bytes: nonce(24) || tag(16) || ciphertext.

        Raises:
            TypeError: Si el mensaje no es un objeto de tipo bytes.
            RandomSourceError: Si no se pudo obtener el nonce aleatorio.

        """

        plaintext = _as_bytes(plaintext, "El mensaje")
        nonce = _generate_nonce()
        sealed = self._box.encrypt(plaintext, nonce)
        return bytes(sealed)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Verifica y descifra un mensaje producido por `encrypt`.

        Args:
            ciphertext (bytes): nonce(24) || tag(16) || ciphertext.

        Returns:
            bytes: Mensaje original en claro.

        Raises:
            TypeError: Si el texto cifrado no es un objeto de tipo bytes.
            InvalidCiphertext: Si la entrada no alcanza a contener el nonce.
            AuthenticationFailed: Si la etiqueta no verifica o los datos
                están corruptos.

        """

        ciphertext = _as_bytes(ciphertext, "El texto cifrado")
        if len(ciphertext) < NONCE_SIZE:
            raise InvalidCiphertext("El texto cifrado es demasiado corto")
        nonce, sealed = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
        try:
            return self._box.decrypt(sealed, nonce)
        except CryptoError:
            raise AuthenticationFailed("No se pudo descifrar el mensaje") from None


def encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Cifra `plaintext` con una clave en bruto de 32 bytes."""

    return SecretBox(key).encrypt(plaintext)


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Descifra `ciphertext` con una clave en bruto de 32 bytes."""

    return SecretBox(key).decrypt(ciphertext)
