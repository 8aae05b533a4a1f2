# --------------------------------------------------------------
# File: config.py
# Description: Configuración de la clave de la aplicación y de las cookies.
# --------------------------------------------------------------
"""Lee la configuración desde el entorno o un fichero `.env`."""

import os

from dotenv import load_dotenv

from sealbox.secretbox import SecretBox

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}

# Clave de 64 caracteres hexadecimales, p. ej. `python -c "import sealbox; print(sealbox.generate_hex_key())"`.
SECRETBOX_SECRET = os.getenv("SECRETBOX_SECRET", "")

COOKIE_DOMAIN = os.getenv("COOKIE_DOMAIN", "")
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "true").strip().lower() in _TRUTHY
COOKIE_MAX_AGE = int(os.getenv("COOKIE_MAX_AGE", str(30 * 24 * 60 * 60)))
COOKIE_PATH = os.getenv("COOKIE_PATH", "/")


def secretbox_from_env() -> SecretBox:
    """Construye la caja de la aplicación a partir de `SECRETBOX_SECRET`.

    Returns:
        SecretBox: Caja ligada a la clave configurada.

    Raises:
        InvalidEncoding: Si la variable no contiene hexadecimal válido.
        InvalidKeyLength: Si falta la variable o no codifica 32 bytes.

    """

    return SecretBox.from_hex_key(SECRETBOX_SECRET)
