# --------------------------------------------------------------
# File: factory.py
# Description: Construcción del gestor de cookies de la aplicación.
# --------------------------------------------------------------
"""Inicializa `CookieMan` con la clave y las opciones configuradas."""

import logging
from typing import Optional

from sealbox import config
from sealbox.models import CookieOption
from sealbox_web.cookieman import CookieMan


def default_cookie_option() -> CookieOption:
    """Opciones por defecto de las cookies según la configuración.

    Returns:
        CookieOption: Cookie HttpOnly, con ruta, vida y dominio configurados.

    """

    return CookieOption(
        path=config.COOKIE_PATH,
        domain=config.COOKIE_DOMAIN or None,
        max_age=config.COOKIE_MAX_AGE,
        secure=config.COOKIE_SECURE,
        httponly=True,
        samesite="lax",
    )


def init_cookieman(logger: Optional[logging.Logger] = None) -> CookieMan:
    """Crea el gestor de cookies cifradas de la aplicación.

    Args:
        logger (Optional[logging.Logger]): Logger que usará el gestor.

    Returns:
        CookieMan: Gestor listo para emitir y leer cookies.

    Raises:
        InvalidEncoding: Si `SECRETBOX_SECRET` no es hexadecimal válido.
        InvalidKeyLength: Si `SECRETBOX_SECRET` falta o no codifica 32 bytes.

    """

    cipher = config.secretbox_from_env()
    return CookieMan(cipher, default_cookie_option(), logger=logger)
