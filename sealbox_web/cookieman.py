# --------------------------------------------------------------
# File: cookieman.py
# Description: Gestión de cookies cifradas y autenticadas con un Cipher.
# --------------------------------------------------------------
"""Gestor de cookies cuyo valor viaja cifrado con una caja secreta."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Optional, Protocol

from starlette.requests import Request
from starlette.responses import Response

from sealbox.errors import SecretBoxError
from sealbox.models import CookieOption

__all__ = [
    "Cipher",
    "CookieDecodeError",
    "CookieError",
    "CookieMan",
    "CookieNotFound",
    "CookieStore",
]


class Cipher(Protocol):
    """Interfaz mínima de cifrado que necesita `CookieMan`."""

    def encrypt(self, plaintext: bytes) -> bytes: ...

    def decrypt(self, ciphertext: bytes) -> bytes: ...


class CookieError(Exception):
    """Raíz de los errores propios de la gestión de cookies."""


class CookieNotFound(CookieError, KeyError):
    """La petición no trae la cookie solicitada."""


class CookieDecodeError(CookieError, ValueError):
    """El valor de la cookie no es Base64 URL-safe válido."""


_B64U_VALUE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def _b64u(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64u(value: str) -> bytes:
    """Decodifica Base64 URL-safe rechazando caracteres fuera del alfabeto."""

    if not _B64U_VALUE.fullmatch(value):
        raise CookieDecodeError("La cookie no contiene Base64 válido")
    pad = "=" * (-len(value) % 4)
    try:
        return base64.b64decode(value + pad, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CookieDecodeError("La cookie no contiene Base64 válido") from exc


class CookieMan:
    """Emite, lee y borra cookies cifradas con opciones por defecto.

    Args:
        cipher (Cipher): Objeto con `encrypt`/`decrypt`, p. ej. `SecretBox`.
        default_opt (CookieOption): Opciones aplicadas a todas las cookies.
        logger (Optional[logging.Logger]): Logger explícito; si se omite se
            usa el del módulo.

    """

    def __init__(
        self,
        cipher: Cipher,
        default_opt: Optional[CookieOption] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._cipher = cipher
        self._default_opt = default_opt or CookieOption()
        self._log = logger or logging.getLogger(__name__)

    @property
    def default_opt(self) -> CookieOption:
        return self._default_opt

    def new_cookie_store(self, name: str, opt: Optional[CookieOption] = None) -> CookieStore:
        """Devuelve un `CookieStore` ligado al nombre y opciones dados."""

        return CookieStore(name, self, opt)

    def set(
        self,
        response: Response,
        name: str,
        value: bytes,
        opt: Optional[CookieOption] = None,
    ) -> None:
        """Cifra `value` y lo fija como cookie en la respuesta.

        Args:
            response (Response): Respuesta starlette que recibirá la cookie.
            name (str): Nombre de la cookie.
            value (bytes): Valor en claro que se cifrará.
            opt (Optional[CookieOption]): Opciones que sustituyen al defecto.

        Raises:
            SecretBoxError: Si el cifrado falla; no se emite ninguna cookie.

        """

        sealed = self._cipher.encrypt(value)
        cookie = self._options(opt)
        response.set_cookie(
            name,
            _b64u(sealed),
            max_age=cookie.max_age,
            expires=cookie.expires,
            path=cookie.path,
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.httponly,
            samesite=cookie.samesite,
        )
        self._log.debug("Cookie cifrada emitida: %s", name)

    def get(self, request: Request, name: str) -> bytes:
        """Lee y descifra la cookie `name` de la petición.

        Args:
            request (Request): Petición starlette entrante.
            name (str): Nombre de la cookie.

        Returns:
            bytes: Valor original en claro.

        Raises:
            CookieNotFound: Si la cookie no está presente.
            CookieDecodeError: Si el valor no es Base64 válido.
            SecretBoxError: Si el descifrado o la autenticación fallan.

        """

        raw = request.cookies.get(name)
        if raw is None:
            raise CookieNotFound(name)
        sealed = _unb64u(raw)
        try:
            return self._cipher.decrypt(sealed)
        except SecretBoxError:
            self._log.warning("No se pudo descifrar la cookie: %s", name)
            raise

    def clear(self, response: Response, name: str) -> None:
        """Caduca inmediatamente la cookie `name` en el navegador."""

        cookie = self._default_opt
        response.delete_cookie(
            name,
            path=cookie.path,
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.httponly,
            samesite=cookie.samesite,
        )
        self._log.debug("Cookie borrada: %s", name)

    def _options(self, opt: Optional[CookieOption]) -> CookieOption:
        if opt is None:
            return self._default_opt
        return opt.merged_over(self._default_opt)


class CookieStore:
    """Acceso a una única cookie con nombre y opciones fijos."""

    def __init__(self, name: str, cookieman: CookieMan, opt: Optional[CookieOption] = None):
        self._name = name
        self._cookieman = cookieman
        self._opt = opt

    @property
    def name(self) -> str:
        return self._name

    def set(self, response: Response, value: bytes) -> None:
        self._cookieman.set(response, self._name, value, self._opt)

    def get(self, request: Request) -> bytes:
        return self._cookieman.get(request, self._name)

    def clear(self, response: Response) -> None:
        self._cookieman.clear(response, self._name)
