# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes compartidos con la capa web.
# --------------------------------------------------------------
"""Modelos Pydantic que describen las opciones de las cookies cifradas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


class CookieOption(BaseModel):
    """Atributos de una cookie emitida por `CookieMan`.

    Attributes:
        path (Optional[str]): Ruta a la que se limita la cookie.
        domain (Optional[str]): Dominio de la cookie; None lo omite.
        max_age (Optional[int]): Vida en segundos; None la deja de sesión.
        expires (Optional[datetime]): Fecha absoluta de caducidad.
        secure (bool): Restringe la cookie a conexiones HTTPS.
        httponly (bool): Oculta la cookie al JavaScript del navegador.
        samesite (Optional[str]): Política SameSite (`lax`, `strict`, `none`).

    """

    path: Optional[str] = None
    domain: Optional[str] = None
    max_age: Optional[int] = None
    expires: Optional[datetime] = None
    secure: bool = False
    httponly: bool = False
    samesite: Optional[Literal["lax", "strict", "none"]] = None

    def merged_over(self, default: "CookieOption") -> "CookieOption":
        """Combina estas opciones sobre las opciones por defecto.

        Los campos con valor sustituyen a los del defecto; `secure` y
        `httponly` solo pueden activarse, nunca desactivarse.

        Args:
            default (CookieOption): Opciones base del gestor de cookies.

        Returns:
            CookieOption: Nuevas opciones resultantes de la combinación.

        """

        merged = default.model_copy()
        if self.path:
            merged.path = self.path
        if self.domain:
            merged.domain = self.domain
        if self.max_age is not None:
            merged.max_age = self.max_age
        if self.expires is not None:
            merged.expires = self.expires
        if self.samesite is not None:
            merged.samesite = self.samesite
        if self.secure:
            merged.secure = True
        if self.httponly:
            merged.httponly = True
        return merged
