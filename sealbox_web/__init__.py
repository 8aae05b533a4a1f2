# --------------------------------------------------------------
# File: __init__.py
# Description: Capa web de sealbox: cookies cifradas sobre starlette.
# --------------------------------------------------------------
"""Inicializa el paquete `sealbox_web` y documenta sus módulos principales."""

__all__ = [
    "cookieman",
    "factory",
]
