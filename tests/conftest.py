# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el entorno y recargar la configuración.
# --------------------------------------------------------------

import importlib
import os
from typing import Callable, Iterator

import pytest

_CONFIG_VARS = (
    "SECRETBOX_SECRET",
    "COOKIE_DOMAIN",
    "COOKIE_SECURE",
    "COOKIE_MAX_AGE",
    "COOKIE_PATH",
)


def _reload_config():
    import sealbox.config as config_module

    return importlib.reload(config_module)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Limpia las variables de configuración y recarga sealbox.config.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    for var in _CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)
    _reload_config()
    yield


@pytest.fixture
def reload_config() -> Callable:
    """Devuelve una función que recarga sealbox.config tras cambiar el entorno."""
    return _reload_config


@pytest.fixture
def key() -> bytes:
    """Clave aleatoria de 32 bytes para cada prueba."""
    return os.urandom(32)
