# padel_crm/config.py
from dataclasses import dataclass, field
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
padel_crm.config
================

Configuración centralizada de la API del CRM de pádel.

Este módulo define:
- La estructura de configuración (`Settings`)
- La carga de variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Notas importantes
-----------------
- `load_dotenv()` se ejecuta al importar el módulo.
- Si faltan SUPABASE_URL o SUPABASE_KEY NO se falla acá: la API arranca
  igual y cada consulta al store termina en un error 500.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()

DEFAULT_CORS_ORIGIN = "http://localhost:5173"


@dataclass(frozen=True)
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    supabase_url:
        URL del proyecto Supabase (store remoto).
    supabase_key:
        Key de acceso al proyecto Supabase.
    port:
        Puerto HTTP usado por `run_api.py`.
    cors_origins:
        Orígenes permitidos para CORS (por defecto solo el frontend de desarrollo).
    log_level:
        Nivel de logging (DEBUG, INFO, WARNING...).
    environment:
        Nombre del ambiente (local, dev, prod). Solo informativo.
    """

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""

    # HTTP
    port: int = 3001
    cors_origins: tuple[str, ...] = field(default=(DEFAULT_CORS_ORIGIN,))

    # Logging
    log_level: str = "INFO"
    environment: str = "local"

    @property
    def store_configured(self) -> bool:
        """True si están las dos variables necesarias para hablar con Supabase."""
        return bool(self.supabase_url and self.supabase_key)


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or (DEFAULT_CORS_ORIGIN,)


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 3001


def load_settings() -> Settings:
    """
    Construye un `Settings` nuevo leyendo el entorno actual.

    Variables de entorno utilizadas
    -------------------------------
    - SUPABASE_URL
    - SUPABASE_KEY
    - PORT (default: 3001)
    - CORS_ORIGINS (default: "http://localhost:5173", separado por comas)
    - LOG_LEVEL (default: "INFO")
    - ENVIRONMENT (default: "local")
    """
    return Settings(
        supabase_url=os.getenv("SUPABASE_URL", ""),
        supabase_key=os.getenv("SUPABASE_KEY", ""),
        port=_parse_port(os.getenv("PORT", "3001")),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGIN)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        environment=os.getenv("ENVIRONMENT", "local"),
    )


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    El cache mantiene la configuración consistente durante toda la vida
    del proceso. En tests usar `load_settings()` o `get_settings.cache_clear()`.
    """
    return load_settings()
