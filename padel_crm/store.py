# padel_crm/store.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from .config import Settings
from .errors import StoreError

"""
padel_crm.store
===============

Acceso al store remoto (Supabase / PostgREST).

Este módulo define:
- `Relation` y `Query`: descripción explícita de una consulta (tabla,
  columnas, relaciones embebidas, filtros por igualdad y orden).
- `StoreClient`: wrapper async sobre el cliente de Supabase que ejecuta
  esas descripciones y el insert / update / delete por filtros.
- `build_store`: construye el cliente una única vez al arrancar la API.

Toda falla del store (error de PostgREST, error de red o cliente no
configurado) se convierte en `StoreError` con el mensaje original.
"""

logger = logging.getLogger(__name__)

Filters = Sequence[tuple[str, Any]]

NOT_CONFIGURED_MESSAGE = "Supabase no configurado: faltan SUPABASE_URL o SUPABASE_KEY"


@dataclass(frozen=True)
class Relation:
    """Tabla relacionada que se embebe en cada fila, ej. `alumnos(id,nombre)`."""

    table: str
    columns: tuple[str, ...] = ("*",)

    def clause(self) -> str:
        return f"{self.table}({','.join(self.columns)})"


@dataclass(frozen=True)
class Query:
    """
    Descripción de un SELECT contra una tabla.

    Attributes
    ----------
    table:
        Tabla principal.
    columns:
        Columnas proyectadas de la tabla principal.
    relations:
        Tablas relacionadas a embeber en cada fila.
    filters:
        Pares (columna, valor) combinados con AND, comparados por igualdad.
    order_by:
        Columna de orden, si corresponde.
    descending:
        Orden descendente (solo aplica si hay `order_by`).
    """

    table: str
    columns: tuple[str, ...] = ("*",)
    relations: tuple[Relation, ...] = ()
    filters: tuple[tuple[str, Any], ...] = ()
    order_by: Optional[str] = None
    descending: bool = False

    def select_clause(self) -> str:
        parts = list(self.columns) + [relation.clause() for relation in self.relations]
        return ",".join(parts)

    def where(self, column: str, value: Any) -> "Query":
        """Devuelve una copia con un filtro de igualdad más."""
        return replace(self, filters=self.filters + ((column, value),))


def _apply_filters(builder, filters: Iterable[tuple[str, Any]]):
    for column, value in filters:
        builder = builder.eq(column, value)
    return builder


class StoreClient:
    """
    Cliente del store compartido por todos los requests.

    Se construye una sola vez al arrancar y después es de solo lectura.
    Si `client` es None (faltan credenciales) cada operación falla con
    `StoreError` en vez de romper el arranque.
    """

    def __init__(self, client: Optional[AsyncClient]):
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None

    def _table(self, table: str):
        if self._client is None:
            raise StoreError(NOT_CONFIGURED_MESSAGE)
        return self._client.table(table)

    async def _execute(self, operation: str, table: str, builder) -> list[dict]:
        try:
            response = await builder.execute()
        except APIError as e:
            message = e.message or str(e)
            logger.error(f"[SUPABASE] Error en {operation} {table}: {message}")
            raise StoreError(message) from e
        except httpx.HTTPError as e:
            logger.error(f"[SUPABASE] Error de conexión en {operation} {table}: {e}")
            raise StoreError(str(e)) from e
        return response.data or []

    async def select(self, query: Query) -> list[dict]:
        builder = self._table(query.table).select(query.select_clause())
        builder = _apply_filters(builder, query.filters)
        if query.order_by:
            builder = builder.order(query.order_by, desc=query.descending)
        return await self._execute("select", query.table, builder)

    async def insert(self, table: str, rows: dict | list[dict]) -> list[dict]:
        builder = self._table(table).insert(rows)
        return await self._execute("insert", table, builder)

    async def update(self, table: str, values: dict, filters: Filters) -> list[dict]:
        """Actualiza las filas que cumplen `filters` y devuelve las filas modificadas."""
        builder = _apply_filters(self._table(table).update(values), filters)
        return await self._execute("update", table, builder)

    async def delete(self, table: str, filters: Filters) -> list[dict]:
        builder = _apply_filters(self._table(table).delete(), filters)
        return await self._execute("delete", table, builder)

    async def aclose(self) -> None:
        """Cierra la sesión HTTP del cliente de Supabase, si hay uno."""
        if self._client is not None:
            await self._client.postgrest.aclose()


async def build_store(settings: Settings) -> StoreClient:
    """
    Crea el `StoreClient` de la aplicación.

    No falla si la configuración está incompleta: lo deja registrado en el
    log y devuelve un cliente sin conexión.
    """
    if not settings.store_configured:
        logger.error("[ENV] Faltan variables SUPABASE_URL o SUPABASE_KEY")
        return StoreClient(None)

    logger.info("[ENV] SUPABASE_URL y SUPABASE_KEY presentes")
    try:
        client = await acreate_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.exception(f"[SUPABASE] No se pudo crear el cliente: {e}")
        return StoreClient(None)
    return StoreClient(client)
