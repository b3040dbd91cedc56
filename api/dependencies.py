"""
Dependencias de FastAPI.

El `StoreClient` se crea una sola vez al arrancar (ver `api.main.lifespan`)
y queda en `app.state.store`; cada endpoint lo recibe con `Depends(get_store)`.
En tests se reemplaza con `app.dependency_overrides[get_store]`.
"""

import logging

from fastapi import Request

from padel_crm.store import StoreClient

logger = logging.getLogger(__name__)


def get_store(request: Request) -> StoreClient:
    """
    Devuelve el cliente del store compartido por la aplicación.

    Si el lifespan no corrió (app montada sin startup) se devuelve un
    cliente sin conexión: las consultas fallarán con 500.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.warning("StoreClient no inicializado; se usa un cliente sin conexión")
        return StoreClient(None)
    return store
