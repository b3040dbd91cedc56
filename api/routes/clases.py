"""
Endpoints para gestionar clases.

Este endpoint maneja:
- GET /api/clases: Listar clases ordenadas por día de la semana
- POST /api/clases: Crear una clase
- PUT /api/clases/{clase_id}: Editar una clase
- DELETE /api/clases/{clase_id}: Eliminar una clase
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from padel_crm.store import Query, StoreClient

from ..dependencies import get_store
from ..models.requests import ClaseCreateRequest, ClaseUpdateRequest

router = APIRouter(prefix="/api/clases", tags=["clases"])

TABLE = "clases"


@router.get("")
async def list_clases(store: StoreClient = Depends(get_store)):
    """Lista las clases ordenadas por `dia_semana` (orden nativo de la columna)."""
    return await store.select(Query(table=TABLE, order_by="dia_semana"))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_clase(request: ClaseCreateRequest, store: StoreClient = Depends(get_store)):
    """
    Crea una clase.

    Raises:
        400: Falta nombre, dia_semana, hora_inicio, hora_fin o nivel
        500: Error del store
    """
    request.check_required()
    data = await store.insert(TABLE, [request.to_row()])
    return {"message": "Clase creada", "data": data}


@router.put("/{clase_id}")
async def update_clase(
    clase_id: str,
    request: Optional[ClaseUpdateRequest] = None,
    store: StoreClient = Depends(get_store),
):
    """
    Edita una clase.

    A diferencia de alumnos, no devuelve 404 si la clase no existe.
    """
    if request is None:
        request = ClaseUpdateRequest()
    data = await store.update(TABLE, request.to_row(), [("id", clase_id)])
    return {"message": "Clase actualizada", "data": data}


@router.delete("/{clase_id}")
async def delete_clase(clase_id: str, store: StoreClient = Depends(get_store)):
    await store.delete(TABLE, [("id", clase_id)])
    return {"message": "Clase eliminada"}
