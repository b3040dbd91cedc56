"""
Endpoints de asistencia.

- POST /api/asistencia: Registrar asistencia
- GET /api/asistencia: Listar asistencias (filtros opcionales fecha y alumno_id)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query as QueryParam, status

from padel_crm.store import Query, Relation, StoreClient

from ..dependencies import get_store
from ..models.requests import AsistenciaCreateRequest

router = APIRouter(prefix="/api/asistencia", tags=["asistencia"])

TABLE = "asistencias"

ASISTENCIAS_QUERY = Query(
    table=TABLE,
    relations=(Relation("alumnos", ("nombre",)), Relation("clases", ("nombre",))),
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def registrar_asistencia(
    request: Optional[AsistenciaCreateRequest] = None,
    store: StoreClient = Depends(get_store),
):
    if request is None:
        request = AsistenciaCreateRequest()
    await store.insert(TABLE, [request.to_row()])
    return {"message": "Asistencia registrada"}


@router.get("")
async def list_asistencias(
    fecha: Optional[str] = QueryParam(default=None, description="Fecha exacta (YYYY-MM-DD)"),
    alumno_id: Optional[str] = QueryParam(default=None, description="ID del alumno"),
    store: StoreClient = Depends(get_store),
):
    """
    Lista asistencias con nombre de alumno y clase.

    Args:
        fecha: Si viene, solo las de esa fecha
        alumno_id: Si viene, solo las de ese alumno (se combina con fecha)
    """
    query = ASISTENCIAS_QUERY
    if fecha:
        query = query.where("fecha", fecha)
    if alumno_id:
        query = query.where("alumno_id", alumno_id)
    return await store.select(query)
