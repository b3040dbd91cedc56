"""
Endpoints de asignación de alumnos a clases (tabla `alumnos_clases`).

- GET /api/alumnos-clases: Listar asignaciones con el nombre del alumno
- POST /api/asignar-alumno: Asignar un alumno a una clase
- DELETE /api/desasignar-alumno/{alumno_id}/{clase_id}: Quitar un alumno de una clase
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from padel_crm.store import Query, Relation, StoreClient

from ..dependencies import get_store
from ..models.requests import AsignacionRequest

router = APIRouter(prefix="/api", tags=["asignaciones"])

TABLE = "alumnos_clases"

ASIGNACIONES_QUERY = Query(
    table=TABLE,
    columns=("id", "alumno_id", "clase_id"),
    relations=(Relation("alumnos", ("nombre",)),),
)


@router.get("/alumnos-clases")
async def list_alumnos_clases(store: StoreClient = Depends(get_store)):
    return await store.select(ASIGNACIONES_QUERY)


@router.post("/asignar-alumno", status_code=status.HTTP_201_CREATED)
async def asignar_alumno(
    request: Optional[AsignacionRequest] = None,
    store: StoreClient = Depends(get_store),
):
    """Asigna un alumno a una clase. No valida campos (ni exige body): el store decide."""
    if request is None:
        request = AsignacionRequest()
    await store.insert(TABLE, [request.to_row()])
    return {"message": "Alumno asignado"}


@router.delete("/desasignar-alumno/{alumno_id}/{clase_id}")
async def desasignar_alumno(alumno_id: str, clase_id: str, store: StoreClient = Depends(get_store)):
    await store.delete(TABLE, [("alumno_id", alumno_id), ("clase_id", clase_id)])
    return {"message": "Alumno desasignado"}
