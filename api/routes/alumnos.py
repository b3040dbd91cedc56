"""
Endpoints para gestionar alumnos.

Este endpoint maneja:
- GET /api/alumnos: Listar alumnos
- POST /api/alumnos: Crear un alumno
- PUT /api/alumnos/{alumno_id}: Editar un alumno
- DELETE /api/alumnos/{alumno_id}: Eliminar un alumno
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from padel_crm.errors import NotFoundError
from padel_crm.store import Query, StoreClient

from ..dependencies import get_store
from ..models.requests import AlumnoCreateRequest, AlumnoUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/alumnos", tags=["alumnos"])

TABLE = "alumnos"


@router.get("")
async def list_alumnos(response: Response, store: StoreClient = Depends(get_store)):
    """
    Lista todos los alumnos, sin filtros ni paginación.

    Returns:
        Lista de alumnos (vacía si no hay filas)

    Raises:
        500: Error del store
    """
    alumnos = await store.select(Query(table=TABLE))
    if not alumnos:
        logger.warning(
            "[SUPABASE] Select alumnos devolvió array vacío. Posibles causas: "
            "RLS bloquea SELECT, tabla vacía o nombre/esquema incorrecto."
        )
    response.headers["Cache-Control"] = "no-store"
    return alumnos


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_alumno(request: AlumnoCreateRequest, store: StoreClient = Depends(get_store)):
    """
    Crea un alumno activo. Si no viene nivel se usa "Iniciación (1)".

    Raises:
        400: Faltan nombre o telefono
        500: Error del store
    """
    request.check_required()
    data = await store.insert(TABLE, request.to_row())
    return {"message": "Alumno creado correctamente", "data": data}


@router.put("/{alumno_id}")
async def update_alumno(
    alumno_id: str,
    request: Optional[AlumnoUpdateRequest] = None,
    store: StoreClient = Depends(get_store),
):
    """
    Edita un alumno existente (solo los campos enviados).

    Raises:
        404: El alumno no existe
        500: Error del store
    """
    if request is None:
        request = AlumnoUpdateRequest()
    rows = await store.update(TABLE, request.to_values(), [("id", alumno_id)])
    if not rows:
        raise NotFoundError("Alumno no encontrado")
    return {"message": "Alumno actualizado", "data": rows[0]}


@router.delete("/{alumno_id}")
async def delete_alumno(alumno_id: str, store: StoreClient = Depends(get_store)):
    """Elimina un alumno. No verifica que exista."""
    await store.delete(TABLE, [("id", alumno_id)])
    return {"message": "Alumno eliminado"}
