"""
Endpoints de pagos.

- GET /api/pagos: Listar pagos (más recientes primero) con el nombre del alumno
- POST /api/pagos: Registrar un pago
"""

from fastapi import APIRouter, Depends, status

from padel_crm.store import Query, Relation, StoreClient

from ..dependencies import get_store
from ..models.requests import PagoCreateRequest

router = APIRouter(prefix="/api/pagos", tags=["pagos"])

TABLE = "pagos"
ALUMNO_ELIMINADO = "Alumno eliminado"

PAGOS_QUERY = Query(
    table=TABLE,
    columns=("id", "cantidad", "mes_cubierto", "metodo", "fecha_pago", "alumno_id"),
    relations=(Relation("alumnos", ("id", "nombre")),),
    order_by="fecha_pago",
    descending=True,
)


def with_nombre_alumno(pago: dict) -> dict:
    """Agrega `nombre_alumno`; si el alumno ya no existe usa "Alumno eliminado"."""
    alumno = pago.get("alumnos") or {}
    return {**pago, "nombre_alumno": alumno.get("nombre") or ALUMNO_ELIMINADO}


@router.get("")
async def list_pagos(store: StoreClient = Depends(get_store)):
    pagos = await store.select(PAGOS_QUERY)
    return [with_nombre_alumno(pago) for pago in pagos]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_pago(request: PagoCreateRequest, store: StoreClient = Depends(get_store)):
    """
    Registra un pago. El método por defecto es "Transferencia".

    Raises:
        400: Faltan alumno_id, cantidad o mes_cubierto (cantidad 0 cuenta como faltante)
        500: Error del store
    """
    request.check_required()
    data = await store.insert(TABLE, [request.to_row()])
    return {"message": "Pago registrado", "data": data}
