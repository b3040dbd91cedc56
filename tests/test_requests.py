import pytest

from api.models.requests import (
    AlumnoCreateRequest,
    AlumnoUpdateRequest,
    AsistenciaCreateRequest,
    ClaseUpdateRequest,
    PagoCreateRequest,
)
from padel_crm.errors import ValidationError


def test_alumno_to_row_defaults():
    row = AlumnoCreateRequest(nombre="Ana", telefono="555").check_required().to_row()
    assert row == {"nombre": "Ana", "telefono": "555", "nivel": "Iniciación (1)", "activo": True}


def test_alumno_telefono_numerico_se_guarda_tal_cual():
    row = AlumnoCreateRequest(nombre="Ana", telefono=555).check_required().to_row()
    assert row["telefono"] == 555


def test_alumno_telefono_cero_es_faltante():
    with pytest.raises(ValidationError):
        AlumnoCreateRequest(nombre="Ana", telefono=0).check_required()


@pytest.mark.parametrize("body", [{"telefono": "555"}, {"nombre": "", "telefono": "555"}, {"nombre": "Ana"}])
def test_alumno_faltan_datos(body):
    with pytest.raises(ValidationError) as exc_info:
        AlumnoCreateRequest(**body).check_required()
    assert exc_info.value.status_code == 400


def test_alumno_update_solo_campos_enviados():
    values = AlumnoUpdateRequest(nivel="Avanzado", email=None).to_values()
    assert values == {"nivel": "Avanzado", "email": None}


@pytest.mark.parametrize("cantidad", [0, None])
def test_pago_cantidad_falsy(cantidad):
    with pytest.raises(ValidationError) as exc_info:
        PagoCreateRequest(alumno_id=1, cantidad=cantidad, mes_cubierto="2024-05").check_required()
    assert exc_info.value.message == "Todos los campos son obligatorios"


def test_pago_metodo_vacio_usa_default():
    row = PagoCreateRequest(alumno_id=1, cantidad=30.5, mes_cubierto="2024-05", metodo="").to_row()
    assert row == {"alumno_id": 1, "cantidad": 30.5, "mes_cubierto": "2024-05", "metodo": "Transferencia"}


def test_clase_update_no_exige_campos():
    request = ClaseUpdateRequest(hora_fin="11:00").check_required()
    assert request.to_row() == {"hora_fin": "11:00"}


def test_asistencia_sin_validacion():
    assert AsistenciaCreateRequest().check_required().to_row() == {}


def test_pago_cantidad_texto_cero_no_es_faltante():
    row = PagoCreateRequest(alumno_id=1, cantidad="0", mes_cubierto="2024-05").check_required().to_row()
    assert row["cantidad"] == "0"
