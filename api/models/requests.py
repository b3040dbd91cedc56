"""
Modelos de request para la API.

Estos modelos definen la estructura esperada de los bodies JSON.
Los campos obligatorios se chequean con `check_required()` antes de
tocar el store: un campo vacío, None o 0 cuenta como faltante.
"""

from typing import ClassVar, Optional, Union

from pydantic import BaseModel, Field

from padel_crm.errors import ValidationError

NIVEL_POR_DEFECTO = "Iniciación (1)"
METODO_POR_DEFECTO = "Transferencia"

# Los ids pueden ser enteros o uuid según cómo se haya creado la tabla
Id = Union[int, str]

# Campos que pueden llegar como texto o número. Se guardan tal cual llegan:
# para el chequeo de obligatorios 0 es faltante y "0" no.
Texto = Union[str, int, float]


class RequestModel(BaseModel):
    """Base con chequeo de campos obligatorios por presencia."""

    required_fields: ClassVar[tuple[str, ...]] = ()
    missing_message: ClassVar[str] = "Faltan datos requeridos"

    def check_required(self):
        """
        Valida que los campos obligatorios tengan un valor "verdadero".

        Raises:
            ValidationError: Si alguno falta o es vacío / 0.
        """
        if any(not getattr(self, name) for name in self.required_fields):
            raise ValidationError(self.missing_message)
        return self

    def sent_fields(self, *names: str) -> dict:
        """Solo los campos que vinieron en el body (los ausentes no se envían al store)."""
        return {name: getattr(self, name) for name in names if name in self.model_fields_set}


class AlumnoCreateRequest(RequestModel):
    """Request para dar de alta un alumno."""

    required_fields: ClassVar[tuple[str, ...]] = ("nombre", "telefono")

    nombre: Optional[str] = Field(default=None, description="Nombre del alumno")
    email: Optional[str] = Field(default=None, description="Email (opcional)")
    telefono: Optional[Texto] = Field(default=None, description="Teléfono de contacto")
    nivel: Optional[str] = Field(default=None, description="Nivel de juego")

    def to_row(self) -> dict:
        row = self.sent_fields("nombre", "email", "telefono")
        row["nivel"] = self.nivel or NIVEL_POR_DEFECTO
        row["activo"] = True
        return row


class AlumnoUpdateRequest(RequestModel):
    """Request para editar un alumno. Todos los campos son opcionales."""

    nombre: Optional[str] = None
    email: Optional[str] = None
    telefono: Optional[Texto] = None
    nivel: Optional[str] = None

    def to_values(self) -> dict:
        return self.sent_fields("nombre", "email", "telefono", "nivel")


class PagoCreateRequest(RequestModel):
    """Request para registrar un pago."""

    required_fields: ClassVar[tuple[str, ...]] = ("alumno_id", "cantidad", "mes_cubierto")
    missing_message: ClassVar[str] = "Todos los campos son obligatorios"

    alumno_id: Optional[Id] = Field(default=None, description="Alumno que paga")
    cantidad: Optional[Union[int, float, str]] = Field(default=None, description="Importe")
    mes_cubierto: Optional[Texto] = Field(default=None, description="Mes que cubre el pago")
    metodo: Optional[str] = Field(default=None, description="Método de pago")
    fecha_pago: Optional[str] = Field(default=None, description="Fecha del pago (si no, la pone el store)")

    def to_row(self) -> dict:
        row = self.sent_fields("alumno_id", "cantidad", "mes_cubierto", "fecha_pago")
        row["metodo"] = self.metodo or METODO_POR_DEFECTO
        return row


class ClaseCreateRequest(RequestModel):
    """Request para crear una clase."""

    required_fields: ClassVar[tuple[str, ...]] = ("nombre", "dia_semana", "hora_inicio", "hora_fin", "nivel")
    missing_message: ClassVar[str] = "Todos los campos obligatorios"

    nombre: Optional[str] = None
    dia_semana: Optional[Id] = None
    hora_inicio: Optional[Texto] = None
    hora_fin: Optional[Texto] = None
    nivel: Optional[str] = None
    profesor: Optional[str] = None

    def to_row(self) -> dict:
        return self.sent_fields("nombre", "dia_semana", "hora_inicio", "hora_fin", "nivel", "profesor")


class ClaseUpdateRequest(ClaseCreateRequest):
    """Request para editar una clase: cualquier subconjunto de campos, sin obligatorios."""

    required_fields: ClassVar[tuple[str, ...]] = ()


class AsignacionRequest(RequestModel):
    """Asignar un alumno a una clase. No tiene campos obligatorios."""

    alumno_id: Optional[Id] = None
    clase_id: Optional[Id] = None

    def to_row(self) -> dict:
        return self.sent_fields("alumno_id", "clase_id")


class AsistenciaCreateRequest(RequestModel):
    """Registrar la asistencia de un alumno a una clase en una fecha."""

    alumno_id: Optional[Id] = None
    clase_id: Optional[Id] = None
    fecha: Optional[str] = None
    estado: Optional[str] = None

    def to_row(self) -> dict:
        return self.sent_fields("alumno_id", "clase_id", "fecha", "estado")
