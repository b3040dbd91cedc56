"""
Errores de dominio del CRM.

Cada error sabe con qué status HTTP se responde; la capa `api` los
traduce a `{"error": <mensaje>}`.
"""


class PadelCRMError(Exception):
    """Error base. `message` es lo que ve el cliente."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PadelCRMError):
    """Faltan campos obligatorios en el request."""

    status_code = 400


class NotFoundError(PadelCRMError):
    """La fila a modificar no existe."""

    status_code = 404


class StoreError(PadelCRMError):
    """Falló la llamada a Supabase. El mensaje viene tal cual del store."""

    status_code = 500
