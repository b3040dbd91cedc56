"""
API HTTP principal del CRM de pádel.

Esta aplicación FastAPI expone endpoints REST sobre las tablas de Supabase
(alumnos, pagos, clases, alumnos_clases, asistencias).

Uso:
    uvicorn api.main:app --reload --port 3001
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from padel_crm.config import get_settings
from padel_crm.errors import PadelCRMError
from padel_crm.store import StoreClient, build_store

from .dependencies import get_store
from .routes import alumnos, asignaciones, asistencias, clases, pagos

VERSION = "0.1.0"

settings = get_settings()

# Configurar logging según ambiente
log_level = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)
logger.info(f"🚀 Iniciando API en ambiente: {settings.environment}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crea el cliente del store una sola vez para toda la vida del proceso."""
    app.state.store = await build_store(settings)
    yield
    await app.state.store.aclose()


app = FastAPI(
    title="Padel CRM API",
    description="API para gestionar alumnos, clases, pagos y asistencias de un club de pádel",
    version=VERSION,
    lifespan=lifespan,
)

logger.info(f"🌐 CORS origins configurados: {list(settings.cors_origins)}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(PadelCRMError)
async def padel_crm_error_handler(request: Request, exc: PadelCRMError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Body mal formado o con tipos inválidos: 400 con el mismo formato de error."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Request inválido")
    logger.warning(f"Request inválido en {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={"error": f"{location}: {message}" if location else message},
    )


# Registrar rutas
app.include_router(alumnos.router)
app.include_router(pagos.router)
app.include_router(clases.router)
app.include_router(asignaciones.router)
app.include_router(asistencias.router)


@app.get("/api/hello")
async def hello():
    """Ruta de prueba."""
    return {"message": "CRM de pádel funcionando 🎾"}


@app.get("/health")
async def health(store: StoreClient = Depends(get_store)):
    """Health check detallado."""
    return {
        "status": "ok",
        "service": "padel-crm-api",
        "version": VERSION,
        "store_configured": store.configured,
    }
