#!/usr/bin/env python3
"""
Script helper para ejecutar la API FastAPI.
Ejecuta desde la raíz del proyecto para asegurar que Python encuentre el módulo 'api'.
"""

import sys

from padel_crm.config import get_settings

if __name__ == "__main__":
    port = get_settings().port
    try:
        import uvicorn
        print(f"🚀 Servidor corriendo en http://localhost:{port}")
        print(f"📖 Documentación disponible en http://localhost:{port}/docs")
        uvicorn.run("api.main:app", host="0.0.0.0", port=port, reload=True)
    except ImportError as e:
        print(f"❌ Error: No se pudo importar uvicorn. ¿Activaste el venv?")
        print(f"   Error: {e}")
        sys.exit(1)
