"""Rutas de la API."""

from . import alumnos, asignaciones, asistencias, clases, pagos

__all__ = ["alumnos", "asignaciones", "asistencias", "clases", "pagos"]
