"""
API HTTP del CRM de pádel.

Esta capa expone endpoints REST sobre el store remoto (Supabase)
usando el cliente de `padel_crm.store`.

La API está diseñada para ser consumida por:
- La UI web (Vite, http://localhost:5173 en desarrollo)
- Scripts de carga de datos
"""
