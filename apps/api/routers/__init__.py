"""
Routers HTTP del servicio.
"""
