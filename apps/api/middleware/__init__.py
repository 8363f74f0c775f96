"""
Middlewares ASGI del servicio.

Cada middleware envuelve una aplicación ASGI interna y delega en ella.
El orden lo fija la raíz de composición (main.py):
access_log(recovery(rutas)).
"""

from middleware.access_log import AccessLogMiddleware
from middleware.recovery import RecoveryMiddleware

__all__ = ["AccessLogMiddleware", "RecoveryMiddleware"]
