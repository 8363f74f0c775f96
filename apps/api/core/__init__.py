"""
Núcleo compartido: configuración, formato de respuesta y logging.
"""
