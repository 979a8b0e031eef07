"""
Utilidades: acceso por ruta a JSON y configuración de logging.
"""
