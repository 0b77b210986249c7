"""
Capa de aplicacion: casos de uso, servicios y contratos.
"""
