"""
Capa de infraestructura: base de datos y servicios externos.
"""
