"""
Constantes de la aplicacion.
"""
