"""
Interfaces de repositorios del dominio.
"""
