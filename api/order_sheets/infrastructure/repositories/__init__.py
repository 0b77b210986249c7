"""
Implementaciones de repositorios.
"""
