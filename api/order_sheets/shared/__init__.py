"""
Codigo compartido entre capas.
"""
