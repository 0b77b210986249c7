"""
Capa HTTP (FastAPI).
"""
