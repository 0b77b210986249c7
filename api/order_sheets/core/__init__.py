"""
Nucleo: configuracion y eventos de ciclo de vida.
"""
