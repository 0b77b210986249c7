"""
Sincronizacion de ordenes a pestanas de Google Sheets.
"""
