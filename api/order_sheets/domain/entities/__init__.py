"""
Entidades del dominio.
"""
from order_sheets.domain.entities.order import Order, Purchase

__all__ = ["Order", "Purchase"]
