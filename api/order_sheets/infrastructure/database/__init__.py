"""
Configuracion de base de datos.

Importa todos los modelos para que se registren con Base
antes de crear las tablas.
"""
from order_sheets.infrastructure.database.models import (
    OrderModel,
    PurchaseModel,
    PurchaseLinkModel,
    PurchaseImageModel,
)
