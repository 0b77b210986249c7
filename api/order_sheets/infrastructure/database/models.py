"""
Modelos de base de datos (ORM) de las ordenes.

Reflejan las tablas que mantiene la aplicacion de pedidos; este servicio
solo las lee. Se mapean unicamente las columnas que lee el sync:
- el tipo de las claves se toma de DB_ID_TYPE (uuid, text o bigint)
- purchase_links y purchase_images se identifican por (purchase_id, valor)
  porque no se asume que tengan una columna id propia
"""
from sqlalchemy import BigInteger, Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator

from order_sheets.core.config import settings
from order_sheets.infrastructure.database.session import Base


ID_TYPES = ("uuid", "text", "bigint")


class RecordId(TypeDecorator):
    """
    Clave de registro expuesta siempre como str.

    En PostgreSQL se compara con el tipo nativo de la columna (uuid o int8),
    sin forzar un cast a VARCHAR en el parametro.
    """

    impl = Text
    cache_ok = True

    def __init__(self, kind: str = "uuid"):
        if kind not in ID_TYPES:
            raise ValueError(f"Unsupported id type: {kind}")
        super().__init__()
        self.kind = kind

    def load_dialect_impl(self, dialect):
        if self.kind == "uuid":
            return dialect.type_descriptor(Uuid(as_uuid=False))
        if self.kind == "bigint":
            return dialect.type_descriptor(BigInteger())
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if self.kind == "bigint":
            return int(value)
        return str(value)

    def process_result_value(self, value, dialect):
        return None if value is None else str(value)


def _id_type() -> RecordId:
    return RecordId(settings.DB_ID_TYPE)


class OrderModel(Base):
    """Modelo de base de datos para ordenes."""

    __tablename__ = "orders"

    id = Column(_id_type(), primary_key=True)
    order_name = Column(String(255), nullable=True)

    purchases = relationship(
        "PurchaseModel",
        back_populates="order",
        order_by=lambda: PurchaseModel.id,
    )

    def __repr__(self):
        return f"<Order(id={self.id}, name={self.order_name})>"


class PurchaseModel(Base):
    """Modelo de base de datos para compras de una orden."""

    __tablename__ = "purchases"

    id = Column(_id_type(), primary_key=True)
    order_id = Column(_id_type(), ForeignKey("orders.id"), nullable=False, index=True)
    customer_name = Column(String(255), nullable=True)
    qty = Column(Integer, nullable=True)
    price = Column(Numeric(asdecimal=False), nullable=True)
    pickup_point = Column(String(255), nullable=True)
    note = Column(Text, nullable=True)
    picked_up = Column(Boolean, nullable=True)
    picked_up_at = Column(DateTime(timezone=True), nullable=True)
    collected = Column(Boolean, nullable=True)
    collected_at = Column(DateTime(timezone=True), nullable=True)

    order = relationship("OrderModel", back_populates="purchases")
    links = relationship("PurchaseLinkModel")
    images = relationship("PurchaseImageModel")

    def __repr__(self):
        return f"<Purchase(id={self.id}, order_id={self.order_id})>"


class PurchaseLinkModel(Base):
    """Link asociado a una compra."""

    __tablename__ = "purchase_links"

    purchase_id = Column(_id_type(), ForeignKey("purchases.id"), nullable=False, index=True)
    url = Column(Text, nullable=False)

    __mapper_args__ = {"primary_key": [purchase_id, url]}


class PurchaseImageModel(Base):
    """Imagen de una compra, guardada en el bucket publico."""

    __tablename__ = "purchase_images"

    purchase_id = Column(_id_type(), ForeignKey("purchases.id"), nullable=False, index=True)
    storage_path = Column(Text, nullable=False)

    __mapper_args__ = {"primary_key": [purchase_id, storage_path]}
