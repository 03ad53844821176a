from sqlalchemy import Boolean, Column, Integer, ForeignKey, String, DateTime, Numeric
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from essence_orders.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)

    # klient albo gosc, nigdy oba
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True)

    is_guest_order = Column(Boolean, nullable=False, default=False)
    guest_email = Column(String, nullable=True)
    guest_name = Column(String, nullable=True)
    guest_address = Column(String, nullable=True)

    status = Column(String, nullable=False, default="Pending")  # Pending, Processing, Shipped, Delivered, Cancelled
    total = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    lines = relationship(
        "OrderLineModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineModel.id",
        lazy="selectin",
    )
    customer = relationship("CustomerModel", lazy="selectin")
    address = relationship("AddressModel", lazy="selectin")
