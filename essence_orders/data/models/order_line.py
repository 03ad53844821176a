from sqlalchemy import Column, Integer, ForeignKey, String, Numeric
from sqlalchemy.orm import relationship

from essence_orders.data.database import Base


class OrderLineModel(Base):
    __tablename__ = "order_lines"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String, nullable=False)
    # kopia z momentu zamowienia, niezalezna od pozniejszych zmian w katalogu
    product_name = Column(String, nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    order = relationship("OrderModel", back_populates="lines")
