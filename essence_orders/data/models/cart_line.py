from sqlalchemy import Column, Integer, ForeignKey, String, Numeric, UniqueConstraint

from essence_orders.data.database import Base


class CartLineModel(Base):
    __tablename__ = "cart_lines"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    # produkt moze byc w zewnetrznym katalogu, bez FK
    product_id = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    __table_args__ = (UniqueConstraint("customer_id", "product_id", name="u_customer_product"),)
