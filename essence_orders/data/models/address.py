from sqlalchemy import Column, Integer, ForeignKey, String
from sqlalchemy.orm import relationship

from essence_orders.data.database import Base


class AddressModel(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)

    province = Column(String, nullable=False)
    canton = Column(String, nullable=False)
    district = Column(String, nullable=False)
    neighborhood = Column(String, nullable=True)
    details = Column(String, nullable=True)
    reference = Column(String, nullable=True)

    customer = relationship("CustomerModel", back_populates="addresses")
