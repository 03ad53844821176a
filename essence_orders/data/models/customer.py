from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from essence_orders.data.database import Base


class CustomerModel(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    addresses = relationship(
        "AddressModel",
        back_populates="customer",
        cascade="all, delete-orphan",
    )
