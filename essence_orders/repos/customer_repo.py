# essence_orders/repos/customer_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from essence_orders.data.models.address import AddressModel
from essence_orders.data.models.customer import CustomerModel


class CustomerRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: int) -> CustomerModel | None:
        return self.db.get(CustomerModel, customer_id)

    def create_customer(self, customer: CustomerModel) -> CustomerModel:
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def create_address(self, address: AddressModel) -> AddressModel:
        self.db.add(address)
        self.db.commit()
        self.db.refresh(address)
        return address

    def list_addresses(self, customer_id: int) -> List[AddressModel]:
        return list(
            self.db.execute(
                select(AddressModel)
                .where(AddressModel.customer_id == customer_id)
                .order_by(AddressModel.id)
            ).scalars().all()
        )

    # AddressLookup - tylko adresy nalezace do klienta
    def get_address(self, address_id: int, customer_id: int) -> AddressModel | None:
        return self.db.execute(
            select(AddressModel).where(
                AddressModel.id == address_id,
                AddressModel.customer_id == customer_id,
            )
        ).scalar_one_or_none()
