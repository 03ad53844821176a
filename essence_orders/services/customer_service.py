from typing import List

from sqlalchemy.orm import Session

from essence_orders.data.models.address import AddressModel
from essence_orders.data.models.customer import CustomerModel
from essence_orders.domain.errors import CustomerNotFound
from essence_orders.domain.schemas import AddressCreate, AddressOut, CustomerCreate, CustomerRead
from essence_orders.repos.customer_repo import CustomerRepo


class CustomerService:
    def __init__(self, db: Session):
        self.repo = CustomerRepo(db)

    def create_customer(self, payload: CustomerCreate) -> CustomerRead:
        existing = self.repo.get_customer(payload.id)
        if existing:
            return CustomerRead.model_validate(existing)

        customer = CustomerModel(id=payload.id, name=payload.name, email=payload.email)
        created = self.repo.create_customer(customer)
        return CustomerRead.model_validate(created)

    def get_customer(self, customer_id: int) -> CustomerRead:
        customer = self.repo.get_customer(customer_id)
        if not customer:
            raise CustomerNotFound(customer_id)
        return CustomerRead.model_validate(customer)

    def add_address(self, customer_id: int, payload: AddressCreate) -> AddressOut:
        if not self.repo.get_customer(customer_id):
            raise CustomerNotFound(customer_id)

        address = AddressModel(customer_id=customer_id, **payload.model_dump())
        created = self.repo.create_address(address)
        return AddressOut.model_validate(created)

    def list_addresses(self, customer_id: int) -> List[AddressOut]:
        if not self.repo.get_customer(customer_id):
            raise CustomerNotFound(customer_id)
        return [AddressOut.model_validate(a) for a in self.repo.list_addresses(customer_id)]
