from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from essence_orders.data.database import get_db
from essence_orders.domain.schemas import AddressCreate, AddressOut, CustomerCreate, CustomerRead
from essence_orders.services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("/", response_model=CustomerRead)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    service = CustomerService(db)
    return service.create_customer(payload)


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    service = CustomerService(db)
    try:
        return service.get_customer(customer_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{customer_id}/addresses", response_model=AddressOut, status_code=201)
def add_address(customer_id: int, payload: AddressCreate, db: Session = Depends(get_db)):
    service = CustomerService(db)
    try:
        return service.add_address(customer_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{customer_id}/addresses", response_model=List[AddressOut])
def list_addresses(customer_id: int, db: Session = Depends(get_db)):
    service = CustomerService(db)
    try:
        return service.list_addresses(customer_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
