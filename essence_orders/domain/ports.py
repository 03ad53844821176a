# essence_orders/domain/ports.py
"""Kontrakty zewnetrznych zaleznosci rdzenia (katalog produktow, adresy)."""
from decimal import Decimal
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict


class ProductInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: Decimal
    stock: int


class ProductLookup(Protocol):
    def get_product(self, product_id: str) -> ProductInfo | None:
        ...


class AddressLookup(Protocol):
    def get_address(self, address_id: int, customer_id: int) -> Any | None:
        ...
