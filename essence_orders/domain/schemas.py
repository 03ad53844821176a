# essence_orders/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


# ---------------------------------------------------------------- cart
class AddItemIn(BaseModel):
    """Dodanie produktu do koszyka."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, description="Ilosc (musi byc > 0)")


class ModifyQuantityIn(BaseModel):
    """Zmiana ilosci pozycji w koszyku."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, description="Nowa ilosc (musi byc > 0)")


class CartLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    name: str
    quantity: int
    unit_price: Decimal


class CartItemsOut(BaseModel):
    message: str
    items: List[CartLineOut]


class CartViewOut(BaseModel):
    items: List[CartLineOut]
    total: Decimal
    item_count: int


# ---------------------------------------------------------------- checkout
class FinalizeIn(BaseModel):
    address_id: int | None = None


class GuestAddressIn(BaseModel):
    province: str | None = None
    canton: str | None = None
    district: str | None = None
    neighborhood: str | None = None
    details: str | None = None
    reference: str | None = None


class GuestInfoIn(BaseModel):
    """Dane kontaktowe goscia. Kompletnosc sprawdza OrderService (IncompleteGuestInfo)."""

    email: str | None = None
    name: str | None = None
    address: GuestAddressIn | None = None


class GuestItemIn(BaseModel):
    product_id: str = Field(..., min_length=1)
    name: str | None = None
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)


class GuestCheckoutIn(BaseModel):
    guest_info: GuestInfoIn | None = None
    items: List[GuestItemIn] = []


# ---------------------------------------------------------------- orders
class OrderLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal


class CustomerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class AddressOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int
    province: str
    canton: str
    district: str
    neighborhood: str | None = None
    details: str | None = None
    reference: str | None = None


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int | None = None
    status: str
    is_guest_order: bool
    guest_email: str | None = None
    guest_name: str | None = None
    guest_address: str | None = None
    address_id: int | None = None
    total: Decimal
    created_at: datetime
    lines: List[OrderLineOut]
    customer: CustomerSummary | None = None
    address: AddressOut | None = None


class OrderCreatedOut(BaseModel):
    message: str
    order: OrderOut


class StatusUpdateIn(BaseModel):
    status: str = Field(..., min_length=1)


# ---------------------------------------------------------------- customers
class CustomerCreate(BaseModel):
    """Schema dla tworzenia klienta."""

    id: int = Field(..., gt=0, description="ID klienta (musi byc > 0)")
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=200)


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class AddressCreate(BaseModel):
    province: str = Field(..., min_length=1)
    canton: str = Field(..., min_length=1)
    district: str = Field(..., min_length=1)
    neighborhood: str | None = None
    details: str | None = None
    reference: str | None = None


class EnumsOut(BaseModel):
    perfume_categories: List[str]
    genders: List[str]
    order_statuses: List[str]
