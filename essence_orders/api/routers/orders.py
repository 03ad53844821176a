# essence_orders/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from essence_orders.data.database import get_db
from essence_orders.domain.errors import InsufficientStock
from essence_orders.domain.schemas import (
    FinalizeIn,
    GuestCheckoutIn,
    OrderCreatedOut,
    OrderOut,
    StatusUpdateIn,
)
from essence_orders.repos.cart_repo import CartRepo
from essence_orders.repos.customer_repo import CustomerRepo
from essence_orders.repos.order_repo import OrderRepo
from essence_orders.services.cart_store import CartStore
from essence_orders.services.catalog_service import build_product_lookup
from essence_orders.services.order_service import OrderService
from essence_orders.services.stock_service import StockChecker

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session) -> OrderService:
    products = build_product_lookup(db)
    return OrderService(
        repo=OrderRepo(db),
        cart_store=CartStore(CartRepo(db), products),
        addresses=CustomerRepo(db),
        stock=StockChecker(products),
    )


@router.post("/checkout", response_model=OrderCreatedOut, status_code=201)
def finalize_order(
    payload: FinalizeIn,
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamowienie z koszyka klienta (bez platnosci).
    """
    svc = get_service(db)
    try:
        order = svc.finalize_from_cart(customer_id, payload.address_id)
    except InsufficientStock as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (LookupError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Order created", "order": order}


@router.post("/guest-checkout", response_model=OrderCreatedOut, status_code=201)
def finalize_guest_order(
    payload: GuestCheckoutIn,
    db: Session = Depends(get_db),
):
    """
    Zamowienie goscia - bez konta, dane kontaktowe i adres w body.
    """
    svc = get_service(db)
    try:
        order = svc.finalize_as_guest(payload.guest_info, payload.items)
    except InsufficientStock as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Order created", "order": order}


@router.get("/history", response_model=List[OrderOut])
def order_history(
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.list_customer_orders(customer_id)


# admin - listing i status, bez sprawdzania wlasciciela
@router.get("/admin/all", response_model=List[OrderOut])
def list_all_orders(db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.list_all_orders()


@router.get("/admin/{order_id}", response_model=OrderOut)
def get_order_admin(order_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_order(order_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/admin/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: int,
    payload: StatusUpdateIn,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_status(order_id, payload.status)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
):
    """
    Szczegoly zamowienia, tylko dla wlasciciela.
    """
    svc = get_service(db)
    try:
        return svc.get_order(order_id, customer_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
