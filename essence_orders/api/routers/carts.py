#essence_orders/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from essence_orders.data.database import get_db
from essence_orders.domain.errors import InsufficientStock
from essence_orders.domain.schemas import (
    AddItemIn,
    ModifyQuantityIn,
    CartItemsOut,
    CartViewOut,
)
from essence_orders.repos.cart_repo import CartRepo
from essence_orders.services.cart_service import CartService
from essence_orders.services.cart_store import CartStore
from essence_orders.services.catalog_service import build_product_lookup
from essence_orders.services.history_store import HistoryStore, get_history_store
from essence_orders.services.lock_service import LockTimeout

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session, histories: HistoryStore) -> CartService:
    products = build_product_lookup(db)
    return CartService(
        store=CartStore(CartRepo(db), products),
        products=products,
        histories=histories,
    )


def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, LockTimeout):
        return HTTPException(status_code=503, detail=str(e))
    if isinstance(e, PermissionError):
        return HTTPException(status_code=403, detail=str(e))
    if isinstance(e, LookupError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, InsufficientStock):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=CartViewOut)
def view_cart(
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
    histories: HistoryStore = Depends(get_history_store),
):
    svc = get_service(db, histories)
    return svc.view_cart(customer_id)


@router.post("/items", response_model=CartItemsOut)
def add_item(
    payload: AddItemIn,
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
    histories: HistoryStore = Depends(get_history_store),
):
    svc = get_service(db, histories)
    try:
        items = svc.add_to_cart(customer_id, payload.product_id, payload.quantity)
    except (LookupError, ValueError, PermissionError, LockTimeout) as e:
        raise _to_http(e)
    return {"message": "Product added to cart", "items": list(items)}


@router.put("/items", response_model=CartItemsOut)
def modify_item(
    payload: ModifyQuantityIn,
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
    histories: HistoryStore = Depends(get_history_store),
):
    svc = get_service(db, histories)
    try:
        items = svc.modify_quantity(customer_id, payload.product_id, payload.quantity)
    except (LookupError, ValueError, PermissionError, LockTimeout) as e:
        raise _to_http(e)
    return {"message": "Quantity updated", "items": list(items)}


@router.delete("/items/{product_id}", response_model=CartItemsOut)
def remove_item(
    product_id: str,
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
    histories: HistoryStore = Depends(get_history_store),
):
    svc = get_service(db, histories)
    try:
        items = svc.remove_from_cart(customer_id, product_id)
    except LockTimeout as e:
        raise _to_http(e)
    return {"message": "Product removed from cart", "items": list(items)}


@router.post("/undo", response_model=CartItemsOut)
def undo(
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
    histories: HistoryStore = Depends(get_history_store),
):
    svc = get_service(db, histories)
    try:
        items = svc.undo(customer_id)
    except (ValueError, LockTimeout) as e:
        raise _to_http(e)
    return {"message": "Action undone", "items": list(items)}


@router.post("/redo", response_model=CartItemsOut)
def redo(
    customer_id: int = Query(...),
    db: Session = Depends(get_db),
    histories: HistoryStore = Depends(get_history_store),
):
    svc = get_service(db, histories)
    try:
        items = svc.redo(customer_id)
    except (ValueError, LockTimeout) as e:
        raise _to_http(e)
    return {"message": "Action redone", "items": list(items)}
