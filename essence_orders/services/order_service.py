# essence_orders/services/order_service.py
from decimal import Decimal
from typing import List

from essence_orders.data.models.order import OrderModel
from essence_orders.data.models.order_line import OrderLineModel
from essence_orders.domain.errors import (
    EmptyCart,
    EmptyOrder,
    Forbidden,
    IncompleteGuestInfo,
    InvalidAddress,
    InvalidStatus,
    OrderNotFound,
)
from essence_orders.domain.order_status import OrderStatus
from essence_orders.domain.ports import AddressLookup
from essence_orders.domain.schemas import GuestAddressIn, GuestInfoIn, GuestItemIn
from essence_orders.repos.order_repo import OrderRepo
from essence_orders.services.cart_store import CartStore
from essence_orders.services.stock_service import StockChecker
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)


def format_guest_address(address: GuestAddressIn) -> str:
    """
    Adres goscia jako jeden string:
    "province, canton, district[, neighborhood][, details][. Ref: reference]"
    """
    text = ", ".join(p for p in (address.province, address.canton, address.district) if p)
    if address.neighborhood:
        text += f", {address.neighborhood}"
    if address.details:
        text += f", {address.details}"
    if address.reference:
        text += f". Ref: {address.reference}"
    return text


class OrderService:
    """
    Serwis zamowien: finalizacja (klient z koszyka / gosc z listy pozycji)
    oraz cykl zycia zamowienia (status, historia, listing admina).
    Platnosci nie ma - zamowienie powstaje jako Pending, stan magazynu tylko sprawdzany.
    """

    def __init__(
        self,
        repo: OrderRepo,
        cart_store: CartStore,
        addresses: AddressLookup,
        stock: StockChecker,
    ):
        self.repo = repo
        self.cart_store = cart_store
        self.addresses = addresses
        self.stock = stock

    def finalize_from_cart(self, customer_id: int, address_id: int | None) -> OrderModel:
        """
        Use Case: zamowienie z koszyka zalogowanego klienta.

        1. koszyk nie moze byc pusty
        2. adres musi nalezec do klienta
        3. total z koszyka
        4. stan magazynu dla kazdej pozycji
        5. zapis zamowienia Pending (koszyk zostaje bez zmian)
        """
        cart = self.cart_store.load(customer_id)
        lines = cart.lines()

        if not lines:
            raise EmptyCart()

        if not address_id:
            raise InvalidAddress("A shipping address must be selected")

        address = self.addresses.get_address(address_id, customer_id)
        if not address:
            logger.warning(f"Address {address_id} does not belong to customer {customer_id}")
            raise InvalidAddress()

        total = cart.total()

        for line in lines:
            self.stock.ensure_line_available(line.product_id, line.name, line.quantity)

        order = OrderModel(
            customer_id=customer_id,
            address_id=address.id,
            status=OrderStatus.PENDING.value,
            is_guest_order=False,
            total=total,
            lines=[
                OrderLineModel(
                    product_id=line.product_id,
                    product_name=line.name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in lines
            ],
        )

        created = self.repo.create_order(order)
        logger.info(f"Order {created.id} created from cart of customer {customer_id}, total {total}")
        return created

    def finalize_as_guest(self, guest_info: GuestInfoIn | None, items: List[GuestItemIn] | None) -> OrderModel:
        """
        Use Case: zamowienie goscia bez konta.
        Ceny jednostkowe przychodza od klienta i nie sa porownywane z katalogiem.
        """
        if not _guest_info_complete(guest_info):
            raise IncompleteGuestInfo()

        if not items:
            raise EmptyOrder()

        total = sum((item.unit_price * item.quantity for item in items), Decimal("0.00"))

        for item in items:
            self.stock.ensure_line_available(item.product_id, item.name, item.quantity)

        order = OrderModel(
            status=OrderStatus.PENDING.value,
            is_guest_order=True,
            guest_email=guest_info.email,
            guest_name=guest_info.name,
            guest_address=format_guest_address(guest_info.address),
            total=total,
            lines=[
                OrderLineModel(
                    product_id=item.product_id,
                    product_name=item.name or item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in items
            ],
        )

        created = self.repo.create_order(order)
        logger.info(f"Guest order {created.id} created for {guest_info.email}, total {total}")
        return created

    #query
    def list_customer_orders(self, customer_id: int) -> List[OrderModel]:
        return self.repo.list_orders_by_customer(customer_id)

    def get_order(self, order_id: int, customer_id: int | None = None) -> OrderModel:
        """customer_id=None - sciezka admina, bez sprawdzania wlasciciela."""
        order = self.repo.get_order(order_id)

        if not order:
            raise OrderNotFound(order_id)

        if customer_id is not None and order.customer_id != customer_id:
            raise Forbidden("You do not have permission to view this order")

        return order

    def list_all_orders(self) -> List[OrderModel]:
        return self.repo.list_all_orders()

    #command
    def update_status(self, order_id: int, status: str) -> OrderModel:
        new_status = OrderStatus.parse(status)
        if new_status is None:
            raise InvalidStatus(status)

        order = self.repo.update_order_status(order_id, new_status.value)
        if not order:
            raise OrderNotFound(order_id)

        logger.info(f"Order {order_id} status changed to {new_status.value}")
        return order


def _guest_info_complete(guest_info: GuestInfoIn | None) -> bool:
    if not guest_info or not guest_info.email or not guest_info.name:
        return False
    address = guest_info.address
    if not address:
        return False
    return bool(address.province and address.canton and address.district)
