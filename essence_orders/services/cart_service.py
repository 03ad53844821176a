from typing import Dict, Any, Tuple

from essence_orders.domain.cart import Cart, CartLine
from essence_orders.domain.errors import InvalidQuantity, ProductNotFound
from essence_orders.domain.ports import ProductInfo, ProductLookup
from essence_orders.services.cart_store import CartStore
from essence_orders.services.history_store import HistoryStore
from essence_orders.services.stock_service import StockChecker
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka klienta.
    commands (add, modify, remove, undo, redo) - load -> zmiana w pamieci -> walidacja stanu
    -> save -> nowy snapshot w historii
    query (view) tylko odczyt
    """

    def __init__(
        self,
        store: CartStore,
        products: ProductLookup,
        histories: HistoryStore,
        stock: StockChecker | None = None,
    ):
        self.store = store
        self.products = products
        self.histories = histories
        self.stock = stock or StockChecker(products)

    def _get_product(self, product_id: str) -> ProductInfo:
        product = self.products.get_product(product_id)
        if not product:
            raise ProductNotFound(product_id)
        return product

    def _commit(self, customer_id: int, history, before, cart: Cart) -> None:
        self.store.save(customer_id, cart)

        #pierwsza mutacja - stan wyjsciowy jako baza do cofniecia
        if history.is_empty():
            history.record(before)
        history.record(cart.snapshot())

    #query
    def view_cart(self, customer_id: int) -> Dict[str, Any]:
        cart = self.store.load(customer_id)
        items = cart.lines()
        return {
            "items": list(items),
            "total": cart.total(),
            "item_count": len(items),
        }

    #commands
    def add_to_cart(self, customer_id: int, product_id: str, quantity: int) -> Tuple[CartLine, ...]:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        product = self._get_product(product_id)
        self.stock.ensure_available(product, quantity)

        with self.histories.session(customer_id) as history:
            cart = self.store.load(customer_id)
            before = cart.snapshot()

            cart.add_line(product.id, product.name, quantity, product.price)

            #lacznie z tym co juz bylo w koszyku
            self.stock.ensure_available(product, cart.get_line(product.id).quantity)

            self._commit(customer_id, history, before, cart)

        logger.info(f"Customer {customer_id} added {quantity} x {product_id} to cart")
        return cart.lines()

    def modify_quantity(self, customer_id: int, product_id: str, quantity: int) -> Tuple[CartLine, ...]:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        product = self._get_product(product_id)
        self.stock.ensure_available(product, quantity)

        with self.histories.session(customer_id) as history:
            cart = self.store.load(customer_id)
            before = cart.snapshot()

            cart.set_quantity(product_id, quantity)

            self._commit(customer_id, history, before, cart)

        logger.info(f"Customer {customer_id} set quantity of {product_id} to {quantity}")
        return cart.lines()

    def remove_from_cart(self, customer_id: int, product_id: str) -> Tuple[CartLine, ...]:
        with self.histories.session(customer_id) as history:
            cart = self.store.load(customer_id)
            before = cart.snapshot()

            cart.remove_line(product_id)

            self._commit(customer_id, history, before, cart)

        logger.info(f"Customer {customer_id} removed {product_id} from cart")
        return cart.lines()

    def undo(self, customer_id: int) -> Tuple[CartLine, ...]:
        with self.histories.session(customer_id) as history:
            snapshot = history.undo()

            cart = Cart()
            cart.restore(snapshot)
            self.store.save(customer_id, cart)

        logger.info(f"Undo on cart of customer {customer_id}, cursor at {history.cursor}")
        return cart.lines()

    def redo(self, customer_id: int) -> Tuple[CartLine, ...]:
        with self.histories.session(customer_id) as history:
            snapshot = history.redo()

            cart = Cart()
            cart.restore(snapshot)
            self.store.save(customer_id, cart)

        logger.info(f"Redo on cart of customer {customer_id}, cursor at {history.cursor}")
        return cart.lines()
