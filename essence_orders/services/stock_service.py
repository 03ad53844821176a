# essence_orders/services/stock_service.py
from essence_orders.domain.errors import InsufficientStock
from essence_orders.domain.ports import ProductInfo, ProductLookup
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)


class StockChecker:
    """
    Sprawdzanie stanu magazynu.
    Tylko odczyt - nic nie jest rezerwowane ani zmniejszane, zamowienie zostaje Pending.
    """

    def __init__(self, products: ProductLookup):
        self.products = products

    def ensure_available(self, product: ProductInfo, quantity: int) -> None:
        if product.stock < quantity:
            logger.warning(
                f"Insufficient stock for product {product.id}: "
                f"requested {quantity}, available {product.stock}"
            )
            raise InsufficientStock(product.name)

    def ensure_line_available(self, product_id: str, name: str, quantity: int) -> None:
        #przy finalizacji brak produktu = brak stanu
        product = self.products.get_product(product_id)
        if not product:
            logger.warning(f"Product {product_id} disappeared from catalog before checkout")
            raise InsufficientStock(name or product_id)
        self.ensure_available(product.model_copy(update={"name": name or product.name}), quantity)
