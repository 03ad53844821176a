# essence_orders/services/cart_store.py
from essence_orders.data.models.cart_line import CartLineModel
from essence_orders.domain.cart import Cart, CartLine
from essence_orders.domain.ports import ProductLookup
from essence_orders.repos.cart_repo import CartRepo
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)


class CartStore:
    """
    Synchronizacja koszyka w pamieci z tabela cart_lines.
    save() zawsze nadpisuje caly zestaw linii klienta (delete + insert), wiec jest idempotentny.
    """

    def __init__(self, repo: CartRepo, products: ProductLookup):
        self.repo = repo
        self.products = products

    def load(self, customer_id: int) -> Cart:
        rows = self.repo.list_lines(customer_id)

        lines = []
        for row in rows:
            #nazwa z aktualnego katalogu
            product = self.products.get_product(row.product_id)
            name = product.name if product else row.product_id
            lines.append(
                CartLine(
                    product_id=row.product_id,
                    name=name,
                    quantity=row.quantity,
                    unit_price=row.unit_price,
                )
            )

        return Cart(lines)

    def save(self, customer_id: int, cart: Cart) -> None:
        rows = [
            CartLineModel(
                customer_id=customer_id,
                product_id=line.product_id,
                position=pos,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for pos, line in enumerate(cart.lines())
        ]
        self.repo.replace_lines(customer_id, rows)
        logger.info(f"Saved {len(rows)} cart lines for customer {customer_id}")
