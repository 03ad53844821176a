#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from essence_orders.data.models.customer import CustomerModel
from essence_orders.data.models.address import AddressModel
from essence_orders.data.models.product import ProductModel
from essence_orders.data.models.cart_line import CartLineModel
from essence_orders.data.models.order import OrderModel
from essence_orders.data.models.order_line import OrderLineModel

__all__ = [
    "CustomerModel",
    "AddressModel",
    "ProductModel",
    "CartLineModel",
    "OrderModel",
    "OrderLineModel",
]
