# essence_orders/domain/errors.py
"""
Wyjatki domenowe.
Kazdy dziedziczy tez po wbudowanym typie (LookupError / ValueError / PermissionError),
routery mapuja je na kody HTTP tak samo jak w reszcie serwisu.
"""


class OrderError(Exception):
    pass


# NotFound
class NotFound(OrderError, LookupError):
    pass


class ProductNotFound(NotFound):
    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class LineNotFound(NotFound):
    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} is not in the cart")
        self.product_id = product_id


class OrderNotFound(NotFound):
    def __init__(self, order_id: int):
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class CustomerNotFound(NotFound):
    def __init__(self, customer_id: int):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class InvalidAddress(NotFound):
    def __init__(self, message: str = "Invalid shipping address"):
        super().__init__(message)


# Validation
class ValidationFailed(OrderError, ValueError):
    pass


class InvalidQuantity(ValidationFailed):
    def __init__(self, quantity: int):
        super().__init__("Quantity must be greater than 0")
        self.quantity = quantity


class EmptyCart(ValidationFailed):
    def __init__(self):
        super().__init__("The cart is empty")


class EmptyOrder(ValidationFailed):
    def __init__(self):
        super().__init__("There are no items in the order")


class IncompleteGuestInfo(ValidationFailed):
    def __init__(self):
        super().__init__("Incomplete guest information. Email, name and address are required")


class InvalidStatus(ValidationFailed):
    def __init__(self, status: str):
        super().__init__(f"Invalid order status: {status}")
        self.status = status


class InsufficientStock(OrderError, ValueError):
    def __init__(self, product_name: str):
        super().__init__(f"Insufficient stock for {product_name}")
        self.product_name = product_name


class Forbidden(OrderError, PermissionError):
    pass


# Historia koszyka
class NothingToUndo(OrderError, ValueError):
    def __init__(self):
        super().__init__("There are no actions to undo")


class NothingToRedo(OrderError, ValueError):
    def __init__(self):
        super().__init__("There are no actions to redo")
