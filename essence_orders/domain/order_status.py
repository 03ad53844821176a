# essence_orders/domain/order_status.py
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]

    @classmethod
    def parse(cls, value: str) -> "OrderStatus | None":
        try:
            return cls(value)
        except ValueError:
            return None


# katalog perfum - tylko do listingu enumow
PERFUME_CATEGORIES = [
    "ExtraitDeParfum",
    "Parfum",
    "EauDeParfum",
    "EauDeToilette",
    "EauFraiche",
    "Elixir",
]

GENDERS = ["Male", "Female", "Unisex"]
