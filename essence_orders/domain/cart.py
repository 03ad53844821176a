# essence_orders/domain/cart.py
from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from essence_orders.domain.errors import InvalidQuantity, LineNotFound


class CartLine(BaseModel):
    """Pozycja koszyka, niemutowalna - zmiana ilosci tworzy nowa pozycje."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class CartSnapshot(BaseModel):
    """Memento: kopia linii koszyka w jednym momencie."""

    model_config = ConfigDict(frozen=True)

    lines: Tuple[CartLine, ...] = ()


class Cart:
    """
    Koszyk jednego klienta trzymany w pamieci.
    Kolejnosc linii = kolejnosc dodania, max jedna linia na product_id.
    """

    def __init__(self, lines=None):
        self._lines: list[CartLine] = list(lines or [])

    def _index_of(self, product_id: str) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                return i
        return None

    def add_line(self, product_id: str, name: str, quantity: int, unit_price: Decimal) -> None:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        idx = self._index_of(product_id)
        if idx is None:
            self._lines.append(
                CartLine(
                    product_id=product_id,
                    name=name,
                    quantity=quantity,
                    unit_price=unit_price,
                )
            )
            return

        existing = self._lines[idx]
        self._lines[idx] = existing.model_copy(update={"quantity": existing.quantity + quantity})

    def set_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity(quantity)

        idx = self._index_of(product_id)
        if idx is None:
            raise LineNotFound(product_id)

        self._lines[idx] = self._lines[idx].model_copy(update={"quantity": quantity})

    def remove_line(self, product_id: str) -> None:
        self._lines = [line for line in self._lines if line.product_id != product_id]

    def get_line(self, product_id: str) -> CartLine | None:
        idx = self._index_of(product_id)
        return None if idx is None else self._lines[idx]

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self._lines), Decimal("0.00"))

    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(lines=tuple(self._lines))

    def restore(self, snapshot: CartSnapshot) -> None:
        self._lines = list(snapshot.lines)
