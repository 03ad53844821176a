# essence_orders/repos/cart_repo.py
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from essence_orders.data.models.cart_line import CartLineModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_lines(self, customer_id: int) -> List[CartLineModel]:
        return list(
            self.db.execute(
                select(CartLineModel)
                .where(CartLineModel.customer_id == customer_id)
                .order_by(CartLineModel.position, CartLineModel.id)
            ).scalars().all()
        )

    def replace_lines(self, customer_id: int, lines: List[CartLineModel]) -> None:
        #delete all + insert, w jednej transakcji
        try:
            self.db.execute(
                delete(CartLineModel).where(CartLineModel.customer_id == customer_id)
            )
            self.db.add_all(lines)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
