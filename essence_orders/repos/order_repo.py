# essence_orders/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from essence_orders.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders_by_customer(self, customer_id: int) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.customer_id == customer_id)
                .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def list_all_orders(self) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel).order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def update_order_status(self, order_id: int, status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            self.db.commit()
            self.db.refresh(order)
        return order
