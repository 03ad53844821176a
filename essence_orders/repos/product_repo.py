# essence_orders/repos/product_repo.py
from sqlalchemy.orm import Session

from essence_orders.data.models.product import ProductModel
from essence_orders.domain.ports import ProductInfo


class ProductRepo:
    """ProductLookup na lokalnej tabeli products."""

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> ProductInfo | None:
        product = self.db.get(ProductModel, product_id)
        if not product:
            return None
        return ProductInfo.model_validate(product)

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
