# essence_orders/services/catalog_service.py
from sqlalchemy.orm import Session

from essence_orders.domain.ports import ProductLookup
from essence_orders.repos.product_repo import ProductRepo
from essence_orders.services.product_client import ProductClient
from essence_orders.utils.settings import PRODUCT_SERVICE_URL


def build_product_lookup(db: Session, base_url: str | None = None) -> ProductLookup:
    """Katalog po HTTP jesli skonfigurowany, inaczej tabela products."""
    url = PRODUCT_SERVICE_URL if base_url is None else base_url
    if url:
        return ProductClient(base_url=url)
    return ProductRepo(db)
