# essence_orders/services/product_client.py
import requests

from essence_orders.domain.ports import ProductInfo
from essence_orders.utils.retry import http_retry
from essence_orders.utils.settings import PRODUCT_SERVICE_URL, PRODUCT_SERVICE_TIMEOUT
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """ProductLookup po HTTP do zewnetrznego katalogu."""

    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout or PRODUCT_SERVICE_TIMEOUT

    @http_retry()
    def _fetch(self, product_id: str) -> dict | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()

    def get_product(self, product_id: str) -> ProductInfo | None:
        try:
            data = self._fetch(product_id)
        except requests.RequestException as e:
            logger.error(f"Product service unavailable for product {product_id}: {e}")
            raise

        if data is None:
            return None
        return ProductInfo(
            id=str(data["id"]),
            name=data["name"],
            price=str(data["price"]),
            stock=int(data.get("stock", 0)),
        )
