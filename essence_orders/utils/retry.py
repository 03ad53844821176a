# essence_orders/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
import redis

from essence_orders.utils.settings import HTTP_RETRY_ATTEMPTS, REDIS_RETRY_ATTEMPTS


def http_retry(attempts: int | None = None):
    """Katalog odpytywany w trakcie requestu - krotki backoff, przerwa max 1s."""
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or HTTP_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    )


def redis_retry(attempts: int | None = None):
    #ResponseError (zla komenda, blad skryptu) nie minie po ponowieniu
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or REDIS_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
        retry=retry_if_exception_type((redis.ConnectionError, redis.TimeoutError)),
    )
