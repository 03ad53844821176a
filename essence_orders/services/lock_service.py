import uuid

import redis
from tenacity import retry, retry_if_result, stop_after_delay, wait_fixed, RetryError

from essence_orders.utils.retry import redis_retry
from essence_orders.utils.settings import REDIS_URL, HISTORY_LOCK_TTL_SECONDS
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec lock zdejmuje tylko ten kto go zalozyl (token)


class LockTimeout(RuntimeError):
    pass


class LockService:
    """
    -lock na historie koszyka klienta (serializacja undo/redo per customer)
    -zwalnianie locka
    -atomowosc przy pomocy lua
    """

    def __init__(self, client: redis.Redis | None = None, url: str | None = None, ttl: int | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl or HISTORY_LOCK_TTL_SECONDS

    @staticmethod
    def _key(customer_id: int) -> str:
        return f"cart:{customer_id}:history:lock"

    @redis_retry()
    def try_acquire(self, customer_id: int, token: str) -> bool:
        #SET cart:1:history:lock <token> NX EX 10
        return bool(
            self.redis.set(
                name=self._key(customer_id),
                value=token,
                nx=True,
                ex=self.ttl,  #wygasa sam jesli proces padnie z lockiem
            )
        )

    def acquire(self, customer_id: int, wait_seconds: float = 5.0) -> str:
        token = str(uuid.uuid4())

        @retry(
            stop=stop_after_delay(wait_seconds),
            wait=wait_fixed(0.05),
            retry=retry_if_result(lambda acquired: not acquired),
        )
        def _spin():
            return self.try_acquire(customer_id, token)

        try:
            _spin()
        except RetryError:
            logger.warning(f"Timed out waiting for history lock of customer {customer_id}")
            raise LockTimeout(f"Cart history of customer {customer_id} is busy")

        logger.debug(f"Acquired history lock for customer {customer_id}")
        return token

    @redis_retry()
    def release(self, customer_id: int, token: str) -> bool:
        res = self.redis.eval(_RELEASE_LUA, 1, self._key(customer_id), token)
        logger.debug(f"Released history lock for customer {customer_id}")
        return bool(res)
