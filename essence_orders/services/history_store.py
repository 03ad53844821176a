# essence_orders/services/history_store.py
import json
import threading
import time
from contextlib import contextmanager
from functools import lru_cache
from typing import Callable, Dict, Iterator, Tuple

import redis

from essence_orders.domain.history import CartHistory
from essence_orders.services.lock_service import LockService
from essence_orders.utils.retry import redis_retry
from essence_orders.utils.settings import HISTORY_BACKEND, HISTORY_TTL_SECONDS, REDIS_URL
from essence_orders.utils.logging import get_logger

logger = get_logger(__name__)


class HistoryStore:
    """
    Magazyn historii undo/redo, klucz = customer_id.

    session() daje wylaczny dostep do historii jednego klienta. Zmiany sa zapisywane
    tylko gdy blok zakonczy sie bez wyjatku, wiec nieudane undo/redo niczego nie zmienia.
    Historia wygasa po ttl sekund bez uzycia.
    """

    def session(self, customer_id: int):
        raise NotImplementedError

    def clear(self, customer_id: int) -> None:
        raise NotImplementedError


class MemoryHistoryStore(HistoryStore):
    """Historia w pamieci procesu - tylko jedna instancja serwisu, ginie przy restarcie."""

    def __init__(self, ttl: int | None = None, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl or HISTORY_TTL_SECONDS
        self._clock = clock
        self._entries: Dict[int, Tuple[CartHistory, float]] = {}
        self._locks: Dict[int, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, customer_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(customer_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[customer_id] = lock
            return lock

    def _acquire(self, customer_id: int) -> threading.Lock:
        while True:
            lock = self._lock_for(customer_id)
            lock.acquire()
            #lock mogl zostac usuniety zanim go wzielismy
            with self._guard:
                if self._locks.get(customer_id) is lock:
                    return lock
            lock.release()

    def _drop_lock(self, customer_id: int) -> None:
        """Wolany pod _guard. Zajety lock zostaje."""
        lock = self._locks.get(customer_id)
        if lock is not None and not lock.locked():
            del self._locks[customer_id]

    def _purge_expired(self) -> None:
        now = self._clock()
        with self._guard:
            expired = [cid for cid, (_, expires_at) in self._entries.items() if expires_at <= now]
            for cid in expired:
                del self._entries[cid]
                self._drop_lock(cid)
        if expired:
            logger.info(f"Dropped {len(expired)} expired cart histories")

    @contextmanager
    def session(self, customer_id: int) -> Iterator[CartHistory]:
        self._purge_expired()

        lock = self._acquire(customer_id)
        try:
            entry = self._entries.get(customer_id)
            history = entry[0].copy() if entry else CartHistory()

            yield history

            with self._guard:
                self._entries[customer_id] = (history, self._clock() + self.ttl)
        finally:
            lock.release()
            with self._guard:
                if customer_id not in self._entries:
                    self._drop_lock(customer_id)

    def clear(self, customer_id: int) -> None:
        with self._guard:
            self._entries.pop(customer_id, None)
            self._drop_lock(customer_id)

    def __contains__(self, customer_id: int) -> bool:
        entry = self._entries.get(customer_id)
        return entry is not None and entry[1] > self._clock()


class RedisHistoryStore(HistoryStore):
    """Historia w redisie - wspolna dla wielu instancji, przezywa restart."""

    def __init__(
        self,
        client: redis.Redis | None = None,
        lock_service: LockService | None = None,
        ttl: int | None = None,
    ):
        self.redis = client or redis.Redis.from_url(REDIS_URL, decode_responses=True)
        self.locks = lock_service or LockService(client=self.redis)
        self.ttl = ttl or HISTORY_TTL_SECONDS

    @staticmethod
    def _key(customer_id: int) -> str:
        return f"cart:{customer_id}:history"

    @redis_retry()
    def _read(self, customer_id: int) -> CartHistory:
        raw = self.redis.get(self._key(customer_id))
        if not raw:
            return CartHistory()
        return CartHistory.from_dict(json.loads(raw))

    @redis_retry()
    def _write(self, customer_id: int, history: CartHistory) -> None:
        self.redis.set(self._key(customer_id), json.dumps(history.to_dict()), ex=self.ttl)

    @contextmanager
    def session(self, customer_id: int) -> Iterator[CartHistory]:
        token = self.locks.acquire(customer_id)
        try:
            history = self._read(customer_id)
            yield history
            self._write(customer_id, history)
        finally:
            self.locks.release(customer_id, token)

    @redis_retry()
    def clear(self, customer_id: int) -> None:
        self.redis.delete(self._key(customer_id))


@lru_cache()
def get_history_store() -> HistoryStore:
    """Jeden magazyn historii na proces, wybierany z HISTORY_BACKEND."""
    if HISTORY_BACKEND == "redis":
        logger.info("Using redis cart history store")
        return RedisHistoryStore()
    if HISTORY_BACKEND != "memory":
        raise ValueError(f"Unknown HISTORY_BACKEND: {HISTORY_BACKEND}")
    logger.info("Using in-memory cart history store")
    return MemoryHistoryStore()
