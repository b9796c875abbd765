import asyncio
import logging
import time
from typing import Awaitable, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, str]


class IdSetCache:
    """
    TTL cache for resolved visible-id lists, keyed by (rider id, filter signature).

    Only the id lists are cached, positions are always fetched fresh by the
    caller. Concurrent misses on the same key share a single computation;
    different keys never wait on each other. Expired entries are pruned on
    every store and at most `max_keys` entries are kept, oldest evicted first.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_keys: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_keys = max_keys
        self.clock = clock
        self._entries: Dict[CacheKey, Tuple[List[int], float]] = {}
        self._inflight: Dict[CacheKey, asyncio.Future] = {}
        self._generation = 0

    def _prune(self) -> None:
        now = self.clock()
        for key in [k for k, (_, expires_at) in self._entries.items() if expires_at <= now]:
            del self._entries[key]

    def _store(self, key: CacheKey, ids: List[int]) -> None:
        self._prune()
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_keys:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
        self._entries[key] = (ids, self.clock() + self.ttl_seconds)

    async def _compute(
        self,
        key: CacheKey,
        compute: Callable[[], Awaitable[List[int]]],
        generation: int,
    ) -> List[int]:
        ids = list(await compute())
        # a flush while computing means this result must not repopulate the cache
        if generation == self._generation:
            self._store(key, ids)
        return ids

    def _forget(self, key: CacheKey, task: asyncio.Future) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"CACHE_COMPUTE_FAILED: {key}")

    async def resolve(
        self, key: CacheKey, compute: Callable[[], Awaitable[List[int]]]
    ) -> List[int]:
        entry = self._entries.get(key)
        if entry is not None:
            ids, expires_at = entry
            if self.clock() < expires_at:
                logger.debug(f"CACHE_HIT: {key}")
                return list(ids)
            del self._entries[key]

        task = self._inflight.get(key)
        if task is None:
            logger.info(f"CACHE_MISS: {key}")
            task = asyncio.ensure_future(self._compute(key, compute, self._generation))
            self._inflight[key] = task
            task.add_done_callback(lambda t, key=key: self._forget(key, t))
        ids = await asyncio.shield(task)
        return list(ids)

    def invalidate(self, rider_id: int) -> None:
        for key in [k for k in self._entries if k[0] == rider_id]:
            del self._entries[key]

    def flush_all(self) -> None:
        self._entries = {}
        self._inflight = {}
        self._generation += 1
        logger.info("CACHE_FLUSH: all id sets dropped")

    def __len__(self) -> int:
        return len(self._entries)
