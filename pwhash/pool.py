"""Bounded worker pool for hash/verify calls.

Argon2 is slow on purpose. Request handlers should push the work here
instead of running it on the event loop. Size max_workers by the memory
each derivation needs (params.memory KiB per call).
"""
import asyncio
import logging
from concurrent.futures import Future, ThreadPoolExecutor

from .hasher import Hasher
from .params import ParameterSet

logger = logging.getLogger(__name__)


class HashingPool:
    def __init__(self, max_workers: int = 2, hasher: Hasher | None = None):
        self.hasher = hasher or Hasher()
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="pwhash")
        logger.debug("hashing pool started with %d workers", max_workers)

    def submit_hash(self, password: str | bytes, params: ParameterSet | None = None) -> Future:
        return self.executor.submit(self.hasher.hash, password, params)

    def submit_compare(self, password: str | bytes, encoded: str) -> Future:
        return self.executor.submit(self.hasher.compare, password, encoded)

    async def hash(self, password: str | bytes, params: ParameterSet | None = None) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, self.hasher.hash, password, params)

    async def compare(self, password: str | bytes, encoded: str) -> bool:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, self.hasher.compare, password, encoded)

    def shutdown(self, wait: bool = True) -> None:
        self.executor.shutdown(wait=wait)

    def __enter__(self) -> "HashingPool":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
