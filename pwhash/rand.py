"""Secure random source used for salts."""
import logging
from os import urandom
from typing import Protocol

from .errors import RandomSourceError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def generate(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Reads from the operating system CSPRNG (os.urandom)."""

    def generate(self, n: int) -> bytes:
        try:
            data = urandom(n)
        except (OSError, NotImplementedError) as exc:
            logger.warning("OS random source failed for %d bytes: %s", n, exc)
            raise RandomSourceError(f"could not read {n} random bytes") from exc
        if len(data) != n:
            raise RandomSourceError(f"short read from random source: {len(data)} of {n} bytes")
        return data


def generate_random_bytes(n: int, source: RandomSource | None = None) -> bytes:
    return (source or SystemRandomSource()).generate(n)
