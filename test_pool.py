"""
Tests for the hashing worker pool (pwhash.pool).

Usage:
    pytest test_pool.py
"""
import pytest

from pwhash import Hasher, HashingPool
from pwhash.errors import InvalidHashFormatError


@pytest.fixture
def pool(fast_params):
    with HashingPool(max_workers=2, hasher=Hasher(params=fast_params)) as pool:
        yield pool


def test_submit_hash_and_compare(pool):
    encoded = pool.submit_hash("pw").result()
    assert pool.submit_compare("pw", encoded).result() is True
    assert pool.submit_compare("nope", encoded).result() is False


def test_submit_many(pool):
    futures = [pool.submit_hash(f"pw{i}") for i in range(4)]
    hashes = [f.result() for f in futures]
    assert len(set(hashes)) == 4


def test_errors_surface_through_future(pool):
    with pytest.raises(InvalidHashFormatError):
        pool.submit_compare("pw", "a$b$c").result()


@pytest.mark.asyncio
async def test_async_hash_and_compare(pool, fast_params):
    encoded = await pool.hash("pw", fast_params.replace(iterations=2))
    assert "t=2" in encoded
    assert await pool.compare("pw", encoded) is True
    assert await pool.compare("other", encoded) is False
