import pytest

from pwhash import ParameterSet
from pwhash.errors import RandomSourceError

# Cheap parameters so round-trip tests stay fast; the known vector uses the real defaults.
FAST_PARAMS = ParameterSet(memory=1024, iterations=1, parallelism=1, salt_length=16, key_length=32)


class FixedRandomSource:
    """Returns the same bytes on every call, truncated or repeated to n."""

    def __init__(self, data: bytes):
        self.data = data
        self.calls = []

    def generate(self, n: int) -> bytes:
        self.calls.append(n)
        return (self.data * (n // len(self.data) + 1))[:n]


class BrokenRandomSource:
    def generate(self, n: int) -> bytes:
        raise RandomSourceError("entropy source unavailable")


@pytest.fixture
def fast_params() -> ParameterSet:
    return FAST_PARAMS


@pytest.fixture
def mocked_salt_source() -> FixedRandomSource:
    return FixedRandomSource(b"mockedsalt")


@pytest.fixture
def broken_random_source() -> BrokenRandomSource:
    return BrokenRandomSource()
