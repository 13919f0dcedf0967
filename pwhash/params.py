"""Argon2id parameter set and the recommended defaults."""
from dataclasses import dataclass, replace

from argon2.low_level import ARGON2_VERSION, Type

ALGORITHM_TAG = "argon2id"
ARGON_TYPE = Type.ID
ARGON_VERSION = ARGON2_VERSION  # 19 (0x13)


@dataclass(frozen=True)
class ParameterSet:
    memory: int = 64 * 1024  # KiB
    iterations: int = 3
    parallelism: int = 2
    salt_length: int = 16
    key_length: int = 32

    def replace(self, **changes) -> "ParameterSet":
        return replace(self, **changes)

    def argon2_kwargs(self) -> dict:
        """Keyword arguments for argon2.low_level.hash_secret_raw, minus secret and salt."""
        return dict(time_cost=self.iterations, memory_cost=self.memory,
                    parallelism=self.parallelism, hash_len=self.key_length,
                    type=ARGON_TYPE, version=ARGON_VERSION)


DEFAULT_PARAMS = ParameterSet()
