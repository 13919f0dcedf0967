import logging
from dataclasses import dataclass, field

from . import codec
from .errors import InvalidHashFormatError, KeyDerivationError
from .keys import derive_key
from .params import ALGORITHM_TAG, DEFAULT_PARAMS, ParameterSet
from .rand import RandomSource, SystemRandomSource, generate_random_bytes
from .verify import compare_password_and_hash

logger = logging.getLogger(__name__)


@dataclass
class Hasher:
    """Argon2id password hasher.

    The random source is injectable so tests can supply fixed salts.
    """
    params: ParameterSet = DEFAULT_PARAMS
    random_source: RandomSource = field(default_factory=SystemRandomSource)

    def hash(self, password: str | bytes, params: ParameterSet | None = None) -> str:
        params = params or self.params
        salt = generate_random_bytes(params.salt_length, self.random_source)
        logger.debug("hashing password with %s", params)
        key = derive_key(password, salt, params)
        return codec.encode(params, salt, key)

    def compare(self, password: str | bytes, encoded: str) -> bool:
        return compare_password_and_hash(password, encoded)

    def needs_rehash(self, encoded: str) -> bool:
        """True if `encoded` was made with a different algorithm or parameter set than ours."""
        stored, _, _ = codec.decode(encoded)
        if codec.algorithm_tag(encoded) != ALGORITHM_TAG:
            return True
        return stored != self.params


_default = Hasher()


def hash_password(password: str | bytes, params: ParameterSet | None = None) -> str:
    return _default.hash(password, params)


def verify_password(password: str | bytes, encoded: str) -> bool:
    """False on mismatch or a corrupt stored hash (bad format or parameters Argon2 rejects).

    IncompatibleVersionError still propagates so callers can plan a rehash migration.
    """
    try:
        return _default.compare(password, encoded)
    except (InvalidHashFormatError, KeyDerivationError) as exc:
        logger.warning("stored password hash is malformed (%s): %s", type(exc).__name__, exc)
        return False
