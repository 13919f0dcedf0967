from argon2.exceptions import HashingError
from argon2.low_level import hash_secret_raw

from .errors import KeyDerivationError
from .params import ParameterSet


def _secret(password: str | bytes) -> bytes:
    return password.encode("utf-8") if isinstance(password, str) else bytes(password)


def derive_key(password: str | bytes, salt: bytes, params: ParameterSet) -> bytes:
    """Argon2id over (password, salt) producing params.key_length bytes."""
    try:
        return hash_secret_raw(_secret(password), salt, **params.argon2_kwargs())
    except (HashingError, OverflowError) as exc:
        raise KeyDerivationError(f"argon2 rejected parameters {params}: {exc}") from exc
