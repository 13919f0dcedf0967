from cryptography.hazmat.primitives.constant_time import bytes_eq

from . import codec
from .keys import derive_key


def compare_password_and_hash(password: str | bytes, encoded: str) -> bool:
    """Recompute the key for `password` with the stored salt/params and compare in constant time.

    Decode errors are raised unchanged. The candidate key length follows the
    stored key, not any current default.
    """
    params, salt, expected = codec.decode(encoded)
    candidate = derive_key(password, salt, params.replace(key_length=len(expected)))
    return bytes_eq(candidate, expected)
