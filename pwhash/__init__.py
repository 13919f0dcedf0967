"""Argon2id password hashing: salted hashes in the $argon2id$v=19$... format."""
from .errors import (PasswordHashError, RandomSourceError, InvalidHashFormatError,
                     HashDecodingError, IncompatibleVersionError, KeyDerivationError)
from .params import ParameterSet, DEFAULT_PARAMS
from .rand import RandomSource, SystemRandomSource
from .codec import encode, decode
from .verify import compare_password_and_hash
from .hasher import Hasher, hash_password, verify_password
from .config import load_params, params_from_mapping
from .pool import HashingPool
