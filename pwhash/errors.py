"""Error taxonomy for password hashing and verification."""


class PasswordHashError(Exception):
    """Base class for every failure raised by pwhash."""


class RandomSourceError(PasswordHashError):
    """Raised when the secure random source cannot supply bytes."""


class InvalidHashFormatError(PasswordHashError):
    """Raised when an encoded hash does not have the expected structure."""


class HashDecodingError(InvalidHashFormatError):
    """Raised when the salt or key field is not valid unpadded base64."""


class IncompatibleVersionError(PasswordHashError):
    """Raised when an encoded hash was made by an unsupported Argon2 version."""


class KeyDerivationError(PasswordHashError):
    """Raised when Argon2 rejects the parameters it was given."""
