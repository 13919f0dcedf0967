"""Encoded hash text format.

    $argon2id$v=19$m=<memory>,t=<iterations>,p=<parallelism>$<salt>$<key>

Salt and key use the standard base64 alphabet without padding. The format is
persisted by callers, so it must stay byte-for-byte stable.
"""
import base64
import binascii
import logging
import re

from .errors import HashDecodingError, IncompatibleVersionError, InvalidHashFormatError
from .params import ALGORITHM_TAG, ARGON_VERSION, ParameterSet

logger = logging.getLogger(__name__)

SEPARATOR = "$"
FIELD_COUNT = 6

# uint32 fields: at most 10 digits
_VERSION_RE = re.compile(r"v=([0-9]{1,10})")
_COST_RE = re.compile(r"m=([0-9]{1,10}),t=([0-9]{1,10}),p=([0-9]{1,10})")
_B64_RE = re.compile(r"[A-Za-z0-9+/]*")


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(field: str) -> bytes:
    """Strict unpadded base64: no '=', no stray characters, canonical tail bits."""
    if not _B64_RE.fullmatch(field) or len(field) % 4 == 1:
        raise HashDecodingError(f"invalid base64 field {field!r}")
    try:
        data = base64.b64decode(field + "=" * (-len(field) % 4), validate=True)
    except binascii.Error as exc:
        raise HashDecodingError(f"invalid base64 field {field!r}") from exc
    if b64encode(data) != field:
        raise HashDecodingError(f"non-canonical base64 field {field!r}")
    return data


def encode(params: ParameterSet, salt: bytes, key: bytes) -> str:
    return SEPARATOR.join([
        "",
        ALGORITHM_TAG,
        f"v={ARGON_VERSION}",
        f"m={params.memory},t={params.iterations},p={params.parallelism}",
        b64encode(salt),
        b64encode(key),
    ])


def split_hash(encoded: str) -> list[str]:
    fields = encoded.split(SEPARATOR)
    if len(fields) != FIELD_COUNT:
        raise InvalidHashFormatError(
            f"expected {FIELD_COUNT} '{SEPARATOR}'-separated fields, got {len(fields)}")
    return fields


def algorithm_tag(encoded: str) -> str:
    return split_hash(encoded)[1]


def check_algorithm(encoded: str) -> None:
    tag = algorithm_tag(encoded)
    if tag != ALGORITHM_TAG:
        raise InvalidHashFormatError(f"unsupported algorithm {tag!r}, expected {ALGORITHM_TAG!r}")


def decode(encoded: str, strict_algorithm: bool = False) -> tuple[ParameterSet, bytes, bytes]:
    """Parse an encoded hash back into (params, salt, key).

    Salt and key lengths in the returned ParameterSet come from the decoded
    bytes. The algorithm tag is only checked when strict_algorithm is set.
    """
    fields = split_hash(encoded)
    if strict_algorithm:
        check_algorithm(encoded)

    m = _VERSION_RE.fullmatch(fields[2])
    if not m:
        raise InvalidHashFormatError(f"invalid version field {fields[2]!r}")
    version = int(m.group(1))
    if version != ARGON_VERSION:
        raise IncompatibleVersionError(
            f"argon2 version {version} is not supported (expected {ARGON_VERSION})")

    m = _COST_RE.fullmatch(fields[3])
    if not m:
        raise InvalidHashFormatError(f"invalid parameter field {fields[3]!r}")
    memory, iterations, parallelism = (int(g) for g in m.groups())

    salt = b64decode(fields[4])
    key = b64decode(fields[5])

    params = ParameterSet(memory=memory, iterations=iterations, parallelism=parallelism,
                          salt_length=len(salt), key_length=len(key))
    logger.debug("decoded %s hash with %s", fields[1], params)
    return params, salt, key
