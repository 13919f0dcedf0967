"""Build a ParameterSet from a dotenv file or a plain mapping.

Only files the caller names are read; os.environ is left alone.
"""
import logging
from collections.abc import Mapping
from os import PathLike

from dotenv import dotenv_values

from .params import DEFAULT_PARAMS, ParameterSet

logger = logging.getLogger(__name__)

# config key -> ParameterSet field
FIELDS = {
    "ARGON2_MEMORY": "memory",
    "ARGON2_ITERATIONS": "iterations",
    "ARGON2_PARALLELISM": "parallelism",
    "ARGON2_SALT_LENGTH": "salt_length",
    "ARGON2_KEY_LENGTH": "key_length",
}


def _int_value(name: str, raw: str | None, default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("ignoring %s=%r: negative, using %d", name, raw, default)
        return default
    return value


def params_from_mapping(values: Mapping[str, str | None],
                        base: ParameterSet = DEFAULT_PARAMS) -> ParameterSet:
    changes = {
        attr: _int_value(name, values.get(name), getattr(base, attr))
        for name, attr in FIELDS.items()
    }
    return base.replace(**changes)


def load_params(path: str | PathLike, base: ParameterSet = DEFAULT_PARAMS) -> ParameterSet:
    return params_from_mapping(dotenv_values(path), base)
