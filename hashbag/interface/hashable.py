"""
Capability that values must provide in order to be placed into a `HashTable`.
"""

from __future__ import annotations

import abc
from typing import Any

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_UINT32_MASK = 0xFFFFFFFF


class Hashable(abc.ABC):
    """Base class for values which can be hashed into a fixed range of integers.

    Subclasses declare the (constant) bounds of their hash codes as class attributes; every
    instance must satisfy `minimum_hash_value <= hash_code() <= maximum_hash_value`. The hash code
    of a value must not change while it is stored in a table.
    """

    minimum_hash_value: int
    maximum_hash_value: int

    @abc.abstractmethod
    def hash_code(self) -> int:
        """Return a deterministic (possibly negative) integer hash for this value."""
        raise NotImplementedError

    @classmethod
    def hash_range(cls) -> int:
        """Width of the declared hash range, which has to be strictly positive."""
        size_of_range = cls.maximum_hash_value - cls.minimum_hash_value
        if size_of_range <= 0:
            raise ValueError(
                f"{cls.__name__} declares an empty hash range "
                f"[{cls.minimum_hash_value}, {cls.maximum_hash_value}]; "
                "maximum_hash_value has to be larger than minimum_hash_value"
            )

        return size_of_range


def to_int32(value: int) -> int:
    """Truncate an arbitrary integer to a signed 32-bit integer (two's complement wraparound)."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value > INT32_MAX else value


def _leading_code_unit(character: str) -> int:
    # Characters outside the BMP contribute only their high surrogate.
    code_point = ord(character)
    if code_point > 0xFFFF:
        return 0xD800 + ((code_point - 0x10000) >> 10)
    return code_point


class HashableString(str, Hashable):
    """String with a 32-bit polynomial hash (`hash = hash * 31 + code`).

    This behaves exactly like a `str` (including equality with plain strings and the builtin
    `hash`), it only adds the `Hashable` capability on top.
    """

    minimum_hash_value = INT32_MIN
    maximum_hash_value = INT32_MAX

    def hash_code(self) -> int:
        hash_value = 0
        for character in self:
            hash_value = to_int32(hash_value * 31 + _leading_code_unit(character))
        return hash_value


def as_hashable(value: Any) -> Hashable:
    """Return `value` if it is `Hashable`, wrapping plain strings into `HashableString`."""
    if isinstance(value, Hashable):
        return value
    elif isinstance(value, str):
        return HashableString(value)
    else:
        raise TypeError(
            f"Values of type {type(value).__name__} cannot be stored in a bag; "
            "they should either be strings or implement `Hashable`"
        )
