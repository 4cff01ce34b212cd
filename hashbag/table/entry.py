from typing import Generic, TypeVar

ValueT = TypeVar("ValueT")


class BagEntry(Generic[ValueT]):
    """A single distinct value stored in a bucket, together with its number of occurrences.

    An entry always holds at least one occurrence; buckets drop the entry instead of letting its
    count reach zero.
    """

    def __init__(self, value: ValueT) -> None:
        self._value = value
        self._count = 1

    @property
    def count(self) -> int:
        return self._count

    @property
    def value(self) -> ValueT:
        return self._value

    def unwrap(self) -> ValueT:
        """Return the stored value."""
        return self._value

    def increment(self) -> None:
        self._count += 1

    def decrement(self) -> None:
        """Remove one occurrence; only valid while more than one occurrence is left."""
        if self._count <= 1:
            raise RuntimeError("Cannot decrement a bag entry below a count of one")
        self._count -= 1

    def matches(self, value) -> bool:
        """Whether this entry holds a value equal (not necessarily identical) to `value`."""
        return self._value == value

    def __repr__(self) -> str:
        return f"BagEntry({self._value!r}, count={self._count})"
