from collections.abc import Collection
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from hashbag.interface.hashable import Hashable, as_hashable
from hashbag.table.hash_table import DEFAULT_NUM_BUCKETS, HashTable

HashableT = TypeVar("HashableT", bound=Hashable)


class Bag(Collection, Generic[HashableT]):
    """Class representing a multi-set (i.e. set where elements are allowed to repeat).

    Values are stored in a fixed-size `HashTable`, so all operations are best case O(1) and worst
    case linear in the size of a bucket, except for `length`, which is always O(1), and `to_list`,
    which is linear in the size of the bag. Insertion order is not preserved.

    Values should implement `Hashable`; plain strings are accepted and stored as `HashableString`.
    """

    def __init__(
        self,
        values: Iterable = (),
        num_buckets: Optional[int] = None,
        hash_table: Optional[HashTable[HashableT]] = None,
    ) -> None:
        if hash_table is None:
            hash_table = HashTable(DEFAULT_NUM_BUCKETS if num_buckets is None else num_buckets)
        elif num_buckets is not None:
            raise ValueError("Provide either `num_buckets` or `hash_table`, not both")
        elif hash_table.to_list():
            raise ValueError("A bag can only be built on top of an empty hash table")

        self._hash_table = hash_table
        self._num_elements = 0

        self.update(values)

    @property
    def num_buckets(self) -> int:
        return self._hash_table.num_buckets

    @property
    def hash_table(self) -> HashTable[HashableT]:
        return self._hash_table

    def insert(self, value) -> None:
        """Insert a single occurrence of `value`."""
        value = as_hashable(value)
        self._hash_table.fetch_bucket(value).insert(value)
        self._num_elements += 1

    def update(self, values: Iterable) -> None:
        """Insert every value from `values` (repeats included)."""
        for value in values:
            self.insert(value)

    def contains(self, value) -> bool:
        """Whether the bag holds at least one occurrence of `value`."""
        value = as_hashable(value)
        return self._hash_table.fetch_bucket(value).contains(value)

    def count(self, value) -> int:
        """Number of occurrences of `value` in the bag."""
        value = as_hashable(value)
        return self._hash_table.fetch_bucket(value).count(value)

    def delete(self, value) -> bool:
        """Remove one occurrence of `value`.

        If `value` occurs multiple times only one occurrence is removed; use `delete_all` to remove
        all of them.

        Returns:
            Whether the value was present (and thus an occurrence was removed).
        """
        value = as_hashable(value)
        if self._hash_table.fetch_bucket(value).delete(value):
            self._num_elements -= 1
            return True
        else:
            return False

    def delete_all(self, value) -> bool:
        """Remove all occurrences of `value`.

        Returns:
            Whether the value was present (and thus at least one occurrence was removed).
        """
        value = as_hashable(value)
        num_removed = self._hash_table.fetch_bucket(value).delete_all(value)
        self._num_elements -= num_removed
        return num_removed > 0

    def length(self) -> int:
        """Total number of values in the bag, counting repeats."""
        return self._num_elements

    def to_list(self) -> List[HashableT]:
        """List with the contents of the bag, in arbitrary order."""
        return self._hash_table.to_list()

    def distinct(self) -> List[HashableT]:
        """List with a single occurrence of every value in the bag, in arbitrary order."""
        return [entry.value for bucket in self._hash_table.buckets for entry in bucket]

    def __iter__(self) -> Iterator:
        return iter(self.to_list())

    def __contains__(self, element) -> bool:
        if not isinstance(element, (Hashable, str)):
            return False
        return self.contains(element)

    def __len__(self) -> int:
        return self._num_elements

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()!r})"
