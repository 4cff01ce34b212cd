"""
Buckets hold the entries for all values which map to the same slot of a `HashTable`.
"""

from typing import Generic, Iterator, List, Optional, TypeVar

from hashbag.table.entry import BagEntry

ValueT = TypeVar("ValueT")


class Bucket(Generic[ValueT]):
    """Unordered list of `BagEntry` objects, at most one per distinct value.

    Lookup is a linear scan comparing values by equality; buckets are expected to stay small as
    long as values are spread well across the table.
    """

    def __init__(self) -> None:
        self._contents: List[BagEntry[ValueT]] = []

    def _find_index(self, value: ValueT) -> Optional[int]:
        for idx, entry in enumerate(self._contents):
            if entry.matches(value):
                return idx
        return None

    def count(self, value: ValueT) -> int:
        idx = self._find_index(value)
        return 0 if idx is None else self._contents[idx].count

    def contains(self, value: ValueT) -> bool:
        return self._find_index(value) is not None

    def insert(self, value: ValueT) -> None:
        idx = self._find_index(value)
        if idx is None:
            self._contents.append(BagEntry(value))
        else:
            self._contents[idx].increment()

    def push(self, entry: BagEntry[ValueT]) -> None:
        """Append an already constructed entry, which must not match any entry in the bucket."""
        if self.contains(entry.value):
            raise ValueError(f"Bucket already holds an entry for {entry.value!r}")
        self._contents.append(entry)

    def delete(self, value: ValueT) -> bool:
        """Remove a single occurrence of `value`, returning whether anything was removed."""
        idx = self._find_index(value)
        if idx is None:
            return False

        entry = self._contents[idx]
        if entry.count > 1:
            entry.decrement()
        else:
            del self._contents[idx]
        return True

    def delete_all(self, value: ValueT) -> int:
        """Remove every occurrence of `value`, returning how many occurrences were removed."""
        idx = self._find_index(value)
        if idx is None:
            return 0
        return self._contents.pop(idx).count

    def num_entries(self) -> int:
        """Number of distinct values in the bucket."""
        return len(self._contents)

    def num_elements(self) -> int:
        """Number of values in the bucket, counting repeats."""
        return sum(entry.count for entry in self._contents)

    def to_list(self) -> List[ValueT]:
        return [entry.value for entry in self._contents for _ in range(entry.count)]

    def __iter__(self) -> Iterator[BagEntry[ValueT]]:
        return iter(self._contents)

    def __repr__(self) -> str:
        return f"Bucket({self._contents!r})"
