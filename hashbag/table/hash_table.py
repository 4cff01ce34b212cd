from __future__ import annotations

import logging
from typing import Callable, Generic, List, Tuple, TypeVar

from hashbag.interface.hashable import Hashable
from hashbag.table.bucket import Bucket

logger = logging.getLogger(__name__)

DEFAULT_NUM_BUCKETS = 100

HashableT = TypeVar("HashableT", bound=Hashable)


class HashTable(Generic[HashableT]):
    """Fixed-size array of buckets, indexed by scaling hash codes into the number of buckets.

    The number of buckets is chosen at construction and never changes (there is no rehashing).
    """

    def __init__(
        self,
        num_buckets: int = DEFAULT_NUM_BUCKETS,
        bucket_cls: Callable[[], Bucket] = Bucket,
    ) -> None:
        """
        Args:
            num_buckets: Number of buckets in the table, has to be a positive integer.
            bucket_cls: Factory used to create each (empty) bucket. Defaults to `Bucket`, but can
                be swapped for an alternative implementation (e.g. for testing).
        """
        if isinstance(num_buckets, bool) or not isinstance(num_buckets, int):
            raise TypeError(f"Number of buckets should be an integer, got {num_buckets!r}")
        if num_buckets <= 0:
            raise ValueError(f"Number of buckets should be positive, got {num_buckets}")

        self._buckets: List[Bucket] = [bucket_cls() for _ in range(num_buckets)]
        logger.debug(f"Created hash table with {num_buckets} buckets of type {bucket_cls}")

    @property
    def num_buckets(self) -> int:
        return len(self._buckets)

    @property
    def buckets(self) -> Tuple[Bucket, ...]:
        return tuple(self._buckets)

    def compute_bucket(self, value: HashableT) -> int:
        """Determine the index of the bucket that `value` belongs in.

        The hash code is placed proportionally within the range of hash codes declared by the type
        of `value`, and that fraction is scaled to the number of buckets. Unlike taking the hash
        modulo the number of buckets this does not depend on the sign or magnitude of the hash. A
        hash code equal to the declared maximum lands in the last bucket.
        """
        size_of_range = value.hash_range()
        hash_code = value.hash_code()

        if not (value.minimum_hash_value <= hash_code <= value.maximum_hash_value):
            raise ValueError(
                f"Hash code {hash_code} of {value!r} falls outside of the declared range "
                f"[{value.minimum_hash_value}, {value.maximum_hash_value}]"
            )

        # Integer arithmetic computes floor(fraction * num_buckets) exactly.
        distance_from_floor = hash_code - value.minimum_hash_value
        index = (distance_from_floor * self.num_buckets) // size_of_range
        return min(index, self.num_buckets - 1)

    def fetch_bucket(self, value: HashableT) -> Bucket[HashableT]:
        """Return the bucket `value` belongs to, whether or not the bucket contains it."""
        return self._buckets[self.compute_bucket(value)]

    def to_list(self) -> List[HashableT]:
        """All values held by the table (with repeats), concatenated in bucket order."""
        return [value for bucket in self._buckets for value in bucket.to_list()]

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(num_buckets={self.num_buckets})"
