"""Functions to summarize how evenly values are spread across the buckets of a table."""

from dataclasses import dataclass

import numpy as np

from hashbag.table.hash_table import HashTable


@dataclass(frozen=True)
class OccupancyStats:
    num_buckets: int
    num_entries: int  # distinct values across all buckets
    num_empty_buckets: int
    max_bucket_size: int
    mean_bucket_size: float
    load_factor: float  # fraction of buckets holding at least one entry


def bucket_sizes(table: HashTable) -> np.ndarray:
    """Return the number of distinct entries held by each bucket, in bucket order."""
    return np.asarray([bucket.num_entries() for bucket in table.buckets], dtype=np.int64)


def occupancy_stats(table: HashTable) -> OccupancyStats:
    sizes = bucket_sizes(table)
    num_empty = int(np.count_nonzero(sizes == 0))

    return OccupancyStats(
        num_buckets=int(sizes.size),
        num_entries=int(sizes.sum()),
        num_empty_buckets=num_empty,
        max_bucket_size=int(sizes.max()),
        mean_bucket_size=float(sizes.mean()),
        load_factor=float((sizes.size - num_empty) / sizes.size),
    )
