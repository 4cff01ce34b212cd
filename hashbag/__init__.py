from hashbag.interface.bag import Bag
from hashbag.interface.hashable import Hashable, HashableString
from hashbag.table.bucket import Bucket
from hashbag.table.entry import BagEntry
from hashbag.table.hash_table import HashTable

__all__ = [
    "Bag",
    "Hashable",
    "HashableString",
    "HashTable",
    "Bucket",
    "BagEntry",
]
