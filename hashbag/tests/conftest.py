from __future__ import annotations

import pytest

from hashbag.interface.bag import Bag
from hashbag.interface.hashable import Hashable


class FixedHash(Hashable):
    """Value with a hash code chosen explicitly, in the range [0, 10]."""

    minimum_hash_value = 0
    maximum_hash_value = 10

    def __init__(self, hash_value: int, label: str = "") -> None:
        self.hash_value = hash_value
        self.label = label

    def hash_code(self) -> int:
        return self.hash_value

    def __eq__(self, other) -> bool:
        if isinstance(other, FixedHash):
            return (self.hash_value, self.label) == (other.hash_value, other.label)
        else:
            return False

    def __hash__(self) -> int:
        return hash((self.hash_value, self.label))

    def __repr__(self) -> str:
        return f"FixedHash({self.hash_value}, {self.label!r})"


@pytest.fixture
def empty_bag() -> Bag:
    return Bag()


@pytest.fixture
def car_bag() -> Bag:
    """Returns a bag with 5 buckets holding 'Honda Pilot' twice and 'Honda Fit' once."""
    bag: Bag = Bag(num_buckets=5)
    bag.insert("Honda Pilot")
    bag.insert("Honda Fit")
    bag.insert("Honda Pilot")
    return bag
