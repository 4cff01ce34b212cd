from dataclasses import dataclass

import numpy as np
import pytest

from hashbag.interface.bag import Bag
from hashbag.interface.hashable import HashableString
from hashbag.utils.misc import asdict_extended, dictify


@dataclass
class Summary:
    bag: Bag
    sizes: np.ndarray
    mean: float


def test_dictify() -> None:
    assert dictify(HashableString("a")) == "a"
    assert type(dictify(HashableString("a"))) is str
    assert dictify(np.int64(3)) == 3
    assert dictify({"x": (1, 2.0, None)}) == {"x": [1, 2.0, None]}

    with pytest.raises(TypeError):
        dictify(object())


def test_asdict_extended() -> None:
    summary = Summary(bag=Bag(["a", "a"]), sizes=np.array([1, 0]), mean=0.5)
    assert asdict_extended(summary) == {"bag": ["a", "a"], "sizes": [1, 0], "mean": 0.5}

    with pytest.raises(TypeError):
        asdict_extended({"not": "a dataclass"})
