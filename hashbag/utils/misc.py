from dataclasses import fields, is_dataclass
from typing import Any, Dict

import numpy as np

from hashbag.interface.bag import Bag


def dictify(data: Any) -> Any:
    # Need to ensure we make return objects fully serializable
    if isinstance(data, (int, float, str)) or data is None:
        # Covers `HashableString` as well, which should be saved as a plain string
        return str(data) if isinstance(data, str) else data
    elif isinstance(data, np.generic):
        return data.item()
    elif isinstance(data, (list, tuple, Bag, np.ndarray)):
        return [dictify(x) for x in data]
    elif isinstance(data, dict):
        return {dictify(k): dictify(v) for k, v in data.items()}
    elif is_dataclass(data):
        result = {}
        for f in fields(data):
            result[f.name] = dictify(getattr(data, f.name))
        return result
    else:
        raise TypeError(f"Type {type(data)} cannot be handled by `dictify`")


def asdict_extended(data) -> Dict[str, Any]:
    """Convert a dataclass, possibly containing bags, into a serializable dict."""
    if not is_dataclass(data):
        raise TypeError(f"asdict_extended only for use on dataclasses, input is type {type(data)}")

    return dictify(data)
