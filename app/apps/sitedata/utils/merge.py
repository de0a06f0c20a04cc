"""
Merge a stored site document onto the defaults
"""
import copy
from typing import Any, Mapping


def is_blank(value: Any) -> bool:
    """None, or an empty string, list or mapping."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, Mapping)):
        return len(value) == 0
    return False


def merge_with_defaults(defaults: Any, stored: Any) -> Any:
    """
    Deep-merge `stored` onto `defaults` and return a new value.

    Mappings are merged key by key, so a field present in the defaults but
    missing from the stored document keeps its default value. A blank stored
    value (None, "", [] or {}) also keeps the default; `0` and `False` are
    real values and replace it. Non-empty lists are replaced whole.
    Keys that only exist in the stored document are kept as stored. Neither
    input is modified.

        >>> merge_with_defaults({"a": {"b": 1, "c": 2}}, {"a": {"b": 5, "c": ""}})
        {'a': {'b': 5, 'c': 2}}
    """
    if is_blank(stored):
        return copy.deepcopy(defaults)

    if isinstance(defaults, Mapping) and isinstance(stored, Mapping):
        merged = {key: copy.deepcopy(value) for key, value in defaults.items()}
        for key, value in stored.items():
            if key in merged:
                merged[key] = merge_with_defaults(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    return copy.deepcopy(stored)
