from copy import deepcopy
from typing import Any, Dict, Iterable, Mapping, Optional


def is_present(value: Any) -> bool:
    """
    A field is present when it carries a usable value.

    None and blank strings count as "not set", so an empty override
    never masks a lower-priority value.
    """
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def merge_present_fields(
    base: Mapping[str, Any],
    override: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Copy `base` and overwrite each key that `override` sets."""
    merged = dict(base)
    if not override:
        return merged

    for key, value in override.items():
        if is_present(value):
            merged[key] = value

    return merged


def reduce_overrides(
    sources: Iterable[Optional[Mapping[str, Any]]],
) -> Dict[str, Any]:
    """
    Fold override sources ordered from lowest to highest priority.

    Later sources win field-by-field.
    """
    merged: Dict[str, Any] = {}
    for source in sources:
        merged = merge_present_fields(merged, source)
    return merged


def deep_merge(
    defaults: Mapping[str, Any],
    stored: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Merge `stored` over `defaults`, recursing into nested dicts.

    Stored values win per nested key, defaults fill whatever stored
    omits. Lists and scalars are replaced, never concatenated.
    Nothing from either input is aliased in the result.
    """
    merged = deepcopy(dict(defaults))
    if not stored:
        return merged

    for key, value in stored.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        elif value is None and key in merged:
            # null in an old document means "never set"
            continue
        else:
            merged[key] = deepcopy(value)

    return merged
