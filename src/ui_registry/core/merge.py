"""Merge rules for combining registry items.

Records merge recursively with the later value winning on a scalar collision.
Lists inside records are union-appended. Dependency and file lists are ordered
maps: an entry keeps the position of its first occurrence and takes the value
of its last.
"""

from typing import Any, Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")


def merge_records(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Deep merge overrides into a copy of base."""
    result: dict[str, Any] = {}
    for key, value in base.items():
        if key in overrides:
            result[key] = _merge_values(value, overrides[key])
        else:
            result[key] = _copy_value(value)
    # Add keys from overrides not in base
    for key, value in overrides.items():
        if key not in base:
            result[key] = _copy_value(value)
    return result


def merge_all_records(records: Iterable[dict[str, Any] | None]) -> dict[str, Any]:
    """Fold records left to right; missing records contribute nothing."""
    merged: dict[str, Any] = {}
    for record in records:
        merged = merge_records(merged, record or {})
    return merged


def _merge_values(value: Any, override: Any) -> Any:
    if isinstance(value, dict) and isinstance(override, dict):
        return merge_records(value, override)
    if isinstance(value, list) and isinstance(override, list):
        return union_append(value, override)
    return _copy_value(override)


def _copy_value(value: Any) -> Any:
    if isinstance(value, dict):
        return merge_records(value, {})
    if isinstance(value, list):
        return [_copy_value(v) for v in value]
    return value


def union_append(first: list[Any], second: list[Any]) -> list[Any]:
    """Keep first as-is, then append the values of second it does not already hold."""
    result = [_copy_value(v) for v in first]
    for value in second:
        if value not in result:
            result.append(_copy_value(value))
    return result


def merge_keyed(sequences: Iterable[Iterable[T] | None], key: Callable[[T], Hashable]) -> list[T]:
    """
    Merge sequences as an ordered map.

    Args:
        sequences: Sequences in precedence order (later wins)
        key: Identity of an entry

    Returns:
        One entry per key, positioned at its first occurrence, valued at its last
    """
    merged: dict[Hashable, T] = {}
    for sequence in sequences:
        for entry in sequence or []:
            merged[key(entry)] = entry
    return list(merged.values())


def package_name(dependency: str) -> str:
    """Strip a version pin: ``react@18.2.0`` -> ``react``, ``@radix-ui/x@1`` -> ``@radix-ui/x``."""
    at = dependency.rfind("@")
    if at > 0:
        return dependency[:at]
    return dependency


def merge_dependencies(sequences: Iterable[Iterable[str] | None]) -> list[str]:
    """Merge package strings by package name; the later pin wins."""
    return merge_keyed(sequences, package_name)
