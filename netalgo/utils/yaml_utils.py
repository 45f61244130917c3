"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to string keys.

    YAML 1.1 boolean keys (``yes``, ``on``, ...) become Python booleans; this
    turns them into "True"/"False" and stringifies any other non-string key.

    Args:
        data: Dictionary that may contain non-string keys from YAML parsing

    Returns:
        Dictionary with all keys converted to strings

    Examples:
        >>> normalize_yaml_dict_keys({True: "value1", "edges": []})
        {'True': 'value1', 'edges': []}
    """
    return {str(key): value for key, value in data.items()}
