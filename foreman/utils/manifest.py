"""Helpers for editing JSON manifests as ordered key-value structures.

Manifests are held as plain ``dict``/``list`` values. Python dicts keep
insertion order, so assigning an existing key overwrites it in place while a
new key is appended after the existing ones.
"""

from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)


def _describe(keys: tuple) -> str:
    return ".".join(str(k) for k in keys)


def ensure_mapping(document: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    """Walk nested mappings, creating empty ones for missing keys.

    Args:
        document: Root mapping to walk
        *keys: Key path to the target mapping

    Returns:
        The (possibly newly created) mapping at the end of the key path

    Raises:
        TypeError: If a value along the path exists but is not a mapping
    """
    current = document
    for depth, key in enumerate(keys, start=1):
        if key not in current:
            logger.debug(f"Creating mapping at {_describe(keys[:depth])}")
            current[key] = {}
        value = current[key]
        if not isinstance(value, dict):
            raise TypeError(
                f"Expected a mapping at {_describe(keys[:depth])!r}, "
                f"found {type(value).__name__}"
            )
        current = value
    return current


def ensure_list(document: Dict[str, Any], *keys: str) -> List[Any]:
    """Walk nested mappings and return the list stored under the last key.

    Intermediate mappings and the final list are created when missing.

    Raises:
        TypeError: If a value along the path exists with the wrong type
    """
    if not keys:
        raise ValueError("At least one key is required")
    parent = ensure_mapping(document, *keys[:-1])
    if keys[-1] not in parent:
        logger.debug(f"Creating list at {_describe(keys)}")
        parent[keys[-1]] = []
    value = parent[keys[-1]]
    if not isinstance(value, list):
        raise TypeError(
            f"Expected a list at {_describe(keys)!r}, found {type(value).__name__}"
        )
    return value


def set_entry(mapping: Dict[str, Any], key: str, value: Any) -> None:
    """Overwrite ``key`` in place if present, otherwise append it."""
    mapping[key] = value


def get_path(document: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Look up a dotted key path such as ``"autoload.classmap"``.

    Returns ``default`` when any segment is missing or not a mapping.
    """
    current: Any = document
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
