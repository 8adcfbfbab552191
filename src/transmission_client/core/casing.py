"""
Pure functions for converting key casing between wire and application style.

The daemon speaks lowercase hyphen-separated keys (``download-dir``) while
results are handed to callers with camel-style keys (``downloadDir``). The
transforms walk arbitrarily nested JSON values and touch every mapping key,
without special-casing any field name.
"""

import re
from typing import Any

_SEPARATORS = re.compile(r"[-_]+")
_UPPER = re.compile(r"(?<=[a-z0-9])([A-Z])")


def camelize(key: str) -> str:
    """Convert a wire key to application casing.

    Keys without separators are returned unchanged, so already-camel keys
    such as ``rateDownload`` survive repeated application. A segment that
    starts with a digit has no upper-case form, so ``a-1b`` becomes ``a1b``
    and ``decamelize`` cannot restore the separator.
    """
    if not _SEPARATORS.search(key):
        return key

    parts = [part for part in _SEPARATORS.split(key) if part]
    if not parts:
        return key

    head, *tail = parts
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


def decamelize(key: str, separator: str = "-") -> str:
    """Convert an application key back to lowercase wire casing."""
    return _UPPER.sub(lambda match: separator + match.group(1), key).lower()


def camelize_keys(value: Any) -> Any:
    """Recursively camelize every mapping key inside a JSON value."""
    if isinstance(value, dict):
        return {camelize(str(k)): camelize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [camelize_keys(item) for item in value]
    return value


def decamelize_keys(value: Any, separator: str = "-") -> Any:
    """Recursively render every mapping key inside a JSON value in wire casing."""
    if isinstance(value, dict):
        return {
            decamelize(str(k), separator): decamelize_keys(v, separator)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [decamelize_keys(item, separator) for item in value]
    return value
