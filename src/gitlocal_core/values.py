"""Configuration value markers shared between the host and the provider."""

from __future__ import annotations

from typing import Any


class _Unknown:
    """Marker for a value the host has not resolved yet.

    A config mapping carries ``None`` for null (absent) values and ``UNKNOWN``
    for values that depend on something the host has not applied.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"

    def __bool__(self) -> bool:
        return False


UNKNOWN = _Unknown()


def is_unknown(value: Any) -> bool:
    return value is UNKNOWN


def is_null(value: Any) -> bool:
    return value is None
