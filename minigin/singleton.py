"""Lazily created, per-class shared instances."""

from __future__ import annotations

from typing import ClassVar, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Base class giving each subclass one shared instance."""

    _instances: ClassVar[dict[type, object]] = {}

    @classmethod
    def get_instance(cls: type[_T]) -> _T:
        """Return the shared instance of this class, creating it on first use."""
        instances = Singleton._instances
        if cls not in instances:
            instances[cls] = cls()
        return instances[cls]  # type: ignore[return-value]