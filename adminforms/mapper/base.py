# -*- coding: utf-8 -*-
"""
base

Common contract of form and show mappers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from ..admin.base import FormAdmin


class BaseMapper(ABC):
    """Fluent API over the fields an admin exposes in one view."""

    def __init__(self, admin: "FormAdmin") -> None:
        self._admin = admin

    @property
    def admin(self) -> "FormAdmin":
        return self._admin

    @abstractmethod
    def get(self, key: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def has(self, key: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> "BaseMapper":
        raise NotImplementedError

    @abstractmethod
    def keys(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def reorder(self, keys: Sequence[str]) -> "BaseMapper":
        raise NotImplementedError

# The End
