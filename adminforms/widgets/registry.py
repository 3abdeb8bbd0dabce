# -*- coding: utf-8 -*-
"""
registry

Widget registry mapping form type keys to widget classes.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Dict, Type, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .base import BaseWidget


class WidgetRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseWidget]] = {}

    def register(self, *keys: str):
        """Decorator to register a widget for one or more form type keys."""
        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            cls.key = keys[0]
            for key in keys:
                self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseWidget] | None:
        return self._by_key.get(key)

    def has(self, key: str) -> bool:
        return key in self._by_key

    def keys(self) -> list[str]:
        return sorted(self._by_key)

registry = WidgetRegistry()

# The End
