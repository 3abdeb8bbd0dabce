# -*- coding: utf-8 -*-
"""
collection

Ordered collection of field descriptions used by list and show builders.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ..exceptions import FieldNotFound
from .descriptors import FieldDescription


class FieldDescriptionCollection:
    """Keep field descriptions keyed by name in insertion order."""

    def __init__(self, elements: Iterable[FieldDescription] = ()) -> None:
        self._elements: dict[str, FieldDescription] = {}
        for fd in elements:
            self.add(fd)

    def add(self, field_description: FieldDescription) -> None:
        self._elements[field_description.name] = field_description

    def get(self, name: str) -> FieldDescription:
        try:
            return self._elements[name]
        except KeyError:
            raise FieldNotFound(name, f'Element "{name}" does not exist.') from None

    def has(self, name: str) -> bool:
        return name in self._elements

    def remove(self, name: str) -> None:
        self._elements.pop(name, None)

    def get_elements(self) -> dict[str, FieldDescription]:
        return dict(self._elements)

    def keys(self) -> list[str]:
        return list(self._elements)

    def reorder(self, keys: Iterable[str]) -> None:
        """Move ``keys`` to the front, keeping ``batch`` first when present."""
        ordered = list(keys)
        if self.has("batch"):
            ordered.insert(0, "batch")
        elements: dict[str, FieldDescription] = {}
        for key in ordered:
            if key in self._elements and key not in elements:
                elements[key] = self._elements[key]
        for key, value in self._elements.items():
            elements.setdefault(key, value)
        self._elements = elements

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def __getitem__(self, name: str) -> FieldDescription:
        return self.get(name)

    def __iter__(self) -> Iterator[FieldDescription]:
        return iter(list(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)

# The End
