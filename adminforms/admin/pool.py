# -*- coding: utf-8 -*-
"""
pool

Registry of admin objects addressable by code or model.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Dict, Iterator

from ..exceptions import AdminConfigurationError
from .base import FormAdmin


class AdminPool:
    """Store registered admins and resolve association admins."""

    def __init__(self) -> None:
        self._by_code: Dict[str, FormAdmin] = {}
        self._by_model: Dict[str, str] = {}

    def register(self, admin: FormAdmin) -> FormAdmin:
        """Register ``admin``; a second admin under the same code is an error."""
        code = admin.code
        if not code:
            raise AdminConfigurationError(f"{admin!r} has no code")
        existing = self._by_code.get(code)
        if existing is admin:
            return admin  # Idempotent
        if existing is not None:
            raise AdminConfigurationError(f"Admin code conflict: {code}")

        self._by_code[code] = admin
        admin.pool = self
        for key in self._model_keys(admin):
            self._by_model.setdefault(key, code)
        return admin

    @staticmethod
    def _model_keys(admin: FormAdmin) -> list[str]:
        keys = []
        if admin.model_class_path:
            keys.append(admin.model_class_path)
        if admin.descriptor is not None:
            keys.append(admin.descriptor.dotted)
        return keys

    def has_admin_by_code(self, code: str) -> bool:
        return code in self._by_code

    def get_admin_by_code(self, code: str) -> FormAdmin:
        try:
            return self._by_code[code]
        except KeyError:
            raise AdminConfigurationError(f"Admin service {code!r} not found in admin pool") from None

    def has_admin_by_model(self, model: str) -> bool:
        return model in self._by_model

    def get_admin_by_model(self, model: str) -> FormAdmin:
        try:
            return self._by_code[self._by_model[model]]
        except KeyError:
            raise AdminConfigurationError(f"No admin registered for model {model!r}") from None

    def codes(self) -> list[str]:
        return list(self._by_code)

    def __iter__(self) -> Iterator[FormAdmin]:
        return iter(list(self._by_code.values()))

    def __len__(self) -> int:
        return len(self._by_code)

# The End
