# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for form and show mapping.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class AdminError(Exception):
    """Base class for adminforms-specific exceptions."""


class MapperLogicError(AdminError):
    """Raised when a mapper block is closed without being opened."""


class MapperStateError(AdminError):
    """Raised when groups and tabs are opened in an invalid order."""


class FieldNotFound(AdminError):
    """Raised when a form child or field description is not registered."""

    def __init__(self, name: str, detail: str | None = None) -> None:
        super().__init__(detail or f'The child with the name "{name}" does not exist.')
        self.name = name


class UnknownFormType(AdminError):
    """Raised when a form type key has no registered widget."""

    def __init__(self, type_key: str) -> None:
        super().__init__(f'Could not load type "{type_key}".')
        self.type_key = type_key


class AdminConfigurationError(AdminError):
    """Raised when an admin, strategy or association is misconfigured."""


# The End
