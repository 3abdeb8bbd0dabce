# -*- coding: utf-8 -*-
"""
context

Widget context helper.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..forms.builder import FormBuilder
    from ..schema.descriptors import FieldDescription


@dataclass(frozen=True)
class BuilderContext:
    """Everything a widget needs to know about the form node it renders."""
    builder: FormBuilder                  # form node being rendered
    name: str                             # child name in the parent form
    field_description: Optional[FieldDescription] = None
    readonly: bool = False                # field read-only?

    @property
    def options(self) -> dict[str, Any]:
        return self.builder.options

    @property
    def type(self) -> str:
        return self.builder.type

# The End
