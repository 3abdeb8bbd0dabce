# -*- coding: utf-8 -*-
"""
builder

In-construction form tree.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterator

from ..exceptions import FieldNotFound, UnknownFormType
from ..widgets import registry as widget_registry
from ..widgets.context import BuilderContext
from .types import FormType


class FormBuilder:
    """A named form node holding a type, options and ordered children.

    Children added by name are built immediately through :meth:`create`, so
    an unknown type fails at ``add`` time. ``to_schema`` hands every node to
    the widget registered for its type.
    """

    def __init__(
        self,
        name: str,
        type: str | None = FormType.FORM,
        options: Dict[str, Any] | None = None,
    ) -> None:
        resolved = type or FormType.TEXT
        if not widget_registry.has(resolved):
            raise UnknownFormType(resolved)
        self.name = name
        self.type = resolved
        self.options: Dict[str, Any] = dict(options or {})
        self._children: Dict[str, FormBuilder] = {}

    def __repr__(self) -> str:
        return f"FormBuilder(name={self.name!r}, type={self.type!r}, children={list(self._children)!r})"

    # --- tree --------------------------------------------------------------

    def create(self, name: str, type: str | None = None, options: Dict[str, Any] | None = None) -> "FormBuilder":
        """Return a new, unattached child builder."""
        return FormBuilder(name, type or FormType.TEXT, options)

    def add(
        self,
        child: "str | FormBuilder",
        type: str | None = None,
        options: Dict[str, Any] | None = None,
    ) -> "FormBuilder":
        if isinstance(child, FormBuilder):
            self._children[child.name] = child
            return self
        self._children[child] = self.create(child, type, options)
        return self

    def get(self, name: str) -> "FormBuilder":
        try:
            return self._children[name]
        except KeyError:
            raise FieldNotFound(name) from None

    def has(self, name: str) -> bool:
        return name in self._children

    def remove(self, name: str) -> "FormBuilder":
        self._children.pop(name, None)
        return self

    def all(self) -> Dict[str, "FormBuilder"]:
        return dict(self._children)

    def count(self) -> int:
        return len(self._children)

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __iter__(self) -> Iterator["FormBuilder"]:
        return iter(list(self._children.values()))

    def __len__(self) -> int:
        return len(self._children)

    # --- options -----------------------------------------------------------

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def set_option(self, name: str, value: Any) -> "FormBuilder":
        self.options[name] = value
        return self

    @property
    def field_description(self):
        return self.options.get("admin_field_description")

    @property
    def required(self) -> bool:
        return bool(self.options.get("required", True))

    @property
    def readonly(self) -> bool:
        attr = self.options.get("attr") or {}
        return bool(
            self.options.get("disabled")
            or self.options.get("readonly")
            or attr.get("readonly")
        )

    # --- rendering ---------------------------------------------------------

    def get_widget(self, name: str | None = None):
        widget_cls = widget_registry.get(self.type)
        if widget_cls is None:  # pragma: no cover - checked in __init__
            raise UnknownFormType(self.type)
        ctx = BuilderContext(
            builder=self,
            name=name or self.name,
            field_description=self.field_description,
            readonly=self.readonly,
        )
        return widget_cls(ctx)

    def to_schema(self) -> Dict[str, Any]:
        """Render this node and its children as a JSON-Editor schema."""
        return self.get_widget().get_schema()

# The End
