# -*- coding: utf-8 -*-
"""
collection

Array widget for plain and admin-managed collections.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("collection", "admin_collection")
class CollectionWidget(BaseWidget):
    """Render a list whose items follow a prototype entry.

    The plain collection reads ``entry_type``/``entry_options``; the admin
    collection reads ``type``/``type_options`` filled in by the form
    contractor, plus its ``btn_add`` and ``modifiable`` flags.
    """

    def _prototype(self):
        if self.ctx.type == "admin_collection":
            entry_type = self.options.get("type")
            entry_options = self.options.get("type_options") or {}
        else:
            entry_type = self.options.get("entry_type")
            entry_options = self.options.get("entry_options") or {}
        return self.ctx.builder.create("__name__", entry_type, entry_options)

    def get_schema(self) -> Dict[str, Any]:
        prototype = self._prototype()
        items = prototype.get_widget(name=self.ctx.name).get_schema()
        items.pop("title", None)

        if self.ctx.type == "admin_collection":
            allow_add = self.options.get("btn_add", True) is not False and bool(self.options.get("modifiable", True))
            allow_delete = bool(self.options.get("modifiable", True))
        else:
            allow_add = bool(self.options.get("allow_add", False))
            allow_delete = bool(self.options.get("allow_delete", False))

        schema: Dict[str, Any] = {
            "type": "array",
            "format": "table" if self.options.get("table") else "tabs",
            "title": self.get_title(),
            "items": items,
            "options": {
                "disable_array_add": not allow_add,
                "disable_array_delete": not allow_delete,
                "disable_array_reorder": not self.options.get("sortable", False),
            },
        }
        return self.merge_common(schema)

# The End
