# -*- coding: utf-8 -*-
"""
relations

Widgets for related models: selects over choices and embedded admin forms.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .choice import normalize_choices
from .registry import registry


@registry.register("model", "model_list", "model_hidden", "model_autocomplete")
class RelationsWidget(BaseWidget):
    """Simple select based on enum/enum_titles.

    Choices are expected pre-calculated in the ``choices`` option; related
    object lookup is the job of the host application. The autocomplete type
    renders a select2-driven input instead.
    """

    def get_schema(self) -> Dict[str, Any]:
        enum, titles = normalize_choices(self.options.get("choices"))
        enum = [str(v) for v in enum]
        item: Dict[str, Any] = {"type": "string"}
        if enum:
            item["enum"] = enum
            item["options"] = {"enum_titles": titles}

        if self.ctx.type == "model_autocomplete":
            item["format"] = "select2"
        elif self.ctx.type == "model_hidden":
            item["options"] = {**item.get("options", {}), "hidden": True}
        else:
            item["format"] = "select"

        if self.options.get("multiple"):
            schema: Dict[str, Any] = {
                "type": "array",
                "title": self.get_title(),
                "uniqueItems": True,
                "items": item,
            }
        else:
            schema = {**item, "title": self.get_title()}

        target = self.options.get("class")
        if target:
            schema["x-model"] = target
        return self.merge_common(schema)


@registry.register("admin")
class AdminWidget(BaseWidget):
    """Embed the form of the associated admin as a nested object."""

    def get_schema(self) -> Dict[str, Any]:
        fd = self.options.get("admin_field_description")
        association_admin = getattr(fd, "association_admin", None)
        if association_admin is None:
            schema: Dict[str, Any] = {"type": "object", "title": self.get_title(), "properties": {}}
        else:
            schema = association_admin.get_form_builder().to_schema()
            schema["title"] = self.get_title()
        data_class = self.options.get("data_class")
        if data_class:
            schema["x-model"] = data_class
        return self.merge_common(schema)

# The End
