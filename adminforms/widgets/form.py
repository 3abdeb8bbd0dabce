# -*- coding: utf-8 -*-
"""
form

Compound widget rendering a form node and its children.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("form")
class FormWidget(BaseWidget):
    """Object schema whose properties follow child insertion order."""

    def get_schema(self) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        order: list[str] = []
        required: list[str] = []
        for child in self.ctx.builder:
            properties[child.name] = child.to_schema()
            order.append(child.name)
            if child.required:
                required.append(child.name)

        schema: Dict[str, Any] = {
            "type": "object",
            "title": self.get_title(),
            "properties": properties,
            "defaultProperties": order,
        }
        if required:
            schema["required"] = required
        return self.merge_common(schema)

# The End
