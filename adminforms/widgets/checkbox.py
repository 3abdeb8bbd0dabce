# -*- coding: utf-8 -*-
"""
checkbox

Checkbox widget with Bootstrap switch support.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("checkbox")
class CheckboxWidget(BaseWidget):
    """Render boolean values as a checkbox or Bootstrap switch."""

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "boolean",
            "format": "checkbox",
            "title": self.get_title(),
        }
        if self.options.get("switch", True):
            schema["options"] = {
                "containerAttributes": {
                    "class": "form-check form-switch"
                },
                "inputAttributes": {
                    "class": "form-check-input",
                    "type": "checkbox",
                    "role": "switch"
                }
            }
        return self.merge_common(schema)

# The End
