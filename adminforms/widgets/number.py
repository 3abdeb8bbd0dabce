# -*- coding: utf-8 -*-
"""
number

Widget for numeric fields (integers and floats).

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("number", "integer")
class NumberWidget(BaseWidget):
    """Render numeric values using JSON Schema number/integer types."""

    def get_schema(self) -> Dict[str, Any]:
        schema_type = "integer" if self.ctx.type == "integer" else "number"
        schema: Dict[str, Any] = {
            "type": schema_type,
            "title": self.get_title(),
        }
        for option, keyword in (("min", "minimum"), ("max", "maximum")):
            if self.options.get(option) is not None:
                schema[keyword] = self.options[option]
        return self.merge_common(schema)

# The End
