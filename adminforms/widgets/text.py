# -*- coding: utf-8 -*-
"""
text

Single-line text input widget.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict
from .base import BaseWidget
from .registry import registry


@registry.register("text", "email", "url", "password", "hidden")
class TextWidget(BaseWidget):
    def get_schema(self) -> Dict[str, Any]:
        fmt = self.config.get("format")
        if fmt is None:
            fmt = self.ctx.type if self.ctx.type != "text" else "text"
        schema: Dict[str, Any] = {
            "type": "string",
            "format": fmt,
            "title": self.get_title(),
        }
        max_length = self.options.get("max_length")
        if max_length:
            schema["maxLength"] = int(max_length)
        if self.ctx.type == "hidden":
            schema["options"] = {"hidden": True}
        return self.merge_common(schema)

# The End
