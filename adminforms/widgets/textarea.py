# -*- coding: utf-8 -*-
"""
textarea

Multi-line text input widget.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("textarea")
class TextAreaWidget(BaseWidget):
    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "string",
            "format": "textarea",
            "title": self.get_title(),
        }

        options: Dict[str, Any] = {}
        syntax = self.options.get("syntax")
        if syntax:
            options["ace"] = {"mode": syntax, "theme": self.options.get("ace_theme", "chrome")}
        options["inputAttributes"] = {"data-textarea-autosize": "1"}
        schema["options"] = options

        return self.merge_common(schema)

# The End
