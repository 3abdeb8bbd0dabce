# -*- coding: utf-8 -*-
"""
base

Base widget class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict
from abc import ABC, abstractmethod

from ..utils import humanize
from .context import BuilderContext


class BaseWidget(ABC):
    """
    Base Widget Class

    Widgets turn one form node into a JSON Schema fragment for JSON-Editor.
    """
    key: str = "base"

    def __init__(self, ctx: BuilderContext, **config) -> None:
        self.ctx = ctx
        self.config: dict[str, Any] = config

    @property
    def options(self) -> dict[str, Any]:
        return self.ctx.options

    def get_title(self) -> str:
        label = self.options.get("label")
        if isinstance(label, str) and label:
            return label
        if label is False:
            return ""
        return humanize(self.ctx.name)

    # === Schema Generation ===
    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment for a specific field."""
        raise NotImplementedError

    def merge_common(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Insert ``readonly``, ``description`` and default data if present."""
        if self.ctx.readonly:
            schema["readonly"] = True
        help_text = self.options.get("help")
        if help_text:
            schema["description"] = str(help_text)
        data = self.options.get("data")
        if data is not None:
            schema["default"] = data
        attr = self.options.get("attr")
        if attr:
            schema.setdefault("options", {})
            schema["options"].setdefault("inputAttributes", {}).update(attr)
        return schema

# The End
