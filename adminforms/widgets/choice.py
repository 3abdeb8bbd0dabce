# -*- coding: utf-8 -*-
"""
choice

Select, radio and multi-select widget for fields with choices.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from enum import Enum, EnumMeta
from typing import Any, Dict, Tuple, Iterable, cast

from .base import BaseWidget
from .registry import registry


def _humanize(name: str) -> str:
    return name.replace("_", " ").title()


def _enum_label(member: Enum) -> str:
    return str(getattr(member, "label", None) or getattr(member, "title", None) or _humanize(member.name))


def normalize_choices(choices: Any) -> Tuple[list[Any], list[str]]:
    """
    Supported forms:
      - dict {value: label}
      - iterable of pairs (value, label)
      - iterable of ``Choice`` models (``const``/``title``)
      - iterable of values
      - Enum class (EnumMeta) or iterable of Enum members
    Returns ``(enum_values, enum_titles)``.
    """
    if not choices:
        return [], []

    if isinstance(choices, EnumMeta):
        members = list(cast(Iterable[Enum], choices))
        return [m.value for m in members], [_enum_label(m) for m in members]

    if isinstance(choices, dict):
        vals, titles = [], []
        for k, v in choices.items():
            vals.append(k.value if isinstance(k, Enum) else k)
            titles.append(_enum_label(v) if isinstance(v, Enum) else str(v))
        return vals, titles

    vals, titles = [], []
    for item in choices:
        if hasattr(item, "const") and hasattr(item, "title"):
            vals.append(item.const)
            titles.append(str(item.title))
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            v, lbl = item
            vals.append(v.value if isinstance(v, Enum) else v)
            titles.append(_enum_label(lbl) if isinstance(lbl, Enum) else str(lbl))
        elif isinstance(item, Enum):
            vals.append(item.value)
            titles.append(_enum_label(item))
        else:
            vals.append(item)
            titles.append(str(item))
    return vals, titles


@registry.register("choice")
class ChoiceWidget(BaseWidget):
    """``expanded`` renders radios/checkboxes, otherwise a select box."""

    def get_schema(self) -> Dict[str, Any]:
        choices = self.options.get("choices")
        if choices is None and self.ctx.field_description is not None:
            mapping = self.ctx.field_description.mapping
            choices = getattr(mapping, "choices", None)
        enum_vals, titles = normalize_choices(choices)

        # Type based on actual values (all ints → integer, otherwise string)
        typ = "integer" if enum_vals and all(
            isinstance(v, int) and not isinstance(v, bool) for v in enum_vals
        ) else "string"
        expanded = bool(self.options.get("expanded"))

        if self.options.get("multiple"):
            schema: Dict[str, Any] = {
                "type": "array",
                "title": self.get_title(),
                "uniqueItems": True,
                "items": {"type": typ, "enum": enum_vals, "options": {"enum_titles": titles}},
            }
            if expanded:
                schema["format"] = "checkbox"
            return self.merge_common(schema)

        return self.merge_common({
            "type": typ,
            "title": self.get_title(),
            "format": "radio" if expanded else "select",
            "enum": enum_vals,                    # ← only values
            "options": {"enum_titles": titles},   # ← labels separately
        })

# The End
