# -*- coding: utf-8 -*-
"""
registry

Field types of read-only views and the templates that render them.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..schema.descriptors import FieldDescriptor

TYPE_ARRAY = "array"
TYPE_BOOLEAN = "boolean"
TYPE_DATE = "date"
TYPE_TIME = "time"
TYPE_DATETIME = "datetime"
TYPE_TEXTAREA = "textarea"
TYPE_EMAIL = "email"
TYPE_TRANS = "trans"
TYPE_STRING = "string"
TYPE_INTEGER = "integer"
TYPE_FLOAT = "float"
TYPE_CURRENCY = "currency"
TYPE_PERCENT = "percent"
TYPE_CHOICE = "choice"
TYPE_URL = "url"
TYPE_HTML = "html"
TYPE_MANY_TO_MANY = "many_to_many"
TYPE_MANY_TO_ONE = "many_to_one"
TYPE_ONE_TO_MANY = "one_to_many"
TYPE_ONE_TO_ONE = "one_to_one"

SHOW_TEMPLATES: Mapping[str, str] = MappingProxyType({
    TYPE_ARRAY: "show/show_array.html",
    TYPE_BOOLEAN: "show/show_boolean.html",
    TYPE_DATE: "show/show_date.html",
    TYPE_TIME: "show/show_time.html",
    TYPE_DATETIME: "show/show_datetime.html",
    TYPE_TEXTAREA: "show/show_html.html",
    TYPE_EMAIL: "show/show_email.html",
    TYPE_TRANS: "show/show_trans.html",
    TYPE_STRING: "show/base_show_field.html",
    TYPE_INTEGER: "show/base_show_field.html",
    TYPE_FLOAT: "show/base_show_field.html",
    TYPE_CURRENCY: "show/show_currency.html",
    TYPE_PERCENT: "show/show_percent.html",
    TYPE_CHOICE: "show/show_choice.html",
    TYPE_URL: "show/show_url.html",
    TYPE_HTML: "show/show_html.html",
    TYPE_MANY_TO_MANY: "show/association/show_many_to_many.html",
    TYPE_MANY_TO_ONE: "show/association/show_many_to_one.html",
    TYPE_ONE_TO_MANY: "show/association/show_one_to_many.html",
    TYPE_ONE_TO_ONE: "show/association/show_one_to_one.html",
})

_KIND_TO_TYPE = {
    "string": TYPE_STRING,
    "uuid": TYPE_STRING,
    "text": TYPE_TEXTAREA,
    "integer": TYPE_INTEGER,
    "bigint": TYPE_INTEGER,
    "float": TYPE_FLOAT,
    "decimal": TYPE_FLOAT,
    "boolean": TYPE_BOOLEAN,
    "date": TYPE_DATE,
    "datetime": TYPE_DATETIME,
    "time": TYPE_TIME,
    "json": TYPE_ARRAY,
}

_RELATION_TO_TYPE = {
    "fk": TYPE_MANY_TO_ONE,
    "o2o": TYPE_ONE_TO_ONE,
    "m2m": TYPE_MANY_TO_MANY,
    "o2m": TYPE_ONE_TO_MANY,
}


def guess_show_type(mapping: "FieldDescriptor | None") -> str | None:
    """Return the show type matching a model field, ``None`` if unknown."""
    if mapping is None:
        return None
    if mapping.relation is not None:
        return _RELATION_TO_TYPE.get(mapping.relation.kind)
    if mapping.choices:
        return TYPE_CHOICE
    return _KIND_TO_TYPE.get(mapping.kind)


class TemplateRegistry:
    """Named admin templates with per-admin overrides."""

    DEFAULTS: Mapping[str, str] = MappingProxyType({
        "show": "show/show.html",
        "base_show_field": "show/base_show_field.html",
    })

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates: dict[str, str] = {**self.DEFAULTS, **(templates or {})}

    def has_template(self, name: str) -> bool:
        return name in self._templates

    def get_template(self, name: str) -> str | None:
        return self._templates.get(name)

    def set_template(self, name: str, template: str) -> None:
        self._templates[name] = template

    def get_templates(self) -> dict[str, str]:
        return dict(self._templates)

# The End
