# -*- coding: utf-8 -*-
"""
form

Fluent registration of form fields against an admin and a form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Sequence

from ..conf import current_settings
from ..forms.builder import FormBuilder
from ..forms.contractor import FormContractor
from ..forms.types import FormType
from ..utils import replace_recursive
from .grouped import BaseGroupedMapper

if TYPE_CHECKING:  # pragma: no cover
    from ..admin.base import FormAdmin

logger = logging.getLogger(__name__)


class FormMapper(BaseGroupedMapper):
    """Map admin fields onto a :class:`FormBuilder`.

    ``add`` is the heart of it: it skips gated fields, derives the property
    path, registers a field description with the admin and hands the child
    to the form builder with the contractor's default options merged under
    the caller's own.
    """

    def __init__(self, contractor: FormContractor, form_builder: FormBuilder, admin: "FormAdmin") -> None:
        super().__init__(admin)
        self.builder = contractor
        self._form_builder = form_builder

    @property
    def form_builder(self) -> FormBuilder:
        return self._form_builder

    def reorder(self, keys: Sequence[str]) -> "FormMapper":
        self.admin.reorder_form_group(self.get_current_group_name(), keys)
        return self

    def add(
        self,
        name: "str | FormBuilder",
        type: str | None = None,
        options: Dict[str, Any] | None = None,
        field_description_options: Dict[str, Any] | None = None,
    ) -> "FormMapper":
        options = dict(options or {})
        fd_options = dict(field_description_options or {})
        is_builder = isinstance(name, FormBuilder)

        if not self.should_apply():
            return self

        role = fd_options.get("role")
        if role is not None and not self.admin.is_granted(role):
            logger.debug("Skipping form field %r: role %r not granted", getattr(name, "name", name), role)
            return self

        field_name = name.name if is_builder else name

        # dots are not allowed in child names but are fine in property paths
        if not is_builder and options.get("property_path") is None:
            options["property_path"] = field_name
            field_name = self.sanitize_field_name(field_name)

        if type == FormType.COLLECTION:
            type = FormType.ADMIN_COLLECTION

        group = self.add_field_to_current_group(field_name)

        if is_builder and type is None:
            fd_options["type"] = name.type

        if fd_options.get("type") is None and isinstance(type, str):
            fd_options["type"] = type

        if fd_options.get("translation_domain") is None:
            fd_options["translation_domain"] = group.get("translation_domain")

        field_description = self.admin.create_field_description(
            name.name if is_builder else name,
            fd_options,
        )
        self.builder.fix_field_description(field_description)

        if field_description.name != field_name:
            field_description.name = field_name

        if is_builder:
            child: str | FormBuilder = name
            type = None
            options = {}
        else:
            child = field_description.name
            options = replace_recursive(
                self.builder.get_default_options(type, field_description, options),
                options,
            )
            if options.get("label_render") is None:
                options["label_render"] = current_settings().label_render
            if options.get("label") is None:
                options["label"] = self.admin.label_translator_strategy.get_label(name, "form", "label")

        self.admin.add_form_field_description(field_name, field_description)
        self._form_builder.add(child, type, options)
        return self

    def get(self, key: str) -> FormBuilder:
        return self._form_builder.get(self.sanitize_field_name(key))

    def has(self, key: str) -> bool:
        return self._form_builder.has(self.sanitize_field_name(key))

    def keys(self) -> list[str]:
        return list(self._form_builder.all())

    def remove(self, key: str) -> "FormMapper":
        key = self.sanitize_field_name(key)
        self.admin.remove_form_field_description(key)
        self.admin.remove_field_from_form_group(key)
        self._form_builder.remove(key)
        return self

    def create(self, name: str, type: str | None = None, options: Dict[str, Any] | None = None) -> FormBuilder:
        return self._form_builder.create(name, type, options)

    # --- storage hooks -----------------------------------------------------

    def get_groups(self) -> Dict[str, Dict[str, Any]]:
        return self.admin.get_form_groups()

    def set_groups(self, groups: Dict[str, Dict[str, Any]]) -> None:
        self.admin.set_form_groups(groups)

    def get_tabs(self) -> Dict[str, Dict[str, Any]]:
        return self.admin.get_form_tabs()

    def set_tabs(self, tabs: Dict[str, Dict[str, Any]]) -> None:
        self.admin.set_form_tabs(tabs)

    def get_name(self) -> str:
        return "form"

    @staticmethod
    def sanitize_field_name(field_name: str) -> str:
        """Make ``field_name`` usable as a child name.

        Children are addressed with dotted paths, so ``.`` becomes ``__``;
        existing ``__`` are doubled first so ``a.b`` and ``a__b`` stay apart.
        """
        return field_name.replace("__", "____").replace(".", "__")

# The End
