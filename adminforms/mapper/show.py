# -*- coding: utf-8 -*-
"""
show

Fluent registration of read-only fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Sequence

from ..builder.show import ShowBuilder
from ..schema.collection import FieldDescriptionCollection
from ..schema.descriptors import FieldDescription
from ..templating.registry import guess_show_type
from .grouped import BaseGroupedMapper

if TYPE_CHECKING:  # pragma: no cover
    from ..admin.base import FormAdmin

logger = logging.getLogger(__name__)


class ShowMapper(BaseGroupedMapper):
    """Map admin fields onto a :class:`FieldDescriptionCollection`."""

    def __init__(self, show_builder: ShowBuilder, collection: FieldDescriptionCollection, admin: "FormAdmin") -> None:
        super().__init__(admin)
        self.builder = show_builder
        self.collection = collection

    def add(
        self,
        name: str,
        type: str | None = None,
        field_description_options: Dict[str, Any] | None = None,
    ) -> "ShowMapper":
        fd_options = dict(field_description_options or {})

        if not self.should_apply():
            return self

        role = fd_options.get("role")
        if role is not None and not self.admin.is_granted(role):
            logger.debug("Skipping show field %r: role %r not granted", name, role)
            return self

        group = self.add_field_to_current_group(name)

        if fd_options.get("translation_domain") is None:
            fd_options["translation_domain"] = group.get("translation_domain")
        if fd_options.get("label") is None:
            fd_options["label"] = self.admin.label_translator_strategy.get_label(name, "show", "label")

        field_description = self.admin.create_field_description(name, fd_options)
        if type is None:
            type = field_description.type or guess_show_type(field_description.mapping)

        self.builder.add_field(self.collection, type, field_description)
        self.admin.add_show_field_description(name, field_description)
        return self

    def get(self, key: str) -> FieldDescription:
        return self.collection.get(key)

    def has(self, key: str) -> bool:
        return self.collection.has(key)

    def keys(self) -> list[str]:
        return self.collection.keys()

    def remove(self, key: str) -> "ShowMapper":
        self.admin.remove_show_field_description(key)
        self.admin.remove_field_from_show_group(key)
        self.collection.remove(key)
        return self

    def reorder(self, keys: Sequence[str]) -> "ShowMapper":
        self.admin.reorder_show_group(self.get_current_group_name(), keys)
        return self

    # --- storage hooks -----------------------------------------------------

    def get_groups(self) -> Dict[str, Dict[str, Any]]:
        return self.admin.get_show_groups()

    def set_groups(self, groups: Dict[str, Dict[str, Any]]) -> None:
        self.admin.set_show_groups(groups)

    def get_tabs(self) -> Dict[str, Dict[str, Any]]:
        return self.admin.get_show_tabs()

    def set_tabs(self, tabs: Dict[str, Dict[str, Any]]) -> None:
        self.admin.set_show_tabs(tabs)

    def get_name(self) -> str:
        return "show"

# The End
