# -*- coding: utf-8 -*-
"""
show

Builder assigning display templates to read-only field descriptions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from ..schema.collection import FieldDescriptionCollection
from ..schema.descriptors import FieldDescription
from ..templating.registry import SHOW_TEMPLATES


class ShowBuilder:
    """Assign display templates to read-only field descriptions.

    Templates come from ``SHOW_TEMPLATES`` by field type only; an unknown or
    missing type leaves the template empty.
    """

    def fix_field_description(self, field_description: FieldDescription) -> None:
        """Fill in the template when the description has none."""
        if field_description.template is None:
            field_description.template = self.get_template(field_description.type)

    def get_base_list(self, options: Dict[str, Any] | None = None) -> FieldDescriptionCollection:
        return FieldDescriptionCollection()

    def add_field(
        self,
        collection: FieldDescriptionCollection,
        type: str | None,
        field_description: FieldDescription,
    ) -> None:
        field_description.type = type
        self.fix_field_description(field_description)

        collection.add(field_description)

    @staticmethod
    def get_template(type: str | None) -> str | None:
        if type is None:
            return None
        return SHOW_TEMPLATES.get(type)

# The End
