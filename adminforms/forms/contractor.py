# -*- coding: utf-8 -*-
"""
contractor

Default options and description fixes applied to form fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..exceptions import AdminConfigurationError
from ..schema.descriptors import FieldDescription
from .builder import FormBuilder
from .types import FormType

logger = logging.getLogger(__name__)


class FormContractor:
    """Prepare field descriptions and compute per-type default options."""

    def fix_field_description(self, field_description: FieldDescription) -> None:
        field_description.set_option("edit", field_description.get_option("edit", "standard"))

        admin = field_description.admin
        if admin is None:
            return
        if field_description.describes_association() or field_description.get_option("admin_code") is not None:
            admin.attach_admin_class(field_description)

    def get_default_options(
        self,
        type: str | None,
        field_description: FieldDescription,
        form_options: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        form_options = form_options or {}
        options: Dict[str, Any] = {"admin_field_description": field_description}

        if type in FormType.MODEL_TYPES:
            options["class"] = field_description.target_model
            if type == FormType.MODEL_AUTOCOMPLETE:
                self._require_association_admin(field_description)
        elif type == FormType.ADMIN:
            self._require_association_admin(field_description)
            if not field_description.describes_single_valued_association():
                raise AdminConfigurationError(
                    f"You are trying to add `{FormType.ADMIN}` field `{field_description.name}` "
                    "which is not a One-To-One or Many-To-One association. "
                    f"You SHOULD use `{FormType.ADMIN_COLLECTION}` instead."
                )
            # sensible defaults so the embedded form works out of the box
            options["btn_add"] = False
            options["delete"] = False
            options["data_class"] = field_description.association_admin.model_class_path
            options["empty_data"] = field_description.association_admin.get_new_instance
            field_description.set_option("edit", field_description.get_option("edit", "admin"))
        elif type == FormType.ADMIN_COLLECTION:
            self._require_association_admin(field_description)
            options["type"] = FormType.ADMIN
            options["modifiable"] = True
            options["type_options"] = self._default_admin_type_options(field_description, form_options)

        return options

    def get_form_builder(self, name: str, options: Dict[str, Any] | None = None) -> FormBuilder:
        return FormBuilder(name, FormType.FORM, options)

    def _default_admin_type_options(
        self, field_description: FieldDescription, form_options: Dict[str, Any]
    ) -> Dict[str, Any]:
        association_admin = field_description.association_admin
        type_options: Dict[str, Any] = {
            "admin_field_description": field_description,
            "data_class": association_admin.model_class_path,
            "empty_data": association_admin.get_new_instance,
        }
        if "by_reference" in form_options:
            type_options["collection_by_reference"] = form_options["by_reference"]
        return type_options

    @staticmethod
    def _require_association_admin(field_description: FieldDescription) -> None:
        if not field_description.has_association_admin():
            logger.warning("Field %s has no association admin", field_description.name)
            raise AdminConfigurationError(
                f"The current field `{field_description.name}` is not linked to an admin. "
                f"Please create one for the target model: `{field_description.target_model}`."
            )

# The End
