# -*- coding: utf-8 -*-
"""
base

Admin object hosting form/show groups, tabs and field descriptions.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence

from ..builder.show import ShowBuilder
from ..conf import current_settings
from ..exceptions import AdminConfigurationError, FieldNotFound
from ..forms.builder import FormBuilder
from ..forms.contractor import FormContractor
from ..mapper.form import FormMapper
from ..mapper.show import ShowMapper
from ..schema.collection import FieldDescriptionCollection
from ..schema.descriptors import FieldDescription, ModelDescriptor
from ..schema.factory import FieldDescriptionFactory
from ..security.handler import NoopSecurityHandler, SecurityHandler
from ..templating.registry import TemplateRegistry
from ..translator.labels import LabelTranslatorStrategy, get_label_translator_strategy

if TYPE_CHECKING:  # pragma: no cover
    from .pool import AdminPool

logger = logging.getLogger(__name__)

Groups = Dict[str, Dict[str, Any]]


def _reorder_fields(group: Dict[str, Any] | None, keys: Sequence[str]) -> None:
    if group is None:
        return
    fields: Dict[str, str] = group.get("fields", {})
    # listed keys the group does not hold are skipped, not added empty
    ordered = {key: fields[key] for key in keys if key in fields}
    for key, value in fields.items():
        ordered.setdefault(key, value)
    group["fields"] = ordered


def _drop_field(groups: Groups, key: str) -> None:
    for name in list(groups):
        fields = groups[name].get("fields", {})
        fields.pop(key, None)
        if not fields:
            del groups[name]


class FormAdmin:
    """Basic admin object the mappers work against.

    Responsibility lines
    --------------------
    * Groups and tabs are plain dictionaries owned here; mappers read and
      write them through the ``get_*``/``set_*`` accessors.
    * Field descriptions are created here so they always carry the admin.
    * ``configure_form_fields`` / ``configure_show_fields`` are the hooks
      subclasses override to declare their fields.
    """

    model: type[Any] | None = None
    label: str | None = None
    translation_domain: str | None = None
    app_label: str = ""
    model_slug: str | None = None
    code: str | None = None
    descriptor: ModelDescriptor | None = None
    templates: Mapping[str, str] = {}

    def __init__(
        self,
        model: type[Any] | None = None,
        *,
        code: str | None = None,
        descriptor: ModelDescriptor | None = None,
        security_handler: SecurityHandler | None = None,
        label_translator_strategy: LabelTranslatorStrategy | None = None,
        form_contractor: FormContractor | None = None,
        show_builder: ShowBuilder | None = None,
    ) -> None:
        self.model = model or type(self).model
        self.descriptor = descriptor or type(self).descriptor
        model_name = getattr(self.model, "__name__", "") or (
            self.descriptor.model_name if self.descriptor else ""
        )
        self.model_slug = type(self).model_slug or model_name.lower()
        if not self.app_label and self.descriptor is not None:
            self.app_label = self.descriptor.app_label
        self.code = code or type(self).code or ".".join(
            part for part in (self.app_label, self.model_slug) if part
        )
        self.translation_domain = type(self).translation_domain or current_settings().translation_domain

        self.pool: AdminPool | None = None
        self.subject: Any = None
        self.security_handler: SecurityHandler = security_handler or NoopSecurityHandler()
        self.form_contractor = form_contractor or FormContractor()
        self.show_builder = show_builder or ShowBuilder()
        self.template_registry = TemplateRegistry(self.templates)
        self._label_translator_strategy = label_translator_strategy
        self._field_description_factory = FieldDescriptionFactory(self.descriptor)

        self._form_groups: Groups = {}
        self._form_tabs: Groups = {}
        self._show_groups: Groups = {}
        self._show_tabs: Groups = {}
        self._form_field_descriptions: Dict[str, FieldDescription] = {}
        self._show_field_descriptions: Dict[str, FieldDescription] = {}
        self._form_builder: FormBuilder | None = None
        self._show: FieldDescriptionCollection | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"

    # --- model helpers -----------------------------------------------------

    @property
    def model_class_path(self) -> str | None:
        if self.model is not None:
            return f"{self.model.__module__}.{self.model.__qualname__}"
        if self.descriptor is not None:
            return self.descriptor.dotted
        return None

    def get_new_instance(self) -> Any:
        if self.model is None:
            raise AdminConfigurationError(f"Admin {self.code!r} has no model class")
        return self.model()

    # --- hooks -------------------------------------------------------------

    def configure_form_fields(self, form: FormMapper) -> None:
        """Declare form fields; override in subclasses."""

    def configure_show_fields(self, show: ShowMapper) -> None:
        """Declare read-only fields; override in subclasses."""

    # --- building ----------------------------------------------------------

    def get_form_builder(self) -> FormBuilder:
        """Build the form once and return the cached builder."""
        if self._form_builder is None:
            builder = self.form_contractor.get_form_builder(
                self.code or "form", {"data_class": self.model_class_path}
            )
            mapper = FormMapper(self.form_contractor, builder, self)
            self.configure_form_fields(mapper)
            self._form_builder = builder
        return self._form_builder

    def get_show(self) -> FieldDescriptionCollection:
        """Build the read-only field list once and return it."""
        if self._show is None:
            collection = self.show_builder.get_base_list()
            mapper = ShowMapper(self.show_builder, collection, self)
            self.configure_show_fields(mapper)
            self._show = collection
        return self._show

    # --- translation -------------------------------------------------------

    @property
    def label_translator_strategy(self) -> LabelTranslatorStrategy:
        if self._label_translator_strategy is None:
            self._label_translator_strategy = get_label_translator_strategy(
                current_settings().label_strategy
            )
        return self._label_translator_strategy

    @label_translator_strategy.setter
    def label_translator_strategy(self, strategy: LabelTranslatorStrategy) -> None:
        self._label_translator_strategy = strategy

    # --- permissions -------------------------------------------------------

    def is_granted(self, role: Any, obj: Optional[Any] = None) -> bool:
        return self.security_handler.is_granted(self, role, obj if obj is not None else self.subject)

    # --- field descriptions ------------------------------------------------

    def create_field_description(self, name: str, options: Dict[str, Any] | None = None) -> FieldDescription:
        return self._field_description_factory.create(name, options, admin=self)

    def attach_admin_class(self, field_description: FieldDescription) -> None:
        """Resolve the admin managing the field's target model."""
        if self.pool is None:
            logger.debug("Admin %s has no pool; %s stays unattached", self.code, field_description.name)
            return
        admin_code = field_description.get_option("admin_code")
        if admin_code is not None:
            admin = self.pool.get_admin_by_code(admin_code)
        else:
            target = field_description.target_model
            if target is None or not self.pool.has_admin_by_model(target):
                return
            admin = self.pool.get_admin_by_model(target)
        field_description.association_admin = admin

    def add_form_field_description(self, name: str, field_description: FieldDescription) -> None:
        self._form_field_descriptions[name] = field_description

    def has_form_field_description(self, name: str) -> bool:
        return name in self._form_field_descriptions

    def get_form_field_description(self, name: str) -> FieldDescription:
        try:
            return self._form_field_descriptions[name]
        except KeyError:
            raise FieldNotFound(name, f'The form field description "{name}" does not exist.') from None

    def get_form_field_descriptions(self) -> Dict[str, FieldDescription]:
        return dict(self._form_field_descriptions)

    def remove_form_field_description(self, name: str) -> None:
        self._form_field_descriptions.pop(name, None)

    def add_show_field_description(self, name: str, field_description: FieldDescription) -> None:
        self._show_field_descriptions[name] = field_description

    def has_show_field_description(self, name: str) -> bool:
        return name in self._show_field_descriptions

    def get_show_field_descriptions(self) -> Dict[str, FieldDescription]:
        return dict(self._show_field_descriptions)

    def remove_show_field_description(self, name: str) -> None:
        self._show_field_descriptions.pop(name, None)

    # --- form groups and tabs ----------------------------------------------

    def get_form_groups(self) -> Groups:
        return self._form_groups

    def set_form_groups(self, groups: Groups) -> None:
        self._form_groups = groups

    def get_form_tabs(self) -> Groups:
        return self._form_tabs

    def set_form_tabs(self, tabs: Groups) -> None:
        self._form_tabs = tabs

    def reorder_form_group(self, group: str, keys: Sequence[str]) -> None:
        _reorder_fields(self._form_groups.get(group), keys)

    def remove_field_from_form_group(self, key: str) -> None:
        _drop_field(self._form_groups, key)

    # --- show groups and tabs ----------------------------------------------

    def get_show_groups(self) -> Groups:
        return self._show_groups

    def set_show_groups(self, groups: Groups) -> None:
        self._show_groups = groups

    def get_show_tabs(self) -> Groups:
        return self._show_tabs

    def set_show_tabs(self, tabs: Groups) -> None:
        self._show_tabs = tabs

    def reorder_show_group(self, group: str, keys: Sequence[str]) -> None:
        _reorder_fields(self._show_groups.get(group), keys)

    def remove_field_from_show_group(self, key: str) -> None:
        _drop_field(self._show_groups, key)

# The End
