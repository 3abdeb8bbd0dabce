# -*- coding: utf-8 -*-
"""
descriptors

Model metadata descriptors and the mutable field description record.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field as PField

# Unified field kinds of the underlying model layer
FieldKind = Literal[
    "string", "text", "integer", "bigint", "float", "decimal",
    "boolean", "date", "datetime", "time", "uuid", "json", "file", "binary",
    "relation",
]

RelationKind = Literal["fk", "o2o", "m2m", "o2m"]

SINGLE_VALUED_RELATIONS = ("fk", "o2o")


class Choice(BaseModel):
    """Single selectable option for a field with discrete choices."""
    const: Any
    title: str


class Relation(BaseModel):
    """Information about a relation to another model."""
    kind: RelationKind
    target: str  # dotted path "app.Model"
    to_field: Optional[str] = None  # usually the target model's PK


class FieldDescriptor(BaseModel):
    """Unified representation of a model field."""
    name: str
    kind: FieldKind
    nullable: bool = False
    required: bool = False
    primary_key: bool = False
    default: Any | None = None

    label: str | None = None
    max_length: int | None = None

    relation: Relation | None = None
    choices: list[Choice] | None = None


class ModelDescriptor(BaseModel):
    """Metadata describing a model handled by an admin."""
    app_label: str
    model_name: str
    dotted: str
    pk_attr: str = "id"

    fields: list[FieldDescriptor] = PField(default_factory=list)

    def field(self, name: str) -> FieldDescriptor | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def fields_map(self) -> dict[str, FieldDescriptor]:
        """Return a mapping of field names to descriptors."""
        return {f.name: f for f in self.fields}


class FieldDescription(BaseModel):
    """Admin metadata for one form or show field.

    Instances are created by the admin's field description factory and then
    mutated in place by mappers and builders during a single build pass. The
    ``type`` and ``template`` keys of the options are lifted into attributes
    by :meth:`set_options`; everything else stays in ``options``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    field_name: str = ""
    type: str | None = None
    template: str | None = None
    options: dict[str, Any] = PField(default_factory=dict)

    mapping: FieldDescriptor | None = None
    parent_associations: list[Relation] = PField(default_factory=list)

    admin: Any = PField(default=None, exclude=True, repr=False)
    association_admin: Any = PField(default=None, exclude=True, repr=False)

    def model_post_init(self, __context: Any) -> None:
        if not self.field_name:
            self.field_name = self.name.rsplit(".", 1)[-1]

    # --- options -----------------------------------------------------------

    def set_options(self, options: dict[str, Any]) -> None:
        """Replace the options, lifting ``type`` and ``template`` out of them."""
        options = dict(options)
        type_ = options.pop("type", None)
        if type_ is not None:
            self.type = type_
        template = options.pop("template", None)
        if template is not None:
            self.template = template
        options.setdefault("placeholder", "short_object_description_placeholder")
        options.setdefault("link_parameters", {})
        self.options = options

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def set_option(self, name: str, value: Any) -> None:
        self.options[name] = value

    def has_option(self, name: str) -> bool:
        return name in self.options

    # --- labels ------------------------------------------------------------

    def get_label(self) -> str | None:
        return self.options.get("label")

    def get_translation_domain(self) -> str | None:
        domain = self.options.get("translation_domain")
        if domain is None and self.admin is not None:
            domain = getattr(self.admin, "translation_domain", None)
        return domain

    # --- associations ------------------------------------------------------

    @property
    def relation(self) -> Relation | None:
        return self.mapping.relation if self.mapping is not None else None

    def describes_association(self) -> bool:
        return self.relation is not None

    def describes_single_valued_association(self) -> bool:
        rel = self.relation
        return rel is not None and rel.kind in SINGLE_VALUED_RELATIONS

    def describes_collection_valued_association(self) -> bool:
        rel = self.relation
        return rel is not None and rel.kind not in SINGLE_VALUED_RELATIONS

    @property
    def target_model(self) -> str | None:
        rel = self.relation
        return rel.target if rel is not None else None

    def has_association_admin(self) -> bool:
        return self.association_admin is not None

# The End
