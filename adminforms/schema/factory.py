# -*- coding: utf-8 -*-
"""
factory

Create field descriptions from names, options and model metadata.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from .descriptors import FieldDescription, ModelDescriptor, Relation


class FieldDescriptionFactory:
    """Build :class:`FieldDescription` objects for one model.

    Dotted names walk through relations: every segment but the last must be a
    relation on ``descriptor`` (only the first hop is resolvable here since
    descriptors of related models are not known), and the last segment is
    looked up only for plain names.
    """

    def __init__(self, descriptor: ModelDescriptor | None = None) -> None:
        self.descriptor = descriptor

    def create(
        self,
        name: str,
        options: dict[str, Any] | None = None,
        *,
        admin: Any = None,
    ) -> FieldDescription:
        mapping = None
        parents: list[Relation] = []
        if self.descriptor is not None:
            head, _, rest = name.partition(".")
            fd = self.descriptor.field(head)
            if not rest:
                mapping = fd
            elif fd is not None and fd.relation is not None:
                parents.append(fd.relation)

        description = FieldDescription(
            name=name,
            mapping=mapping,
            parent_associations=parents,
            admin=admin,
        )
        description.set_options(options or {})
        return description

# The End
