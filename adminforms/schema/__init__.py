# -*- coding: utf-8 -*-
"""
schema

Field description records and model metadata.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .collection import FieldDescriptionCollection
from .descriptors import (
    Choice,
    FieldDescription,
    FieldDescriptor,
    ModelDescriptor,
    Relation,
)
from .factory import FieldDescriptionFactory

__all__ = [
    "Choice",
    "FieldDescription",
    "FieldDescriptionCollection",
    "FieldDescriptionFactory",
    "FieldDescriptor",
    "ModelDescriptor",
    "Relation",
]

# The End
