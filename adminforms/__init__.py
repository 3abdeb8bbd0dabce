# -*- coding: utf-8 -*-
"""
adminforms

Form and show field mapping for FastAPI admin panels.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .admin import AdminPool, FormAdmin
from .builder import ShowBuilder
from .conf import AdminFormsSettings, configure, current_settings
from .forms import FormBuilder, FormContractor, FormType
from .mapper import FormMapper, ShowMapper
from .schema import FieldDescription, FieldDescriptionCollection

__all__ = [
    "AdminFormsSettings",
    "AdminPool",
    "FieldDescription",
    "FieldDescriptionCollection",
    "FormAdmin",
    "FormBuilder",
    "FormContractor",
    "FormMapper",
    "FormType",
    "ShowBuilder",
    "ShowMapper",
    "configure",
    "current_settings",
]

# The End
