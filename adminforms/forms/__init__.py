# -*- coding: utf-8 -*-
"""
forms

Form tree, form types and the form contractor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .builder import FormBuilder
from .contractor import FormContractor
from .types import FormType

__all__ = ["FormBuilder", "FormContractor", "FormType"]

# The End
