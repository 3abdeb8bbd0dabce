# -*- coding: utf-8 -*-
"""
mapper

Fluent field mappers for admin forms and read-only views.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseMapper
from .form import FormMapper
from .grouped import BaseGroupedMapper
from .show import ShowMapper

__all__ = ["BaseGroupedMapper", "BaseMapper", "FormMapper", "ShowMapper"]

# The End
