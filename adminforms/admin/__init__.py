# -*- coding: utf-8 -*-
"""
admin

Host admin objects and their pool.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import FormAdmin
from .pool import AdminPool

__all__ = ["AdminPool", "FormAdmin"]

# The End
