# -*- coding: utf-8 -*-
"""
api

HTTP surface of the form mapping layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .forms import FormSchemaAPI

__all__ = ["FormSchemaAPI"]

# The End
