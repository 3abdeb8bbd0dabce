# -*- coding: utf-8 -*-
"""
builder

View builders.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .show import ShowBuilder

__all__ = ["ShowBuilder"]

# The End
