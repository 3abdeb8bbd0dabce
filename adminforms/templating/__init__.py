# -*- coding: utf-8 -*-
"""
templating

Show templates registry and rendering.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .registry import SHOW_TEMPLATES, TemplateRegistry, guess_show_type
from .rendering import ShowRenderer

__all__ = ["SHOW_TEMPLATES", "ShowRenderer", "TemplateRegistry", "guess_show_type"]

# The End
