# -*- coding: utf-8 -*-
"""
__init__

Widgets rendering form types as JSON-Editor schema fragments.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .base import BaseWidget
from .registry import registry

__all__ = ["BaseWidget", "registry"]

# Import built-in widgets so they register themselves:
from .form import FormWidget  # noqa: F401,E402
from .text import TextWidget      # noqa: F401,E402
from .textarea import TextAreaWidget  # noqa: F401,E402
from .number import NumberWidget  # noqa: F401,E402
from .checkbox import CheckboxWidget  # noqa: F401,E402
from .choice import ChoiceWidget  # noqa: F401,E402
from .datetime import DateTimeWidget  # noqa: F401,E402
from .collection import CollectionWidget  # noqa: F401,E402
from .relations import AdminWidget, RelationsWidget  # noqa: F401,E402

# The End
