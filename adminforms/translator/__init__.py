# -*- coding: utf-8 -*-
"""
translator

Label translator strategies.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .labels import (
    BCLabelTranslatorStrategy,
    FormLabelTranslatorStrategy,
    LabelTranslatorStrategy,
    NativeLabelTranslatorStrategy,
    NoopLabelTranslatorStrategy,
    STRATEGIES,
    UnderscoreLabelTranslatorStrategy,
    get_label_translator_strategy,
)

__all__ = [
    "BCLabelTranslatorStrategy",
    "FormLabelTranslatorStrategy",
    "LabelTranslatorStrategy",
    "NativeLabelTranslatorStrategy",
    "NoopLabelTranslatorStrategy",
    "STRATEGIES",
    "UnderscoreLabelTranslatorStrategy",
    "get_label_translator_strategy",
]

# The End
