# -*- coding: utf-8 -*-
"""
labels

Strategies deriving display labels from field names.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Dict, Type

from ..exceptions import AdminConfigurationError

_CAMEL_RE = re.compile(r"(?<=\w)([A-Z])")


def _snake(label: str) -> str:
    return _CAMEL_RE.sub(r"_\1", label).lower()


def _ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


class LabelTranslatorStrategy(ABC):
    """Turn a field name into a label or a translation key."""

    key: str = "base"

    @abstractmethod
    def get_label(self, label: str, context: str = "", type: str = "") -> str:
        raise NotImplementedError


class NativeLabelTranslatorStrategy(LabelTranslatorStrategy):
    """``isValid`` -> ``Is Valid``; ``author.first_name`` -> ``Author First Name``."""

    key = "native"

    def get_label(self, label: str, context: str = "", type: str = "") -> str:
        label = label.replace("_", " ").replace(".", " ")
        label = _snake(label)
        return " ".join(word.capitalize() for word in label.replace("_", " ").split())


class UnderscoreLabelTranslatorStrategy(LabelTranslatorStrategy):
    """``isValid`` -> ``form.label_is_valid``."""

    key = "underscore"

    def get_label(self, label: str, context: str = "", type: str = "") -> str:
        label = label.replace(".", "_")
        return f"{context}.{type}_{_snake(label)}"


class NoopLabelTranslatorStrategy(LabelTranslatorStrategy):
    key = "noop"

    def get_label(self, label: str, context: str = "", type: str = "") -> str:
        return label


class BCLabelTranslatorStrategy(LabelTranslatorStrategy):
    """Keep breadcrumb translation keys and capitalise everything else."""

    key = "bc"

    def get_label(self, label: str, context: str = "", type: str = "") -> str:
        if context == "breadcrumb":
            return f"{context}.{type}_{label.lower()}"
        return _ucfirst(label.lower())


class FormLabelTranslatorStrategy(LabelTranslatorStrategy):
    key = "form_component"

    def get_label(self, label: str, context: str = "", type: str = "") -> str:
        return _ucfirst(label.lower())


STRATEGIES: Dict[str, Type[LabelTranslatorStrategy]] = {
    cls.key: cls
    for cls in (
        NativeLabelTranslatorStrategy,
        UnderscoreLabelTranslatorStrategy,
        NoopLabelTranslatorStrategy,
        BCLabelTranslatorStrategy,
        FormLabelTranslatorStrategy,
    )
}


def get_label_translator_strategy(name: str) -> LabelTranslatorStrategy:
    """Instantiate the strategy registered under ``name``."""
    try:
        return STRATEGIES[name.strip().lower()]()
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise AdminConfigurationError(
            f"Unknown label translator strategy {name!r} (known: {known})"
        ) from None

# The End
