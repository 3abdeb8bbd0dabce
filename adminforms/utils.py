# -*- coding: utf-8 -*-
"""
utils

Small helpers shared by mappers, builders and widgets.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping


def replace_recursive(base: Mapping[str, Any], *overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` with every mapping in ``overrides`` laid on top.

    Nested dictionaries present on both sides are merged key by key; any other
    value from an override replaces the one from ``base``. Inputs are not
    mutated.
    """

    result: dict[str, Any] = dict(base)
    for override in overrides:
        for key, value in override.items():
            current = result.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = replace_recursive(current, value)
            else:
                result[key] = value
    return result


def humanize(name: str) -> str:
    """Turn ``field_name`` into ``Field name``."""
    text = name.replace("_", " ").replace(".", " ").strip()
    return text[:1].upper() + text[1:]


# The End
