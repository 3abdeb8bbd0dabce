# -*- coding: utf-8 -*-
"""
tests.test_show_builder

Template resolution for read-only field descriptions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from adminforms.builder import ShowBuilder
from adminforms.schema import FieldDescription, FieldDescriptionCollection
from adminforms.templating.registry import SHOW_TEMPLATES


class TestShowBuilder:
    """Type to template lookups without fallbacks."""

    @pytest.mark.parametrize(
        "type_, template",
        [
            ("boolean", "show/show_boolean.html"),
            ("string", "show/base_show_field.html"),
            ("textarea", "show/show_html.html"),
            ("many_to_one", "show/association/show_many_to_one.html"),
        ],
    )
    def test_template_follows_type(self, type_: str, template: str) -> None:
        fd = FieldDescription(name="field", type=type_)
        ShowBuilder().fix_field_description(fd)
        assert fd.template == template

    def test_unknown_type_leaves_template_empty(self) -> None:
        fd = FieldDescription(name="field", type="hologram")
        ShowBuilder().fix_field_description(fd)
        assert fd.template is None

    def test_missing_type_leaves_template_empty(self) -> None:
        fd = FieldDescription(name="field")
        ShowBuilder().fix_field_description(fd)
        assert fd.template is None

    def test_explicit_template_is_kept(self) -> None:
        fd = FieldDescription(name="field", type="boolean", template="custom/flag.html")
        ShowBuilder().fix_field_description(fd)
        assert fd.template == "custom/flag.html"

    def test_base_list_is_empty(self) -> None:
        collection = ShowBuilder().get_base_list()
        assert isinstance(collection, FieldDescriptionCollection)
        assert len(collection) == 0

    def test_add_field_sets_type_and_template(self) -> None:
        builder = ShowBuilder()
        collection = builder.get_base_list()
        fd = FieldDescription(name="created_at")
        builder.add_field(collection, "datetime", fd)

        assert collection.get("created_at") is fd
        assert fd.type == "datetime"
        assert fd.template == SHOW_TEMPLATES["datetime"]

# The End
