# -*- coding: utf-8 -*-
"""
tests.test_grouped_mapper

Group and tab bookkeeping shared by form and show mappers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from adminforms.admin import FormAdmin
from adminforms.exceptions import MapperLogicError, MapperStateError
from adminforms.forms import FormContractor
from adminforms.mapper import FormMapper
from tests.conftest import settings_state


def make_mapper(admin: FormAdmin | None = None) -> FormMapper:
    contractor = FormContractor()
    return FormMapper(contractor, contractor.get_form_builder("sample"), admin or FormAdmin(code="sample"))


class TestGroupsAndTabs:
    """Opening and closing groups and tabs."""

    def test_group_without_tab_uses_default_tab(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main", description="Core data").add("title").end()

        groups = mapper.get_groups()
        tabs = mapper.get_tabs()
        assert groups["Main"]["description"] == "Core data"
        assert groups["Main"]["label"] == "Main"
        assert groups["Main"]["box_class"] == "box box-primary"
        assert groups["Main"]["collapsed"] is False
        assert tabs["default"]["groups"] == ["Main"]
        assert tabs["default"]["auto_created"] is True
        assert mapper.has_open_tab()

    def test_groups_in_named_tab_are_prefixed(self) -> None:
        mapper = make_mapper()
        mapper.tab("Content").with_("Main").add("title").end().end()
        mapper.tab("Meta").with_("Main").add("slug").end().end()

        assert list(mapper.get_groups()) == ["Content.Main", "Meta.Main"]
        assert mapper.get_tabs()["Content"]["groups"] == ["Content.Main"]
        assert mapper.get_tabs()["Meta"]["groups"] == ["Meta.Main"]
        assert mapper.get_tabs()["Meta"]["auto_created"] is False
        assert not mapper.has_open_tab()

    def test_reopening_group_keeps_fields_and_tab_entry(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").add("a").end()
        mapper.with_("Main", collapsed=True).add("b").end()

        group = mapper.get_groups()["Main"]
        assert group["fields"] == {"a": "a", "b": "b"}
        assert group["collapsed"] is True
        assert mapper.get_tabs()["default"]["groups"] == ["Main"]

    def test_tab_inside_open_tab_is_rejected(self) -> None:
        mapper = make_mapper()
        mapper.tab("One")
        with pytest.raises(MapperStateError, match='close previous tab "One"'):
            mapper.tab("Two")

    def test_tab_after_auto_created_tab_is_rejected(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").end()
        with pytest.raises(MapperStateError, match="added automatically"):
            mapper.tab("Two")

    def test_group_inside_open_group_is_rejected(self) -> None:
        mapper = make_mapper()
        mapper.with_("One")
        with pytest.raises(MapperStateError, match='close previous group "One"'):
            mapper.with_("Two")

    def test_end_without_open_block_raises(self) -> None:
        mapper = make_mapper()
        with pytest.raises(MapperLogicError):
            mapper.end()

    def test_if_end_without_open_block_raises(self) -> None:
        mapper = make_mapper()
        with pytest.raises(MapperLogicError):
            mapper.if_end()

    def test_auto_group_takes_admin_label(self) -> None:
        admin = FormAdmin(code="sample")
        admin.label = "Article"
        mapper = make_mapper(admin)
        mapper.add("title")

        assert list(mapper.get_groups()) == ["Article"]
        assert mapper.get_groups()["Article"]["auto_created"] is True

    def test_default_tab_name_comes_from_settings(self) -> None:
        settings_state.use(default_tab="general")
        mapper = make_mapper()
        mapper.add("title")

        assert list(mapper.get_tabs()) == ["general"]
        assert list(mapper.get_groups()) == ["general"]


class TestRemoval:
    """Removing whole groups and tabs."""

    def test_remove_group_on_default_tab(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").add("title").add("body").end()
        mapper.with_("Extra").add("slug").end()
        mapper.remove_group("Main")

        assert mapper.keys() == ["slug"]
        assert list(mapper.get_groups()) == ["Extra"]
        assert mapper.get_tabs()["default"]["groups"] == ["Extra"]
        assert not mapper.admin.has_form_field_description("title")

    def test_remove_last_group_can_drop_tab(self) -> None:
        mapper = make_mapper()
        mapper.tab("Meta").with_("Seo").add("slug").end().end()
        mapper.remove_group("Seo", "Meta", delete_empty_tab=True)

        assert mapper.get_groups() == {}
        assert "Meta" not in mapper.get_tabs()
        assert mapper.keys() == []

    def test_remove_tab(self) -> None:
        mapper = make_mapper()
        mapper.tab("Content").with_("Main").add("title").end().with_("Side").add("tags").end().end()
        mapper.tab("Meta").with_("Seo").add("slug").end().end()
        mapper.remove_tab("Content")

        assert mapper.keys() == ["slug"]
        assert list(mapper.get_groups()) == ["Meta.Seo"]
        assert list(mapper.get_tabs()) == ["Meta"]


class TestEmptiedGroups:
    """The open group survives losing its last field."""

    def test_add_after_removing_last_field(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").add("a")
        mapper.remove("a")
        mapper.add("b").end()

        groups = mapper.get_groups()
        assert groups["Main"]["fields"] == {"b": "b"}
        assert groups["Main"]["label"] == "Main"
        assert mapper.get_tabs()["default"]["groups"] == ["Main"]

    def test_auto_created_group_is_recreated(self) -> None:
        mapper = make_mapper()
        mapper.add("a").remove("a").add("b")

        assert mapper.get_groups()["default"]["fields"] == {"b": "b"}
        assert mapper.keys() == ["b"]

    def test_group_in_named_tab_keeps_plain_label(self) -> None:
        mapper = make_mapper()
        mapper.tab("Content").with_("Main").add("a").remove("a").add("b").end().end()

        group = mapper.get_groups()["Content.Main"]
        assert group["label"] == "Main"
        assert group["fields"] == {"b": "b"}
        assert mapper.get_tabs()["Content"]["groups"] == ["Content.Main"]

    def test_remove_while_other_empty_group_is_open(self) -> None:
        mapper = make_mapper()
        mapper.with_("A").add("a").end().with_("B")
        mapper.remove("a")
        mapper.add("b").end()

        assert list(mapper.get_groups()) == ["B"]
        assert mapper.get_groups()["B"]["fields"] == {"b": "b"}

    def test_remove_open_group_then_add(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").add("a")
        mapper.remove_group("Main")
        mapper.add("b").end()

        assert mapper.keys() == ["b"]
        assert mapper.get_groups()["Main"]["fields"] == {"b": "b"}
        assert mapper.get_tabs()["default"]["groups"] == ["Main"]

    def test_reorder_after_removing_last_field(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").add("a").remove("a").reorder(["a"]).end()

        assert mapper.get_groups()["Main"]["fields"] == {}

# The End
