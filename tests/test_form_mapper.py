# -*- coding: utf-8 -*-
"""
tests.test_form_mapper

Field registration through the form mapper: paths, options, labels, gating.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from adminforms.admin import FormAdmin
from adminforms.exceptions import FieldNotFound
from adminforms.forms import FormBuilder, FormContractor, FormType
from adminforms.mapper import FormMapper
from adminforms.security import RoleSecurityHandler
from adminforms.translator import UnderscoreLabelTranslatorStrategy
from tests.conftest import settings_state


class StaticDefaultsContractor(FormContractor):
    """Contractor returning fixed defaults for every field."""

    def __init__(self, defaults: dict) -> None:
        self.defaults = defaults
        self.calls: list[tuple] = []

    def get_default_options(self, type, field_description, form_options=None):
        self.calls.append((type, field_description.name, dict(form_options or {})))
        return {k: (dict(v) if isinstance(v, dict) else v) for k, v in self.defaults.items()}


def make_mapper(admin: FormAdmin | None = None, contractor: FormContractor | None = None) -> FormMapper:
    admin = admin or FormAdmin(code="sample")
    contractor = contractor or FormContractor()
    return FormMapper(contractor, contractor.get_form_builder("sample"), admin)


class TestAddField:
    """Registering plain fields."""

    def test_registers_description_and_child(self) -> None:
        mapper = make_mapper()
        mapper.add("title")

        admin = mapper.admin
        assert admin.has_form_field_description("title")
        child = mapper.get("title")
        assert child.type == FormType.TEXT
        assert child.options["property_path"] == "title"
        assert child.options["label"] == "Title"
        assert child.options["label_render"] is False
        assert child.options["admin_field_description"] is admin.get_form_field_description("title")

    def test_field_goes_to_auto_created_group_and_tab(self) -> None:
        mapper = make_mapper()
        mapper.add("title")

        groups = mapper.admin.get_form_groups()
        assert list(groups) == ["default"]
        assert groups["default"]["fields"] == {"title": "title"}
        assert groups["default"]["auto_created"] is True
        tabs = mapper.admin.get_form_tabs()
        assert tabs["default"]["auto_created"] is True
        assert tabs["default"]["groups"] == ["default"]

    def test_dotted_name_becomes_property_path(self) -> None:
        mapper = make_mapper()
        mapper.add("author.first_name")

        assert mapper.keys() == ["author__first_name"]
        assert mapper.has("author.first_name")
        child = mapper.get("author.first_name")
        assert child.options["property_path"] == "author.first_name"
        assert child.options["label"] == "Author First Name"

        fd = mapper.admin.get_form_field_description("author__first_name")
        assert fd.name == "author__first_name"
        assert fd.field_name == "first_name"
        assert mapper.admin.get_form_groups()["default"]["fields"] == {
            "author__first_name": "author__first_name"
        }

    def test_explicit_property_path_keeps_name(self) -> None:
        mapper = make_mapper()
        mapper.add("nick", FormType.TEXT, {"property_path": "profile.nickname"})

        assert mapper.keys() == ["nick"]
        assert mapper.get("nick").options["property_path"] == "profile.nickname"

    def test_type_is_copied_to_description(self) -> None:
        mapper = make_mapper()
        mapper.add("body", FormType.TEXTAREA)

        fd = mapper.admin.get_form_field_description("body")
        assert fd.type == FormType.TEXTAREA
        assert mapper.get("body").type == FormType.TEXTAREA

    def test_explicit_description_type_wins(self) -> None:
        mapper = make_mapper()
        mapper.add("body", FormType.TEXTAREA, {}, {"type": "html"})

        assert mapper.admin.get_form_field_description("body").type == "html"
        assert mapper.get("body").type == FormType.TEXTAREA

    def test_collection_type_is_swapped_for_admin_collection(self) -> None:
        contractor = StaticDefaultsContractor({})
        mapper = make_mapper(contractor=contractor)
        mapper.add("tags", FormType.COLLECTION)

        assert mapper.get("tags").type == FormType.ADMIN_COLLECTION
        assert mapper.admin.get_form_field_description("tags").type == FormType.ADMIN_COLLECTION
        assert contractor.calls[0][0] == FormType.ADMIN_COLLECTION

    def test_translation_domain_defaults_to_group_domain(self) -> None:
        mapper = make_mapper()
        mapper.with_("General", translation_domain="blog").add("title").end()
        mapper.with_("Other").add("body", None, {}, {"translation_domain": "own"}).end()

        admin = mapper.admin
        assert admin.get_form_field_description("title").get_translation_domain() == "blog"
        assert admin.get_form_field_description("body").get_translation_domain() == "own"

    def test_form_builder_child_is_added_as_is(self) -> None:
        mapper = make_mapper()
        nested = mapper.create("address", FormType.FORM, {"label": "Address"})
        nested.add("city")
        mapper.add(nested)

        assert mapper.get("address") is nested
        fd = mapper.admin.get_form_field_description("address")
        assert fd.type == FormType.FORM
        assert "property_path" not in nested.options
        assert nested.options == {"label": "Address"}


class TestOptions:
    """Merging defaults, labels and caller options."""

    def test_caller_options_take_precedence_recursively(self) -> None:
        contractor = StaticDefaultsContractor(
            {"required": True, "attr": {"class": "form-control", "data-x": "1"}, "help": "computed"}
        )
        mapper = make_mapper(contractor=contractor)
        mapper.add("title", FormType.TEXT, {"required": False, "attr": {"class": "wide"}})

        options = mapper.get("title").options
        assert options["required"] is False
        assert options["attr"] == {"class": "wide", "data-x": "1"}
        assert options["help"] == "computed"
        assert contractor.calls == [
            (FormType.TEXT, "title", {"required": False, "attr": {"class": "wide"}, "property_path": "title"})
        ]

    def test_explicit_label_is_kept(self) -> None:
        mapper = make_mapper()
        mapper.add("title", None, {"label": "Headline", "label_render": True})

        options = mapper.get("title").options
        assert options["label"] == "Headline"
        assert options["label_render"] is True

    def test_label_uses_admin_strategy_with_original_name(self) -> None:
        admin = FormAdmin(code="sample", label_translator_strategy=UnderscoreLabelTranslatorStrategy())
        mapper = make_mapper(admin)
        mapper.add("author.firstName")

        assert mapper.get("author.firstName").options["label"] == "form.label_author_first_name"

    def test_label_render_default_follows_settings(self) -> None:
        settings_state.use(label_render=True)
        mapper = make_mapper()
        mapper.add("title")

        assert mapper.get("title").options["label_render"] is True


class TestGating:
    """Fields hidden by roles or conditional blocks are never registered."""

    def test_unmet_role_registers_nothing(self) -> None:
        user = SimpleNamespace(is_superuser=False, roles={"ROLE_EDITOR"}, permissions=set())
        admin = FormAdmin(code="sample", security_handler=RoleSecurityHandler(user))
        mapper = make_mapper(admin)
        mapper.add("secret", None, {}, {"role": "ROLE_ADMIN"})

        assert not mapper.has("secret")
        assert mapper.keys() == []
        assert admin.get_form_field_descriptions() == {}
        assert admin.get_form_groups() == {}

    def test_met_role_registers_field(self) -> None:
        user = SimpleNamespace(is_superuser=False, roles={"ROLE_ADMIN"}, permissions=set())
        admin = FormAdmin(code="sample", security_handler=RoleSecurityHandler(user))
        mapper = make_mapper(admin)
        mapper.add("secret", None, {}, {"role": "ROLE_ADMIN"})

        assert mapper.has("secret")
        assert admin.has_form_field_description("secret")

    def test_if_blocks_skip_fields(self) -> None:
        mapper = make_mapper()
        (
            mapper.if_true(False)
                .add("hidden")
                .if_false(False)
                    .add("still_hidden")
                .if_end()
            .if_end()
            .if_false(False)
                .add("shown")
            .if_end()
        )

        assert mapper.keys() == ["shown"]
        assert not mapper.admin.has_form_field_description("hidden")


class TestAccessors:
    """get/has/remove/keys/reorder delegate with sanitized names."""

    def test_get_unknown_raises(self) -> None:
        mapper = make_mapper()
        with pytest.raises(FieldNotFound):
            mapper.get("missing")

    def test_remove_clears_admin_group_and_builder(self) -> None:
        mapper = make_mapper()
        mapper.add("author.name").add("title")
        mapper.remove("author.name")

        admin = mapper.admin
        assert mapper.keys() == ["title"]
        assert not admin.has_form_field_description("author__name")
        assert admin.get_form_groups()["default"]["fields"] == {"title": "title"}

        mapper.remove("title")
        assert admin.get_form_groups() == {}

    def test_add_after_remove_emptied_group(self) -> None:
        mapper = make_mapper()
        mapper.add("title").remove("title").add("body")

        assert mapper.keys() == ["body"]
        assert mapper.admin.get_form_groups()["default"]["fields"] == {"body": "body"}
        assert mapper.admin.has_form_field_description("body")

    def test_reorder_current_group(self) -> None:
        mapper = make_mapper()
        mapper.with_("Main").add("a").add("b").add("c").reorder(["c", "a"]).end()

        assert list(mapper.admin.get_form_groups()["Main"]["fields"]) == ["c", "a", "b"]

    def test_form_builder_accessor(self) -> None:
        builder = FormBuilder("root")
        mapper = FormMapper(FormContractor(), builder, FormAdmin(code="sample"))
        assert mapper.form_builder is builder
        assert mapper.get_name() == "form"


class TestSanitize:
    """Child names never contain dots and never collide."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("title", "title"),
            ("first_name", "first_name"),
            ("author.name", "author__name"),
            ("author__name", "author____name"),
            ("a.b.c", "a__b__c"),
            ("a__b.c", "a____b__c"),
        ],
    )
    def test_known_names(self, raw: str, expected: str) -> None:
        assert FormMapper.sanitize_field_name(raw) == expected

    def test_dotted_and_underscored_spellings_stay_apart(self) -> None:
        mapper = make_mapper()
        mapper.add("author.name").add("author__name")

        assert mapper.keys() == ["author__name", "author____name"]
        assert mapper.get("author.name").options["property_path"] == "author.name"
        assert mapper.get("author__name").options["property_path"] == "author__name"

    def test_plain_names_are_fixed_points(self) -> None:
        for name in ("title", "first_name", "_private", "x_"):
            once = FormMapper.sanitize_field_name(name)
            assert once == name
            assert FormMapper.sanitize_field_name(once) == once

    def test_sanitized_output_has_no_dots(self) -> None:
        assert "." not in FormMapper.sanitize_field_name("a.b__c.d")

# The End
