# -*- coding: utf-8 -*-
"""
tests.test_security

Role and permission checks used to gate mapped fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from types import SimpleNamespace

from adminforms.admin import FormAdmin
from adminforms.security import NoopSecurityHandler, RoleSecurityHandler


def make_admin() -> FormAdmin:
    admin = FormAdmin(code="blog.post")
    admin.app_label = "blog"
    admin.model_slug = "post"
    return admin


class TestRoleSecurityHandler:
    """Roles, qualified permissions and superusers."""

    def test_noop_grants_everything(self) -> None:
        assert NoopSecurityHandler().is_granted(make_admin(), "ROLE_ANY")

    def test_missing_user_is_denied(self) -> None:
        assert not RoleSecurityHandler(None).is_granted(make_admin(), "ROLE_ADMIN")

    def test_superuser_is_granted(self) -> None:
        user = SimpleNamespace(is_superuser=True)
        assert RoleSecurityHandler(user).is_granted(make_admin(), "anything")

    def test_role_match(self) -> None:
        user = SimpleNamespace(roles=["ROLE_EDITOR"])
        handler = RoleSecurityHandler(user)

        assert handler.is_granted(make_admin(), "ROLE_EDITOR")
        assert not handler.is_granted(make_admin(), "ROLE_ADMIN")

    def test_bare_permission_is_qualified_with_admin(self) -> None:
        user = SimpleNamespace(permissions={"blog.post.edit"})
        handler = RoleSecurityHandler(user)

        assert handler.is_granted(make_admin(), "edit")
        assert handler.is_granted(make_admin(), "blog.post.edit")
        assert not handler.is_granted(make_admin(), "delete")

    def test_any_of_several_attributes(self) -> None:
        user = SimpleNamespace(roles={"ROLE_B"})
        handler = RoleSecurityHandler(user)

        assert handler.is_granted(make_admin(), iter(["ROLE_A", "ROLE_B"]))
        assert not handler.is_granted(make_admin(), ("ROLE_A", "ROLE_C"))

    def test_admin_delegates_with_subject(self) -> None:
        seen = []

        class Recording(NoopSecurityHandler):
            def is_granted(self, admin, attributes, obj=None):
                seen.append((attributes, obj))
                return False

        admin = FormAdmin(code="x", security_handler=Recording())
        admin.subject = "post-1"

        assert admin.is_granted("ROLE_X") is False
        assert admin.is_granted("ROLE_Y", "post-2") is False
        assert seen == [("ROLE_X", "post-1"), ("ROLE_Y", "post-2")]

# The End
