# -*- coding: utf-8 -*-
"""
handler

Security handlers deciding whether a user may see a mapped field.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)


class SecurityHandler:
    """Base contract: ``is_granted(admin, attributes, obj)``."""

    def is_granted(self, admin: Any, attributes: str | Iterable[str], obj: Optional[Any] = None) -> bool:
        raise NotImplementedError


class NoopSecurityHandler(SecurityHandler):
    """Grant every attribute; used when an admin has no user bound."""

    def is_granted(self, admin: Any, attributes: str | Iterable[str], obj: Optional[Any] = None) -> bool:
        return True


class RoleSecurityHandler(SecurityHandler):
    """Check requested roles against the user's roles and permissions.

    The user is any object exposing ``is_superuser``, ``roles`` and/or
    ``permissions``. Permission codes may be given fully qualified
    (``app.model.action``) or as a bare action, which is then qualified with
    the admin's ``app_label`` and ``model_slug``.
    """

    def __init__(self, user: Any) -> None:
        self.user = user

    def _granted_codes(self) -> set[str]:
        codes: set[str] = set()
        for attr in ("roles", "permissions"):
            codes.update(str(code) for code in (getattr(self.user, attr, None) or ()))
        return codes

    def _qualify(self, admin: Any, code: str) -> str:
        app_label = getattr(admin, "app_label", "") or ""
        model_slug = getattr(admin, "model_slug", "") or ""
        return f"{app_label}.{model_slug}.{code}".strip(".")

    def is_granted(self, admin: Any, attributes: str | Iterable[str], obj: Optional[Any] = None) -> bool:
        if self.user is None:
            return False
        if getattr(self.user, "is_superuser", False):
            return True
        if isinstance(attributes, str):
            attributes = [attributes]
        attributes = list(attributes)
        granted = self._granted_codes()
        for code in attributes:
            if code in granted or self._qualify(admin, code) in granted:
                return True
        logger.debug("User %r lacks any of %r", getattr(self.user, "username", self.user), list(attributes))
        return False

# The End
