# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for adminforms test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from adminforms.conf import AdminFormsSettings, configure, reset_settings


class SettingsState:
    """Manage global adminforms configuration during tests."""

    def reset(self) -> None:
        """Install default settings regardless of the process environment."""

        reset_settings()
        configure(AdminFormsSettings())

    def use(self, **overrides) -> AdminFormsSettings:
        """Install settings built from ``overrides`` and return them."""

        settings = AdminFormsSettings(**overrides)
        configure(settings)
        return settings


settings_state = SettingsState()


@pytest.fixture(autouse=True)
def _default_settings():
    """Run every test against default settings."""

    settings_state.reset()
    yield
    settings_state.reset()


__all__ = ["settings_state"]


# The End
