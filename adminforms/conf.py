# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the adminforms package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, Mapping


@dataclass
class AdminFormsSettings:
    """Container for form mapping configuration derived from environment variables."""

    label_strategy: str = "native"
    translation_domain: str | None = None
    label_render: bool = False
    default_tab: str = "default"
    group_box_class: str = "box box-primary"
    templates_dirs: list[str] = field(default_factory=list)
    api_prefix: str = "/forms"

    def __post_init__(self) -> None:
        """Normalize values that may arrive in loose form."""
        self.label_strategy = (self.label_strategy or "native").strip().lower()
        if self.translation_domain is not None and not self.translation_domain.strip():
            self.translation_domain = None
        self.default_tab = self.default_tab.strip() or "default"
        self.templates_dirs = [str(path) for path in self.templates_dirs if str(path).strip()]
        self.api_prefix = self._normalize_prefix(self.api_prefix)

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "ADMINFORMS_",
    ) -> "AdminFormsSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        templates_raw = data.get("TEMPLATES_DIRS") or ""
        return cls(
            label_strategy=data.get("LABEL_STRATEGY") or "native",
            translation_domain=data.get("TRANSLATION_DOMAIN") or None,
            label_render=cls._to_bool(data.get("LABEL_RENDER"), default=False),
            default_tab=data.get("DEFAULT_TAB") or "default",
            group_box_class=data.get("GROUP_BOX_CLASS") or "box box-primary",
            templates_dirs=[part for part in templates_raw.split(os.pathsep) if part],
            api_prefix=data.get("API_PREFIX") or "/forms",
        )

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths always contain a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``AdminFormsSettings`` instance."""

    def __init__(self, initial: AdminFormsSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[AdminFormsSettings], None]] = []

    def configure(self, settings: AdminFormsSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> AdminFormsSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = AdminFormsSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access reads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[AdminFormsSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[AdminFormsSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: AdminFormsSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> AdminFormsSettings:
    """Return the active settings instance used by adminforms components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings; mostly useful in test-suites."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[AdminFormsSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[AdminFormsSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "AdminFormsSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
