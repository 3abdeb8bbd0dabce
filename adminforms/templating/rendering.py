# -*- coding: utf-8 -*-
"""
rendering

Render read-only field values through their show templates.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateNotFound
from markupsafe import Markup, escape

from ..conf import AdminFormsSettings, current_settings, register_settings_observer
from ..schema.descriptors import FieldDescription

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class ShowRenderer:
    """Render field values and whole show pages with Jinja2."""

    def __init__(
        self,
        *,
        templates_dir: str | Path | Iterable[str | Path] | None = None,
        settings: AdminFormsSettings | None = None,
    ) -> None:
        self._settings = settings or current_settings()
        self._base_dirs = self._coerce_template_dirs(templates_dir or TEMPLATES_DIR)
        self._templates: Jinja2Templates | None = None
        if settings is None:
            register_settings_observer(self._apply_settings)

    @staticmethod
    def _coerce_template_dirs(templates_dir: str | Path | Iterable[str | Path]) -> list[str]:
        """Normalise ``templates_dir`` into a mutable list of search paths."""
        if isinstance(templates_dir, (str, Path)):
            return [str(templates_dir)]
        return [str(path) for path in templates_dir]

    def _apply_settings(self, settings: AdminFormsSettings) -> None:
        """Drop the cached environment when global settings change."""
        self._settings = settings
        self._templates = None

    def get_templates(self) -> Jinja2Templates:
        if self._templates is None:
            # project directories take precedence over the bundled ones
            search_path = [*self._settings.templates_dirs, *self._base_dirs]
            self._templates = Jinja2Templates(directory=search_path)
        return self._templates

    def render_field(self, field_description: FieldDescription, obj: Any = None, value: Any = None) -> Markup:
        """Render one field of ``obj`` (or an explicit ``value``)."""
        if value is None and obj is not None:
            value = self.get_value(obj, field_description)
        template = field_description.template
        if template is None:
            return escape("" if value is None else str(value))
        try:
            tpl = self.get_templates().env.get_template(template)
        except TemplateNotFound:
            logger.warning("Show template %s for field %s not found", template, field_description.name)
            return escape("" if value is None else str(value))
        return Markup(tpl.render(
            field_description=field_description,
            value=value,
            object=obj,
            admin=field_description.admin,
        ))

    def render_show(self, admin: Any, obj: Any) -> str:
        """Render the whole read-only page of ``obj`` grouped like the admin."""
        fields = admin.get_show()
        tpl = self.get_templates().env.get_template(admin.template_registry.get_template("show"))
        return tpl.render(
            admin=admin,
            object=obj,
            groups=admin.get_show_groups(),
            tabs=admin.get_show_tabs(),
            elements=fields.get_elements(),
            render_field=lambda fd: self.render_field(fd, obj),
        )

    @staticmethod
    def get_value(obj: Any, field_description: FieldDescription) -> Any:
        """Follow the dotted field name through ``obj``; ``None`` on a gap."""
        value = obj
        for part in field_description.name.split("."):
            if value is None:
                return None
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = getattr(value, part, None)
        return value

# The End
