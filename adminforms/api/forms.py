# -*- coding: utf-8 -*-
"""forms

HTTP endpoints exposing mapped form schemas and show field metadata.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from ..admin.base import FormAdmin
from ..admin.pool import AdminPool
from ..conf import AdminFormsSettings, current_settings
from ..exceptions import AdminConfigurationError, AdminError


class FormSchemaAPI:
    """Build an ``APIRouter`` serving the forms of every admin in a pool."""

    def __init__(self, pool: AdminPool, *, settings: AdminFormsSettings | None = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._pool = pool
        self._settings = settings or current_settings()
        self.router = APIRouter(prefix=self._settings.api_prefix, tags=["adminforms"])
        self.router.add_api_route("/{code}/form", self.form_schema, methods=["GET"])
        self.router.add_api_route("/{code}/show", self.show_fields, methods=["GET"])

    def _get_admin(self, code: str) -> FormAdmin:
        try:
            return self._pool.get_admin_by_code(code)
        except AdminConfigurationError:
            raise HTTPException(status_code=404, detail=f"Unknown admin: {code}") from None

    async def form_schema(self, code: str) -> Dict[str, Any]:
        """Return the JSON-Editor schema together with groups and tabs."""
        admin = self._get_admin(code)
        try:
            schema = admin.get_form_builder().to_schema()
        except AdminError as exc:
            self._logger.exception("form schema failed for %s", code)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return {
            "code": admin.code,
            "schema": schema,
            "groups": {
                name: {**group, "fields": list(group.get("fields", {}))}
                for name, group in admin.get_form_groups().items()
            },
            "tabs": admin.get_form_tabs(),
        }

    async def show_fields(self, code: str) -> Dict[str, Any]:
        """Return show fields with their resolved types and templates."""
        admin = self._get_admin(code)
        try:
            show = admin.get_show()
        except AdminError as exc:
            self._logger.exception("show fields failed for %s", code)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        fields = [
            {
                "name": fd.name,
                "type": fd.type,
                "template": fd.template,
                "label": fd.get_label(),
            }
            for fd in show
        ]
        return {
            "code": admin.code,
            "fields": fields,
            "groups": {
                name: {**group, "fields": list(group.get("fields", {}))}
                for name, group in admin.get_show_groups().items()
            },
            "tabs": admin.get_show_tabs(),
        }


# The End
