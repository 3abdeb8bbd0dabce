# -*- coding: utf-8 -*-
"""
datetime

Date, datetime and time inputs rendered as formatted strings.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict
from datetime import date, datetime, time, timezone

from .base import BaseWidget
from .registry import registry

_FORMATS = {"datetime": "datetime-local", "date": "date", "time": "time"}


@registry.register("datetime", "date", "time")
class DateTimeWidget(BaseWidget):
    """
    Widget for ``date``/``datetime``/``time`` form types.
    JSON-Editor expects a string plus format: "date" | "datetime-local" | "time".
    """

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "string",
            "title": self.get_title(),
            "format": _FORMATS[self.ctx.type],
        }
        schema = self.merge_common(schema)
        if "default" in schema:
            schema["default"] = self.serialize(schema["default"])
        return schema

    @staticmethod
    def serialize(v: Any) -> Any:
        # Convert to a string suitable for HTML5/JSON-Editor
        if isinstance(v, datetime):
            if v.tzinfo is not None:
                v = v.astimezone(timezone.utc).replace(tzinfo=None)
            return v.replace(microsecond=0).isoformat(timespec="seconds")
        if isinstance(v, date):
            return v.isoformat()
        if isinstance(v, time):
            return v.replace(microsecond=0).isoformat(timespec="seconds")
        return v

# The End
