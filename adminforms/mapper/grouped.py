# -*- coding: utf-8 -*-
"""
grouped

Mapper base adding groups, tabs and conditional blocks.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Dict

from ..conf import current_settings
from ..exceptions import MapperLogicError, MapperStateError
from .base import BaseMapper

logger = logging.getLogger(__name__)


class BaseGroupedMapper(BaseMapper):
    """Track the open tab and group while fields are being mapped.

    Typical usage::

        mapper.with_("General").add("title").add("body").end()
        mapper.tab("Meta")
        mapper.with_("Dates", collapsed=True).add("created_at").end()
        mapper.end()

    Groups live in the admin keyed by their code: the plain name on the
    default tab, ``<tab>.<name>`` elsewhere, so equally named groups may sit
    on different tabs. Fields added with nothing open land in an
    auto-created group on an auto-created default tab.
    """

    def __init__(self, admin) -> None:
        super().__init__(admin)
        self._current_group: str | None = None
        self._current_tab: str | None = None
        self._apply: list[bool] = []

    # --- storage hooks -----------------------------------------------------

    @abstractmethod
    def get_groups(self) -> Dict[str, Dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def set_groups(self, groups: Dict[str, Dict[str, Any]]) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_tabs(self) -> Dict[str, Dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def set_tabs(self, tabs: Dict[str, Dict[str, Any]]) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        raise NotImplementedError

    # --- groups and tabs ---------------------------------------------------

    def _default_options(self, name: str) -> Dict[str, Any]:
        return {
            "collapsed": False,
            "class": False,
            "description": False,
            "label": name,
            "translation_domain": None,
            "name": name,
            "box_class": current_settings().group_box_class,
            "empty_message": "message_form_group_empty",
            "empty_message_translation_domain": "adminforms",
        }

    def with_(self, name: str, **options: Any) -> "BaseGroupedMapper":
        """Open group ``name``, or a tab when ``tab=True`` is passed."""
        default_tab = current_settings().default_tab
        code = name

        if options.get("tab"):
            tabs = self.get_tabs()
            if self._current_tab:
                if tabs.get(self._current_tab, {}).get("auto_created"):
                    raise MapperStateError(
                        "New tab was added automatically when you have added field or group. "
                        "You should close current tab before adding new one "
                        "OR add tabs before adding groups and fields."
                    )
                raise MapperStateError(
                    f'You should close previous tab "{self._current_tab}" with end() '
                    f'before adding new tab "{name}".'
                )
            if self._current_group:
                raise MapperStateError(f'You should open tab before adding new group "{name}".')

            tabs[code] = {
                **self._default_options(name),
                "auto_created": False,
                "groups": [],
                **tabs.get(code, {}),
                **options,
            }
            self._current_tab = code
        else:
            if self._current_group:
                raise MapperStateError(
                    f'You should close previous group "{self._current_group}" with end() '
                    f'before adding new tab "{name}".'
                )
            if not self._current_tab:
                logger.debug("Auto-creating tab %r for %s group %r", default_tab, self.get_name(), name)
                self.with_(
                    default_tab,
                    tab=True,
                    auto_created=True,
                    translation_domain=options.get("translation_domain"),
                )

            if self._current_tab != default_tab:
                code = f"{self._current_tab}.{name}"

            groups = self.get_groups()
            groups[code] = {
                **self._default_options(name),
                "fields": {},
                **groups.get(code, {}),
                **options,
            }
            self._current_group = code
            self.set_groups(groups)
            tabs = self.get_tabs()

        if self._current_group and self._current_tab in tabs:
            tab_groups = tabs[self._current_tab].setdefault("groups", [])
            if self._current_group not in tab_groups:
                tab_groups.append(self._current_group)

        self.set_tabs(tabs)
        return self

    def tab(self, name: str, **options: Any) -> "BaseGroupedMapper":
        return self.with_(name, **{**options, "tab": True})

    def end(self) -> "BaseGroupedMapper":
        if self._current_group is not None:
            self._current_group = None
        elif self._current_tab is not None:
            self._current_tab = None
        else:
            raise MapperLogicError("No open tabs or groups, you cannot use end()")
        return self

    def has_open_tab(self) -> bool:
        return self._current_tab is not None

    # --- conditional blocks ------------------------------------------------

    def if_true(self, flag: bool) -> "BaseGroupedMapper":
        self._apply.append(bool(flag))
        return self

    def if_false(self, flag: bool) -> "BaseGroupedMapper":
        self._apply.append(not flag)
        return self

    def if_end(self) -> "BaseGroupedMapper":
        if not self._apply:
            raise MapperLogicError("No open if_true() or if_false(), you cannot use if_end().")
        self._apply.pop()
        return self

    def should_apply(self) -> bool:
        return False not in self._apply

    # --- removal -----------------------------------------------------------

    def remove_group(self, group: str, tab: str | None = None, delete_empty_tab: bool = False) -> "BaseGroupedMapper":
        default_tab = current_settings().default_tab
        tab = tab or default_tab
        groups = self.get_groups()

        # the default tab does not prefix its group codes
        if tab != default_tab:
            group = f"{tab}.{group}"

        for field in list(groups.get(group, {}).get("fields", {})):
            self.remove(field)
        groups = self.get_groups()
        groups.pop(group, None)

        tabs = self.get_tabs()
        if tab in tabs:
            tab_groups = tabs[tab].get("groups", [])
            if group in tab_groups:
                tab_groups.remove(group)
            if delete_empty_tab and not tab_groups:
                del tabs[tab]

        self.set_tabs(tabs)
        self.set_groups(groups)
        return self

    def remove_tab(self, tab: str) -> "BaseGroupedMapper":
        tabs = self.get_tabs()
        for group in list(tabs.get(tab, {}).get("groups", [])):
            for field in list(self.get_groups().get(group, {}).get("fields", {})):
                self.remove(field)
            groups = self.get_groups()
            groups.pop(group, None)
            self.set_groups(groups)

        tabs = self.get_tabs()
        tabs.pop(tab, None)
        self.set_tabs(tabs)
        return self

    # --- helpers for subclasses -------------------------------------------

    def add_field_to_current_group(self, field_name: str) -> Dict[str, Any]:
        # resolve (and maybe create) the group before reading the groups
        current_group = self.get_current_group_name()
        groups = self.get_groups()
        groups[current_group].setdefault("fields", {})[field_name] = field_name
        self.set_groups(groups)
        return groups[current_group]

    def get_current_group_name(self) -> str:
        if not self._current_group:
            name = getattr(self.admin, "label", None) or current_settings().default_tab
            logger.debug("Auto-creating %s group %r", self.get_name(), name)
            self.with_(name, auto_created=True)
        elif self._current_group not in self.get_groups():
            self._restore_current_group()
        return self._current_group

    def _restore_current_group(self) -> None:
        # removing the last field of a group drops it from the admin
        code = self._current_group
        name = code
        prefix = f"{self._current_tab}."
        if self._current_tab != current_settings().default_tab and code.startswith(prefix):
            name = code[len(prefix):]
        logger.debug("Re-creating emptied %s group %r", self.get_name(), code)
        groups = self.get_groups()
        groups[code] = {**self._default_options(name), "fields": {}}
        self.set_groups(groups)

        tabs = self.get_tabs()
        if self._current_tab in tabs:
            tab_groups = tabs[self._current_tab].setdefault("groups", [])
            if code not in tab_groups:
                tab_groups.append(code)
            self.set_tabs(tabs)

# The End
