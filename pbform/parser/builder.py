# -*- coding: utf-8 -*-
#
# This file is part of `pbform`, a library for PureBasic Form Designer files
#
# Copyright © 2026 by the pbform authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Build a :class:`~pbform.model.FormDocument` from a Form Designer source.

The calls found by :func:`~pbform.parser.scanner.scan_calls` are interpreted
one by one, in the order they appear, by a :class:`FormBuilder`. The builder
keeps track of the open menu, toolbar or statusbar section, the submenu level
and the stack of gadget lists that are open. A new builder is created for
every parse, so nothing is shared between parses.

Malformed statements are skipped or read as well as possible; the builder
never raises an exception on account of the text. Problems that matter for
patching are collected as :class:`~pbform.model.Issue` tuples in the
``meta.issues`` list of the document.

"""

import parce.util

from .. import model
from .declarations import enum_value, find_procedure, parse_enumerations, procedure_defaults
from .header import detect_scan_range, header_issues, parse_header
from .scanner import scan_calls
from .tokenizer import as_number, split_params, strip_param, unquote_string


def parse(text, expected_version=None):
    """Parse the text and return a :class:`~pbform.model.FormDocument`.

    If ``expected_version`` is given, a warning is added to the issues when
    the version in the Form Designer header is different.

    """
    return FormBuilder(text, expected_version).build()


def _param(params, n):
    """Return the stripped n-th parameter, or None if there are not so many."""
    if n < len(params):
        return strip_param(params[n])


def _text(raw):
    """Return the unquoted text of the raw value, or None."""
    if raw is not None:
        return unquote_string(raw)


def _index(raw, default):
    """Return the non-negative integer value of raw, or the default."""
    value = as_number(raw)
    if isinstance(value, int) and value >= 0:
        return value
    return default


class _Frame:
    """An open gadget list on the container stack."""
    __slots__ = ('gadget', 'item')

    def __init__(self, gadget, item=None):
        self.gadget = gadget
        self.item = item


class FormBuilder:
    """Interprets the calls of one text and builds a FormDocument.

    Use :meth:`build` once to get the document.

    """
    def __init__(self, text, expected_version=None):
        self.text = text
        header = parse_header(text)
        self.scan_range = detect_scan_range(text, header)
        self.issues = header_issues(header, expected_version)
        self.meta = model.FormMeta(header, self.scan_range, self.issues,
            parse_enumerations(text, self.scan_range))

        self.window = None
        self.gadgets = []
        self.menus = []
        self.toolbars = []
        self.statusbars = []

        self._gadgets = {}          # id -> Gadget
        self._panel_item = {}       # panel id -> current tab
        self._stack = []            # open gadget lists (_Frame)
        self._menu = None
        self._menu_level = 0
        self._toolbar = None
        self._statusbar = None

    def build(self):
        """Interpret all calls and return the FormDocument."""
        for call in scan_calls(self.text, self.scan_range):
            self._statement(call.name, call)
        return model.FormDocument(self.window, self.gadgets, self.menus,
            self.toolbars, self.statusbars, self.meta)

    def identity(self, call, first_param):
        """Return the stable key of the entity created by the call.

        If there is none, an error issue is added and ``"#PB_Any"`` is
        returned.

        """
        try:
            return model.stable_key(first_param, call.assigned_var)
        except model.IdentityError:
            self.issues.append(model.Issue(model.ERROR,
                "Found {0}(#PB_Any, ...) without a stable assignment "
                "(expected: Var = {0}(#PB_Any, ...)). Patching may be ambiguous.".format(call.name),
                call.range.line))
            return model.PB_ANY

    def close_sections(self):
        """Forget the open menu, toolbar and statusbar."""
        self._menu = self._toolbar = self._statusbar = None
        self._menu_level = 0

    def set_panel_item(self, panel_id, index):
        """Make the tab the current one of the panel."""
        self._panel_item[panel_id] = index
        for frame in reversed(self._stack):
            if frame.gadget.kind == model.PANEL_GADGET and frame.gadget.id == panel_id:
                frame.item = index
                break

    def push(self, gadget):
        """Open the gadget list of the container gadget."""
        self._stack.append(_Frame(gadget, self._panel_item.get(gadget.id)))

    @parce.util.Dispatcher
    def _statement(self, name, call):
        """Handle all calls that have no handler of their own: the gadgets."""
        if name in model.GADGET_KINDS:
            self.add_gadget(call)

    ## sections
    @_statement(model.CREATE_MENU)
    def _create_menu(self, call):
        params = split_params(call.args)
        menu_id = _param(params, 0)
        self.close_sections()
        if menu_id:
            self._menu = model.FormMenu(menu_id, [], call.range)
            self.menus.append(self._menu)

    @_statement(model.CREATE_TOOLBAR)
    def _create_toolbar(self, call):
        toolbar_id = _param(split_params(call.args), 0)
        self.close_sections()
        if toolbar_id:
            self._toolbar = model.FormToolBar(toolbar_id, [], call.range)
            self.toolbars.append(self._toolbar)

    @_statement(model.CREATE_STATUSBAR)
    def _create_statusbar(self, call):
        statusbar_id = _param(split_params(call.args), 0)
        self.close_sections()
        if statusbar_id:
            self._statusbar = model.FormStatusBar(statusbar_id, [], call.range)
            self.statusbars.append(self._statusbar)

    ## menu entries
    def add_menu_entry(self, call, id_raw=None, text_raw=None):
        """Append an entry to the open menu, at the current level."""
        self._menu.entries.append(model.FormMenuEntry(call.name, self._menu_level,
            id_raw, text_raw, _text(text_raw), call.range))

    @_statement(model.MENU_TITLE)
    def _menu_title(self, call):
        if self._menu:
            self.add_menu_entry(call, text_raw=_param(split_params(call.args), 0))

    @_statement(model.MENU_ITEM)
    def _menu_item(self, call):
        if self._menu:
            params = split_params(call.args)
            self.add_menu_entry(call, _param(params, 0), _param(params, 1))

    @_statement(model.MENU_BAR)
    def _menu_bar(self, call):
        if self._menu:
            self.add_menu_entry(call)

    @_statement(model.OPEN_SUBMENU)
    def _open_submenu(self, call):
        if self._menu:
            self.add_menu_entry(call, text_raw=_param(split_params(call.args), 0))
            self._menu_level += 1

    @_statement(model.CLOSE_SUBMENU)
    def _close_submenu(self, call):
        if self._menu:
            self._menu_level = max(0, self._menu_level - 1)
            self.add_menu_entry(call)

    ## toolbar entries
    def add_toolbar_entry(self, call, id_raw=None, icon_raw=None, text_raw=None):
        """Append an entry to the open toolbar."""
        self._toolbar.entries.append(model.FormToolBarEntry(call.name,
            id_raw, icon_raw, text_raw, _text(text_raw), call.range))

    @_statement(model.TOOLBAR_STANDARD_BUTTON)
    def _toolbar_standard_button(self, call):
        if self._toolbar:
            params = split_params(call.args)
            self.add_toolbar_entry(call, _param(params, 0), _param(params, 1))

    @_statement(model.TOOLBAR_BUTTON)
    def _toolbar_button(self, call):
        if self._toolbar:
            params = split_params(call.args)
            self.add_toolbar_entry(call, _param(params, 0), _param(params, 1), _param(params, 2))

    @_statement(model.TOOLBAR_SEPARATOR)
    def _toolbar_separator(self, call):
        if self._toolbar:
            self.add_toolbar_entry(call)

    @_statement(model.TOOLBAR_TOOLTIP)
    def _toolbar_tooltip(self, call):
        if self._toolbar:
            params = split_params(call.args)
            self.add_toolbar_entry(call, _param(params, 0), text_raw=_param(params, 1))

    ## statusbar fields
    @_statement(model.ADD_STATUSBAR_FIELD)
    def _add_statusbar_field(self, call):
        if self._statusbar:
            width_raw = _param(split_params(call.args), 0)
            if width_raw:
                self._statusbar.fields.append(model.FormStatusBarField(width_raw, call.range))

    ## gadget lists
    @_statement(model.OPEN_GADGET_LIST)
    def _open_gadget_list(self, call):
        gadget = self._gadgets.get(_param(split_params(call.args), 0))
        if gadget:
            self.push(gadget)

    @_statement(model.CLOSE_GADGET_LIST)
    def _close_gadget_list(self, call):
        if self._stack:
            self._stack.pop()

    @_statement(model.ADD_GADGET_ITEM)
    def _add_gadget_item(self, call):
        params = split_params(call.args)
        if len(params) < 3:
            return
        gadget = self._gadgets.get(_param(params, 0))
        if gadget:
            pos_raw = _param(params, 1)
            text_raw = _param(params, 2)
            item = model.GadgetItem(_index(pos_raw, len(gadget.items)), pos_raw,
                text_raw, unquote_string(text_raw), _param(params, 3), _param(params, 4), call.range)
            gadget.items.append(item)
            if gadget.kind == model.PANEL_GADGET:
                self.set_panel_item(gadget.id, item.index)

    @_statement(model.ADD_GADGET_COLUMN)
    def _add_gadget_column(self, call):
        params = split_params(call.args)
        if len(params) < 4:
            return
        gadget = self._gadgets.get(_param(params, 0))
        if gadget:
            col_raw = _param(params, 1)
            title_raw = _param(params, 2)
            gadget.columns.append(model.GadgetColumn(_index(col_raw, len(gadget.columns)),
                col_raw, title_raw, unquote_string(title_raw), _param(params, 3), call.range))

    ## window and gadgets
    @_statement(model.OPEN_WINDOW)
    def _open_window(self, call):
        self.close_sections()
        params = split_params(call.args)
        if len(params) < 5:
            return
        first_param = _param(params, 0)
        pb_any = model.is_pb_any(first_param)
        defaults = {}
        proc = find_procedure(self.text, call.range.start, self.scan_range)
        if proc:
            defaults = procedure_defaults(proc)

        def geometry(n):
            raw = _param(params, n)
            value = as_number(raw)
            if value is None:
                value = as_number(defaults.get(raw.lower(), ""))
            return value or 0

        self.window = model.FormWindow(
            self.identity(call, first_param),
            pb_any,
            call.assigned_var,
            None if pb_any else enum_value(self.meta.enums.windows, first_param),
            first_param,
            geometry(1), geometry(2), geometry(3), geometry(4),
            _text(_param(params, 5)),
            _param(params, 6),
            call.range)

    def add_gadget(self, call):
        """Create a Gadget for the call and put it in the current gadget list."""
        params = split_params(call.args)
        if len(params) < 5:
            return
        first_param = _param(params, 0)
        parent_id = parent_item = None
        if self._stack:
            frame = self._stack[-1]
            parent_id = frame.gadget.id
            if frame.gadget.kind == model.PANEL_GADGET:
                parent_item = frame.item

        def geometry(n):
            return as_number(_param(params, n)) or 0

        gadget = model.Gadget(
            self.identity(call, first_param),
            call.name,
            model.is_pb_any(first_param),
            first_param,
            call.assigned_var,
            parent_id,
            parent_item,
            geometry(1), geometry(2), geometry(3), geometry(4),
            _text(_param(params, 5)),
            _param(params, 6),
            [], [],
            call.range)
        self.gadgets.append(gadget)
        self._gadgets[gadget.id] = gadget
        if gadget.kind in model.CONTAINER_KINDS:
            self.push(gadget)
