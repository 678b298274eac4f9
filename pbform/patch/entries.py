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
Add, change and remove the entries of gadgets, menus, toolbars and statusbars.

Every kind of entry has three patch functions: ``insert_xxx()`` adds a new
statement after the last entry of its owner, ``update_xxx()`` rewrites the
statement on a given line and ``delete_xxx()`` removes that line. Update and
delete first check that the line really has a statement of the expected kind
that belongs to the given owner; otherwise they return None.

The values are given as raw PureBasic text in small named tuples, e.g.
``ItemArgs('-1', '"Tab 1"')``. They are written as they are.

"""

import collections
import logging

from .. import model
from ..parser.sections import find_section, in_section
from ..util import delete_lines, insert_line
from . import Edit, Source, first_param


log = logging.getLogger(__name__)


ItemArgs = collections.namedtuple("ItemArgs", "pos_raw text_raw image_raw flags_raw")
ItemArgs.__new__.__defaults__ = (None, None)

ColumnArgs = collections.namedtuple("ColumnArgs", "col_raw title_raw width_raw")

MenuEntryArgs = collections.namedtuple("MenuEntryArgs", "kind id_raw text_raw")
MenuEntryArgs.__new__.__defaults__ = (None, None)

ToolBarEntryArgs = collections.namedtuple("ToolBarEntryArgs", "kind id_raw icon_raw text_raw")
ToolBarEntryArgs.__new__.__defaults__ = (None, None, None)

StatusBarFieldArgs = collections.namedtuple("StatusBarFieldArgs", "width_raw")


_menu_entry_formats = {
    model.MENU_TITLE: "MenuTitle({text})",
    model.MENU_ITEM: "MenuItem({id}, {text})",
    model.MENU_BAR: "MenuBar()",
    model.OPEN_SUBMENU: "OpenSubMenu({text})",
    model.CLOSE_SUBMENU: "CloseSubMenu()",
}

_toolbar_entry_formats = {
    model.TOOLBAR_STANDARD_BUTTON: "ToolBarStandardButton({id}, {icon})",
    model.TOOLBAR_BUTTON: "ToolBarButton({id}, {icon}, {text})",
    model.TOOLBAR_SEPARATOR: "ToolBarSeparator()",
    model.TOOLBAR_TOOLTIP: "ToolBarToolTip({id}, {text})",
}


def _raw(value, default):
    return value.strip() if value and value.strip() else default


def item_statement(key, args):
    """Return the ``AddGadgetItem`` statement for the gadget key and ItemArgs."""
    params = [key, args.pos_raw.strip(), args.text_raw.strip()]
    if args.image_raw is not None or args.flags_raw is not None:
        params.append(_raw(args.image_raw, "0"))
    if args.flags_raw is not None:
        params.append(args.flags_raw.strip())
    return "{}({})".format(model.ADD_GADGET_ITEM, ", ".join(params))


def column_statement(key, args):
    """Return the ``AddGadgetColumn`` statement for the gadget key and ColumnArgs."""
    return "{}({}, {}, {}, {})".format(model.ADD_GADGET_COLUMN, key,
        args.col_raw.strip(), args.title_raw.strip(), args.width_raw.strip())


def menu_entry_statement(args):
    """Return the statement for the MenuEntryArgs.

    Raises ValueError for an unknown kind.

    """
    try:
        fmt = _menu_entry_formats[args.kind]
    except KeyError:
        raise ValueError("unknown menu entry kind: {!r}".format(args.kind)) from None
    return fmt.format(id=_raw(args.id_raw, "0"), text=_raw(args.text_raw, '""'))


def toolbar_entry_statement(args):
    """Return the statement for the ToolBarEntryArgs.

    Raises ValueError for an unknown kind.

    """
    try:
        fmt = _toolbar_entry_formats[args.kind]
    except KeyError:
        raise ValueError("unknown toolbar entry kind: {!r}".format(args.kind)) from None
    return fmt.format(id=_raw(args.id_raw, "0"), icon=_raw(args.icon_raw, "0"),
        text=_raw(args.text_raw, '""'))


def statusbar_field_statement(args):
    """Return the ``AddStatusBarField`` statement for the StatusBarFieldArgs."""
    return "{}({})".format(model.ADD_STATUSBAR_FIELD, args.width_raw.strip())


## helpers

def _insert_after(source, call, statement):
    """Return the edits adding the statement on a new line after the call."""
    line = source.last_line(call)
    return [Edit(*insert_line(source.index, line, call.indent + statement))]


def _insert_before(source, call, indent, statement):
    """Return the edits adding the statement on a new line before the call's line."""
    pos = call.range.line_start
    return [Edit(pos, pos, indent + statement + source.index.newline(call.range.line))]


def _replace(call, statement):
    """Return the edits replacing the call with the statement."""
    return [Edit(call.range.start, call.range.end, statement)]


def _delete(source, call):
    """Return the edits removing the line(s) of the call."""
    return [Edit(*delete_lines(source.index, call.range.line, source.last_line(call)))]


def _closing_gadget_list(calls, start):
    """Return the CloseGadgetList call matching the container created at calls[start]."""
    depth = 1
    for call in calls[start+1:]:
        if call.name in model.CONTAINER_KINDS or call.name == model.OPEN_GADGET_LIST:
            depth += 1
        elif call.name == model.CLOSE_GADGET_LIST:
            depth -= 1
            if depth == 0:
                return call


def _gadget_entry(source, key, name, line):
    """Return the call with the name on the line that adds to the gadget key."""
    call = source.call_at(line, name)
    if call and first_param(call) == key:
        return call
    log.debug("%s on line %d does not belong to %r", name, line, key)


def _section_entry(source, opener, section_id, line, name):
    """Return the call with the name on the line in the section of the opener."""
    call = source.call_at(line, name)
    if call and in_section(source.calls, line, opener, section_id):
        return call
    log.debug("%s on line %d is not in the %s section %r", name, line, opener, section_id)


def _insert_section_entry(source, opener, section_id, names, statement):
    """Return the edits adding the statement after the last entry of the section."""
    section = find_section(source.calls, opener, section_id)
    if section is None:
        log.debug("no %s section %r", opener, section_id)
        return None
    start, end = section
    anchor = source.calls[start]
    for call in source.calls[start+1:end]:
        if call.name in names:
            anchor = call
    return _insert_after(source, anchor, statement)


## gadget items

def insert_item(text, key, item, scan_range=None):
    """Return the edits adding an item to the gadget, or None.

    The item is added after the last item of the gadget, or after the gadget
    itself. A new tab of a ``PanelGadget`` that already has tabs is added
    before the ``CloseGadgetList()`` of the panel, so that the gadgets on
    the existing tabs stay where they are.

    """
    source = Source(text, scan_range)
    gadget = source.find(key, model.GADGET_KINDS)
    if not gadget:
        return None
    statement = item_statement(key, item)
    start = source.calls.index(gadget)
    siblings = [call for call in source.calls[start+1:]
                if call.name == model.ADD_GADGET_ITEM and first_param(call) == key]
    if siblings and gadget.name == model.PANEL_GADGET:
        close = _closing_gadget_list(source.calls, start)
        if close:
            return _insert_before(source, close, siblings[-1].indent, statement)
    return _insert_after(source, siblings[-1] if siblings else gadget, statement)


def update_item(text, key, line, item, scan_range=None):
    """Return the edits rewriting the item of the gadget on the line, or None."""
    source = Source(text, scan_range)
    call = _gadget_entry(source, key, model.ADD_GADGET_ITEM, line)
    if call:
        return _replace(call, item_statement(key, item))


def delete_item(text, key, line, scan_range=None):
    """Return the edits removing the item of the gadget on the line, or None."""
    source = Source(text, scan_range)
    call = _gadget_entry(source, key, model.ADD_GADGET_ITEM, line)
    if call:
        return _delete(source, call)


## gadget columns

def insert_column(text, key, column, scan_range=None):
    """Return the edits adding a column to the gadget, or None."""
    source = Source(text, scan_range)
    gadget = source.find(key, model.GADGET_KINDS)
    if not gadget:
        return None
    anchor = gadget
    for call in source.calls[source.calls.index(gadget)+1:]:
        if call.name == model.ADD_GADGET_COLUMN and first_param(call) == key:
            anchor = call
    return _insert_after(source, anchor, column_statement(key, column))


def update_column(text, key, line, column, scan_range=None):
    """Return the edits rewriting the column of the gadget on the line, or None."""
    source = Source(text, scan_range)
    call = _gadget_entry(source, key, model.ADD_GADGET_COLUMN, line)
    if call:
        return _replace(call, column_statement(key, column))


def delete_column(text, key, line, scan_range=None):
    """Return the edits removing the column of the gadget on the line, or None."""
    source = Source(text, scan_range)
    call = _gadget_entry(source, key, model.ADD_GADGET_COLUMN, line)
    if call:
        return _delete(source, call)


## menu entries

def insert_menu_entry(text, menu_id, entry, scan_range=None):
    """Return the edits adding the MenuEntryArgs entry to the menu, or None."""
    statement = menu_entry_statement(entry)
    source = Source(text, scan_range)
    return _insert_section_entry(source, model.CREATE_MENU, menu_id,
        model.MENU_ENTRY_KINDS, statement)


def update_menu_entry(text, menu_id, line, entry, scan_range=None):
    """Return the edits rewriting the menu entry on the line, or None.

    The entry on the line must be of the same kind as ``entry``.

    """
    statement = menu_entry_statement(entry)
    source = Source(text, scan_range)
    call = _section_entry(source, model.CREATE_MENU, menu_id, line, entry.kind)
    if call:
        return _replace(call, statement)


def delete_menu_entry(text, menu_id, line, kind, scan_range=None):
    """Return the edits removing the menu entry of the kind on the line, or None."""
    source = Source(text, scan_range)
    call = _section_entry(source, model.CREATE_MENU, menu_id, line, kind)
    if call:
        return _delete(source, call)


## toolbar entries

def insert_toolbar_entry(text, toolbar_id, entry, scan_range=None):
    """Return the edits adding the ToolBarEntryArgs entry to the toolbar, or None."""
    statement = toolbar_entry_statement(entry)
    source = Source(text, scan_range)
    return _insert_section_entry(source, model.CREATE_TOOLBAR, toolbar_id,
        model.TOOLBAR_ENTRY_KINDS, statement)


def update_toolbar_entry(text, toolbar_id, line, entry, scan_range=None):
    """Return the edits rewriting the toolbar entry on the line, or None."""
    statement = toolbar_entry_statement(entry)
    source = Source(text, scan_range)
    call = _section_entry(source, model.CREATE_TOOLBAR, toolbar_id, line, entry.kind)
    if call:
        return _replace(call, statement)


def delete_toolbar_entry(text, toolbar_id, line, kind, scan_range=None):
    """Return the edits removing the toolbar entry of the kind on the line, or None."""
    source = Source(text, scan_range)
    call = _section_entry(source, model.CREATE_TOOLBAR, toolbar_id, line, kind)
    if call:
        return _delete(source, call)


## statusbar fields

def insert_statusbar_field(text, statusbar_id, field, scan_range=None):
    """Return the edits adding the StatusBarFieldArgs field to the statusbar, or None."""
    source = Source(text, scan_range)
    return _insert_section_entry(source, model.CREATE_STATUSBAR, statusbar_id,
        (model.ADD_STATUSBAR_FIELD,), statusbar_field_statement(field))


def update_statusbar_field(text, statusbar_id, line, field, scan_range=None):
    """Return the edits rewriting the statusbar field on the line, or None."""
    source = Source(text, scan_range)
    call = _section_entry(source, model.CREATE_STATUSBAR, statusbar_id, line,
        model.ADD_STATUSBAR_FIELD)
    if call:
        return _replace(call, statusbar_field_statement(field))


def delete_statusbar_field(text, statusbar_id, line, scan_range=None):
    """Return the edits removing the statusbar field on the line, or None."""
    source = Source(text, scan_range)
    call = _section_entry(source, model.CREATE_STATUSBAR, statusbar_id, line,
        model.ADD_STATUSBAR_FIELD)
    if call:
        return _delete(source, call)
