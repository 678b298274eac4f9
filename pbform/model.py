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
The document model of a parsed Form Designer source.

All records are plain named tuples, created anew every time a text is parsed.
Nothing in here refers to the text; only the positions in the
:class:`SourceRange` records do, and they are only valid for the text that was
parsed.

Use :func:`to_dict` to convert a :class:`FormDocument` (or any other record)
to plain dictionaries and lists, e.g. to send it to a user interface as JSON.

"""

import collections


PB_ANY = "#PB_Any"

#: The names of the enumerations holding the window and gadget constants.
ENUM_WINDOWS = "FormWindow"
ENUM_GADGETS = "FormGadget"

## recognized statements

OPEN_WINDOW = "OpenWindow"

CREATE_MENU = "CreateMenu"
CREATE_TOOLBAR = "CreateToolBar"
CREATE_STATUSBAR = "CreateStatusBar"

OPEN_GADGET_LIST = "OpenGadgetList"
CLOSE_GADGET_LIST = "CloseGadgetList"
ADD_GADGET_ITEM = "AddGadgetItem"
ADD_GADGET_COLUMN = "AddGadgetColumn"
ADD_STATUSBAR_FIELD = "AddStatusBarField"

MENU_TITLE = "MenuTitle"
MENU_ITEM = "MenuItem"
MENU_BAR = "MenuBar"
OPEN_SUBMENU = "OpenSubMenu"
CLOSE_SUBMENU = "CloseSubMenu"

TOOLBAR_STANDARD_BUTTON = "ToolBarStandardButton"
TOOLBAR_BUTTON = "ToolBarButton"
TOOLBAR_SEPARATOR = "ToolBarSeparator"
TOOLBAR_TOOLTIP = "ToolBarToolTip"

MENU_ENTRY_KINDS = (MENU_TITLE, MENU_ITEM, MENU_BAR, OPEN_SUBMENU, CLOSE_SUBMENU)

TOOLBAR_ENTRY_KINDS = (
    TOOLBAR_STANDARD_BUTTON, TOOLBAR_BUTTON, TOOLBAR_SEPARATOR, TOOLBAR_TOOLTIP)

GADGET_KINDS = (
    "ButtonGadget",
    "ButtonImageGadget",
    "StringGadget",
    "TextGadget",
    "CheckBoxGadget",
    "OptionGadget",
    "FrameGadget",
    "ComboBoxGadget",
    "ListViewGadget",
    "ListIconGadget",
    "TreeGadget",
    "EditorGadget",
    "SpinGadget",
    "TrackBarGadget",
    "ProgressBarGadget",
    "ImageGadget",
    "HyperLinkGadget",
    "CalendarGadget",
    "DateGadget",
    "ContainerGadget",
    "PanelGadget",
    "ScrollAreaGadget",
    "SplitterGadget",
    "WebViewGadget",
    "WebGadget",
    "OpenGLGadget",
    "CanvasGadget",
    "ExplorerTreeGadget",
    "ExplorerListGadget",
    "ExplorerComboGadget",
    "IPAddressGadget",
    "ScrollBarGadget",
    "ScintillaGadget",
)

PANEL_GADGET = "PanelGadget"

#: Gadgets that open a gadget list for their children.
CONTAINER_KINDS = ("ContainerGadget", PANEL_GADGET, "ScrollAreaGadget")

## issue severities

ERROR = "error"
WARNING = "warning"
INFO = "info"


class IdentityError(ValueError):
    """Raised by :func:`stable_key` if an entity has no stable identity."""


def is_pb_any(first_param):
    """Return True if the (stripped) first parameter is the ``#PB_Any`` token."""
    return first_param.lower() == PB_ANY.lower()


def stable_key(first_param, assigned_var=None):
    """Return the key that identifies an entity across parses.

    That is the assigned variable for an entity created with ``#PB_Any``, and
    the first parameter otherwise. Raises :class:`IdentityError` for a
    ``#PB_Any`` entity that is not assigned to a variable.

    """
    if is_pb_any(first_param):
        if not assigned_var:
            raise IdentityError("{} without assignment".format(PB_ANY))
        return assigned_var
    return first_param


SourceRange = collections.namedtuple("SourceRange", "start end line line_start")
SourceRange.start.__doc__ = "Position of the first token of the statement."
SourceRange.end.__doc__ = "Position just after the closing parenthesis."
SourceRange.line.__doc__ = "The line number (zero-based) the statement starts on."
SourceRange.line_start.__doc__ = "Position of the first character of that line."

ScanRange = collections.namedtuple("ScanRange", "start end")
ScanRange.__doc__ = "The region of the text that is actually scanned."

Call = collections.namedtuple("Call", "name assigned_var args indent range args_pos")
Call.name.__doc__ = "The name of the called function."
Call.assigned_var.__doc__ = "The assigned variable (left-hand side) or None."
Call.args.__doc__ = "The raw text between the parentheses."
Call.indent.__doc__ = "The leading whitespace of the line the statement starts on."
Call.range.__doc__ = "The :class:`SourceRange` of the statement."
Call.args_pos.__doc__ = "Position of the first character of :attr:`args`."

Issue = collections.namedtuple("Issue", "severity message line")
Issue.__new__.__defaults__ = (None,)
Issue.severity.__doc__ = "One of ``'error'``, ``'warning'`` or ``'info'``."
Issue.line.__doc__ = "The line number the issue refers to, or None."

FormHeader = collections.namedtuple("FormHeader", "version line has_strict_syntax_warning")

EnumEntry = collections.namedtuple("EnumEntry", "name value line")
EnumEntry.name.__doc__ = "The constant, including the ``#``."
EnumEntry.value.__doc__ = "The raw value expression, or None if not given."

FormEnumerations = collections.namedtuple("FormEnumerations", "windows gadgets")

FormMeta = collections.namedtuple("FormMeta", "header scan_range issues enums")

GadgetItem = collections.namedtuple("GadgetItem",
    "index pos_raw text_raw text image_raw flags_raw source")
GadgetItem.index.__doc__ = "The resolved position: explicit if numeric, else the append position."

GadgetColumn = collections.namedtuple("GadgetColumn",
    "index col_raw title_raw title width_raw source")

FormMenuEntry = collections.namedtuple("FormMenuEntry", "kind level id_raw text_raw text source")
FormMenuEntry.level.__doc__ = "The submenu nesting level, never below zero."

FormMenu = collections.namedtuple("FormMenu", "id entries source")

FormToolBarEntry = collections.namedtuple("FormToolBarEntry",
    "kind id_raw icon_raw text_raw text source")

FormToolBar = collections.namedtuple("FormToolBar", "id entries source")

FormStatusBarField = collections.namedtuple("FormStatusBarField", "width_raw source")

FormStatusBar = collections.namedtuple("FormStatusBar", "id fields source")

FormWindow = collections.namedtuple("FormWindow",
    "id pb_any variable enum_value_raw first_param x y w h title flags_expr source")
FormWindow.enum_value_raw.__doc__ = \
    "The value of the constant in the FormWindow enumeration, if given there."

FormDocument = collections.namedtuple("FormDocument",
    "window gadgets menus toolbars statusbars meta")


class Gadget(collections.namedtuple("Gadget",
        "id kind pb_any first_param variable parent_id parent_item "
        "x y w h text flags_expr items columns source")):
    """A gadget (control) on the form.

    The ``id`` is the :func:`stable_key` of the gadget. If the gadget uses
    ``#PB_Any`` without assignment, ``id`` is ``"#PB_Any"`` and the gadget
    can't be patched, see :attr:`patchable`.

    """
    __slots__ = ()

    @property
    def patchable(self):
        """True if the gadget has a stable identity."""
        return not (self.pb_any and not self.variable)


def to_dict(obj):
    """Return the record as plain dictionaries and lists, recursively."""
    if isinstance(obj, tuple) and hasattr(obj, '_asdict'):
        d = {name: to_dict(value) for name, value in obj._asdict().items()}
        if isinstance(obj, Gadget):
            d['patchable'] = obj.patchable
        return d
    elif isinstance(obj, (list, tuple)):
        return [to_dict(value) for value in obj]
    return obj
