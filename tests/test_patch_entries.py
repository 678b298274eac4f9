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
Test adding, changing and removing entries with pbform.patch.entries.
"""

import pytest

### find pbform
import sys
sys.path.insert(0, '.')

import os

import pbform
from pbform.patch import apply
from pbform.patch.entries import (
    ColumnArgs, ItemArgs, MenuEntryArgs, StatusBarFieldArgs, ToolBarEntryArgs,
    delete_column, delete_item, delete_menu_entry, delete_statusbar_field,
    delete_toolbar_entry, insert_column, insert_item, insert_menu_entry,
    insert_statusbar_field, insert_toolbar_entry, item_statement,
    menu_entry_statement, toolbar_entry_statement, update_column, update_item,
    update_menu_entry, update_statusbar_field, update_toolbar_entry)


def read(name):
    with open(os.path.join(os.path.dirname(__file__), name), encoding='utf-8', newline='') as f:
        return f.read()


def gadget(text, key):
    for g in pbform.parse(text).gadgets:
        if g.id == key:
            return g


def check_statements():
    assert item_statement("G", ItemArgs("-1", ' "a" ')) == 'AddGadgetItem(G, -1, "a")'
    assert item_statement("G", ItemArgs("0", '"x"', None, "#F")) == 'AddGadgetItem(G, 0, "x", 0, #F)'
    assert item_statement("G", ItemArgs("0", '"x"', "ImageID(1)")) == \
        'AddGadgetItem(G, 0, "x", ImageID(1))'
    assert menu_entry_statement(MenuEntryArgs("MenuItem", "3", '"Two"')) == 'MenuItem(3, "Two")'
    assert menu_entry_statement(MenuEntryArgs("MenuTitle")) == 'MenuTitle("")'
    assert menu_entry_statement(MenuEntryArgs("CloseSubMenu")) == 'CloseSubMenu()'
    assert toolbar_entry_statement(ToolBarEntryArgs("ToolBarButton", "1", "ImageID(0)", '"B"')) == \
        'ToolBarButton(1, ImageID(0), "B")'
    assert toolbar_entry_statement(ToolBarEntryArgs("ToolBarStandardButton", "1")) == \
        'ToolBarStandardButton(1, 0)'
    with pytest.raises(ValueError):
        menu_entry_statement(MenuEntryArgs("Bogus"))
    with pytest.raises(ValueError):
        toolbar_entry_statement(ToolBarEntryArgs("MenuItem"))


def check_items():
    text = read('Form1.pbf')
    b = '  AddGadgetItem(ListIcon_0, -1, "b")\n'
    result = apply(text, insert_item(text, "ListIcon_0", ItemArgs("-1", '"c"')))
    assert result == text.replace(b, b + '  AddGadgetItem(ListIcon_0, -1, "c")\n')
    items = gadget(result, "ListIcon_0").items
    assert [(i.index, i.text) for i in items] == [(0, "a"), (1, "b"), (2, "c")]

    # a gadget without items gets the item after its own statement
    button = '  Button_0 = ButtonGadget(#PB_Any, 10, 20, 80, 24, "OK") ; the button\n'
    result = apply(text, insert_item(text, "Button_0", ItemArgs("-1", '"x"')))
    assert result == text.replace(button, button + '  AddGadgetItem(Button_0, -1, "x")\n')

    # a new panel tab goes before CloseGadgetList()
    result = apply(text, insert_item(text, "Panel_0", ItemArgs("-1", '"Tab 3"')))
    assert result == text.replace('  CloseGadgetList()\n',
        '  AddGadgetItem(Panel_0, -1, "Tab 3")\n  CloseGadgetList()\n')
    doc = pbform.parse(result)
    assert [i.text for i in doc.gadgets[2].items] == ["Tab 1", "Tab 2", "Tab 3"]
    assert doc.gadgets[3].parent_item == 0

    result = apply(text, update_item(text, "ListIcon_0", 28, ItemArgs("-1", '"A"')))
    assert result == text.replace('ListIcon_0, -1, "a")', 'ListIcon_0, -1, "A")')
    assert update_item(text, "Panel_0", 28, ItemArgs("-1", '"A"')) is None
    assert update_item(text, "ListIcon_0", 27, ItemArgs("-1", '"A"')) is None
    assert update_item(text, "ListIcon_0", 1000, ItemArgs("-1", '"A"')) is None

    result = apply(text, delete_item(text, "ListIcon_0", 28))
    assert result == text.replace('  AddGadgetItem(ListIcon_0, -1, "a")\n', '')
    assert delete_item(text, "Panel_0", 28) is None
    assert insert_item(text, "Nothing", ItemArgs("-1", '"x"')) is None


def check_columns():
    text = read('Form1.pbf')
    column = '  AddGadgetColumn(ListIcon_0, 1, "Size", 80)\n'
    result = apply(text, insert_column(text, "ListIcon_0", ColumnArgs("2", '"Date"', "60")))
    assert result == text.replace(column, column + '  AddGadgetColumn(ListIcon_0, 2, "Date", 60)\n')
    assert [c.title for c in gadget(result, "ListIcon_0").columns] == ["Size", "Date"]

    result = apply(text, update_column(text, "ListIcon_0", 27, ColumnArgs("1", '"Bytes"', "90")))
    assert 'AddGadgetColumn(ListIcon_0, 1, "Bytes", 90)\n' in result
    result = apply(text, delete_column(text, "ListIcon_0", 27))
    assert "AddGadgetColumn" not in result
    assert delete_column(text, "ListIcon_0", 28) is None


def check_menu():
    text = read('Form1.pbf')
    close = '  CloseSubMenu()\n'
    result = apply(text, insert_menu_entry(text, "0", MenuEntryArgs("MenuItem", "3", '"Two"')))
    assert result == text.replace(close, close + '  MenuItem(3, "Two")\n')
    entries = pbform.parse(result).menus[0].entries
    assert [(e.kind, e.level, e.text) for e in entries][-1] == ("MenuItem", 0, "Two")

    result = apply(text, update_menu_entry(text, "0", 21, MenuEntryArgs("MenuItem", "2", '"Uno"')))
    assert result == text.replace('MenuItem(2, "One")', 'MenuItem(2, "Uno")')
    # kind must match
    assert update_menu_entry(text, "0", 21, MenuEntryArgs("MenuTitle", None, '"Uno"')) is None
    # wrong menu
    assert update_menu_entry(text, "1", 21, MenuEntryArgs("MenuItem", "2", '"Uno"')) is None

    result = apply(text, delete_menu_entry(text, "0", 22, "CloseSubMenu"))
    assert result == text.replace(close, '')
    assert insert_menu_entry(text, "1", MenuEntryArgs("MenuBar")) is None


def check_sections():
    text = (
        'CreateToolBar(0, WindowID(0))\n'
        'ToolBarStandardButton(1, #PB_ToolBarIcon_New)\n'
        'CreateMenu(0, WindowID(0))\n'
        'MenuItem(1, "A")\n'
        'ToolBarSeparator()\n')
    # the separator is in the menu section, not in the toolbar
    assert delete_toolbar_entry(text, "0", 4, "ToolBarSeparator") is None
    assert delete_toolbar_entry(text, "0", 1, "ToolBarStandardButton") == [(30, 76, '')]

    result = apply(text, insert_toolbar_entry(text, "0", ToolBarEntryArgs("ToolBarSeparator")))
    assert result.splitlines()[2] == "ToolBarSeparator()"
    assert [e.kind for e in pbform.parse(result).toolbars[0].entries] == \
        ["ToolBarStandardButton", "ToolBarSeparator"]

    result = apply(text, update_toolbar_entry(text, "0", 1,
        ToolBarEntryArgs("ToolBarStandardButton", "1", "#PB_ToolBarIcon_Open")))
    assert result.splitlines()[1] == "ToolBarStandardButton(1, #PB_ToolBarIcon_Open)"

    # last line without line break
    text = 'CreateMenu(0, 0)\r\nMenuItem(1, "A")'
    result = apply(text, insert_menu_entry(text, "0", MenuEntryArgs("MenuBar")))
    assert result == 'CreateMenu(0, 0)\r\nMenuItem(1, "A")\r\nMenuBar()'


def check_statusbar():
    text = read('Form1.pbf')
    field = '  AddStatusBarField(100)\n'
    result = apply(text, insert_statusbar_field(text, "0", StatusBarFieldArgs("50")))
    assert result == text.replace(field, field + '  AddStatusBarField(50)\n')
    assert [f.width_raw for f in pbform.parse(result).statusbars[0].fields] == ["100", "50"]

    result = apply(text, update_statusbar_field(text, "0", 24, StatusBarFieldArgs("#PB_Ignore")))
    assert '  AddStatusBarField(#PB_Ignore)\n' in result
    result = apply(text, delete_statusbar_field(text, "0", 24))
    assert "AddStatusBarField" not in result
    # a statusbar field is not a menu entry
    assert delete_menu_entry(text, "0", 24, "AddStatusBarField") is None


def test_main():
    check_statements()
    check_items()
    check_columns()
    check_menu()
    check_sections()
    check_statusbar()



if __name__ == "__main__" and 'test_main' in globals():
    test_main()
