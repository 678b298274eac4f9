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
Test reading Form Designer files: header, declarations and the document model.
"""

### find pbform
import sys
sys.path.insert(0, '.')

import os

import pbform
from pbform import model
from pbform.parser.declarations import (
    find_enumeration, find_globals, find_procedure, parse_enumerations)
from pbform.parser.header import detect_scan_range, header_issues, parse_header


def read(name):
    with open(os.path.join(os.path.dirname(__file__), name), encoding='utf-8', newline='') as f:
        return f.read()


def errors(doc):
    return [issue for issue in doc.meta.issues if issue.severity == model.ERROR]


def check_header():
    text = read('Form1.pbf')
    header = parse_header(text)
    assert header == model.FormHeader("6.10", 0, True)
    assert detect_scan_range(text, header) == model.ScanRange(0, text.index("; IDE Options"))
    assert header_issues(header) == []

    issues = header_issues(header, "6.00")
    assert len(issues) == 1
    assert issues[0].severity == model.WARNING
    assert "6.00" in issues[0].message

    assert parse_header("OpenWindow(0, 0, 0, 1, 1)") is None
    issues = header_issues(None)
    assert len(issues) == 1
    assert issues[0].severity == model.WARNING and issues[0].line == 0

    header = parse_header("; comment\n; Form Designer for PureBasic - 5.73\nOpenWindow(0, 0, 0, 1, 1)\n")
    assert header.version == "5.73"
    assert header.line == 1
    assert not header.has_strict_syntax_warning
    assert [i.severity for i in header_issues(header)] == [model.INFO]


def check_declarations():
    text = read('Form1.pbf')
    block = find_enumeration(text, "FormGadget")
    assert block.line == 11
    assert block.end_line == 13
    assert [e.name for e in block.entries] == ["#MenuItem_1"]
    assert find_enumeration(text, "FormWindow") is None

    enums = parse_enumerations("Enumeration FormWindow\n  #Window_0 = 5 ; main\n  #Window_1\nEndEnumeration\n")
    assert enums.windows == [
        model.EnumEntry("#Window_0", "5", 1),
        model.EnumEntry("#Window_1", None, 2),
    ]
    assert enums.gadgets == []

    proc = find_procedure(text, text.index("CreateMenu"))
    assert proc.name == "OpenWindow_0"
    assert proc.line == 15
    assert [(p.name, p.default) for p in proc.params] == [
        ("x", "0"), ("y", "0"), ("width", "600"), ("height", "400")]
    assert text[proc.params[2].default_pos:proc.params[2].default_end] == "600"
    assert text[proc.end:].startswith("\n; IDE Options")
    assert find_procedure(text, text.index("Enumeration")) is None
    assert find_procedure(text, text.index("; IDE Options")) is None

    globals_ = find_globals(text)
    assert [[n.name for n in g.names] for g in globals_] == [
        ["Window_0"], ["Button_0", "ListIcon_0", "Panel_0"]]
    assert globals_[1].line == 9


def check_document():
    doc = pbform.parse(read('Form1.pbf'))
    assert doc.meta.issues == []
    assert doc.meta.header.version == "6.10"
    assert doc.meta.enums.gadgets == [model.EnumEntry("#MenuItem_1", None, 12)]

    w = doc.window
    assert w.id == "Window_0"
    assert w.pb_any and w.variable == "Window_0"
    assert (w.x, w.y, w.w, w.h) == (0, 0, 600, 400)
    assert w.title == "Main"
    assert w.flags_expr == "#PB_Window_SystemMenu"
    assert w.source.line == 16

    assert len(doc.menus) == 1
    menu = doc.menus[0]
    assert menu.id == "0"
    assert [(e.kind, e.level) for e in menu.entries] == [
        ("MenuTitle", 0), ("MenuItem", 0), ("OpenSubMenu", 0), ("MenuItem", 1), ("CloseSubMenu", 0)]
    assert menu.entries[1].id_raw == "#MenuItem_1"
    assert menu.entries[1].text == "Open"

    assert [f.width_raw for f in doc.statusbars[0].fields] == ["100"]
    assert doc.toolbars == []

    gadgets = {g.id: g for g in doc.gadgets}
    assert list(gadgets) == ["Button_0", "ListIcon_0", "Panel_0", "Text_0"]
    b = gadgets["Button_0"]
    assert (b.kind, b.x, b.y, b.w, b.h, b.text, b.flags_expr) == \
        ("ButtonGadget", 10, 20, 80, 24, "OK", None)
    assert b.patchable and b.parent_id is None

    lst = gadgets["ListIcon_0"]
    assert lst.flags_expr == "100"
    assert [(c.index, c.title, c.width_raw) for c in lst.columns] == [(1, "Size", "80")]
    assert [(i.index, i.text) for i in lst.items] == [(0, "a"), (1, "b")]

    assert [(i.index, i.text) for i in gadgets["Panel_0"].items] == [(0, "Tab 1"), (1, "Tab 2")]
    t = gadgets["Text_0"]
    assert (t.parent_id, t.parent_item) == ("Panel_0", 0)

    d = model.to_dict(doc)
    assert d['window']['id'] == "Window_0"
    assert d['gadgets'][0]['patchable'] is True
    assert d['gadgets'][0]['source']['line'] == 25


def check_scenarios():
    doc = pbform.parse('Button_0 = ButtonGadget(#PB_Any, 10, 20, 80, 24, "OK")')
    assert len(doc.gadgets) == 1
    g = doc.gadgets[0]
    assert (g.kind, g.id, g.pb_any, g.x, g.y, g.w, g.h, g.text) == \
        ("ButtonGadget", "Button_0", True, 10, 20, 80, 24, "OK")
    assert errors(doc) == []

    doc = pbform.parse('\nButtonGadget(#PB_Any, 10,20,80,24,"OK")')
    assert len(errors(doc)) == 1
    assert errors(doc)[0].line == 1
    assert len(doc.gadgets) == 1
    assert not doc.gadgets[0].patchable

    doc = pbform.parse('CreateMenu(0,"M")\nMenuItem(1,"A")\nOpenSubMenu("B")\nMenuItem(2,"C")\nCloseSubMenu()')
    assert len(doc.menus) == 1
    assert [e.level for e in doc.menus[0].entries] == [0, 0, 1, 0]

    # the menu level never goes below zero
    doc = pbform.parse('CreateMenu(0, 0)\nCloseSubMenu()\nCloseSubMenu()\nMenuItem(1, "A")')
    assert [e.level for e in doc.menus[0].entries] == [0, 0, 0]

    # entries belong to the section that was opened last
    doc = pbform.parse(
        'CreateToolBar(0, WindowID(0))\n'
        'ToolBarStandardButton(1, #PB_ToolBarIcon_New)\n'
        'CreateMenu(0, WindowID(0))\n'
        'MenuItem(1, "A")\n'
        'ToolBarSeparator()\n')
    assert [e.kind for e in doc.toolbars[0].entries] == ["ToolBarStandardButton"]
    assert [e.kind for e in doc.menus[0].entries] == ["MenuItem"]

    # OpenWindow ends a section
    doc = pbform.parse('CreateMenu(0, 0)\nOpenWindow(0, 0, 0, 10, 10)\nMenuItem(1, "A")')
    assert doc.menus[0].entries == []
    assert doc.window.title is None

    # explicit item positions
    doc = pbform.parse(
        'ComboBoxGadget(1, 0, 0, 10, 10)\nAddGadgetItem(1, 5, "x")\nAddGadgetItem(1, -1, "y")\n'
        'AddGadgetItem(1, 0)\nAddGadgetItem(2, -1, "z")')
    assert [i.index for i in doc.gadgets[0].items] == [5, 1]


def check_window():
    text = (
        "; Form Designer for PureBasic - 6.10\n"
        "Enumeration FormWindow\n"
        "  #Window_0 = 3\n"
        "EndEnumeration\n"
        "OpenWindow(#Window_0, 0, 0, 300, W, ~\"A\\tB\")\n")
    doc = pbform.parse(text, expected_version="6.10")
    assert [i.severity for i in doc.meta.issues] == [model.INFO]
    w = doc.window
    assert (w.id, w.pb_any, w.variable, w.enum_value_raw) == ("#Window_0", False, None, "3")
    assert (w.w, w.h) == (300, 0)
    assert w.title == "A\tB"

    doc = pbform.parse("OpenWindow(#PB_Any, 0, 0, 300, 200)")
    assert doc.window.id == model.PB_ANY
    assert [i.severity for i in doc.meta.issues] == [model.WARNING, model.ERROR]


def test_main():
    check_header()
    check_declarations()
    check_document()
    check_scenarios()
    check_window()



if __name__ == "__main__" and 'test_main' in globals():
    test_main()
