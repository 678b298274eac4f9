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
Change the identity of the window.

A window is either created with a constant (``OpenWindow(#Window_0, ...)``,
declared in ``Enumeration FormWindow``) or with ``#PB_Any`` and a variable
(``Window_0 = OpenWindow(#PB_Any, ...)``, declared with ``Global``). The
patches in this module switch between those forms and rename the window.
They consist of multiple edits in different places of the text, which
must be applied together.

Besides the declarations and the ``OpenWindow`` statement, the references to
the old name in the procedure that opens the window are changed as well.
The procedures that the Form Designer derives from the window name
(``OpenWindow_0()`` and ``Window_0_Events()``) are only renamed when asked
for, because that may also rename unrelated names that happen to match.

"""

import logging

from .. import model
from ..parser.declarations import find_enumeration, find_globals, find_procedure
from ..parser.scanner import scan_identifiers
from ..parser.tokenizer import param_spans, value_span
from ..util import delete_lines
from . import Edit, Source


log = logging.getLogger(__name__)


#: Whether :func:`rename_window` renames the derived procedures by default.
PROPAGATE_PROCEDURES = False

#: The indent used for a new entry in an empty enumeration.
ENUM_INDENT = "  "


def _overlaps(edit, edits):
    return any(edit.pos < e.end and e.pos < edit.end or edit.pos == e.pos for e in edits)


def _merge(edits, more):
    """Add the edits in ``more`` that do not overlap with those in ``edits``."""
    for edit in more:
        if not _overlaps(edit, edits):
            edits.append(edit)
    return edits


def _first_param_edit(call, value):
    """Return an Edit replacing the first argument of the call."""
    start, end = value_span(call.args, *param_spans(call.args)[0])
    return Edit(call.args_pos + start, call.args_pos + end, value)


def _name_pos(text, call):
    """Return the position of the function name of the call."""
    return text.rfind(call.name, call.range.start, call.args_pos)


def _references(text, scan_range, start, end, old, new):
    """Return Edits renaming the identifier ``old`` to ``new`` in text[start:end]."""
    start = max(start, scan_range.start)
    end = min(end, scan_range.end)
    return [Edit(ident.pos, ident.end, new)
            for ident in scan_identifiers(text, start, end)
                if ident.text.lower() == old.lower()]


def _procedure_references(source, call, old, new):
    """Return Edits renaming ``old`` to ``new`` in the procedure around the call."""
    proc = find_procedure(source.text, call.range.start, source.scan_range, source.index)
    if not proc:
        log.debug("%s is not in a procedure, no references renamed", call.name)
        return []
    return _references(source.text, source.scan_range, proc.start, proc.end, old, new)


def _enum_entry(block, symbol):
    for entry in block.entries:
        if entry.name.lower() == symbol.lower():
            return entry


def _enum_entry_edits(source, block, symbol, value_raw):
    """Return Edits making sure the entry ``symbol[ = value_raw]`` is in the block."""
    entry = _enum_entry(block, symbol)
    value = value_raw.strip() if value_raw and value_raw.strip() else None
    if entry:
        if value is None:
            if entry.value_pos is None:
                return []
            return [Edit(entry.name_end, entry.value_end, "")]
        elif entry.value_pos is None:
            return [Edit(entry.name_end, entry.name_end, " = " + value)]
        return [Edit(entry.value_pos, entry.value_end, value)]
    line = symbol if value is None else "{} = {}".format(symbol, value)
    indent = source.index.indent(block.entries[-1].line) if block.entries else ENUM_INDENT
    newline = source.index.newline(block.end_line)
    return [Edit(block.end, block.end, indent + line + newline)]


def _global_insert(source, call, variable):
    """Return Edits declaring the variable ``Global``."""
    globals_ = find_globals(source.text, source.scan_range, source.index)
    for decl in globals_:
        if any(n.name.lower() == variable.lower() for n in decl.names):
            return []
    index = source.index
    if globals_:
        decl = globals_[-1]
        newline = index.newline(decl.line)
        if decl.end == len(source.text) and index.end(decl.line) == decl.end:
            return [Edit(decl.end, decl.end, newline + "Global " + variable)]
        return [Edit(decl.end, decl.end, index.indent(decl.line) + "Global " + variable + newline)]
    proc = find_procedure(source.text, call.range.start, source.scan_range, index)
    pos = proc.start if proc else call.range.line_start
    newline = index.newline(index.line(pos))
    return [Edit(pos, pos, "Global " + variable + newline + newline)]


def _global_remove(source, variable):
    """Return Edits removing the ``Global`` declaration of the variable."""
    edits = []
    text = source.text
    for decl in find_globals(text, source.scan_range, source.index):
        names = decl.names
        for i, n in enumerate(names):
            if n.name.lower() != variable.lower():
                continue
            if len(names) == 1:
                edits.append(Edit(decl.start, decl.end, ""))
            elif i == 0:
                edits.append(Edit(n.field_start, names[1].field_start, ""))
            else:
                edits.append(Edit(names[i-1].field_end, n.field_end, ""))
            break
    return edits


def toggle_window_pb_any(text, window_key, to_pb_any, variable_name, enum_symbol,
                         enum_value_raw=None, scan_range=None):
    """Return the edits switching the window between ``#PB_Any`` and a constant.

    With ``to_pb_any`` True, the window (currently ``#enum_symbol``) gets
    created with ``#PB_Any`` and assigned to ``variable_name``, which is
    declared ``Global``, and the constant is removed from the
    ``FormWindow`` enumeration.

    With ``to_pb_any`` False, the window (currently ``variable_name``) gets
    created with ``#enum_symbol`` which is added to the enumeration (with
    ``enum_value_raw``, if given), and the ``Global`` declaration of the
    variable is removed.

    References to the old name in the procedure of the window are renamed.
    Returns None if the window can't be found or is already in the requested
    form.

    """
    source = Source(text, scan_range)
    call = source.find(window_key, (model.OPEN_WINDOW,))
    if not call:
        return None
    first = value_span(call.args, *param_spans(call.args)[0])
    pb_any = model.is_pb_any(call.args[first[0]:first[1]])
    if pb_any == bool(to_pb_any):
        log.debug("window %r already uses %s", window_key,
            model.PB_ANY if pb_any else "a constant")
        return None
    block = find_enumeration(text, model.ENUM_WINDOWS, source.scan_range, source.index)
    if not block:
        log.debug("no %s enumeration", model.ENUM_WINDOWS)
    start = _name_pos(text, call)
    if to_pb_any:
        edits = _global_insert(source, call, variable_name)
        if block:
            entry = _enum_entry(block, enum_symbol)
            if entry:
                edits.append(Edit(*delete_lines(source.index, entry.line, entry.line)))
        edits.append(Edit(call.range.start, start, variable_name + " = "))
        edits.append(_first_param_edit(call, model.PB_ANY))
        old, new = enum_symbol, variable_name
    else:
        edits = _global_remove(source, variable_name)
        if block:
            edits.extend(_enum_entry_edits(source, block, enum_symbol, enum_value_raw))
        edits.append(Edit(call.range.start, start, ""))
        edits.append(_first_param_edit(call, enum_symbol))
        old, new = variable_name, enum_symbol
    _merge(edits, _procedure_references(source, call, old, new))
    return sorted(edits, key=lambda e: (e.pos, e.end))


def set_window_enum_value(text, enum_symbol, enum_value_raw, scan_range=None):
    """Return the edits setting the value of the constant in ``Enumeration FormWindow``.

    If the constant is not in the enumeration, it is added. An empty value
    removes the ``= value`` part. Returns None if there is no such
    enumeration.

    """
    source = Source(text, scan_range)
    block = find_enumeration(text, model.ENUM_WINDOWS, source.scan_range, source.index)
    if not block:
        log.debug("no %s enumeration", model.ENUM_WINDOWS)
        return None
    return _enum_entry_edits(source, block, enum_symbol, enum_value_raw)


def rename_window(text, window_key, new_name, propagate_procedures=None, scan_range=None):
    """Return the edits renaming the window, or None.

    A window created with ``#PB_Any`` has its variable renamed, in the
    statement and in the ``Global`` declaration. Otherwise the constant is
    renamed, in the statement and in the enumeration; a ``#`` is prepended
    to ``new_name`` if needed. References in the procedure opening the
    window are renamed too.

    If ``propagate_procedures`` is True, the procedures ``Open<Name>`` and
    ``<Name>_Events`` and their calls are also renamed. If None, the module
    default :data:`PROPAGATE_PROCEDURES` is used.

    """
    if propagate_procedures is None:
        propagate_procedures = PROPAGATE_PROCEDURES
    source = Source(text, scan_range)
    call = source.find(window_key, (model.OPEN_WINDOW,))
    if not call:
        return None
    edits = []
    if call.assigned_var:
        old = call.assigned_var
        new = new_name.lstrip('#')
        edits.append(Edit(call.range.start, call.range.start + len(old), new))
        for decl in find_globals(text, source.scan_range, source.index):
            for n in decl.names:
                if n.name.lower() == old.lower():
                    edits.append(Edit(n.pos, n.end, new))
    else:
        old = window_key
        new = new_name if new_name.startswith('#') else '#' + new_name
        edits.append(_first_param_edit(call, new))
        block = find_enumeration(text, model.ENUM_WINDOWS, source.scan_range, source.index)
        entry = block and _enum_entry(block, old)
        if entry:
            edits.append(Edit(entry.name_pos, entry.name_end, new))
    if old == new:
        return None
    _merge(edits, _procedure_references(source, call, old, new))
    if propagate_procedures:
        old_base, new_base = old.lstrip('#'), new.lstrip('#')
        for fmt in ("Open{}", "{}_Events"):
            _merge(edits, _references(text, source.scan_range, 0, len(text),
                fmt.format(old_base), fmt.format(new_base)))
    return sorted(edits, key=lambda e: (e.pos, e.end))
