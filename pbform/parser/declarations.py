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
Find declarations around the form statements: enumeration blocks,
``Procedure`` headers and ``Global`` variable declarations.

These are recognized per line, as the Form Designer writes them. All
functions accept an optional :class:`~pbform.model.ScanRange` and never look
outside it.

"""

import collections
import re

from .. import model
from ..util import LineIndex
from .tokenizer import find_closing, param_spans, value_span


EnumBlock = collections.namedtuple("EnumBlock", "name line end_line start end entries")
EnumBlock.line.__doc__ = "The line of the ``Enumeration`` statement."
EnumBlock.end_line.__doc__ = "The line of ``EndEnumeration`` (or the last line scanned)."
EnumBlock.end.__doc__ = "Start position of the ``EndEnumeration`` line."

EnumSpan = collections.namedtuple("EnumSpan",
    "name value line line_start name_pos name_end value_pos value_end")
EnumSpan.value_pos.__doc__ = "Start of the value expression, or None if there is no ``=``."

ProcedureBlock = collections.namedtuple("ProcedureBlock",
    "name name_pos line start end params")
ProcedureBlock.start.__doc__ = "Start of the line with the ``Procedure`` header."
ProcedureBlock.end.__doc__ = "End of the ``EndProcedure`` line (incl. the line break)."

ProcedureParam = collections.namedtuple("ProcedureParam",
    "name default name_pos default_pos default_end")

GlobalDecl = collections.namedtuple("GlobalDecl", "line start end names")
GlobalDecl.names.__doc__ = "List of GlobalName tuples, one per declared variable."

GlobalName = collections.namedtuple("GlobalName", "name pos end field_start field_end")
GlobalName.field_start.__doc__ = "Start of the declaration, e.g. of ``Window_0.i``."

_enum_entry_re = re.compile(
    r'[ \t]*(#[A-Za-z_]\w*\$?)(?:([ \t]*=[ \t]*)([^;\r\n]*?))?[ \t]*(?:;[^\r\n]*)?')
_end_enum_re = re.compile(r'[ \t]*EndEnumeration\b', re.IGNORECASE)
_procedure_re = re.compile(
    r'[ \t]*Procedure(?:C|DLL|CDLL)?(?:\.[A-Za-z]\w*)?[ \t]+([A-Za-z_]\w*)[ \t]*\(', re.IGNORECASE)
_end_procedure_re = re.compile(r'[ \t]*EndProcedure\b', re.IGNORECASE)
_param_re = re.compile(r'\*?([A-Za-z_]\w*\$?)(?:\.[A-Za-z]\w*)?(?:[ \t]*=[ \t]*)?')
_global_re = re.compile(r'[ \t]*Global[ \t]+', re.IGNORECASE)
_name_re = re.compile(r'\*?([A-Za-z_]\w*\$?)')


def _lines(index, scan_range):
    """Yield the line numbers within the scan range."""
    if scan_range is None:
        first, last = 0, len(index) - 1
    else:
        first = index.line(scan_range.start)
        last = index.line(max(scan_range.start, scan_range.end - 1))
    return range(first, last + 1)


def find_enumeration(text, name, scan_range=None, index=None):
    """Return the :class:`EnumBlock` of the named enumeration, or None."""
    if index is None:
        index = LineIndex(text)
    begin_re = re.compile(r'[ \t]*Enumeration[ \t]+' + re.escape(name) + r'\b', re.IGNORECASE)
    block_line = None
    entries = []
    for line in _lines(index, scan_range):
        start = index.start(line)
        end = index.end(line)
        if block_line is None:
            if begin_re.match(text, start, end):
                block_line = line
            continue
        if _end_enum_re.match(text, start, end):
            return EnumBlock(name, block_line, line, index.start(block_line), start, entries)
        m = _enum_entry_re.fullmatch(text, start, end)
        if m:
            value = m.group(3) if m.group(2) is not None else None
            entries.append(EnumSpan(m.group(1), value, line, start,
                m.start(1), m.end(1),
                m.start(3) if value is not None else None,
                m.end(3) if value is not None else None))
    if block_line is not None:
        # no EndEnumeration
        return EnumBlock(name, block_line, line, index.start(block_line), index.end_with_newline(line), entries)


def parse_enumerations(text, scan_range=None):
    """Return the :class:`~pbform.model.FormEnumerations` of the text."""
    index = LineIndex(text)
    def entries(name):
        block = find_enumeration(text, name, scan_range, index)
        if block:
            return [model.EnumEntry(e.name, e.value or None, e.line) for e in block.entries]
        return []
    return model.FormEnumerations(entries(model.ENUM_WINDOWS), entries(model.ENUM_GADGETS))


def enum_value(enums, symbol):
    """Return the raw value of the constant in the list of EnumEntry tuples, or None."""
    for entry in enums:
        if entry.name.lower() == symbol.lower():
            return entry.value


def _procedure_at(text, index, line, scan_end):
    """Return a ProcedureBlock if the line has a Procedure header."""
    start = index.start(line)
    m = _procedure_re.match(text, start, index.end(line))
    if not m:
        return None
    args_pos = m.end()
    args_end = find_closing(text, args_pos, scan_end)
    params = []
    if args_end is not None:
        for s, e in param_spans(text[args_pos:args_end]):
            s, e = value_span(text, args_pos + s, args_pos + e)
            p = _param_re.match(text, s, e)
            if p:
                default = text[p.end():e] if p.end() > p.end(1) and '=' in p.group() else None
                params.append(ProcedureParam(p.group(1), default, p.start(1),
                    p.end() if default is not None else None,
                    e if default is not None else None))
    end = scan_end
    for n in range(line + 1, index.line(max(start, scan_end - 1)) + 1):
        if _end_procedure_re.match(text, index.start(n), index.end(n)):
            end = min(index.end_with_newline(n), scan_end)
            break
    return ProcedureBlock(m.group(1), m.start(1), line, start, end, params)


def find_procedure(text, pos, scan_range=None, index=None):
    """Return the :class:`ProcedureBlock` the position is in, or None.

    The search goes upward from the line of the position to the nearest
    ``Procedure`` header, and stops at an ``EndProcedure`` above the position.

    """
    if index is None:
        index = LineIndex(text)
    scan_start, scan_end = (0, len(text)) if scan_range is None else scan_range
    first = index.line(scan_start)
    line = index.line(pos)
    for n in range(line, first - 1, -1):
        start, end = index.start(n), index.end(n)
        if n < line and _end_procedure_re.match(text, start, end):
            return None
        if _procedure_re.match(text, start, end):
            return _procedure_at(text, index, n, scan_end)


def procedure_defaults(block):
    """Return a dict mapping the lowercase parameter names to their default values."""
    return {p.name.lower(): p.default for p in block.params if p.default is not None}


def find_globals(text, scan_range=None, index=None):
    """Return a list of :class:`GlobalDecl` tuples."""
    if index is None:
        index = LineIndex(text)
    result = []
    for line in _lines(index, scan_range):
        start, end = index.start(line), index.end(line)
        m = _global_re.match(text, start, end)
        if not m:
            continue
        names = []
        rest = text[m.end():end]
        for s, e in param_spans(rest):
            s, e = value_span(rest, s, e)
            n = _name_re.match(rest, s, e)
            if n:
                names.append(GlobalName(n.group(1), m.end() + n.start(1), m.end() + n.end(1),
                    m.end() + s, m.end() + e))
        result.append(GlobalDecl(line, start, index.end_with_newline(line), names))
    return result
