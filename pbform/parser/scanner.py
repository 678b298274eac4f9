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
Find the calls in a PureBasic source text.

The text is lexed with the :class:`~pbform.lang.purebasic.PureBasic` language
definition, and :class:`~pbform.lang.purebasic.PureBasicTransform` picks the
calls that appear in statement position. A call may span multiple lines;
calls in strings or comments are never found, and a call without its closing
parenthesis is skipped.

Example::

    >>> from pbform.parser.scanner import scan_calls
    >>> for c in scan_calls('Button_0 = ButtonGadget(#PB_Any, 10, 20, 80, 24, "OK")'):
    ...     print(c.assigned_var, c.name, c.range.start, c.range.end)
    ...
    Button_0 ButtonGadget 0 54

"""

import collections

import parce
from parce.transform import transform_text

from .. import model
from ..lang.purebasic import PureBasic, IDENTIFIER_ACTIONS
from ..util import LineIndex


Identifier = collections.namedtuple("Identifier", "text pos end")


def scan_calls(text, scan_range=None):
    """Return the list of :class:`~pbform.model.Call` tuples in the text.

    If a :class:`~pbform.model.ScanRange` is given, only that part of the
    text is scanned, but all positions are relative to the full text.

    """
    start, end = scan_range or (0, len(text))
    index = LineIndex(text)
    calls = []
    for s in transform_text(PureBasic.root, text[start:end]) or ():
        pos = start + s.pos
        args_pos = start + s.args_pos
        line = index.line(pos)
        calls.append(model.Call(
            s.name,
            s.var,
            text[args_pos:start + s.args_end],
            index.indent(line),
            model.SourceRange(pos, start + s.end, line, index.start(line)),
            args_pos))
    return calls


def scan_identifiers(text, start=0, end=None):
    """Yield an :class:`Identifier` for every name in text[start:end].

    Plain names, names of called functions and ``#constants`` are yielded;
    nothing in strings or comments.

    """
    if end is None:
        end = len(text)
    for t in parce.root(PureBasic.root, text[start:end]).tokens():
        if t.action in IDENTIFIER_ACTIONS:
            yield Identifier(t.text, start + t.pos, start + t.end)
