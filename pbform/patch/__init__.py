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
Compute minimal text edits that change a Form Designer source.

Every patch function gets the current text and returns a list of
:class:`Edit` tuples, or None if the patch can't be done, e.g. because the
targeted statement can't be found. The text is scanned anew by every patch;
nothing is remembered from an earlier parse. Only the parts of the text that
really need to change are touched.

The edits of one patch must be applied together, use :func:`apply` for a
string or :func:`edit_document` for a :class:`parce.Document`.

The patch functions are in the modules:

* :mod:`~pbform.patch.fields`: move and resize gadgets and the window
* :mod:`~pbform.patch.entries`: add, change and remove gadget items and
  columns, menu and toolbar entries and statusbar fields
* :mod:`~pbform.patch.window`: change the identity of the window

"""

import collections
import logging

from .. import model
from ..parser.header import detect_scan_range, parse_header
from ..parser.scanner import scan_calls
from ..parser.tokenizer import split_params, strip_param
from ..util import LineIndex


log = logging.getLogger(__name__)


Edit = collections.namedtuple("Edit", "pos end text")
Edit.pos.__doc__ = "The start of the range to replace."
Edit.end.__doc__ = "The end of the range to replace (pos for an insertion)."
Edit.text.__doc__ = "The replacement text."


def apply(text, edits):
    """Return the text with the edits applied.

    The positions of all edits refer to the original text. Raises
    :class:`ValueError` if edits overlap or fall outside the text.

    """
    result = []
    last = 0
    for pos, end, new in sorted(edits, key=lambda e: (e.pos, e.end)):
        if pos < last:
            raise ValueError("overlapping edits at position {}".format(pos))
        if end < pos or end > len(text):
            raise ValueError("invalid edit range: {}-{}".format(pos, end))
        result.append(text[last:pos])
        result.append(new)
        last = end
    result.append(text[last:])
    return ''.join(result)


def coalesce(edits):
    """Return the edits sorted, with edits starting at the same position joined.

    An insertion followed by other edits at the same position becomes one
    edit, so the texts keep the order in which the edits were given.

    """
    result = []
    for edit in sorted(edits, key=lambda e: (e.pos, e.end)):
        if result and result[-1].pos == edit.pos and result[-1].end == edit.pos:
            edit = Edit(edit.pos, edit.end, result.pop().text + edit.text)
        result.append(edit)
    return result


def edit_document(document, edits):
    """Apply the edits to the :class:`parce.Document` in one transaction.

    Returns the number of changes made.

    """
    n = 0
    with document:
        for pos, end, text in coalesce(edits):
            document[pos:end] = text
            n += 1
    return n


def call_key(call):
    """Return the stable key of the entity created by the call, or None."""
    params = split_params(call.args)
    if params:
        try:
            return model.stable_key(strip_param(params[0]), call.assigned_var)
        except model.IdentityError:
            pass


def first_param(call):
    """Return the trimmed first parameter of the call."""
    params = split_params(call.args)
    return strip_param(params[0]) if params else ""


class Source:
    """A snapshot of the text with its calls, used by one patch.

    If no ``scan_range`` is given, it is detected from the text.

    """
    def __init__(self, text, scan_range=None):
        self.text = text
        if scan_range is None:
            scan_range = detect_scan_range(text, parse_header(text))
        self.scan_range = scan_range
        self.calls = scan_calls(text, scan_range)
        self.index = LineIndex(text)

    def find(self, key, names):
        """Return the first call with a name in ``names`` creating the entity ``key``."""
        for call in self.calls:
            if call.name in names and call_key(call) == key:
                return call
        log.debug("no call for %r in %d-%d", key, *self.scan_range)

    def call_at(self, line, name):
        """Return the call with the name that starts on the line, or None."""
        if 0 <= line < len(self.index):
            for call in self.calls:
                if call.range.line == line and call.name == name:
                    return call
                elif call.range.line > line:
                    break
        log.debug("no %s call on line %d", name, line)

    def last_line(self, call):
        """Return the line the call ends on."""
        return self.index.line(call.range.end)
