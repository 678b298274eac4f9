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
Move and resize gadgets and the window.

Only the targeted arguments of the statement are rewritten; all other
arguments, the whitespace and comments around them, the assigned variable
and any text after the closing parenthesis stay exactly as they were.

Example::

    >>> from pbform.patch import apply
    >>> from pbform.patch.fields import move_gadget
    >>> text = 'Button_0 = ButtonGadget(#PB_Any, 10, 20, 80, 24, "OK") ; ok'
    >>> apply(text, move_gadget(text, "Button_0", 30, 40.7))
    'Button_0 = ButtonGadget(#PB_Any, 30, 40, 80, 24, "OK") ; ok'

"""

import logging

from .. import model
from ..parser.declarations import find_procedure
from ..parser.tokenizer import as_number, param_spans, value_span
from . import Edit, Source


log = logging.getLogger(__name__)


def _number(value):
    """Return the value truncated toward zero, as text."""
    return format(int(value))


def replace_params(text, call, values):
    """Return a list with one Edit replacing fields of the call's arguments.

    ``values`` is a dictionary mapping the index of a field to its new text.
    Returns None if the call has not enough fields.

    """
    args = call.args
    spans = param_spans(args)
    if not values or max(values) >= len(spans):
        log.debug("%s has %d parameters, can't replace %s", call.name, len(spans), sorted(values))
        return None
    result = []
    last = 0
    for n, (start, end) in enumerate(spans):
        if n in values:
            start, end = value_span(args, start, end)
            result.append(args[last:start])
            result.append(values[n])
            last = end
    result.append(args[last:])
    return [Edit(call.args_pos, call.args_pos + len(args), ''.join(result))]


def move_gadget(text, key, x, y, scan_range=None):
    """Return the edits to move the gadget to (x, y), or None."""
    call = Source(text, scan_range).find(key, model.GADGET_KINDS)
    if call:
        return replace_params(text, call, {1: _number(x), 2: _number(y)})


def resize_gadget(text, key, x, y, w, h, scan_range=None):
    """Return the edits to set the geometry of the gadget, or None."""
    call = Source(text, scan_range).find(key, model.GADGET_KINDS)
    if call:
        return replace_params(text, call,
            {1: _number(x), 2: _number(y), 3: _number(w), 4: _number(h)})


def move_window(text, key, x, y, w, h, scan_range=None):
    """Return the edits to set the geometry of the window, or None.

    When a geometry argument is a name that is a parameter with a default
    value of the enclosing ``Procedure``, the default value is rewritten
    instead of the argument.

    """
    source = Source(text, scan_range)
    call = source.find(key, (model.OPEN_WINDOW,))
    if not call:
        return None
    spans = param_spans(call.args)
    if len(spans) < 5:
        return None
    proc = find_procedure(text, call.range.start, source.scan_range, source.index)
    defaults = {}
    if proc:
        defaults = {p.name.lower(): p for p in proc.params if p.default is not None}
    edits = []
    values = {}
    for n, value in enumerate((x, y, w, h), 1):
        start, end = value_span(call.args, *spans[n])
        raw = call.args[start:end]
        param = defaults.get(raw.lower())
        if as_number(raw) is None and param:
            edits.append(Edit(param.default_pos, param.default_end, _number(value)))
        else:
            values[n] = _number(value)
    if values:
        edits.extend(replace_params(text, call, values))
    return edits
