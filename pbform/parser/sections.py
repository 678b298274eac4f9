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
Sections of menu, toolbar and statusbar entries.

A section runs from a section-opening call (e.g. ``CreateMenu(0, ...)``) up to,
but not including, the next section-opening call of any kind. The entries
that follow a ``CreateMenu`` call thus belong to that menu, even if a toolbar
with the same id is created elsewhere.

All functions work on a list of :class:`~pbform.model.Call` tuples as returned
by :func:`~pbform.parser.scanner.scan_calls`.

"""

from .. import model
from .tokenizer import split_params, strip_param


SECTION_OPENERS = (
    model.CREATE_MENU,
    model.CREATE_TOOLBAR,
    model.CREATE_STATUSBAR,
    model.OPEN_WINDOW,
)


def section_key(call):
    """Return the trimmed first parameter of the call, or the empty string."""
    params = split_params(call.args)
    return strip_param(params[0]) if params else ""


def find_section(calls, opener, key):
    """Return the (start, end) indices of the section in the list of calls.

    ``start`` is the index of the opening call, ``end`` the index of the next
    section opener or the length of the list. Returns None if there is no
    such section.

    """
    for i, call in enumerate(calls):
        if call.name == opener and section_key(call) == key:
            for j in range(i + 1, len(calls)):
                if calls[j].name in SECTION_OPENERS:
                    return i, j
            return i, len(calls)


def nearest_opener(calls, line):
    """Return the last section-opening call on or before the line, or None."""
    result = None
    for call in calls:
        if call.range.line > line:
            break
        if call.name in SECTION_OPENERS:
            result = call
    return result


def in_section(calls, line, opener, key):
    """Return True if the line lies in the section of the named opener and key."""
    call = nearest_opener(calls, line)
    return call is not None and call.name == opener and section_key(call) == key
