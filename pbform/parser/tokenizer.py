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
Functions to split and read the argument list of a call.

These functions work on the raw text between the parentheses of a call. They
never raise an exception on malformed input; they do the best they can.

"""

import re


_escapes = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
}

_escape_re = re.compile(r'\\(.)', re.DOTALL)
_int_re = re.compile(r'[+-]?\d+')
_float_re = re.compile(r'[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?')
_hex_re = re.compile(r'([+-]?)\$([0-9A-Fa-f]+)')
_bin_re = re.compile(r'([+-]?)%([01]+)')


def _skip(text, i, quote):
    """Return the position after the quoted string, character or comment at i.

    ``quote`` is the character at i: ``'"'``, ``"'"`` or ``';'``. Strings
    end at the end of the line if the closing quote is missing.

    """
    n = len(text)
    if quote == ';':
        end = text.find('\n', i)
        return n if end == -1 else end
    escaped = quote == '"' and i > 0 and text[i-1] == '~'
    i += 1
    while i < n:
        c = text[i]
        if escaped and c == '\\':
            i += 2
            continue
        if c == quote:
            return i + 1
        if c == '\n':
            return i
        i += 1
    return n


def param_spans(args):
    """Return a list of (start, end) tuples, one for every top-level field.

    Fields are separated by commas that are not inside parentheses, strings
    or comments. If ``args`` is empty or only contains whitespace, an empty
    list is returned.

    """
    spans = []
    depth = 0
    start = i = 0
    n = len(args)
    while i < n:
        c = args[i]
        if c in '"\';':
            i = _skip(args, i, c)
            continue
        elif c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
        elif c == ',' and depth <= 0:
            spans.append((start, i))
            start = i + 1
        i += 1
    if spans or strip_param(args):
        spans.append((start, n))
    return spans


def split_params(args):
    """Split the argument text in top-level fields.

    The fields are returned untouched, including surrounding whitespace.
    Example::

        >>> split_params('#PB_Any, 10, "a, b", Str(x, 2)')
        ['#PB_Any', ' 10', ' "a, b"', ' Str(x, 2)']

    """
    return [args[start:end] for start, end in param_spans(args)]


def value_span(text, start, end):
    """Return the (start, end) of the value in the field text[start:end].

    Surrounding whitespace and comments are not part of the value.

    """
    i = start
    while i < end:
        c = text[i]
        if c in ' \t\r\n':
            i += 1
        elif c == ';':
            i = min(_skip(text, i, c), end)
        else:
            break
    value_start = i
    value_end = i
    while i < end:
        c = text[i]
        if c == ';':
            i = _skip(text, i, c)
            continue
        if c in '"\'':
            i = min(_skip(text, i, c), end)
            value_end = i
            continue
        i += 1
        if c not in ' \t\r\n':
            value_end = i
    return value_start, value_end


def strip_param(raw):
    """Return the field without surrounding whitespace and comments."""
    start, end = value_span(raw, 0, len(raw))
    return raw[start:end]


def unquote_string(raw):
    """Return the text of a string literal.

    Doubled quotes are read as one quote, and in an escaped string literal
    (``~"..."``) the backslash escapes are interpreted. If ``raw`` is not a
    single string literal, it is returned unchanged.

    """
    s = raw.strip()
    if len(s) >= 3 and s.startswith('~"') and s.endswith('"'):
        inner = s[2:-1]
        if '"' not in _escape_re.sub('', inner):
            return _escape_re.sub(lambda m: _escapes.get(m.group(1), m.group(1)), inner)
    elif len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        inner = s[1:-1]
        if '"' not in inner.replace('""', ''):
            return inner.replace('""', '"')
    return raw


def as_number(raw):
    """Return the numeric value of the literal, or None.

    Decimal integers and floats are understood, and also PureBasic's
    hexadecimal (``$FF``) and binary (``%1010``) notations.

    """
    s = raw.strip()
    if _int_re.fullmatch(s):
        return int(s)
    if _float_re.fullmatch(s):
        return float(s)
    m = _hex_re.fullmatch(s) or _bin_re.fullmatch(s)
    if m:
        value = int(m.group(2), 16 if m.re is _hex_re else 2)
        return -value if m.group(1) == '-' else value


def find_closing(text, pos, end=None):
    """Return the position of the parenthesis closing the one before pos.

    Returns None if it can't be found before ``end``.

    """
    if end is None:
        end = len(text)
    depth = 1
    i = pos
    while i < end:
        c = text[i]
        if c in '"\';':
            i = _skip(text, i, c)
            continue
        elif c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth == 0:
                return i
        i += 1
